"""Scheduling subsystem: in-process priority dispatch.

Public API:
- PriorityScheduler: Holds tasks by priority and releases them one at a time

Types:
- Priority: Protocol for orderable, hashable priorities
- TaskExecutor: Callback signature for dispatched tasks
- EmptyHandler: Callback signature for the no-work notification
"""

from genlab.scheduling.scheduler import PriorityScheduler
from genlab.scheduling.types import EmptyHandler, Priority, TaskExecutor

__all__ = [
    "EmptyHandler",
    "Priority",
    "PriorityScheduler",
    "TaskExecutor",
]
