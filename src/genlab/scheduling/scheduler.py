"""Priority task scheduler.

Tasks are grouped into FIFO buckets keyed by priority. A max-heap of the
priorities that currently have work decides which bucket is served next.
"""

from __future__ import annotations

import heapq
import logging
import threading
from collections import deque

from genlab.scheduling.types import Descending, EmptyHandler, Priority, TaskExecutor

logger = logging.getLogger(__name__)

_NOTHING = object()


class PriorityScheduler[T, P: Priority]:
    """Releases one pending task per request, highest priority first.

    Equal priorities are served in insertion order. A priority is dropped
    from the pending table as soon as its bucket drains, so every key in
    ``_buckets`` maps to a non-empty deque and appears in ``_heap`` exactly
    once.
    """

    def __init__(self, *, on_empty: EmptyHandler | None = None) -> None:
        """Initialize an empty scheduler.

        Args:
            on_empty: Optional callback fired when ``execute_next`` finds no
                pending work, in addition to the log notification.
        """
        self._buckets: dict[P, deque[T]] = {}
        self._heap: list[Descending[P]] = []
        self._lock = threading.Lock()
        self._on_empty = on_empty

    def add_task(self, task: T, priority: P) -> None:
        """Queue a task at the tail of its priority bucket.

        Raises:
            TypeError: If a new priority cannot be compared with the pending
                ones. The scheduler is left unchanged.
        """
        with self._lock:
            bucket = self._buckets.get(priority)
            if bucket is None:
                try:
                    heapq.heappush(self._heap, Descending(priority))
                except TypeError:
                    # heappush appends before sifting; drop the stray wrapper
                    self._heap = [Descending(p) for p in self._buckets]
                    heapq.heapify(self._heap)
                    raise
                bucket = self._buckets[priority] = deque()
            bucket.append(task)
        logger.debug("Queued task at priority %r", priority)

    def execute_next(self, executor: TaskExecutor[T]) -> bool:
        """Dequeue the next task and hand it to ``executor``.

        The task is removed before ``executor`` runs. If the executor raises,
        the exception propagates and the task is not re-queued.

        Args:
            executor: Callback invoked synchronously with the task.

        Returns:
            True if a task was dispatched, False if there was no work.
        """
        with self._lock:
            task = self._dequeue()

        if task is _NOTHING:
            logger.info("No tasks to execute")
            if self._on_empty is not None:
                self._on_empty()
            return False

        executor(task)  # type: ignore[arg-type]
        return True

    def _dequeue(self) -> T | object:
        """Pop the head of the highest bucket. Caller must hold the lock."""
        if not self._heap:
            return _NOTHING

        priority = self._heap[0].value
        bucket = self._buckets[priority]
        task = bucket.popleft()
        if not bucket:
            heapq.heappop(self._heap)
            del self._buckets[priority]
            logger.debug("Priority %r drained", priority)
        return task

    def peek_priority(self) -> P | None:
        """Return the highest pending priority, or None when empty."""
        with self._lock:
            return self._heap[0].value if self._heap else None

    def priorities(self) -> list[P]:
        """Return pending priorities, highest first."""
        with self._lock:
            return sorted(self._buckets, reverse=True)

    def __len__(self) -> int:
        with self._lock:
            return sum(len(bucket) for bucket in self._buckets.values())
