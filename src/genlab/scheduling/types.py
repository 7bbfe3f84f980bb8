"""Scheduler types.

Public types:
- Priority: Orderable, hashable value that ranks pending tasks
- TaskExecutor: Callback that receives a dequeued task
- EmptyHandler: Callback fired when there is nothing to dispatch
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol


class Priority(Protocol):
    """Protocol for priority values.

    Priorities key the task buckets, so they must hash consistently with
    equality as well as support ``<``.
    """

    def __lt__(self, other: Any, /) -> bool: ...

    def __hash__(self) -> int: ...


type TaskExecutor[T] = Callable[[T], object]

type EmptyHandler = Callable[[], None]


class Descending[P: Priority]:
    """Heap key that inverts the natural ordering of a priority.

    ``heapq`` is a min-heap; wrapping each priority puts the highest one
    at index 0.
    """

    __slots__ = ("value",)

    def __init__(self, value: P) -> None:
        self.value = value

    def __lt__(self, other: Descending[P]) -> bool:
        return other.value < self.value

    def __repr__(self) -> str:
        return f"Descending({self.value!r})"
