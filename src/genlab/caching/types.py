"""Cache types."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

type ComputeFunction[K, R] = Callable[[K], R]

type Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry[R]:
    """A memoized result and the clock reading at which it goes stale."""

    result: R
    expires_at: float

    def is_live(self, now: float) -> bool:
        return now < self.expires_at


@dataclass
class CacheStats:
    """Cache statistics."""

    hits: int
    misses: int
    size: int
    maxsize: int | None
