"""Time-bounded memoizing cache for caller-supplied functions.

Each call names its own TTL. Stale entries are not swept; they stay in the
table until the same key is requested again and are then overwritten.
Without ``maxsize`` the table keeps one entry for every key ever seen.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Hashable, MutableMapping
from dataclasses import dataclass, field

from cachetools import Cache, LRUCache

from genlab.caching.types import CacheEntry, CacheStats, Clock, ComputeFunction

logger = logging.getLogger(__name__)


@dataclass
class _KeySlot:
    """Per-key computation lock plus the number of callers using it."""

    lock: threading.Lock = field(default_factory=threading.Lock)
    refs: int = 0


class FunctionCache[K: Hashable, R]:
    """Memoizes ``function(key)`` per key for a per-call time window.

    Thread-safe. Reads of live entries only take the short table lock.
    Recomputation is serialized per key, so concurrent callers for one
    stale key share a single computation while distinct keys compute in
    parallel. The function must not call back into the cache for its own
    key.
    """

    def __init__(
        self,
        *,
        maxsize: int | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        """Initialize cache.

        Args:
            maxsize: Optional cap on the number of entries. When set, the
                least recently used entry is evicted once the cap is hit.
                None (default) keeps the table unbounded.
            clock: Monotonic time source in seconds.
        """
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be a positive integer, got {maxsize}")

        self._table: MutableMapping[K, CacheEntry[R]] = (
            LRUCache(maxsize=maxsize) if maxsize is not None else {}
        )
        self._maxsize = maxsize
        self._clock = clock
        self._lock = threading.Lock()
        self._key_slots: dict[K, _KeySlot] = {}
        self._hits = 0
        self._misses = 0

    def execute(self, key: K, function: ComputeFunction[K, R], ttl_seconds: float) -> R:
        """Return the memoized result for ``key``, computing it if needed.

        Args:
            key: Cache key, also passed to ``function``.
            function: Computation invoked as ``function(key)`` on a miss.
            ttl_seconds: How long a fresh result stays live. Zero or
                negative values store an already stale entry, so every call
                recomputes.

        Returns:
            The cached or freshly computed result.

        Raises:
            Whatever ``function`` raises. Nothing is stored in that case.
        """
        with self._lock:
            entry = self._live_entry(key)
            if entry is not None:
                self._hits += 1
                logger.debug("Cache hit for %r", key)
                return entry.result

        slot = self._checkout(key)
        try:
            with slot.lock:
                # Another caller may have refreshed the key while we waited
                with self._lock:
                    entry = self._live_entry(key)
                    if entry is not None:
                        self._hits += 1
                        return entry.result
                    self._misses += 1

                logger.debug("Cache miss for %r, computing", key)
                result = function(key)

                with self._lock:
                    self._table[key] = CacheEntry(
                        result=result, expires_at=self._clock() + ttl_seconds
                    )
                return result
        finally:
            self._release(key, slot)

    def _live_entry(self, key: K, touch: bool = True) -> CacheEntry[R] | None:
        """Return the entry for key if it is still live. Caller holds the lock.

        With ``touch=False`` a bounded table's LRU order is left as is.
        """
        if touch or not isinstance(self._table, Cache):
            entry = self._table.get(key)
        elif key in self._table:
            # Base Cache lookup skips LRUCache's recency update
            entry = Cache.__getitem__(self._table, key)
        else:
            entry = None
        if entry is None or not entry.is_live(self._clock()):
            return None
        return entry

    def _checkout(self, key: K) -> _KeySlot:
        with self._lock:
            slot = self._key_slots.get(key)
            if slot is None:
                slot = self._key_slots[key] = _KeySlot()
            slot.refs += 1
            return slot

    def _release(self, key: K, slot: _KeySlot) -> None:
        with self._lock:
            slot.refs -= 1
            if slot.refs == 0:
                del self._key_slots[key]

    def stats(self) -> CacheStats:
        """Get cache statistics."""
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                size=len(self._table),
                maxsize=self._maxsize,
            )

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return self._live_entry(key, touch=False) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        with self._lock:
            return len(self._table)
