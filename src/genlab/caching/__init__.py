"""Caching subsystem: per-key memoization with a per-call TTL.

Public API:
- FunctionCache: Memoizes a caller-supplied function per key

Types:
- CacheEntry: Stored result plus expiry reading
- CacheStats: Hit/miss/size snapshot
"""

from genlab.caching.cache import FunctionCache
from genlab.caching.types import CacheEntry, CacheStats, Clock, ComputeFunction

__all__ = [
    "CacheEntry",
    "CacheStats",
    "Clock",
    "ComputeFunction",
    "FunctionCache",
]
