"""Cache: admin-scoped in-process read cache.

Used by cached repositories to avoid repeated Firestore round-trips for
employee and employment reads.
"""

from hradmin.infrastructure.cache.cache_protocol import ReadCacheProtocol
from hradmin.infrastructure.cache.scoped_read_cache import (
    CacheEntry,
    CacheStats,
    ScopedReadCache,
)

__all__ = [
    "CacheEntry",
    "CacheStats",
    "ReadCacheProtocol",
    "ScopedReadCache",
]
