"""Cache subsystem: keys, atomic on-disk store, eviction and stats."""

from wallthumb.cache.evictor import Evictor
from wallthumb.cache.keys import derive_cache_key, hash_identity, source_identity
from wallthumb.cache.stats import CacheEntry, CacheStats, StatsReporter
from wallthumb.cache.store import ThumbnailStore

__all__ = [
    "ThumbnailStore",
    "Evictor",
    "StatsReporter",
    "CacheEntry",
    "CacheStats",
    "derive_cache_key",
    "hash_identity",
    "source_identity",
]
