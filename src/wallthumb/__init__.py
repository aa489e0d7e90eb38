"""wallthumb: cached wallpaper thumbnails."""

from wallthumb.cache.stats import CacheStats
from wallthumb.config.loader import load_cache_config
from wallthumb.config.schema import ThumbnailCacheConfig
from wallthumb.core import ThumbnailCache, generate_thumbnail, generate_thumbnails
from wallthumb.types import ThumbnailOutcome, ThumbnailPair

__all__ = [
    "ThumbnailCache",
    "ThumbnailCacheConfig",
    "ThumbnailOutcome",
    "ThumbnailPair",
    "CacheStats",
    "generate_thumbnail",
    "generate_thumbnails",
    "load_cache_config",
]
