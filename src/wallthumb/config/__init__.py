"""Configuration: defaults, layered hierarchy and the validated config model."""

from wallthumb.config.loader import build_cache_config, load_cache_config, resolve_log_level
from wallthumb.config.schema import ThumbnailCacheConfig

__all__ = [
    "ThumbnailCacheConfig",
    "build_cache_config",
    "load_cache_config",
    "resolve_log_level",
]
