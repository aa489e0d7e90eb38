"""Error handling: exception hierarchy for the thumbnail cache."""

from wallthumb.errors.exceptions import (
    CacheIOError,
    CodecError,
    ConfigError,
    SourceNotFound,
    WallthumbError,
)

__all__ = [
    "WallthumbError",
    "SourceNotFound",
    "CodecError",
    "CacheIOError",
    "ConfigError",
]
