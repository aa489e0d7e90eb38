"""Custom exception hierarchy for wallthumb."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class WallthumbError(Exception):
    """Base exception for all wallthumb errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class SourceNotFound(WallthumbError):
    """The source image does not exist."""

    def __init__(self, message: str = "", path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class CodecError(WallthumbError):
    """The source could not be decoded or the thumbnail could not be encoded.

    Examples: unsupported format, truncated JPEG, decompression bomb.
    """

    def __init__(
        self,
        message: str = "",
        path: str | Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.original = original


class CacheIOError(WallthumbError):
    """Filesystem failure while reading a source or touching the cache.

    Examples: unwritable cache directory, disk full, stat/delete failure.
    """

    def __init__(
        self,
        message: str = "",
        path: str | Path | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.original = original


class ConfigError(WallthumbError):
    """Invalid configuration value or config file."""
