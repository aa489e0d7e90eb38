"""Shared Pydantic models for wallthumb."""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel

from wallthumb.errors.exceptions import (
    CacheIOError,
    CodecError,
    SourceNotFound,
)

# ── Enums ──


class ErrorKind(StrEnum):
    SOURCE_NOT_FOUND = "source_not_found"
    CODEC = "codec"
    IO = "io"
    UNEXPECTED = "unexpected"


# ── Source identity ──


class SourceIdentity(BaseModel):
    """Normalized absolute path plus millisecond mtime of a source image."""

    path: Path
    mtime_ms: int

    def fingerprint(self) -> str:
        return f"{self.path}|{self.mtime_ms}"


# ── Results ──


class ThumbnailOutcome(BaseModel):
    """Result of resolving one source image to a thumbnail.

    A failed outcome carries the error instead of raising it; callers decide
    whether to degrade to the source path.
    """

    source: Path
    artifact: Path | None = None
    cached: bool = False
    error_kind: ErrorKind | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.artifact is not None

    @property
    def resolved_path(self) -> Path:
        return self.artifact if self.artifact is not None else self.source

    @classmethod
    def failed(cls, source: str | Path, exc: Exception) -> ThumbnailOutcome:
        return cls(source=Path(source), error_kind=classify_error(exc), error=str(exc))


class ThumbnailPair(BaseModel):
    original: Path
    thumbnail: Path


def classify_error(exc: Exception) -> ErrorKind:
    """Map an exception onto the outcome error taxonomy."""
    if isinstance(exc, SourceNotFound):
        return ErrorKind.SOURCE_NOT_FOUND
    if isinstance(exc, CodecError):
        return ErrorKind.CODEC
    if isinstance(exc, (CacheIOError, OSError)):
        return ErrorKind.IO
    return ErrorKind.UNEXPECTED
