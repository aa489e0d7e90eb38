"""Cache key generation: addressed by source path and modification time."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

from wallthumb.errors.exceptions import CacheIOError, SourceNotFound
from wallthumb.types import SourceIdentity


def source_identity(path: str | Path) -> SourceIdentity:
    """Stat a source image and return its normalized identity.

    Raises SourceNotFound if the file does not exist.
    """
    normalized = Path(os.path.normpath(os.path.abspath(path)))
    try:
        st = normalized.stat()
    except FileNotFoundError as e:
        raise SourceNotFound(f"Image file not found: {path}", path=path) from e
    except OSError as e:
        raise CacheIOError(f"Cannot stat {path}: {e}", path=path, original=e) from e
    if not normalized.is_file():
        raise SourceNotFound(f"Not a regular file: {path}", path=path)
    return SourceIdentity(path=normalized, mtime_ms=st.st_mtime_ns // 1_000_000)


def derive_cache_key(path: str | Path) -> str:
    """Generate a SHA256 cache key from the source path and its mtime.

    Editing the file (which bumps mtime) or moving it yields a new key, so
    stale thumbnails are never served; the old entry ages out via the TTL
    sweep.
    """
    return hash_identity(source_identity(path))


def hash_identity(identity: SourceIdentity) -> str:
    """Hash a source identity for cache key use."""
    return hashlib.sha256(identity.fingerprint().encode("utf-8")).hexdigest()
