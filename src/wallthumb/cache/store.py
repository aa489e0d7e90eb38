"""On-disk thumbnail store: one file per cache key, written atomically."""

from __future__ import annotations

import contextlib
import logging
import os
import tempfile
import time
from pathlib import Path

from wallthumb.cache.stats import CacheEntry
from wallthumb.errors.exceptions import CacheIOError

logger = logging.getLogger(__name__)

_PARTIAL_SUFFIX = ".tmp"


class ThumbnailStore:
    """Maps cache keys to ``<root>/<key>.<extension>`` artifacts.

    Writes go to a temporary file in the same directory and are renamed
    into place, so a reader never observes a partially written artifact.
    The root directory is created lazily on the first write.
    """

    def __init__(self, root: Path, extension: str = "jpg") -> None:
        self._root = Path(root)
        self._extension = extension.lstrip(".")
        self._root_warning_logged = False

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, key: str) -> Path:
        return self._root / f"{key}.{self._extension}"

    def lookup(self, key: str) -> Path | None:
        path = self.path_for(key)
        return path if path.is_file() else None

    def put(self, key: str, data: bytes) -> Path:
        """Atomically store artifact bytes under ``key`` and return the path."""
        self.ensure_root()
        target = self.path_for(key)
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._root, prefix=f".{key}.", suffix=_PARTIAL_SUFFIX
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            raise CacheIOError(f"Cannot write thumbnail {target}: {e}", path=target, original=e) from e
        logger.debug("Stored %s (%d bytes)", target.name, len(data))
        return target

    def delete(self, key: str) -> bool:
        """Remove an entry. Returns False if it was already gone."""
        return self.remove(self.path_for(key))

    def remove(self, path: Path) -> bool:
        """Remove a file listed by :meth:`list_entries`, whatever its extension."""
        path = Path(path)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise CacheIOError(f"Cannot delete {path}: {e}", path=path, original=e) from e
        return True

    def touch(self, key: str) -> None:
        """Mark an entry as accessed now, keeping its mtime."""
        path = self.path_for(key)
        try:
            st = path.stat()
            os.utime(path, ns=(time.time_ns(), st.st_mtime_ns))
        except OSError as e:
            logger.debug("Could not update access time of %s: %s", path, e)

    def list_entries(self, include_partial: bool = False) -> list[CacheEntry]:
        """List the regular files under the cache root.

        Artifacts are listed whatever their extension, so entries written
        under an earlier output format stay visible to eviction and stats.
        Temporary files left by interrupted writes are only listed when
        ``include_partial`` is set. A missing root yields an empty list.
        """
        try:
            scanned = list(os.scandir(self._root))
        except FileNotFoundError:
            return []
        except OSError as e:
            raise CacheIOError(
                f"Cannot list cache directory {self._root}: {e}", path=self._root, original=e
            ) from e

        entries: list[CacheEntry] = []
        for item in scanned:
            partial = item.name.startswith(".")
            if partial and not (include_partial and item.name.endswith(_PARTIAL_SUFFIX)):
                continue
            try:
                if not item.is_file(follow_symlinks=False):
                    continue
                st = item.stat(follow_symlinks=False)
            except OSError as e:
                logger.warning("Skipping unreadable cache entry %s: %s", item.path, e)
                continue
            entries.append(CacheEntry(
                key=item.name.lstrip(".").split(".", 1)[0],
                path=Path(item.path),
                size_bytes=st.st_size,
                created_at=getattr(st, "st_birthtime", st.st_ctime),
                last_accessed=st.st_atime,
                modified_at=st.st_mtime,
                partial=partial,
            ))
        return entries

    def ensure_root(self) -> None:
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            if not self._root_warning_logged:
                logger.warning(
                    "Thumbnail cache directory %s is unavailable (%s); "
                    "serving original images until it becomes writable",
                    self._root,
                    e,
                )
                self._root_warning_logged = True
            raise CacheIOError(
                f"Cannot create cache directory {self._root}: {e}", path=self._root, original=e
            ) from e
