"""Cache entry and statistics models."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel

from wallthumb.errors.exceptions import CacheIOError

if TYPE_CHECKING:
    from wallthumb.cache.store import ThumbnailStore

logger = logging.getLogger(__name__)


class CacheEntry(BaseModel):
    """A stored thumbnail as seen on disk."""

    key: str
    path: Path
    size_bytes: int = 0
    created_at: float = 0.0
    last_accessed: float = 0.0
    modified_at: float = 0.0
    # Temporary file left behind by an interrupted write
    partial: bool = False

    def is_older_than(self, cutoff: float) -> bool:
        """Stale check: access time for artifacts, mtime for partial writes."""
        if self.partial:
            return self.modified_at < cutoff
        return self.last_accessed < cutoff


class CacheStats(BaseModel):
    """Aggregate cache statistics."""

    count: int = 0
    total_size_bytes: int = 0

    @property
    def size_mb(self) -> float:
        return round(self.total_size_bytes / (1024 * 1024), 2)


class StatsReporter:
    """Reports entry count and total size for a thumbnail store."""

    def __init__(self, store: ThumbnailStore) -> None:
        self._store = store

    def collect(self) -> CacheStats:
        """Return aggregate stats; zeros if the cache root is unusable.

        ``count`` covers finished thumbnails; ``total_size_bytes`` is the
        disk usage of the whole root, leftover partial writes included.
        """
        try:
            entries = self._store.list_entries(include_partial=True)
        except CacheIOError as e:
            logger.error("Error getting thumbnail cache stats: %s", e)
            return CacheStats()
        return CacheStats(
            count=sum(1 for e in entries if not e.partial),
            total_size_bytes=sum(e.size_bytes for e in entries),
        )
