"""Eviction: TTL sweep and full clear over the thumbnail store."""

from __future__ import annotations

import logging
import time

from wallthumb.cache.stats import CacheEntry
from wallthumb.cache.store import ThumbnailStore
from wallthumb.errors.exceptions import CacheIOError

logger = logging.getLogger(__name__)

_DEFAULT_TTL_SECONDS = 30 * 24 * 3600  # 30 days


class Evictor:
    """Removes stale or all entries. Never scheduled automatically.

    Both operations cover every file in the cache root: artifacts of any
    output format and temporary files abandoned by interrupted writes.
    """

    def __init__(self, store: ThumbnailStore, ttl_seconds: float = _DEFAULT_TTL_SECONDS) -> None:
        self._store = store
        self._ttl_seconds = ttl_seconds

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def sweep_expired(self, now: float | None = None) -> int:
        """Delete entries not accessed within the TTL. Returns count deleted."""
        cutoff = (now if now is not None else time.time()) - self._ttl_seconds
        try:
            entries = self._store.list_entries(include_partial=True)
        except CacheIOError as e:
            logger.error("Error clearing old thumbnails: %s", e)
            return 0

        stale = [entry for entry in entries if entry.is_older_than(cutoff)]
        deleted = self._remove(stale, "Could not evict")
        if deleted > 0:
            logger.info("Cleared %d old thumbnails from cache", deleted)
        return deleted

    def clear_all(self) -> int:
        """Delete every entry. Returns count removed."""
        try:
            entries = self._store.list_entries(include_partial=True)
        except CacheIOError as e:
            logger.error("Error clearing thumbnails: %s", e)
            return 0

        removed = self._remove(entries, "Could not remove")
        logger.info("Cleared %d thumbnails from cache", removed)
        return removed

    def _remove(self, entries: list[CacheEntry], failure: str) -> int:
        removed = 0
        for entry in entries:
            try:
                if self._store.remove(entry.path):
                    removed += 1
            except CacheIOError as e:
                logger.warning("%s %s: %s", failure, entry.path.name, e)
        return removed
