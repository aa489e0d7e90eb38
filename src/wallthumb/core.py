"""Top-level entry points: generate_thumbnail(), generate_thumbnails(), ThumbnailCache."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path

from wallthumb.cache.evictor import Evictor
from wallthumb.cache.keys import derive_cache_key
from wallthumb.cache.stats import CacheStats, StatsReporter
from wallthumb.cache.store import ThumbnailStore
from wallthumb.concurrency.batch import BatchScheduler
from wallthumb.concurrency.inflight import InFlightRegistry
from wallthumb.config.schema import ThumbnailCacheConfig
from wallthumb.errors.exceptions import WallthumbError
from wallthumb.thumbnails.generator import ThumbnailGenerator
from wallthumb.types import ThumbnailOutcome, ThumbnailPair

logger = logging.getLogger(__name__)


class ThumbnailCache:
    """Wallpaper thumbnail cache with full lifecycle control."""

    def __init__(
        self,
        config: ThumbnailCacheConfig | None = None,
        generator: ThumbnailGenerator | None = None,
    ) -> None:
        self._config = config or ThumbnailCacheConfig()
        self._store = ThumbnailStore(self._config.cache_dir, extension=self._config.extension)
        self._generator = generator or ThumbnailGenerator(
            width=self._config.width,
            height=self._config.height,
            quality=self._config.quality,
            extension=self._config.extension,
        )
        self._scheduler = BatchScheduler(window_size=self._config.batch_size)
        self._evictor = Evictor(self._store, ttl_seconds=self._config.ttl_seconds)
        self._reporter = StatsReporter(self._store)
        self._inflight: InFlightRegistry[ThumbnailOutcome] = InFlightRegistry()

    @property
    def config(self) -> ThumbnailCacheConfig:
        return self._config

    @property
    def store(self) -> ThumbnailStore:
        return self._store

    async def resolve(self, source: str | Path) -> ThumbnailOutcome:
        """Resolve a source image to a thumbnail without raising.

        Failures are reported in the returned outcome.
        """
        source = Path(source)
        try:
            key = derive_cache_key(source)
        except WallthumbError as e:
            return ThumbnailOutcome.failed(source, e)

        cached = self._store.lookup(key)
        if cached is not None:
            self._store.touch(key)
            logger.info("Using cached thumbnail for: %s", source.name)
            return ThumbnailOutcome(source=source, artifact=cached, cached=True)

        return await self._inflight.run(key, lambda: self._generate(source, key))

    async def generate_thumbnail(self, source: str | Path) -> Path:
        """Return the thumbnail path for ``source``, or ``source`` itself on failure."""
        try:
            outcome = await self.resolve(source)
        except Exception:
            logger.exception("Unexpected error generating thumbnail for %s", source)
            return Path(source)

        if outcome.ok:
            return outcome.resolved_path
        logger.warning(
            "Error generating thumbnail for %s (%s): %s",
            source,
            outcome.error_kind,
            outcome.error,
        )
        return Path(source)

    async def generate_thumbnails(self, sources: Iterable[str | Path]) -> dict[Path, Path]:
        """Generate thumbnails for many sources, a few at a time."""
        return await self._scheduler.run(self.generate_thumbnail, sources)

    async def list_with_thumbnails(self, sources: Iterable[str | Path]) -> list[ThumbnailPair]:
        """Pair each source with its thumbnail (or itself), in input order."""
        paths = [Path(s) for s in sources]
        if not paths:
            return []
        logger.info("Generating thumbnails for %d wallpapers...", len(paths))
        mapping = await self.generate_thumbnails(paths)
        return [ThumbnailPair(original=p, thumbnail=mapping.get(p, p)) for p in paths]

    def clear_old_thumbnails(self) -> int:
        """Delete thumbnails not accessed within the TTL."""
        return self._evictor.sweep_expired()

    def clear_all_thumbnails(self) -> int:
        """Delete every cached thumbnail."""
        return self._evictor.clear_all()

    def get_cache_stats(self) -> CacheStats:
        return self._reporter.collect()

    async def _generate(self, source: Path, key: str) -> ThumbnailOutcome:
        logger.info("Generating thumbnail for: %s", source.name)
        try:
            data = await self._generator.render_async(source)
            artifact = await asyncio.to_thread(self._store.put, key, data)
        except WallthumbError as e:
            return ThumbnailOutcome.failed(source, e)
        logger.info("Generated thumbnail: %s", artifact.name)
        return ThumbnailOutcome(source=source, artifact=artifact)


# ── Module-level convenience functions ──


def generate_thumbnail(
    source: str | Path,
    config: ThumbnailCacheConfig | None = None,
) -> Path:
    """Return the thumbnail path for one image (sync wrapper)."""
    cache = ThumbnailCache(config)
    return asyncio.run(cache.generate_thumbnail(source))


def generate_thumbnails(
    sources: Iterable[str | Path],
    config: ThumbnailCacheConfig | None = None,
) -> dict[Path, Path]:
    """Generate thumbnails for many images (sync wrapper)."""
    cache = ThumbnailCache(config)
    return asyncio.run(cache.generate_thumbnails(sources))
