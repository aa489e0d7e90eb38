"""Thumbnail generator: decode, cover-fit, encode."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from wallthumb.config.defaults import (
    DEFAULT_EXTENSION,
    DEFAULT_HEIGHT,
    DEFAULT_QUALITY,
    DEFAULT_WIDTH,
)
from wallthumb.utils.image import cover_fit, decode_image, encode_image, load_image

logger = logging.getLogger(__name__)


class ThumbnailGenerator:
    """Produces thumbnail bytes for a source image.

    Does not write anything; persisting the result is the store's job.
    """

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        quality: int = DEFAULT_QUALITY,
        extension: str = DEFAULT_EXTENSION,
    ) -> None:
        self._size = (width, height)
        self._quality = quality
        self._extension = extension

    @property
    def size(self) -> tuple[int, int]:
        return self._size

    def render(self, source: str | Path) -> bytes:
        """Render a thumbnail synchronously.

        Raises CacheIOError if the source cannot be read and CodecError if it
        cannot be decoded.
        """
        data = load_image(source)
        img = decode_image(data, size_hint=self._size, source=source)
        thumb = cover_fit(img, self._size)
        encoded = encode_image(thumb, self._quality, self._extension)
        logger.debug(
            "Rendered %s: %dx%d -> %dx%d (%d bytes)",
            Path(source).name, img.width, img.height, thumb.width, thumb.height, len(encoded),
        )
        return encoded

    async def render_async(self, source: str | Path) -> bytes:
        """Render on a worker thread so the event loop stays responsive."""
        return await asyncio.to_thread(self.render, source)
