"""Image loading, cover-fit and encoding utilities."""

from __future__ import annotations

import io
from pathlib import Path

from PIL import Image, ImageOps

from wallthumb.errors.exceptions import CacheIOError, CodecError

# Pillow encoder name per artifact extension
ENCODERS = {"jpg": "JPEG", "jpeg": "JPEG", "webp": "WEBP"}

_DECODE_ERRORS = (OSError, ValueError, SyntaxError, Image.DecompressionBombError)


def load_image(path: str | Path) -> bytes:
    """Read an image file and return raw bytes."""
    path = Path(path)
    try:
        return path.read_bytes()
    except OSError as e:
        raise CacheIOError(f"Cannot read {path}: {e}", path=path, original=e) from e


def decode_image(
    data: bytes,
    size_hint: tuple[int, int] | None = None,
    source: str | Path | None = None,
) -> Image.Image:
    """Decode raw bytes into an upright RGB image.

    The format is sniffed from the content, never from a file extension.
    ``size_hint`` lets JPEG decoding downscale early while staying at least
    as large as the hint.
    """
    try:
        img = Image.open(io.BytesIO(data))
        if size_hint is not None:
            side = max(size_hint)
            img.draft("RGB", (side, side))
        img.load()
        img = ImageOps.exif_transpose(img) or img
        return _to_rgb(img)
    except _DECODE_ERRORS as e:
        label = source if source is not None else "<bytes>"
        raise CodecError(f"Cannot decode image {label}: {e}", path=source, original=e) from e


def cover_fit(img: Image.Image, size: tuple[int, int]) -> Image.Image:
    """Scale to fill ``size`` completely, then center-crop the overflow."""
    return ImageOps.fit(img, size, method=Image.Resampling.LANCZOS, centering=(0.5, 0.5))


def encode_image(img: Image.Image, quality: int, extension: str = "jpg") -> bytes:
    """Encode an image to compressed bytes at the given quality."""
    encoder = ENCODERS.get(extension.lower())
    if encoder is None:
        raise CodecError(f"Unsupported thumbnail format: {extension}")
    buf = io.BytesIO()
    try:
        img.save(buf, format=encoder, quality=quality, optimize=True)
    except (OSError, ValueError) as e:
        raise CodecError(f"Cannot encode thumbnail: {e}", original=e) from e
    return buf.getvalue()


def _to_rgb(img: Image.Image) -> Image.Image:
    if img.mode == "RGB":
        return img
    if img.mode == "P" and "transparency" in img.info:
        img = img.convert("RGBA")
    if img.mode in ("RGBA", "LA"):
        background = Image.new("RGB", img.size, (255, 255, 255))
        background.paste(img, mask=img.getchannel("A"))
        return background
    return img.convert("RGB")
