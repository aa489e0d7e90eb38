"""Thumbnail rendering."""

from wallthumb.thumbnails.generator import ThumbnailGenerator

__all__ = ["ThumbnailGenerator"]
