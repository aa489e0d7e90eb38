"""Pydantic model for thumbnail cache configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wallthumb.config.defaults import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_EXTENSION,
    DEFAULT_HEIGHT,
    DEFAULT_QUALITY,
    DEFAULT_TTL_DAYS,
    DEFAULT_WIDTH,
)
from wallthumb.utils.paths import thumbnail_cache_dir

_SECONDS_PER_DAY = 24 * 3600
_SUPPORTED_EXTENSIONS = {"jpg", "jpeg", "webp"}


class ThumbnailCacheConfig(BaseModel):
    """Everything the cache needs, resolved once and passed explicitly."""

    model_config = ConfigDict(frozen=True)

    cache_dir: Path = Field(default_factory=thumbnail_cache_dir)
    width: int = Field(default=DEFAULT_WIDTH, gt=0)
    height: int = Field(default=DEFAULT_HEIGHT, gt=0)
    quality: int = Field(default=DEFAULT_QUALITY, ge=1, le=100)
    ttl_days: float = Field(default=DEFAULT_TTL_DAYS, gt=0)
    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, ge=1)
    extension: str = DEFAULT_EXTENSION

    @field_validator("extension")
    @classmethod
    def _strip_dot(cls, value: str) -> str:
        value = value.strip().lstrip(".").lower()
        if value not in _SUPPORTED_EXTENSIONS:
            raise ValueError(f"unsupported thumbnail extension '{value}'")
        return value

    @property
    def ttl_seconds(self) -> float:
        return self.ttl_days * _SECONDS_PER_DAY

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)
