"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Default thumbnail geometry and encoding
DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 250
DEFAULT_QUALITY = 80
DEFAULT_EXTENSION = "jpg"

# Default eviction settings
DEFAULT_TTL_DAYS = 30.0

# Default concurrency settings
DEFAULT_BATCH_SIZE = 3

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "width": DEFAULT_WIDTH,
        "height": DEFAULT_HEIGHT,
        "quality": DEFAULT_QUALITY,
        "extension": DEFAULT_EXTENSION,
        "ttl_days": DEFAULT_TTL_DAYS,
        "batch_size": DEFAULT_BATCH_SIZE,
        "log_level": DEFAULT_LOG_LEVEL,
    }
