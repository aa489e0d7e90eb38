"""YAML config loading and validation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from wallthumb.config.defaults import DEFAULT_LOG_LEVEL
from wallthumb.config.hierarchy import config_section, load_config_hierarchy
from wallthumb.config.schema import ThumbnailCacheConfig
from wallthumb.errors.exceptions import ConfigError
from wallthumb.utils.paths import thumbnail_cache_dir


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a config YAML file safely.

    Accepts either a flat mapping or one nested under a top-level
    ``thumbnails`` key.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Expected YAML mapping, got {type(raw).__name__} in {path}")

    section = config_section(raw)
    if section is None:
        raise ConfigError(f"'thumbnails' must be a mapping in {path}")
    return section


def build_cache_config(settings: dict[str, Any]) -> ThumbnailCacheConfig:
    """Validate a merged settings dict into a ThumbnailCacheConfig."""
    values = {
        name: settings[name]
        for name in ThumbnailCacheConfig.model_fields
        if settings.get(name) is not None
    }
    if "cache_dir" not in values:
        values["cache_dir"] = thumbnail_cache_dir(settings.get("data_dir"))
    try:
        return ThumbnailCacheConfig(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid thumbnail cache configuration: {e}") from e


def load_cache_config(
    config_file: str | Path | None = None,
    **overrides: Any,
) -> ThumbnailCacheConfig:
    """Resolve the full config hierarchy into a validated config.

    An explicit ``config_file`` ranks with runtime overrides: above the
    global, project and environment layers, below keyword overrides.
    """
    runtime: dict[str, Any] = load_yaml(config_file) if config_file else {}
    runtime.update({k: v for k, v in overrides.items() if v is not None})
    return build_cache_config(load_config_hierarchy(**runtime))


def resolve_log_level(config_file: str | Path | None = None) -> int:
    """Resolve the ``log_level`` setting across the hierarchy to a logging level.

    Raises ConfigError for a name the logging module does not know.
    """
    runtime: dict[str, Any] = load_yaml(config_file) if config_file else {}
    name = str(load_config_hierarchy(**runtime).get("log_level") or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {name}")
    return level
