"""Configuration hierarchy: merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.wallthumb/config.yaml)
  3. Project config   (./wallthumb.yaml)
  4. Environment variables (WALLTHUMB_*)
  5. Runtime arguments
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from wallthumb.config.defaults import get_defaults

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".wallthumb" / "config.yaml"
_PROJECT_CONFIG_NAME = "wallthumb.yaml"
_SECTION_KEY = "thumbnails"

# Map of environment variables to config keys
_ENV_MAP: dict[str, str] = {
    "WALLTHUMB_CACHE_DIR": "cache_dir",
    "WALLTHUMB_DATA_DIR": "data_dir",
    "WALLTHUMB_WIDTH": "width",
    "WALLTHUMB_HEIGHT": "height",
    "WALLTHUMB_QUALITY": "quality",
    "WALLTHUMB_TTL_DAYS": "ttl_days",
    "WALLTHUMB_BATCH_SIZE": "batch_size",
    "WALLTHUMB_LOG_LEVEL": "log_level",
}

# Keys that should be parsed as specific types
_TYPE_MAP: dict[str, type] = {
    "width": int,
    "height": int,
    "quality": int,
    "ttl_days": float,
    "batch_size": int,
    "cache_dir": Path,
    "data_dir": Path,
}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Load and merge configuration from all sources.

    Returns a merged dict with the final resolved values.
    """
    config = get_defaults()

    # Layer 2: Global config
    global_cfg = _load_yaml_config(_GLOBAL_CONFIG_PATH)
    if global_cfg:
        config.update(global_cfg)

    # Layer 3: Project config (search from cwd upward)
    project_path = _find_project_config()
    if project_path:
        project_cfg = _load_yaml_config(project_path)
        if project_cfg:
            config.update(project_cfg)

    # Layer 4: Environment variables
    env_cfg = _load_env_vars()
    config.update(env_cfg)

    # Layer 5: Runtime arguments (highest priority)
    # Filter out None values: only override when explicitly set
    for key, value in runtime_overrides.items():
        if value is not None:
            config[key] = value

    return config


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Load a YAML config file if it exists."""
    if not path.exists() or not path.is_file():
        return None
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
        section = config_section(data)
        if section is not None:
            return section
        logger.warning("Config file %s is not a mapping, ignoring", path)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
    return None


def config_section(data: Any) -> dict[str, Any] | None:
    """Return the settings mapping of a parsed config file.

    Files may be flat or nest their settings under a top-level ``thumbnails``
    key. Returns None when there is no mapping to use.
    """
    if not isinstance(data, dict):
        return None
    section = data.get(_SECTION_KEY, data)
    return section if isinstance(section, dict) else None


def _find_project_config() -> Path | None:
    """Search for wallthumb.yaml from cwd upward."""
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / _PROJECT_CONFIG_NAME
        if candidate.exists():
            return candidate
    return None


def _load_env_vars() -> dict[str, Any]:
    """Read WALLTHUMB_* environment variables."""
    result: dict[str, Any] = {}
    for env_key, config_key in _ENV_MAP.items():
        value = os.environ.get(env_key)
        if value is None:
            continue
        result[config_key] = _coerce_env_value(config_key, value)
    return result


def _coerce_env_value(key: str, value: str) -> Any:
    """Coerce an environment variable string to the appropriate type."""
    target_type = _TYPE_MAP.get(key)
    if target_type:
        try:
            return target_type(value)
        except (ValueError, TypeError):
            logger.warning(
                "Cannot convert env var for '%s' to %s: %s", key, target_type.__name__, value
            )
            return value

    return value
