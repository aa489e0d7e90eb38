"""Per-user application data directory resolution."""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_DATA_DIR_NAME = "Flowstate"


def app_data_dir(app_name: str = APP_DATA_DIR_NAME) -> Path:
    """Return the writable per-user data directory for the application.

    macOS:   ~/Library/Application Support/<app>
    Windows: %APPDATA%\\<app>
    Other:   $XDG_DATA_HOME/<app lowercased> (default ~/.local/share)
    """
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / app_name

    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / app_name

    xdg = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg) if xdg else Path.home() / ".local" / "share"
    return base / app_name.lower()


def thumbnail_cache_dir(data_dir: str | Path | None = None) -> Path:
    """Return the thumbnail cache root under the application data directory."""
    base = Path(data_dir) if data_dir else app_data_dir()
    return base / "thumbnails"
