"""
core/paths.py — PASSFORGE
=========================
Single source of truth for filesystem locations.

  - BASE_DIR        → project root (read-only resources such as config/)
  - user data dir   → writable; holds logs only, never passwords
      Windows   : %APPDATA%/PASSFORGE/
      Linux/Mac : ~/.local/share/PASSFORGE/

Usage:
    from core.paths import config_path, logs_path

    settings = config_path("settings.json")
    log_dir = logs_path()
"""

import os
import sys
from pathlib import Path

from version import APP_NAME


BASE_DIR = Path(__file__).resolve().parent.parent


def config_path(filename: str = "") -> Path:
    """Path of the config directory, or of a file inside it."""
    p = BASE_DIR / "config"
    return p / filename if filename else p


def get_user_data_dir() -> Path:
    """
    Return the writable per-user data directory, creating it if needed.
    """
    if sys.platform == "win32":
        appdata = os.getenv("APPDATA")
        if not appdata:
            appdata = str(Path.home() / "AppData" / "Roaming")
        base = Path(appdata)
    else:
        base = Path.home() / ".local" / "share"

    user_dir = base / APP_NAME
    user_dir.mkdir(parents=True, exist_ok=True)
    return user_dir


def logs_path(filename: str = "") -> Path:
    """Path of the logs directory inside the user data dir."""
    p = get_user_data_dir() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p / filename if filename else p
