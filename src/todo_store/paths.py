"""Canonical and legacy locations of the task file."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

APP_DIR_NAME = "StickyTodo"
APP_DIR_NAME_POSIX = "sticky-todo"
LEGACY_DIR_NAME = ".sticky-todo"
DATA_FILE_NAME = "todos.json"


def default_data_dir(platform: Optional[str] = None, home: Optional[Path] = None) -> Path:
    """Per-user application data directory for the current platform."""
    platform = platform or sys.platform
    home = home or Path.home()

    if platform.startswith("win"):
        appdata = os.getenv("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return base / APP_DIR_NAME
    if platform == "darwin":
        return home / "Library" / "Application Support" / APP_DIR_NAME

    xdg = os.getenv("XDG_DATA_HOME")
    base = Path(xdg) if xdg else home / ".local" / "share"
    return base / APP_DIR_NAME_POSIX


def default_data_path(file_name: str = DATA_FILE_NAME) -> Path:
    return default_data_dir() / file_name


def legacy_data_path(home: Optional[Path] = None, file_name: str = DATA_FILE_NAME) -> Path:
    """Location used by earlier releases, read only during first-run migration."""
    home = home or Path.home()
    return home / LEGACY_DIR_NAME / file_name
