"""
Path utilities for handling dev vs production (frozen) file locations.

Dev mode: Uses local workspace/ directory
Frozen mode: Uses system-standard paths (AppData, Pictures)
"""
from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths

APP_DIR_NAME = "Comic Studio"


def is_frozen() -> bool:
    """Check if running as a frozen (PyInstaller) application."""
    return getattr(sys, 'frozen', False) or hasattr(sys, '_MEIPASS')


def get_app_data_dir() -> Path:
    """
    Get the application data directory for internal state files.

    Frozen: Qt's AppLocalDataLocation
    Dev: workspace/
    """
    if is_frozen():
        app_data = Path(QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppLocalDataLocation
        ))
        app_data.mkdir(parents=True, exist_ok=True)
        return app_data
    return Path.cwd() / "workspace"


def get_default_export_dir() -> Path:
    """
    Get the default folder for exported pages and libraries.

    Frozen: ~/Pictures/Comic Studio
    Dev: workspace/exports
    """
    if is_frozen():
        pictures = Path(QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.PicturesLocation
        ))
        return pictures / APP_DIR_NAME
    return Path.cwd() / "workspace" / "exports"


def get_settings_path() -> Path:
    """Get the path for storing GUI settings."""
    return get_app_data_dir() / "studio_settings.json"
