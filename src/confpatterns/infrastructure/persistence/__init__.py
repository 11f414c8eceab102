"""Persistence infrastructure for settings files."""

from .exceptions import PersistenceError, SettingsFileError
from .settings_file import SettingsFileManager, parse_settings, render_settings

__all__ = [
    "PersistenceError",
    "SettingsFileError",
    "SettingsFileManager",
    "parse_settings",
    "render_settings",
]
