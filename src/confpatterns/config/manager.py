"""Process-wide settings manager."""
from __future__ import annotations

import threading
from typing import Dict, Optional

from confpatterns.config.schemas.app_schema import SettingsConfig
from confpatterns.domain.settings.settings_store import SettingsStore
from confpatterns.infrastructure.logging.logger import get_logger
from confpatterns.infrastructure.persistence.settings_file import SettingsFileManager

logger = get_logger(__name__)


class ConfigurationManager:
    """
    Singleton store of string settings with flat-file persistence.

    ``get_instance()`` and ``ConfigurationManager()`` both return the same
    object. The first call constructs it under a class lock; every later
    call returns the cached instance without locking. Construction performs
    no I/O.

    Settings live in memory until ``save_settings_to_file`` is called, and
    ``load_settings_from_file`` merges a file into whatever is already set.
    Lookups of unknown keys raise ``SettingNotFoundError`` and file open
    failures raise ``SettingsFileError``.
    """

    _instance: Optional[ConfigurationManager] = None
    _lock = threading.Lock()

    def __new__(cls) -> ConfigurationManager:
        """Thread-safe singleton pattern."""
        if cls._instance is None:
            with cls._lock:
                # Double-checked locking pattern
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._initialize()
                    cls._instance = instance
        return cls._instance

    def _initialize(self) -> None:
        """Set up an empty store and default file settings, once per process."""
        self._store = SettingsStore()
        self._settings_config = SettingsConfig()
        self._file_manager = SettingsFileManager()
        logger.debug("Configuration manager created")

    @classmethod
    def get_instance(cls) -> ConfigurationManager:
        """Return the process-wide instance, creating it on first use."""
        return cls()

    def apply_config(self, settings_config: SettingsConfig) -> None:
        """
        Apply persistence options from the application config.

        Args:
            settings_config: Default file path, encoding and write mode
        """
        self._settings_config = settings_config
        self._file_manager = SettingsFileManager(
            encoding=settings_config.encoding,
            atomic_write=settings_config.atomic_write,
        )
        logger.debug(
            "Settings persistence configured",
            default_file=settings_config.default_file,
            encoding=settings_config.encoding,
            atomic_write=settings_config.atomic_write,
        )

    @property
    def default_file(self) -> str:
        return self._settings_config.default_file

    def load_settings_from_file(self, file_path: Optional[str] = None) -> None:
        """
        Merge settings from a file into the store.

        The file is read completely before any setting changes, so a failed
        open leaves the store untouched. A trailing key without a value is
        ignored.

        Args:
            file_path: Settings file; defaults to the configured file

        Raises:
            SettingsFileError: If the file cannot be opened or read
        """
        path = file_path or self.default_file
        loaded = self._file_manager.read_settings(path)
        self._store.update(loaded.items())
        logger.info("Settings loaded", path=str(path), count=len(loaded))

    def get_setting(self, key: str) -> str:
        """
        Get a setting value.

        Raises:
            SettingNotFoundError: If the key is not present
        """
        return self._store.get(key)

    def set_setting(self, key: str, value: str) -> None:
        """Insert or overwrite a setting in memory."""
        self._store.set(key, value)

    def has_setting(self, key: str) -> bool:
        return self._store.contains(key)

    def get_all_settings(self) -> Dict[str, str]:
        """Return a key-ordered copy of every setting."""
        return self._store.snapshot()

    def clear_settings(self) -> None:
        """Remove every setting from memory."""
        self._store.clear()

    def save_settings_to_file(self, file_path: Optional[str] = None) -> None:
        """
        Write every setting to a file, one ``key value`` pair per line.

        Args:
            file_path: Settings file; defaults to the configured file

        Raises:
            SettingsFileError: If the file cannot be opened or written
        """
        path = file_path or self.default_file
        snapshot = self._store.snapshot()
        self._file_manager.write_settings(path, snapshot)
        logger.info("Settings saved", path=str(path), count=len(snapshot))
