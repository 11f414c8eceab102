"""In-memory settings store."""
import threading
from typing import Dict, Iterable, Tuple

from confpatterns.domain.core.exceptions import SettingNotFoundError


class SettingsStore:
    """
    Mapping of setting names to setting values.

    All reads and writes go through a single re-entrant lock, so concurrent
    callers always observe a consistent mapping. Keys are unique and the
    last write wins.
    """

    def __init__(self):
        self._settings: Dict[str, str] = {}
        self._lock = threading.RLock()

    def get(self, key: str) -> str:
        """
        Return the value stored for ``key``.

        Raises:
            SettingNotFoundError: If ``key`` has never been set or loaded
        """
        with self._lock:
            try:
                return self._settings[key]
            except KeyError:
                raise SettingNotFoundError(key) from None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._settings[key] = value

    def contains(self, key: str) -> bool:
        with self._lock:
            return key in self._settings

    def update(self, pairs: Iterable[Tuple[str, str]]) -> None:
        """Apply all pairs under one lock acquisition, in order."""
        with self._lock:
            for key, value in pairs:
                self._settings[key] = value

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of the mapping ordered by key."""
        with self._lock:
            return {key: self._settings[key] for key in sorted(self._settings)}

    def clear(self) -> None:
        with self._lock:
            self._settings.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._settings)
