"""Flat settings file reader/writer.

The on-disk format is a sequence of whitespace-separated tokens read as
alternating key/value pairs. Writing emits one ``key value`` pair per line,
keys in ascending order.
"""

import os
import tempfile
from pathlib import Path
from typing import Dict, Iterator, Mapping, Tuple

from confpatterns.infrastructure.logging.logger import get_logger
from confpatterns.infrastructure.persistence.exceptions import SettingsFileError


def parse_settings(text: str) -> Iterator[Tuple[str, str]]:
    """
    Yield (key, value) pairs from settings text.

    An unpaired trailing token is dropped without error.
    """
    tokens = text.split()
    for index in range(0, len(tokens) - 1, 2):
        yield tokens[index], tokens[index + 1]


def render_settings(settings: Mapping[str, str]) -> str:
    """Render settings as ``key value`` lines sorted by key."""
    return "".join(f"{key} {settings[key]}\n" for key in sorted(settings))


def _reason(error: Exception) -> str:
    return getattr(error, "strerror", None) or str(error)


class SettingsFileManager:
    """
    Reads and writes settings files.

    Every call opens the file, performs the operation and releases the
    handle before returning, including when the operation fails. Bytes that
    do not decode in the configured encoding are carried through as escaped
    surrogates and written back unchanged.
    """

    def __init__(self, encoding: str = "utf-8", atomic_write: bool = False):
        """
        Initialize settings file manager.

        Args:
            encoding: Text encoding used for reading and writing
            atomic_write: Write through a temporary file and rename it into place
        """
        self.encoding = encoding
        self.atomic_write = atomic_write
        self.logger = get_logger(__name__)

    def read_settings(self, file_path: str) -> Dict[str, str]:
        """
        Read all key/value pairs from a settings file.

        Args:
            file_path: Path to the settings file

        Returns:
            Mapping of the pairs in file order, later duplicates winning

        Raises:
            SettingsFileError: If the file cannot be opened or read
        """
        try:
            with open(file_path, "r", encoding=self.encoding, errors="surrogateescape") as f:
                content = f.read()
        except (OSError, UnicodeError) as e:
            self.logger.debug("Settings file read failed", path=str(file_path), error=str(e))
            raise SettingsFileError(str(file_path), "read", _reason(e)) from e

        settings = dict(parse_settings(content))
        self.logger.debug("Read settings file", path=str(file_path), count=len(settings))
        return settings

    def write_settings(self, file_path: str, settings: Mapping[str, str]) -> None:
        """
        Write settings to a file, truncating any existing content.

        Args:
            file_path: Path to the settings file
            settings: Mapping to persist

        Raises:
            SettingsFileError: If the file cannot be opened or written
        """
        content = render_settings(settings)
        try:
            if self.atomic_write:
                self._atomic_write(Path(file_path), content)
            else:
                with open(file_path, "w", encoding=self.encoding, errors="surrogateescape") as f:
                    f.write(content)
        except (OSError, UnicodeError) as e:
            self.logger.debug("Settings file write failed", path=str(file_path), error=str(e))
            raise SettingsFileError(str(file_path), "write", _reason(e)) from e

        self.logger.debug("Wrote settings file", path=str(file_path), count=len(settings))

    def _atomic_write(self, file_path: Path, content: str) -> None:
        """
        Perform atomic write operation using temporary file.

        Args:
            file_path: Destination path
            content: Content to write
        """
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=self.encoding,
            errors="surrogateescape",
            dir=file_path.parent,
            delete=False,
            prefix=f".{file_path.name}.tmp",
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        try:
            temp_path.replace(file_path)
        except OSError:
            if temp_path.exists():
                temp_path.unlink()
            raise

