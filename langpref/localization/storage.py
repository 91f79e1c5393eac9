"""Durable key-value settings storage."""

import json
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

import structlog

from ..errors import StorageError

logger = structlog.get_logger(__name__)


class SettingsStore(ABC):
    """Process-durable string settings.

    ``set`` must not return before the value survives a process restart.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None if the key was never set.

        Raises StorageError when the store exists but cannot be read, so
        callers can tell "unreadable" from "absent".
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` durably. Raises StorageError on failure."""
        pass


class InMemorySettingsStore(SettingsStore):
    """Dictionary-backed store. Durable only for the life of the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileSettingsStore(SettingsStore):
    """Settings kept in a single JSON object on disk.

    Writes go to a temporary file in the same directory which is flushed,
    fsynced and then renamed over the target, so readers see either the old
    or the new document. The directory is fsynced after the rename.

    A file that exists but cannot be parsed is never overwritten; both
    ``get`` and ``set`` raise StorageError instead.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        value = self._load(key).get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load(key)
            data[key] = value
            self._write(data, key)

    def _load(self, key: str) -> Dict[str, object]:
        """Read the settings document. A missing file is empty; a broken one raises."""
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(
                f"Failed to read settings file: {e}",
                operation="get",
                key=key,
                path=str(self.path),
                previous_error=e,
            ) from e

        if not isinstance(data, dict):
            raise StorageError(
                "Settings file is not a JSON object",
                operation="get",
                key=key,
                path=str(self.path),
            )

        return data

    def _write(self, data: Dict[str, object], key: str) -> None:
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
            self._fsync_directory()
        except OSError as e:
            raise StorageError(
                f"Failed to write settings file: {e}",
                operation="set",
                key=key,
                path=str(self.path),
                previous_error=e,
            ) from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        logger.debug("Settings written", path=str(self.path), key=key)

    def _fsync_directory(self) -> None:
        # Makes the rename itself durable; directories cannot be opened on Windows
        if os.name == "nt":
            return
        dir_fd = os.open(str(self.path.parent), os.O_RDONLY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
