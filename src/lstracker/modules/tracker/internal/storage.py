"""Key-value storage slots for the persisted aggregate."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from lstracker.shared.exceptions import StorageWriteError


class KeyValueStorage(Protocol):
    """Minimal string slot store: the aggregate lives under one fixed key."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """Dict-backed storage for tests and embedding."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FileStorage:
    """One JSON file per key under ``directory``.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace``, so readers never observe a half-written file.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        # Undecodable bytes are left for the JSON parser to reject.
        return path.read_text(encoding="utf-8", errors="replace")

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        tmp_name: Optional[str] = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise StorageWriteError(f"Failed to write {path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

    def remove(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)


__all__ = ["KeyValueStorage", "MemoryStorage", "FileStorage"]
