"""The tracker controller: one in-memory aggregate plus the store that persists it."""

from __future__ import annotations

from pathlib import Path

from lstracker.modules.tracker.internal import FileStorage
from lstracker.shared.config import EXPORT_FILENAME, Config
from lstracker.shared.exceptions import ImportParseError

from .store import StateStore
from .types import TrackerState


class Tracker:
    """Owns the current TrackerState and is passed explicitly to every operation.

    Mutations change ``state`` in place and then call ``commit``; if the write
    fails the change stays in memory and the StorageWriteError propagates.
    """

    def __init__(self, store: StateStore, state: TrackerState | None = None):
        self.store = store
        self.state = state if state is not None else store.load()

    @classmethod
    def open(cls, store: StateStore) -> "Tracker":
        return cls(store, store.load())

    @classmethod
    def from_config(cls, config: Config) -> "Tracker":
        store = StateStore(FileStorage(config.data_dir), key=config.storage_key)
        return cls.open(store)

    def commit(self) -> None:
        self.store.save(self.state)

    def replace(self, state: TrackerState) -> None:
        self.state = state
        self.commit()

    def reset(self) -> TrackerState:
        self.replace(self.store.reset())
        return self.state

    # --- Files ---
    def export_file(self, target: Path, *, filename: str = EXPORT_FILENAME) -> Path:
        """Write a snapshot to ``target``, or to ``target/filename`` when it is a directory."""
        path = Path(target)
        if path.is_dir():
            path = path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.store.export_snapshot(self.state))
        return path

    def import_file(self, path: Path) -> TrackerState:
        """Replace the whole state with the contents of an export file."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise ImportParseError(f"Cannot read {path}: {exc}") from exc
        self.replace(self.store.import_snapshot(data))
        return self.state


__all__ = ["Tracker"]
