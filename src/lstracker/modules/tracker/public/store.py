"""Persistence of the tracker aggregate.

The store owns the single storage slot. Loading never fails: an absent or
unreadable slot falls back to the starter dataset. Imports are parsed
completely before anything changes, so a rejected file leaves the caller's
state alone.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Callable, List

from lstracker.modules.tracker.internal import KeyValueStorage, default_payload
from lstracker.shared.config import STORAGE_KEY
from lstracker.shared.exceptions import (
    ImportParseError,
    StorageCorruptError,
    StorageWriteError,
)

from .types import TrackerState

SaveListener = Callable[[TrackerState], None]


def default_state() -> TrackerState:
    """Fresh copy of the starter dataset."""
    return TrackerState.from_payload(default_payload())


def _decode_document(text: str) -> dict[str, Any]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


class StateStore:
    def __init__(self, storage: KeyValueStorage, *, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._listeners: List[SaveListener] = []

    # --- Observers ---
    def add_listener(self, listener: SaveListener) -> None:
        """Register a callback run once after every successful save."""
        self._listeners.append(listener)

    def remove_listener(self, listener: SaveListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Lifecycle ---
    def _read(self) -> TrackerState | None:
        raw = self.storage.get(self.key)
        if raw is None:
            return None
        try:
            document = _decode_document(raw)
        except (ValueError, RecursionError) as exc:
            raise StorageCorruptError(f"Stored state '{self.key}' is unreadable: {exc}") from exc
        return TrackerState.from_payload(document)

    def load(self) -> TrackerState:
        try:
            state = self._read()
        except StorageCorruptError as exc:
            print(f"[WARN] {exc}; falling back to defaults", file=sys.stderr)
            return default_state()
        except OSError as exc:
            print(f"[WARN] Failed to read stored state: {exc}", file=sys.stderr)
            return default_state()
        return state if state is not None else default_state()

    def save(self, state: TrackerState) -> None:
        """Overwrite the slot with ``state``; raises StorageWriteError on failure."""
        text = json.dumps(state.to_payload(), ensure_ascii=False)
        try:
            self.storage.set(self.key, text)
        except StorageWriteError:
            raise
        except OSError as exc:
            raise StorageWriteError(f"Failed to write stored state: {exc}") from exc
        for listener in list(self._listeners):
            listener(state)

    def reset(self) -> TrackerState:
        try:
            self.storage.remove(self.key)
        except OSError as exc:
            print(f"[WARN] Failed to clear stored state: {exc}", file=sys.stderr)
        return default_state()

    # --- Snapshots ---
    def export_snapshot(self, state: TrackerState) -> bytes:
        return json.dumps(state.to_payload(), ensure_ascii=False, indent=2).encode("utf-8")

    def import_snapshot(self, data: bytes | str) -> TrackerState:
        """Parse an export file; the result replaces the whole state (no merge)."""
        try:
            text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
            document = _decode_document(text)
        except (ValueError, RecursionError) as exc:
            raise ImportParseError(f"Not a valid export file: {exc}") from exc
        return TrackerState.from_payload(document)


__all__ = ["StateStore", "SaveListener", "default_state"]
