from __future__ import annotations

from typing import Any

from lstracker.modules.tracker.internal import without_record

from .tracker import Tracker
from .types import Note, Record


def add_note(tracker: Tracker, title: Any, tags: Any = "", link: Any = "", body: Any = "") -> Record:
    record = Note(title=title, tags=tags, link=link, body=body).to_record()
    tracker.state.notes.insert(0, record)
    tracker.commit()
    return record


def delete_note(tracker: Tracker, note_id: str) -> bool:
    tracker.state.notes, removed = without_record(tracker.state.notes, note_id)
    if removed:
        tracker.commit()
    return removed


__all__ = ["add_note", "delete_note"]
