from __future__ import annotations

from typing import Any

from lstracker.modules.tracker.internal import without_record

from .tracker import Tracker
from .types import Record, Reflection


def add_reflection(tracker: Tracker, week: Any, learned: Any = "", next_steps: Any = "") -> Record:
    record = Reflection(week=week, learned=learned, next=next_steps).to_record()
    tracker.state.reflections.insert(0, record)
    tracker.commit()
    return record


def delete_reflection(tracker: Tracker, reflection_id: str) -> bool:
    tracker.state.reflections, removed = without_record(tracker.state.reflections, reflection_id)
    if removed:
        tracker.commit()
    return removed


__all__ = ["add_reflection", "delete_reflection"]
