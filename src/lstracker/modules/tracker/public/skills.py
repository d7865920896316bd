"""Skill operations: add, adjust progress, delete."""

from __future__ import annotations

from typing import Any

from lstracker.modules.tracker.internal import (
    clamp_progress,
    coerce_progress,
    find_record,
    without_record,
)

from .tracker import Tracker
from .types import Record, Skill


def add_skill(
    tracker: Tracker,
    name: Any,
    category: Any = "",
    progress: Any = 0,
    goal: Any = "",
) -> Record:
    """Prepend a new skill; progress is coerced to an int and clamped to 0..100."""
    record = Skill(name=name, category=category, progress=progress, goal=goal).to_record()
    tracker.state.skills.insert(0, record)
    tracker.commit()
    return record


def adjust_skill_progress(tracker: Tracker, skill_id: str, delta: Any) -> Record | None:
    """Move progress by ``delta`` within 0..100. Unknown ids are ignored (no save)."""
    skill = find_record(tracker.state.skills, skill_id)
    if skill is None:
        return None
    old = coerce_progress(skill.get("progress"))
    skill["progress"] = clamp_progress(old + coerce_progress(delta))
    tracker.commit()
    return skill


def delete_skill(tracker: Tracker, skill_id: str) -> bool:
    tracker.state.skills, removed = without_record(tracker.state.skills, skill_id)
    if removed:
        tracker.commit()
    return removed


__all__ = ["add_skill", "adjust_skill_progress", "delete_skill"]
