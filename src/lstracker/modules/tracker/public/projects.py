"""Project operations: add, cycle status, delete."""

from __future__ import annotations

from typing import Any

from lstracker.modules.tracker.internal import find_record, without_record

from .tracker import Tracker
from .types import PROJECT_STATUSES, Project, Record


def next_status(status: Any) -> str:
    """In progress -> Completed -> Paused -> In progress; unknown values restart the cycle."""
    try:
        idx = PROJECT_STATUSES.index(status)
    except ValueError:
        idx = -1
    return PROJECT_STATUSES[(idx + 1) % len(PROJECT_STATUSES)]


def add_project(
    tracker: Tracker,
    name: Any,
    project_type: Any = "",
    skill_tags: Any = "",
    ksb_codes: Any = "",
    learned: Any = "",
    status: Any = PROJECT_STATUSES[0],
) -> Record:
    """Prepend a project. Tags and codes may be comma-separated strings or lists."""
    record = Project(
        name=name,
        type=project_type,
        skills=skill_tags,
        ksbs=ksb_codes,
        learned=learned,
        status=status,
    ).to_record()
    tracker.state.projects.insert(0, record)
    tracker.commit()
    return record


def cycle_project_status(tracker: Tracker, project_id: str) -> Record | None:
    project = find_record(tracker.state.projects, project_id)
    if project is None:
        return None
    project["status"] = next_status(project.get("status"))
    tracker.commit()
    return project


def delete_project(tracker: Tracker, project_id: str) -> bool:
    tracker.state.projects, removed = without_record(tracker.state.projects, project_id)
    if removed:
        tracker.commit()
    return removed


__all__ = ["next_status", "add_project", "cycle_project_status", "delete_project"]
