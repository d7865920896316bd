"""Read-only views over the tracker state.

These mirror the screens of the tracker (dashboard, filtered lists, KSB
evidence counts). Nothing here persists or mutates; stored items that are not
mappings are skipped.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from lstracker.modules.tracker.internal import (
    clean_text,
    coerce_progress,
    field_list,
    field_text,
)

from .types import DashboardSummary, KsbSummary, Record, TrackerState

TOP_SKILLS = 5
RECENT_PROJECTS = 6


def _records(items: Iterable[Any]) -> list[Record]:
    return [item for item in items if isinstance(item, Mapping)]


def _matches(query: str, *parts: str) -> bool:
    needle = clean_text(query).lower()
    if not needle:
        return True
    return needle in " ".join(parts).lower()


def _newest_first(records: list[Record]) -> list[Record]:
    return sorted(records, key=lambda r: field_text(r, "createdAt"), reverse=True)


def _by_progress(records: list[Record]) -> list[Record]:
    return sorted(records, key=lambda r: coerce_progress(r.get("progress")), reverse=True)


def list_skills(state: TrackerState, query: str = "", category: str | None = None) -> list[Record]:
    """Skills filtered by category and search text, highest progress first."""
    rows = [
        s
        for s in _records(state.skills)
        if (not category or field_text(s, "category") == category)
        and _matches(query, field_text(s, "name"), field_text(s, "goal"), field_text(s, "category"))
    ]
    return _by_progress(rows)


def list_projects(
    state: TrackerState, query: str = "", project_type: str | None = None
) -> list[Record]:
    rows = [
        p
        for p in _records(state.projects)
        if (not project_type or field_text(p, "type") == project_type)
        and _matches(
            query,
            field_text(p, "name"),
            field_text(p, "type"),
            " ".join(field_list(p, "skills")),
            " ".join(field_list(p, "ksbs")),
            field_text(p, "learned"),
        )
    ]
    return _newest_first(rows)


def ksb_evidence_counts(state: TrackerState) -> Counter:
    """Number of evidence items citing each KSB code."""
    counts: Counter = Counter()
    for ev in _records(state.evidence):
        counts.update(field_list(ev, "ksbs"))
    return counts


def list_ksbs(state: TrackerState) -> list[KsbSummary]:
    counts = ksb_evidence_counts(state)
    rows = [
        KsbSummary(
            id=field_text(k, "id"),
            code=field_text(k, "code"),
            text=field_text(k, "text"),
            evidence_count=counts.get(field_text(k, "code"), 0),
        )
        for k in _records(state.ksb_library)
    ]
    return sorted(rows, key=lambda k: k.code)


def list_evidence(state: TrackerState, query: str = "") -> list[Record]:
    rows = [
        ev
        for ev in _records(state.evidence)
        if _matches(
            query,
            field_text(ev, "title"),
            " ".join(field_list(ev, "ksbs")),
            field_text(ev, "notes"),
        )
    ]
    return _newest_first(rows)


def list_notes(state: TrackerState, query: str = "") -> list[Record]:
    rows = [
        n
        for n in _records(state.notes)
        if _matches(
            query,
            field_text(n, "title"),
            " ".join(field_list(n, "tags")),
            field_text(n, "body"),
            field_text(n, "link"),
        )
    ]
    return _newest_first(rows)


def list_reflections(state: TrackerState) -> list[Record]:
    return _newest_first(_records(state.reflections))


def dashboard_summary(state: TrackerState) -> DashboardSummary:
    skills = _records(state.skills)
    projects = _records(state.projects)

    average = 0
    if skills:
        total = sum(coerce_progress(s.get("progress")) for s in skills)
        # half-up, in integers: imported values may exceed float range
        average = (2 * total + len(skills)) // (2 * len(skills))

    return DashboardSummary(
        skill_count=len(state.skills),
        project_count=len(state.projects),
        completed_projects=sum(1 for p in projects if p.get("status") == "Completed"),
        evidence_count=len(state.evidence),
        average_progress=average,
        top_skills=_by_progress(skills)[:TOP_SKILLS],
        recent_projects=_newest_first(projects)[:RECENT_PROJECTS],
    )


__all__ = [
    "list_skills",
    "list_projects",
    "list_ksbs",
    "ksb_evidence_counts",
    "list_evidence",
    "list_notes",
    "list_reflections",
    "dashboard_summary",
]
