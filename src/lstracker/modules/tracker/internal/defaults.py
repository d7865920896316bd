"""Starter dataset shown on first launch and after a reset."""

from __future__ import annotations

import copy
from typing import Any

from lstracker.shared.ids import generate_id, now_iso


def build_default_payload() -> dict[str, Any]:
    created = now_iso()
    return {
        "skills": [
            {
                "id": generate_id("skill"),
                "name": "Python",
                "category": "Python",
                "progress": 35,
                "goal": "Comfortable writing clean scripts + notebooks",
                "createdAt": created,
            },
            {
                "id": generate_id("skill"),
                "name": "SQL",
                "category": "Data Science",
                "progress": 25,
                "goal": "Joins, CTEs, window functions",
                "createdAt": created,
            },
            {
                "id": generate_id("skill"),
                "name": "Power BI",
                "category": "Power BI",
                "progress": 20,
                "goal": "DAX + model design + dashboards",
                "createdAt": created,
            },
        ],
        "projects": [
            {
                "id": generate_id("proj"),
                "name": "KSB Notebook Exercises",
                "type": "University",
                "skills": ["Python", "ML"],
                "ksbs": ["B1", "B5"],
                "learned": "Built consistent workflow for practice notebooks.",
                "status": "In progress",
                "createdAt": created,
            },
        ],
        "ksbLibrary": [
            {
                "id": generate_id("ksb"),
                "code": "B1",
                "text": "An inquisitive approach: curiosity, tenacity, creativity in solutions.",
                "createdAt": created,
            },
            {
                "id": generate_id("ksb"),
                "code": "B5",
                "text": "Impartial, scientific, hypothesis-driven approach with integrity.",
                "createdAt": created,
            },
        ],
        "evidence": [
            {
                "id": generate_id("ev"),
                "title": "Built ETL import with validation checks",
                "ksbs": ["B5"],
                "notes": "Handled missing values + unit cleanup + reporting.",
                "createdAt": created,
            },
        ],
        "notes": [
            {
                "id": generate_id("note"),
                "title": "Random Forest",
                "tags": ["ML", "Trees"],
                "link": "",
                "body": "Bagging ensemble. Key knobs: n_estimators, max_depth, max_features.",
                "createdAt": created,
            },
        ],
        "reflections": [
            {
                "id": generate_id("ref"),
                "week": "Week of 2026-01-26",
                "learned": "Stayed consistent. Improved SQL joins. Refactored JS modules.",
                "next": "Do 1 ML notebook + one small app feature.",
                "createdAt": created,
            },
        ],
    }


# Generated once per process; callers only ever receive deep copies.
_DEFAULT_PAYLOAD = build_default_payload()


def default_payload() -> dict[str, Any]:
    return copy.deepcopy(_DEFAULT_PAYLOAD)
