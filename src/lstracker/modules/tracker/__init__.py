"""Public API for the tracker module."""

from .public.ksb import add_evidence, add_ksb, delete_evidence, delete_ksb
from .public.notes import add_note, delete_note
from .public.projects import add_project, cycle_project_status, delete_project, next_status
from .public.query import (
    dashboard_summary,
    ksb_evidence_counts,
    list_evidence,
    list_ksbs,
    list_notes,
    list_projects,
    list_reflections,
    list_skills,
)
from .public.reflections import add_reflection, delete_reflection
from .public.skills import add_skill, adjust_skill_progress, delete_skill
from .public.store import SaveListener, StateStore, default_state
from .public.tracker import Tracker
from .public.types import (
    COLLECTIONS,
    PROJECT_STATUSES,
    DashboardSummary,
    Evidence,
    Ksb,
    KsbSummary,
    Note,
    Project,
    Record,
    Reflection,
    Skill,
    TrackerState,
)

__all__ = [
    "Tracker",
    "StateStore",
    "SaveListener",
    "default_state",
    "add_skill",
    "adjust_skill_progress",
    "delete_skill",
    "add_project",
    "cycle_project_status",
    "delete_project",
    "next_status",
    "add_ksb",
    "delete_ksb",
    "add_evidence",
    "delete_evidence",
    "add_note",
    "delete_note",
    "add_reflection",
    "delete_reflection",
    "dashboard_summary",
    "ksb_evidence_counts",
    "list_skills",
    "list_projects",
    "list_ksbs",
    "list_evidence",
    "list_notes",
    "list_reflections",
    "COLLECTIONS",
    "PROJECT_STATUSES",
    "Record",
    "Skill",
    "Project",
    "Ksb",
    "Evidence",
    "Note",
    "Reflection",
    "TrackerState",
    "KsbSummary",
    "DashboardSummary",
]
