from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from lstracker.modules.tracker.internal.normalize import (
    clamp_progress,
    clean_text,
    ensure_list,
    split_codes,
    split_tags,
)
from lstracker.shared.ids import generate_id, now_iso
from lstracker.shared.types import FrozenModel, RecordModel


# Order matters: cycling a project's status walks this tuple.
PROJECT_STATUSES: tuple[str, ...] = ("In progress", "Completed", "Paused")

COLLECTIONS: tuple[str, ...] = (
    "skills",
    "projects",
    "ksbLibrary",
    "evidence",
    "notes",
    "reflections",
)

Record = dict[str, Any]


# --- Records ----------------------------------------------------------------


class Skill(RecordModel):
    """A skill being learned, with progress in percent."""

    id: str = Field(default_factory=lambda: generate_id("skill"))
    name: str = ""
    category: str = ""
    progress: int = 0
    goal: str = ""
    created_at: str = Field(default_factory=now_iso, alias="createdAt")

    @field_validator("name", "category", "goal", mode="before")
    @classmethod
    def _clean_text(cls, value: Any) -> str:
        return clean_text(value)

    @field_validator("progress", mode="before")
    @classmethod
    def _clamp_progress(cls, value: Any) -> int:
        return clamp_progress(value)


class Project(RecordModel):
    """A piece of work, tagged with the skills and KSB codes it exercised."""

    id: str = Field(default_factory=lambda: generate_id("proj"))
    name: str = ""
    type: str = ""
    skills: list[str] = Field(default_factory=list)
    ksbs: list[str] = Field(default_factory=list)
    learned: str = ""
    status: str = PROJECT_STATUSES[0]
    created_at: str = Field(default_factory=now_iso, alias="createdAt")

    @field_validator("name", "type", "learned", mode="before")
    @classmethod
    def _clean_text(cls, value: Any) -> str:
        return clean_text(value)

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> str:
        return clean_text(value) or PROJECT_STATUSES[0]

    @field_validator("skills", mode="before")
    @classmethod
    def _split_skills(cls, value: Any) -> list[str]:
        return split_tags(value)

    @field_validator("ksbs", mode="before")
    @classmethod
    def _split_ksbs(cls, value: Any) -> list[str]:
        return split_codes(value)


class Ksb(RecordModel):
    """A competency from the KSB library. Codes are not required to be unique."""

    id: str = Field(default_factory=lambda: generate_id("ksb"))
    code: str = ""
    text: str = ""
    created_at: str = Field(default_factory=now_iso, alias="createdAt")

    @field_validator("code", mode="before")
    @classmethod
    def _upper_code(cls, value: Any) -> str:
        return clean_text(value).upper()

    @field_validator("text", mode="before")
    @classmethod
    def _clean_text(cls, value: Any) -> str:
        return clean_text(value)


class Evidence(RecordModel):
    """Something done that backs one or more KSB codes (by value, not by id)."""

    id: str = Field(default_factory=lambda: generate_id("ev"))
    title: str = ""
    ksbs: list[str] = Field(default_factory=list)
    notes: str = ""
    created_at: str = Field(default_factory=now_iso, alias="createdAt")

    @field_validator("title", "notes", mode="before")
    @classmethod
    def _clean_text(cls, value: Any) -> str:
        return clean_text(value)

    @field_validator("ksbs", mode="before")
    @classmethod
    def _split_ksbs(cls, value: Any) -> list[str]:
        return split_codes(value)


class Note(RecordModel):
    id: str = Field(default_factory=lambda: generate_id("note"))
    title: str = ""
    tags: list[str] = Field(default_factory=list)
    link: str = ""
    body: str = ""
    created_at: str = Field(default_factory=now_iso, alias="createdAt")

    @field_validator("title", "link", "body", mode="before")
    @classmethod
    def _clean_text(cls, value: Any) -> str:
        return clean_text(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> list[str]:
        return split_tags(value)


class Reflection(RecordModel):
    id: str = Field(default_factory=lambda: generate_id("ref"))
    week: str = ""
    learned: str = ""
    next: str = ""
    created_at: str = Field(default_factory=now_iso, alias="createdAt")

    @field_validator("week", "learned", "next", mode="before")
    @classmethod
    def _clean_text(cls, value: Any) -> str:
        return clean_text(value)


# --- Aggregate --------------------------------------------------------------


class TrackerState(BaseModel):
    """The six collections persisted as one document.

    Collection items are kept as plain mappings, exactly as stored or imported;
    only the collections themselves are shape-checked.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    skills: list[Any] = Field(default_factory=list)
    projects: list[Any] = Field(default_factory=list)
    ksb_library: list[Any] = Field(default_factory=list, alias="ksbLibrary")
    evidence: list[Any] = Field(default_factory=list)
    notes: list[Any] = Field(default_factory=list)
    reflections: list[Any] = Field(default_factory=list)

    @field_validator("*", mode="before")
    @classmethod
    def _default_collection(cls, value: Any) -> list:
        return ensure_list(value)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "TrackerState":
        """Build from a decoded document; unknown keys are dropped, bad collections emptied."""
        return cls.model_validate({key: payload[key] for key in COLLECTIONS if key in payload})

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


# --- Query results ----------------------------------------------------------


class KsbSummary(FrozenModel):
    """A KSB library entry with the number of evidence items citing its code."""

    id: str
    code: str
    text: str
    evidence_count: int = Field(default=0, ge=0)


class DashboardSummary(FrozenModel):
    skill_count: int = Field(..., ge=0)
    project_count: int = Field(..., ge=0)
    completed_projects: int = Field(..., ge=0)
    evidence_count: int = Field(..., ge=0)
    average_progress: int = Field(..., description="Mean skill progress, rounded")
    top_skills: list[Record] = Field(default_factory=list)
    recent_projects: list[Record] = Field(default_factory=list)


__all__ = [
    "PROJECT_STATUSES",
    "COLLECTIONS",
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
