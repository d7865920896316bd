"""Tracker settings.

``Config`` is frozen and handed to whatever needs it; nothing reads a module
level instance. Every field can be set from an ``LSTRACKER_*`` environment
variable or a ``.env`` file.
"""

import json
from pathlib import Path
from typing import Any, Tuple, Type

from pydantic import Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict
from pydantic_settings.sources import EnvSettingsSource

LSTRACKER_HOME = Path("~/.lstracker").expanduser()

STORAGE_KEY = "lst_app_v1"
EXPORT_FILENAME = "learning-skills-tracker-export.json"

DEFAULT_SKILL_CATEGORIES = ["Python", "SQL", "Power BI", "Data Science", "Other"]
DEFAULT_PROJECT_TYPES = ["University", "Personal", "Work"]


def _env_list(raw: str) -> list[str]:
    """``'["a", "b"]'`` or ``"a, b"`` -> ``["a", "b"]``."""
    items: Any = None
    if raw.lstrip().startswith("["):
        try:
            items = json.loads(raw)
        except json.JSONDecodeError:
            items = None
    if not isinstance(items, list):
        items = raw.split(",")
    cleaned = (str(item).strip() for item in items)
    return [item for item in cleaned if item]


class CommaListEnvSettingsSource(EnvSettingsSource):
    """Reads list fields from plain comma-separated env values as well as JSON."""

    def prepare_field_value(
        self, field_name: str, field: FieldInfo, value: Any, value_is_complex: bool
    ) -> Any:
        if isinstance(value, str) and getattr(field.annotation, "__origin__", None) is list:
            return _env_list(value)
        return super().prepare_field_value(field_name, field, value, value_is_complex)


class Config(BaseSettings):
    """Where the tracker keeps its data and which form choices it offers."""

    model_config = SettingsConfigDict(
        env_prefix="LSTRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Storage
    data_dir: Path = Field(
        default=LSTRACKER_HOME,
        description="Directory holding the persisted tracker state",
    )
    storage_key: str = Field(
        default=STORAGE_KEY,
        min_length=1,
        description="Key of the single storage slot (file stem under data_dir)",
    )
    export_filename: str = Field(
        default=EXPORT_FILENAME,
        min_length=1,
        description="File name used when exporting into a directory",
    )

    # Form choices
    progress_step: int = Field(
        default=5, ge=1, le=100, description="Default delta for skill progress adjustments"
    )
    skill_categories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SKILL_CATEGORIES),
        description="Categories offered when adding a skill",
    )
    project_types: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PROJECT_TYPES),
        description="Types offered when adding a project",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            CommaListEnvSettingsSource(settings_cls),
            dotenv_settings,
            file_secret_settings,
        )

    @field_validator("data_dir", mode="before")
    @classmethod
    def _resolve_data_dir(cls, value: str | Path) -> Path:
        return Path(value).expanduser().resolve()

    @property
    def storage_path(self) -> Path:
        return self.data_dir / f"{self.storage_key}.json"

    def with_overrides(self, **kwargs) -> "Config":
        """Copy with the given fields replaced."""
        return self.model_copy(update=kwargs)


__all__ = [
    "Config",
    "LSTRACKER_HOME",
    "STORAGE_KEY",
    "EXPORT_FILENAME",
    "DEFAULT_SKILL_CATEGORIES",
    "DEFAULT_PROJECT_TYPES",
]
