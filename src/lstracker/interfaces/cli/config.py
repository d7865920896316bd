"""Project-level configuration (.lstrackerrc).

Resolution order for the data directory: CLI option > LSTRACKER_DATA_DIR >
.lstrackerrc in the working directory > default (~/.lstracker).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

RC_FILENAME = ".lstrackerrc"


@dataclass(frozen=True)
class ProjectConfig:
    data_dir: Optional[Path] = None
    source: Optional[Path] = None


def _read_rc(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise ValueError(f"Invalid {RC_FILENAME} at {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{RC_FILENAME} must be a mapping: {path}")
    return data


def load_project_config(cwd: Optional[Path] = None) -> ProjectConfig:
    """Read .lstrackerrc unless the environment already pins the data dir."""
    if os.getenv("LSTRACKER_DATA_DIR"):
        return ProjectConfig()

    root = Path(cwd) if cwd else Path.cwd()
    rc_path = root / RC_FILENAME
    if not rc_path.is_file():
        return ProjectConfig()

    data = _read_rc(rc_path)
    raw_dir = data.get("data_dir")
    if not raw_dir:
        return ProjectConfig(source=rc_path)

    data_dir = Path(str(raw_dir)).expanduser()
    if not data_dir.is_absolute():
        data_dir = rc_path.parent / data_dir
    return ProjectConfig(data_dir=data_dir.resolve(), source=rc_path)
