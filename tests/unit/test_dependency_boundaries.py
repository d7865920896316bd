"""Layering checks: the tracker core stays free of CLI dependencies."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[2] / "src" / "lstracker"


def _offenders(root: Path, markers: set[str]) -> list[Path]:
    found: list[Path] = []
    for path in root.rglob("*.py"):
        text = path.read_text(encoding="utf-8")
        if any(marker in text for marker in markers):
            found.append(path)
    return found


def test_core_import_does_not_load_cli_deps():
    code = r"""
import sys
import lstracker.modules.tracker  # noqa: F401
blocked = {"typer", "rich", "yaml", "lstracker.interfaces"}
loaded = set(sys.modules)
found = sorted(name for name in blocked if name in loaded)
if found:
    raise SystemExit(f"Unexpected imports: {found}")
"""
    result = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        check=False,
        env={**os.environ, "PYTHONPATH": str(SRC.parent)},
    )
    assert result.returncode == 0, result.stderr or result.stdout


def test_core_source_has_no_interface_imports():
    offenders = _offenders(
        SRC / "modules",
        {"lstracker.interfaces", "import typer", "from rich", "import yaml"},
    )
    assert not offenders, f"CLI imports found in core files: {offenders}"


def test_internal_does_not_import_public():
    offenders = _offenders(SRC / "modules" / "tracker" / "internal", {"tracker.public", "from ..public"})
    assert not offenders, f"internal modules import public API: {offenders}"
