"""Integration-test-only pytest fixtures."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolate_tracker_data(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep CLI tests away from ~/.lstracker and any .lstrackerrc in the repo."""
    data_dir = tmp_path / "data"
    monkeypatch.setenv("LSTRACKER_DATA_DIR", str(data_dir))
    monkeypatch.chdir(tmp_path)
    return data_dir
