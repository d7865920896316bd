"""Integration tests for CLI commands.

Uses Typer's CliRunner for E2E CLI testing.
"""

import json
from pathlib import Path

from typer.testing import CliRunner

from lstracker.interfaces.cli.app import app

runner = CliRunner()


def _json(*args: str) -> dict:
    result = runner.invoke(app, [*args, "--json"])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


class TestDashboard:
    def test_fresh_install_shows_starter_data(self):
        result = runner.invoke(app, ["dashboard"])

        assert result.exit_code == 0, result.output
        assert "3 skills" in result.stdout
        assert "1 projects" in result.stdout

    def test_dashboard_json(self):
        data = _json("dashboard")
        assert data["skill_count"] == 3
        assert data["average_progress"] == 27
        assert [s["name"] for s in data["top_skills"]] == ["Python", "SQL", "Power BI"]

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "lstracker" in result.stdout


class TestSkillCommands:
    def test_add_persists_to_data_dir(self, _isolate_tracker_data: Path):
        record = _json("skill", "add", "Rust", "--category", "Other", "--progress", "150")

        assert record["name"] == "Rust"
        assert record["progress"] == 100
        stored = json.loads((_isolate_tracker_data / "lst_app_v1.json").read_text(encoding="utf-8"))
        assert stored["skills"][0]["id"] == record["id"]

    def test_add_rejects_unknown_category(self):
        result = runner.invoke(app, ["skill", "add", "Rust", "--category", "Cooking"])
        assert result.exit_code == 1
        assert "Unknown category" in result.output

    def test_list_search_and_category(self):
        runner.invoke(app, ["skill", "add", "Pandas", "-c", "Python", "-g", "groupby"])

        data = _json("skill", "list", "--search", "groupby")
        assert [s["name"] for s in data["skills"]] == ["Pandas"]

        data = _json("skill", "list", "--category", "Python")
        assert {s["name"] for s in data["skills"]} == {"Python", "Pandas"}

    def test_adjust_uses_default_step_and_clamps(self):
        record = _json("skill", "add", "Go", "-p", "97")

        result = runner.invoke(app, ["skill", "adjust", record["id"]])
        assert result.exit_code == 0, result.output
        assert "100%" in result.stdout

        result = runner.invoke(app, ["skill", "adjust", record["id"], "--by=-250"])
        assert result.exit_code == 0, result.output
        assert "0%" in result.stdout

    def test_adjust_unknown_id_fails(self):
        result = runner.invoke(app, ["skill", "adjust", "skill_missing"])
        assert result.exit_code == 1
        assert "No skill" in result.output

    def test_delete(self):
        record = _json("skill", "add", "Temp")

        result = runner.invoke(app, ["skill", "delete", record["id"]])
        assert result.exit_code == 0, result.output

        names = [s["name"] for s in _json("skill", "list")["skills"]]
        assert "Temp" not in names

    def test_table_output(self):
        result = runner.invoke(app, ["skill", "list"])
        assert result.exit_code == 0
        assert "Skills" in result.stdout
        assert "SQL" in result.stdout


class TestProjectCommands:
    def test_add_and_cycle(self):
        record = _json(
            "project", "add", "ETL", "--type", "Work", "--skills", "Python, SQL", "--ksbs", "k1,b5"
        )
        assert record["skills"] == ["Python", "SQL"]
        assert record["ksbs"] == ["K1", "B5"]
        assert record["status"] == "In progress"

        for expected in ("Completed", "Paused", "In progress"):
            result = runner.invoke(app, ["project", "cycle", record["id"]])
            assert result.exit_code == 0, result.output
            assert expected in result.stdout

    def test_list_filter_by_type(self):
        runner.invoke(app, ["project", "add", "Side quest", "--type", "Personal"])
        data = _json("project", "list", "--type", "Personal")
        assert [p["name"] for p in data["projects"]] == ["Side quest"]

    def test_invalid_status_rejected(self):
        result = runner.invoke(app, ["project", "add", "X", "--status", "Done"])
        assert result.exit_code == 1

    def test_delete_unknown(self):
        result = runner.invoke(app, ["project", "delete", "proj_missing"])
        assert result.exit_code == 1


class TestKsbAndEvidenceCommands:
    def test_evidence_counts_follow_codes(self):
        runner.invoke(app, ["ksb", "add", "k9", "Data pipelines"])
        runner.invoke(app, ["evidence", "add", "Built DAG", "--ksbs", "K9, b1"])

        ksbs = {k["code"]: k["evidence_count"] for k in _json("ksb", "list")["ksbs"]}
        assert ksbs["K9"] == 1
        assert ksbs["B1"] == 1
        assert ksbs["B5"] == 1

    def test_delete_ksb_keeps_evidence(self):
        ksb = _json("ksb", "add", "Z1", "Temporary")
        runner.invoke(app, ["evidence", "add", "Proof", "--ksbs", "Z1"])

        result = runner.invoke(app, ["ksb", "delete", ksb["id"]])
        assert result.exit_code == 0, result.output

        evidence = _json("evidence", "list", "--search", "proof")["evidence"]
        assert evidence[0]["ksbs"] == ["Z1"]


class TestNotesAndReflections:
    def test_note_round_trip(self):
        note = _json("note", "add", "Joins", "--tags", "SQL, basics", "--link", "https://example.org")
        assert note["tags"] == ["SQL", "basics"]

        found = _json("note", "list", "--search", "example.org")["notes"]
        assert [n["id"] for n in found] == [note["id"]]

        assert runner.invoke(app, ["note", "delete", note["id"]]).exit_code == 0

    def test_reflection_add_and_list(self):
        runner.invoke(app, ["reflection", "add", "Week 5", "--learned", "CTEs", "--next", "Window functions"])

        result = runner.invoke(app, ["reflection", "list"])
        assert result.exit_code == 0
        assert "Week 5" in result.stdout
        assert "CTEs" in result.stdout


class TestDataCommands:
    def test_export_default_name_in_cwd(self, tmp_path: Path):
        result = runner.invoke(app, ["export"])

        assert result.exit_code == 0, result.output
        exported = tmp_path / "learning-skills-tracker-export.json"
        data = json.loads(exported.read_text(encoding="utf-8"))
        assert set(data) == {"skills", "projects", "ksbLibrary", "evidence", "notes", "reflections"}

    def test_import_replaces_everything(self, tmp_path: Path):
        source = tmp_path / "in.json"
        source.write_text(
            json.dumps(
                {
                    "skills": [
                        {
                            "id": "x",
                            "name": "Rust",
                            "category": "Other",
                            "progress": 150,
                            "goal": "",
                            "createdAt": "2024-01-01T00:00:00Z",
                        }
                    ]
                }
            ),
            encoding="utf-8",
        )

        result = runner.invoke(app, ["import", str(source)])
        assert result.exit_code == 0, result.output

        data = _json("dashboard")
        assert data["skill_count"] == 1
        assert data["project_count"] == 0
        assert _json("skill", "list")["skills"][0]["progress"] == 150

    def test_bad_import_fails_and_keeps_state(self, tmp_path: Path):
        _json("skill", "add", "Keep me")
        before = _json("skill", "list")
        bad = tmp_path / "bad.json"
        bad.write_text('"not an object"', encoding="utf-8")

        result = runner.invoke(app, ["import", str(bad)])

        assert result.exit_code == 1
        assert _json("skill", "list") == before

    def test_deeply_nested_import_is_rejected(self, tmp_path: Path):
        nested = tmp_path / "nested.json"
        nested.write_text("[" * 200_000, encoding="utf-8")

        result = runner.invoke(app, ["import", str(nested)])

        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert _json("dashboard")["skill_count"] == 3

    def test_lists_render_null_fields_as_blank(self, tmp_path: Path):
        source = tmp_path / "nulls.json"
        source.write_text(
            json.dumps(
                {
                    "skills": [{"id": "s1", "name": None, "category": None, "progress": 40, "goal": None}],
                    "projects": [{"id": "p1", "name": None, "type": None, "status": None, "learned": None}],
                }
            ),
            encoding="utf-8",
        )
        assert runner.invoke(app, ["import", str(source)]).exit_code == 0

        for group in ("skill", "project"):
            result = runner.invoke(app, [group, "list"])
            assert result.exit_code == 0, result.output
            assert "None" not in result.stdout

    def test_reset_requires_yes_when_not_interactive(self):
        result = runner.invoke(app, ["reset"])
        assert result.exit_code == 1

    def test_reset_restores_starter_data(self):
        _json("skill", "add", "Extra")
        result = runner.invoke(app, ["reset", "--yes"])

        assert result.exit_code == 0, result.output
        assert [s["name"] for s in _json("skill", "list")["skills"]] == ["Python", "SQL", "Power BI"]


class TestConfigResolution:
    def test_data_dir_option_wins(self, tmp_path: Path):
        target = tmp_path / "elsewhere"
        result = runner.invoke(app, ["--data-dir", str(target), "note", "add", "Hello"])

        assert result.exit_code == 0, result.output
        assert (target / "lst_app_v1.json").exists()

    def test_rc_file_used_without_env(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("LSTRACKER_DATA_DIR", raising=False)
        (tmp_path / ".lstrackerrc").write_text("data_dir: ./rc-data\n", encoding="utf-8")

        result = runner.invoke(app, ["note", "add", "From rc"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "rc-data" / "lst_app_v1.json").exists()

    def test_corrupt_storage_falls_back_to_defaults(self, _isolate_tracker_data: Path):
        _isolate_tracker_data.mkdir(parents=True, exist_ok=True)
        (_isolate_tracker_data / "lst_app_v1.json").write_text("{oops", encoding="utf-8")

        result = runner.invoke(app, ["dashboard"])

        assert result.exit_code == 0, result.output
        assert "3 skills" in result.output
        assert "[WARN]" in result.output
