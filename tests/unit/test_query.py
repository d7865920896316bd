"""Unit tests for read-only views."""

from lstracker.modules.tracker import (
    TrackerState,
    dashboard_summary,
    default_state,
    ksb_evidence_counts,
    list_evidence,
    list_ksbs,
    list_notes,
    list_projects,
    list_reflections,
    list_skills,
)


def _state() -> TrackerState:
    return TrackerState(
        skills=[
            {"id": "s1", "name": "Python", "category": "Python", "progress": 35, "goal": "scripts"},
            {"id": "s2", "name": "SQL", "category": "Data Science", "progress": 80, "goal": "window functions"},
            {"id": "s3", "name": "Power BI", "category": "Power BI", "progress": 20, "goal": "DAX"},
            "garbage",
        ],
        projects=[
            {"id": "p1", "name": "Old", "type": "Work", "status": "Completed", "skills": ["SQL"], "ksbs": [], "createdAt": "2024-01-01T00:00:00Z"},
            {"id": "p2", "name": "New", "type": "University", "status": "In progress", "skills": ["Python"], "ksbs": ["B1"], "createdAt": "2025-06-01T00:00:00Z"},
            {"id": "p3", "name": "Mid", "type": "Work", "status": "Completed", "learned": "dbt models", "createdAt": "2024-09-01T00:00:00Z"},
        ],
        ksb_library=[
            {"id": "k2", "code": "K2", "text": "Data"},
            {"id": "k1", "code": "B1", "text": "Curiosity"},
        ],
        evidence=[
            {"id": "e1", "title": "ETL", "ksbs": ["B1", "K2"], "notes": "cleanup", "createdAt": "2024-02-01T00:00:00Z"},
            {"id": "e2", "title": "Report", "ksbs": ["B1"], "createdAt": "2024-03-01T00:00:00Z"},
        ],
        notes=[
            {"id": "n1", "title": "Random Forest", "tags": ["ML"], "body": "bagging", "link": "", "createdAt": "2024-01-01T00:00:00Z"},
            {"id": "n2", "title": "Joins", "tags": ["SQL"], "body": "", "link": "https://docs.example/joins", "createdAt": "2024-05-01T00:00:00Z"},
        ],
        reflections=[
            {"id": "r1", "week": "W1", "createdAt": "2024-01-07T00:00:00Z"},
            {"id": "r2", "week": "W2", "createdAt": "2024-01-14T00:00:00Z"},
        ],
    )


class TestSkillsView:
    def test_sorted_by_progress_and_skips_non_records(self):
        assert [s["id"] for s in list_skills(_state())] == ["s2", "s1", "s3"]

    def test_category_filter(self):
        assert [s["id"] for s in list_skills(_state(), category="Power BI")] == ["s3"]

    def test_search_is_case_insensitive_over_goal(self):
        assert [s["id"] for s in list_skills(_state(), query="WINDOW")] == ["s2"]


class TestProjectsView:
    def test_newest_first(self):
        assert [p["id"] for p in list_projects(_state())] == ["p2", "p3", "p1"]

    def test_type_filter_and_search(self):
        assert [p["id"] for p in list_projects(_state(), project_type="Work")] == ["p3", "p1"]
        assert [p["id"] for p in list_projects(_state(), query="dbt")] == ["p3"]
        assert [p["id"] for p in list_projects(_state(), query="b1")] == ["p2"]


class TestKsbView:
    def test_counts_by_code(self):
        counts = ksb_evidence_counts(_state())
        assert counts["B1"] == 2
        assert counts["K2"] == 1
        assert counts["S9"] == 0

    def test_sorted_by_code_with_counts(self):
        rows = list_ksbs(_state())
        assert [(k.code, k.evidence_count) for k in rows] == [("B1", 2), ("K2", 1)]

    def test_evidence_search(self):
        assert [e["id"] for e in list_evidence(_state())] == ["e2", "e1"]
        assert [e["id"] for e in list_evidence(_state(), "cleanup")] == ["e1"]


class TestNotesAndReflections:
    def test_notes_search_covers_link(self):
        assert [n["id"] for n in list_notes(_state(), "docs.example")] == ["n2"]
        assert [n["id"] for n in list_notes(_state(), "ml")] == ["n1"]

    def test_reflections_newest_first(self):
        assert [r["id"] for r in list_reflections(_state())] == ["r2", "r1"]


class TestDashboard:
    def test_summary(self):
        summary = dashboard_summary(_state())
        assert summary.skill_count == 4
        assert summary.project_count == 3
        assert summary.completed_projects == 2
        assert summary.evidence_count == 2
        # (35 + 80 + 20) / 3 = 45
        assert summary.average_progress == 45
        assert [s["id"] for s in summary.top_skills] == ["s2", "s1", "s3"]
        assert [p["id"] for p in summary.recent_projects] == ["p2", "p3", "p1"]

    def test_average_rounds_half_up(self):
        state = TrackerState(skills=[{"progress": 10}, {"progress": 11}])
        assert dashboard_summary(state).average_progress == 11

    def test_fractional_progress_rounds_half_up_like_the_average(self):
        state = TrackerState(skills=[{"progress": 2.5}, {"progress": 2.5}])
        assert dashboard_summary(state).average_progress == 3

    def test_average_handles_values_beyond_float_range(self):
        state = TrackerState(skills=[{"progress": 10**400}, {"progress": 0}])
        assert dashboard_summary(state).average_progress == 10**400 // 2

    def test_empty_state(self):
        summary = dashboard_summary(TrackerState())
        assert summary.average_progress == 0
        assert summary.top_skills == []
        assert summary.recent_projects == []

    def test_default_dataset(self):
        summary = dashboard_summary(default_state())
        assert summary.skill_count == 3
        assert summary.completed_projects == 0
        assert summary.average_progress == 27
        assert len(summary.top_skills) == 3
