"""Tests for the HTTP JSON API."""

import pytest
from fastapi.testclient import TestClient

from deskfit.web import create_app


@pytest.fixture
def client(services):
    return TestClient(create_app(services))


@pytest.fixture
def onboarded(client, desk_worker_profile):
    """Client with the desk worker profile saved."""
    response = client.put("/profile", json=desk_worker_profile.to_dict())
    assert response.status_code == 200
    return client


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        """Test the health check."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestProfileRoutes:
    """Tests for /profile."""

    def test_missing_profile_is_404(self, client):
        """Test reading before onboarding."""
        assert client.get("/profile").status_code == 404
        assert client.get("/profile/report").status_code == 404

    def test_save_and_read(self, onboarded, desk_worker_profile):
        """Test a saved profile reads back unchanged."""
        response = onboarded.get("/profile")
        assert response.status_code == 200
        assert response.json() == desk_worker_profile.to_dict()

    def test_minimal_profile(self, client):
        """Test every field is optional."""
        response = client.put("/profile", json={})
        assert response.status_code == 200
        assert response.json()["daily_time_minutes"] == 5

    def test_all_day_stiffness_is_normalized(self, client):
        """Test all day wins over individual times."""
        response = client.put("/profile", json={"stiffness_times": ["morning", "all_day"]})
        assert response.json()["stiffness_times"] == ["all_day"]

    def test_unknown_value_is_422(self, client):
        """Test enum values are validated."""
        response = client.put("/profile", json={"pain_areas": ["elbows"]})
        assert response.status_code == 422

    def test_work_hours_must_be_ordered(self, client):
        """Test a workday that ends before it starts is rejected."""
        response = client.put(
            "/profile", json={"work_start_minutes": 1020, "work_end_minutes": 540}
        )
        assert response.status_code == 422

    def test_report(self, onboarded):
        """Test the analysis report for the saved profile."""
        response = onboarded.get("/profile/report")
        assert response.status_code == 200

        report = response.json()
        assert report["score"]["category"] == "elevated"
        titles = [card["title"] for card in report["insights"]]
        assert "Sedentary Load" in titles
        assert len(titles) <= 6

    def test_report_follows_profile_changes(self, onboarded):
        """Test a new profile gets a new report."""
        onboarded.get("/profile/report")
        onboarded.put("/profile", json={})

        report = onboarded.get("/profile/report").json()
        assert report["score"]["category"] == "low"


class TestProgressRoutes:
    """Tests for /progress."""

    def test_empty_summary(self, client):
        """Test the summary before any session."""
        summary = client.get("/progress").json()

        assert summary["has_enough_data"] is False
        assert len(summary["last_7_days"]) == 7
        assert summary["streak_days"] == 0

    def test_record_session(self, onboarded, today):
        """Test recording a session scores today's entry."""
        response = onboarded.post(
            "/progress/sessions", json={"duration_seconds": 180, "focus_areas": ["neck"]}
        )
        assert response.status_code == 201

        body = response.json()
        assert body["entry"]["date"] == today.isoformat()
        assert body["entry"]["sessions_completed"] == 1
        assert body["entry"]["minutes_completed"] == 3
        # base 60, session 8, streak 2, morning match 3
        assert body["entry"]["score"] == 73
        assert body["summary"]["streak_days"] == 1

    def test_record_session_from_exercises(self, client):
        """Test exercise ids supply duration and focus areas."""
        response = client.post(
            "/progress/sessions", json={"exercise_ids": ["chin_tucks", "shoulder_rolls"]}
        )
        entry = response.json()["entry"]

        assert entry["minutes_completed"] == 1
        assert entry["focus_areas"] == ["neck", "shoulders", "upper_back"]

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"duration_seconds": -5},
            {"duration_seconds": 60, "focus_areas": ["elbows"]},
            {"exercise_ids": ["moonwalk"]},
        ],
    )
    def test_invalid_sessions_are_422(self, client, payload):
        """Test bad session payloads are rejected."""
        assert client.post("/progress/sessions", json=payload).status_code == 422

    def test_entries(self, client):
        """Test listing stored entries."""
        client.post("/progress/sessions", json={"duration_seconds": 60})
        entries = client.get("/progress/entries?days=7").json()["entries"]
        assert len(entries) == 1

    def test_delete_entry(self, client, today):
        """Test deleting one day."""
        client.post("/progress/sessions", json={"duration_seconds": 60})

        assert client.delete(f"/progress/entries/{today.isoformat()}").status_code == 200
        assert client.delete(f"/progress/entries/{today.isoformat()}").status_code == 404
        assert client.delete("/progress/entries/yesterday").status_code == 422

    def test_clear(self, client):
        """Test clearing every entry."""
        client.post("/progress/sessions", json={"duration_seconds": 60})

        assert client.delete("/progress").json() == {"status": "cleared"}
        assert client.get("/progress/entries").json()["entries"] == []


class TestPlanRoutes:
    """Tests for /plan."""

    def test_missing_profile_is_404(self, client):
        """Test the plan needs a profile."""
        assert client.get("/plan/today").status_code == 404

    def test_todays_plan(self, onboarded, today):
        """Test three tailored sessions for the saved profile."""
        plan = onboarded.get("/plan/today").json()

        assert plan["date"] == today.isoformat()
        assert plan["session_count"] == 3
        assert [s["title"] for s in plan["sessions"]] == [
            "Morning Relief",
            "Midday Unwind",
            "Afternoon Stretch",
        ]
        assert plan["sessions"][0]["exercise_ids"] == ["neck_rolls", "chin_tucks", "neck_side_stretch"]
        assert plan["total_seconds"] == 300

    def test_completion_follows_sessions(self, onboarded):
        """Test a recorded session completes the first planned session."""
        onboarded.post("/progress/sessions", json={"duration_seconds": 100})

        plan = onboarded.get("/plan/today").json()
        assert plan["completed_count"] == 1
        assert [s["is_completed"] for s in plan["sessions"]] == [True, False, False]


class TestInsightRoutes:
    """Tests for /insights."""

    def test_without_profile(self, client):
        """Test general insights before onboarding."""
        insights = client.get("/insights/today").json()["insights"]

        assert len(insights) == 2
        assert insights[0]["category"] == "motivational"

    def test_profile_change_resets_cache(self, client, desk_worker_profile):
        """Test saving a profile replaces today's general insights."""
        client.get("/insights/today")
        client.put("/profile", json=desk_worker_profile.to_dict())

        insights = client.get("/insights/today").json()["insights"]
        assert insights[0]["category"] == "pain_specific"

    def test_stable_within_day(self, onboarded):
        """Test two calls on one day agree."""
        first = onboarded.get("/insights/today").json()
        assert onboarded.get("/insights/today").json() == first
        assert onboarded.get("/insights/today?refresh=true").json() == first


class TestExerciseRoutes:
    """Tests for /exercises."""

    def test_list_all(self, client, services):
        """Test the full catalog."""
        exercises = client.get("/exercises").json()["exercises"]
        assert len(exercises) == len(services.catalog)

    def test_filter_by_focus(self, client):
        """Test focus filtering."""
        exercises = client.get("/exercises?focus=wrists").json()["exercises"]
        assert [e["id"] for e in exercises] == ["wrist_circles", "wrist_flexor_stretch"]
        assert client.get("/exercises?focus=elbows").status_code == 422

    def test_get_one(self, client):
        """Test single exercise lookup."""
        assert client.get("/exercises/chin_tucks").json()["name"]
        assert client.get("/exercises/moonwalk").status_code == 404
