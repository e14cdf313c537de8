"""Tests for the deskfit command line."""

import pytest
from click.testing import CliRunner

from deskfit import __version__
from deskfit.cli import main
from deskfit.clients.manual import ManualInputClient


@pytest.fixture
def invoke(services):
    """Run the CLI against the test services."""
    runner = CliRunner()

    def run(*args, input=None):
        return runner.invoke(main, list(args), obj={"services": services}, input=input)

    return run


@pytest.fixture
def onboarded(services, desk_worker_profile):
    services.save_profile(desk_worker_profile)
    return services


class TestMain:
    """Tests for the command group."""

    def test_version(self, invoke):
        """Test --version prints the package version."""
        result = invoke("--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, invoke):
        """Test every command is registered."""
        result = invoke("--help")
        for name in (
            "onboard", "profile", "report", "plan", "session", "progress", "insights", "exercises", "serve"
        ):
            assert name in result.output


class TestOnboard:
    """Tests for the onboard command."""

    @pytest.fixture
    def answers(self, monkeypatch, desk_worker_profile):
        async def collect_profile(self):
            return desk_worker_profile

        monkeypatch.setattr(ManualInputClient, "collect_profile", collect_profile)

    def test_saves_profile(self, invoke, services, answers, desk_worker_profile):
        """Test answers are saved and summarized."""
        result = invoke("onboard")

        assert result.exit_code == 0, result.output
        assert "Profile saved." in result.output
        assert "Posture load: 78/100 (Elevated)" in result.output
        assert services.profiles.get() == desk_worker_profile

    def test_keeps_existing_profile(self, invoke, services, answers, active_profile):
        """Test declining the prompt leaves the old profile alone."""
        services.save_profile(active_profile)

        result = invoke("onboard", input="n\n")
        assert result.exit_code == 0
        assert "A profile already exists." in result.output
        assert services.profiles.get() == active_profile

    def test_force_replaces(self, invoke, services, answers, active_profile, desk_worker_profile):
        """Test --force skips the prompt."""
        services.save_profile(active_profile)

        assert invoke("onboard", "--force").exit_code == 0
        assert services.profiles.get() == desk_worker_profile


class TestProfileCommands:
    """Tests for profile show and report."""

    def test_show_without_profile(self, invoke):
        """Test an error before onboarding."""
        result = invoke("profile", "show")
        assert result.exit_code == 1
        assert "deskfit onboard" in result.output

    def test_show(self, invoke, onboarded):
        """Test the readable profile."""
        result = invoke("profile", "show")
        assert result.exit_code == 0
        assert "Your Profile" in result.output

    def test_show_json(self, invoke, onboarded, desk_worker_profile):
        """Test the JSON profile."""
        result = invoke("profile", "show", "--json")
        assert '"daily_time_minutes": 5' in result.output

    def test_report(self, invoke, onboarded):
        """Test the full report."""
        result = invoke("report")

        assert result.exit_code == 0
        assert "Your habits suggest room for improvement" in result.output
        assert "Sedentary Load" in result.output
        assert "Risk factors:" in result.output
        assert "This week:" in result.output

    def test_report_without_profile(self, invoke):
        """Test the report needs a profile."""
        assert invoke("report").exit_code == 1


class TestPlan:
    """Tests for the plan command."""

    def test_without_profile(self, invoke):
        """Test the plan needs a profile."""
        result = invoke("plan")
        assert result.exit_code == 1
        assert "deskfit onboard" in result.output

    def test_shows_sessions(self, invoke, onboarded, today):
        """Test the three sessions with tailored titles."""
        result = invoke("plan")

        assert result.exit_code == 0, result.output
        assert f"Plan for {today.isoformat()}" in result.output
        assert "Morning Relief" in result.output
        assert "Midday Unwind" in result.output
        assert "Afternoon Stretch" in result.output
        assert "neck_rolls, chin_tucks, neck_side_stretch" in result.output
        assert "0 of 3 done. Next: Morning Relief" in result.output

    def test_sessions_tick_off(self, invoke, onboarded):
        """Test recorded sessions complete the plan in order."""
        invoke("session", "--minutes", "2")
        assert "1 of 3 done. Next: Midday Unwind" in invoke("plan").output

        invoke("session", "--minutes", "2")
        invoke("session", "--minutes", "2")
        assert "All sessions done for today." in invoke("plan").output


class TestSession:
    """Tests for the session command."""

    def test_minutes_and_focus(self, invoke, services):
        """Test recording a timed session."""
        result = invoke("session", "--minutes", "3", "--focus", "neck")

        assert result.exit_code == 0, result.output
        assert "Today: 1 session(s), 3 min" in result.output
        assert "Focus areas: neck" in result.output
        assert services.progress.todays_entry().minutes_completed == 3

    def test_exercises(self, invoke):
        """Test exercise ids supply the duration."""
        result = invoke("session", "-e", "chin_tucks", "-e", "shoulder_rolls")

        assert result.exit_code == 0, result.output
        assert "Today: 1 session(s), 1 min" in result.output
        assert "Focus areas: neck, shoulders, upper_back" in result.output

    def test_nothing_given(self, invoke, services):
        """Test a session needs a length or exercises."""
        result = invoke("session")

        assert result.exit_code == 1
        assert "--minutes" in result.output
        assert services.progress.entries == []

    def test_unknown_exercise(self, invoke, services):
        """Test unknown exercise ids are rejected."""
        result = invoke("session", "-e", "moonwalk")

        assert result.exit_code == 1
        assert "Unknown exercise 'moonwalk'" in result.output
        assert services.progress.entries == []

    def test_invalid_focus(self, invoke):
        """Test focus values are checked by click."""
        assert invoke("session", "-m", "2", "-f", "elbows").exit_code == 2


class TestProgressCommands:
    """Tests for the progress group."""

    def test_status_empty(self, invoke):
        """Test the status before any session."""
        result = invoke("progress", "status")
        assert result.exit_code == 0
        assert "No sessions in the last 7 days." in result.output

    def test_status(self, invoke, services):
        """Test the weekly status after a session."""
        services.record_session(duration_seconds=180, focus_areas=["neck"])

        result = invoke("progress", "status")
        assert result.exit_code == 0
        assert "Last 7 Days:" in result.output
        assert "Streak: 1 day" in result.output
        assert "Focus areas: neck" in result.output

    def test_history(self, invoke, services, today):
        """Test listing entries."""
        assert "No entries in the last 30 days." in invoke("progress", "history").output

        services.record_session(duration_seconds=120)
        result = invoke("progress", "history", "--days", "7")
        assert today.isoformat() in result.output

    def test_delete(self, invoke, services, today):
        """Test deleting one day."""
        services.record_session(duration_seconds=120)

        result = invoke("progress", "delete", today.isoformat())
        assert f"Deleted entry for {today.isoformat()}." in result.output
        assert services.progress.entries == []

        result = invoke("progress", "delete", today.isoformat())
        assert "No entry for" in result.output

    def test_delete_bad_date(self, invoke):
        """Test a malformed day exits with an error."""
        result = invoke("progress", "delete", "13/03/2024")
        assert result.exit_code == 1
        assert "YYYY-MM-DD" in result.output

    def test_reset(self, invoke, services):
        """Test reset asks first unless --yes is given."""
        services.record_session(duration_seconds=120)

        invoke("progress", "reset", input="n\n")
        assert len(services.progress.entries) == 1

        result = invoke("progress", "reset", "--yes")
        assert "All progress entries deleted." in result.output
        assert services.progress.entries == []


class TestInsights:
    """Tests for the insights command."""

    def test_without_profile(self, invoke):
        """Test general insights with a note."""
        result = invoke("insights")
        assert result.exit_code == 0
        assert "insights are general" in result.output

    def test_with_profile(self, invoke, onboarded):
        """Test personalized insights."""
        result = invoke("insights")
        assert result.exit_code == 0
        assert "Pain Relief" in result.output
        assert "insights are general" not in result.output


class TestExercises:
    """Tests for the exercises command."""

    def test_all(self, invoke):
        """Test the full catalog table."""
        result = invoke("exercises")
        assert result.exit_code == 0
        assert "chin_tucks" in result.output
        assert "deep_breathing" in result.output

    def test_focus(self, invoke):
        """Test filtering by focus area."""
        result = invoke("exercises", "--focus", "wrists")
        assert "wrist_circles" in result.output
        assert "chin_tucks" not in result.output

    def test_routine(self, invoke):
        """Test building a routine for a time budget."""
        result = invoke("exercises", "--seconds", "60", "--focus", "neck")
        assert "neck_rolls" in result.output
        assert "Total: 60s of 60s" in result.output


class TestServe:
    """Tests for the serve command."""

    def test_runs_app_with_services(self, invoke, services, monkeypatch):
        """Test the API is served from the invocation's services."""
        import uvicorn

        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))

        result = invoke("serve", "--port", "9000")

        assert result.exit_code == 0, result.output
        [(app, kwargs)] = calls
        assert app.state.services is services
        assert kwargs == {"host": "127.0.0.1", "port": 9000}
