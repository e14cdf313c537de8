"""Pytest configuration and fixtures."""

from datetime import date, datetime, timedelta

import pytest

from deskfit.config import Settings
from deskfit.models.profile import (
    ExerciseFrequency,
    FocusArea,
    MotivationLevel,
    PainArea,
    PostureIssue,
    ProfileSnapshot,
    SedentaryHoursBucket,
    StiffnessTime,
    UserGoal,
    WorkType,
)
from deskfit.models.progress import DailyScoreEntry
from deskfit.services.analytics import RecordingAnalytics
from deskfit.services.container import DeskFitServices

# A Wednesday, mid-morning
NOW = datetime(2024, 3, 13, 10, 30)


class FixedClock:
    """Callable clock that only moves when told to."""

    def __init__(self, moment: datetime):
        self.moment = moment

    def __call__(self) -> datetime:
        return self.moment

    def advance(self, **kwargs) -> None:
        self.moment += timedelta(**kwargs)

    @property
    def today(self) -> date:
        return self.moment.date()


def _entry(day: date, score: int = 70, sessions: int = 1, minutes: int = 3, focus=()):
    return DailyScoreEntry(
        day=day,
        score=score,
        sessions_completed=sessions,
        minutes_completed=minutes,
        focus_areas=list(focus),
    )


@pytest.fixture
def make_entry():
    """Factory for stored entries: make_entry(day, score=70, sessions=1, ...)."""
    return _entry


@pytest.fixture
def clock():
    """Clock fixed at NOW."""
    return FixedClock(NOW)


@pytest.fixture
def today(clock):
    return clock.today


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a temporary data directory."""
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def analytics():
    return RecordingAnalytics()


@pytest.fixture
def services(settings, clock, analytics):
    """Fully wired services on a temporary data directory."""
    return DeskFitServices.from_settings(settings, clock=clock, analytics=analytics)


@pytest.fixture
def desk_worker_profile():
    """Heavy sitter with neck and back pain who rarely exercises."""
    return ProfileSnapshot(
        goal=UserGoal.REDUCE_STIFFNESS,
        focus_areas=frozenset({FocusArea.NECK, FocusArea.UPPER_BACK}),
        pain_areas=frozenset({PainArea.NECK, PainArea.UPPER_BACK, PainArea.LOWER_BACK}),
        posture_issues=frozenset({PostureIssue.FORWARD_HEAD, PostureIssue.ROUNDED_SHOULDERS}),
        stiffness_times=frozenset({StiffnessTime.MORNING, StiffnessTime.MIDDAY}),
        work_type=WorkType.DESK_OFFICE,
        sedentary_hours_bucket=SedentaryHoursBucket.MORE_THAN_8,
        exercise_frequency=ExerciseFrequency.RARELY,
        motivation_level=MotivationLevel.READY,
        daily_time_minutes=5,
    )


@pytest.fixture
def active_profile():
    """Light sitter with no pain who exercises often."""
    return ProfileSnapshot(
        goal=UserGoal.BUILD_HABIT,
        focus_areas=frozenset({FocusArea.WRISTS}),
        work_type=WorkType.STANDING,
        sedentary_hours_bucket=SedentaryHoursBucket.TWO_TO_FOUR,
        exercise_frequency=ExerciseFrequency.DAILY,
        motivation_level=MotivationLevel.VERY_MOTIVATED,
        daily_time_minutes=10,
    )


@pytest.fixture
def lower_back_profile():
    """Hip and lower back complaints with all-day stiffness."""
    return ProfileSnapshot(
        goal=UserGoal.IMPROVE_POSTURE,
        focus_areas=frozenset({FocusArea.LOWER_BACK, FocusArea.HIPS}),
        pain_areas=frozenset({PainArea.LOWER_BACK, PainArea.HIPS}),
        posture_issues=frozenset({PostureIssue.ANTERIOR_PELVIC_TILT, PostureIssue.SLOUCHING}),
        stiffness_times=frozenset({StiffnessTime.ALL_DAY}),
        work_type=WorkType.DESK_HOME,
        sedentary_hours_bucket=SedentaryHoursBucket.MORE_THAN_8,
        exercise_frequency=ExerciseFrequency.ONCE_WEEK,
        daily_time_minutes=15,
        work_start_minutes=8 * 60,
        work_end_minutes=19 * 60,
    )
