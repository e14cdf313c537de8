"""Tests for data models."""

import json
from datetime import date, datetime

import pytest

from deskfit.db.repositories import ProfileRepository
from deskfit.models.profile import (
    FocusArea,
    PainArea,
    ProfileSnapshot,
    SedentaryHoursBucket,
    StiffnessTime,
    UserGoal,
    stiffness_from_selection,
    toggle_stiffness_time,
)
from deskfit.models.progress import (
    DailyScoreEntry,
    ProgressSummary,
    ScoreDisplayCategory,
    week_start,
)
from deskfit.models.report import AnalysisScore, ScoreCategory, Severity

MORNING = StiffnessTime.MORNING
MIDDAY = StiffnessTime.MIDDAY
EVENING = StiffnessTime.EVENING
ALL_DAY = StiffnessTime.ALL_DAY


class TestToggleStiffnessTime:
    """Tests for the all-day toggle rules."""

    def test_select_individual_time(self):
        """Test tapping an unselected time adds it."""
        assert toggle_stiffness_time(MORNING, frozenset()) == {MORNING}
        assert toggle_stiffness_time(MIDDAY, frozenset({MORNING})) == {MORNING, MIDDAY}

    def test_unselect_individual_time(self):
        """Test tapping a selected time removes it."""
        assert toggle_stiffness_time(MORNING, frozenset({MORNING, EVENING})) == {EVENING}

    def test_all_day_clears_individual_times(self):
        """Test selecting all day replaces individual picks."""
        current = frozenset({MORNING, MIDDAY, EVENING})
        assert toggle_stiffness_time(ALL_DAY, current) == {ALL_DAY}

    def test_individual_time_clears_all_day(self):
        """Test picking a time while all day is selected replaces it."""
        assert toggle_stiffness_time(EVENING, frozenset({ALL_DAY})) == {EVENING}

    def test_all_day_tapped_again_clears(self):
        """Test unselecting all day leaves nothing selected."""
        assert toggle_stiffness_time(ALL_DAY, frozenset({ALL_DAY})) == frozenset()

    def test_selection_with_all_day_keeps_only_all_day(self):
        """Test a multi-select answer is folded through the toggle."""
        assert stiffness_from_selection([MORNING, ALL_DAY, MIDDAY]) == {ALL_DAY}
        assert stiffness_from_selection([EVENING, MORNING]) == {MORNING, EVENING}
        assert stiffness_from_selection([]) == frozenset()


class TestProfileSnapshot:
    """Tests for ProfileSnapshot model."""

    def test_defaults(self):
        """Test an empty profile uses documented defaults."""
        profile = ProfileSnapshot()
        assert profile.daily_time_minutes == 5
        assert profile.work_start_minutes == 540
        assert profile.work_end_minutes == 1020
        assert profile.work_hours == 8
        assert profile.goal is None

    def test_all_day_expands_to_individual_times(self):
        """Test ALL_DAY counts as morning, midday and evening."""
        profile = ProfileSnapshot(stiffness_times=frozenset({ALL_DAY}))
        assert profile.effective_stiffness_times == {MORNING, MIDDAY, EVENING}
        assert profile.ordered_stiffness_times() == [MORNING, MIDDAY, EVENING]

    @pytest.mark.parametrize(
        "minutes,sessions",
        [(3, 1), (4, 1), (5, 2), (8, 2), (10, 3), (15, 3)],
    )
    def test_sessions_per_day(self, minutes, sessions):
        """Test session count thresholds for daily time."""
        assert ProfileSnapshot(daily_time_minutes=minutes).sessions_per_day == sessions

    def test_ordered_areas_follow_declaration_order(self):
        """Test ordered helpers do not depend on set iteration order."""
        profile = ProfileSnapshot(
            pain_areas=frozenset({PainArea.HEADACHES, PainArea.LOWER_BACK, PainArea.NECK})
        )
        assert profile.ordered_pain_areas() == [
            PainArea.NECK,
            PainArea.LOWER_BACK,
            PainArea.HEADACHES,
        ]

    def test_profile_to_dict(self, desk_worker_profile):
        """Test profile serialization."""
        data = desk_worker_profile.to_dict()

        assert data["goal"] == "reduce_stiffness"
        assert data["pain_areas"] == ["lower_back", "neck", "upper_back"]
        assert data["stiffness_times"] == ["midday", "morning"]
        assert data["sedentary_hours_bucket"] == "more_than_8"
        assert data["daily_time_minutes"] == 5

    def test_profile_from_dict(self, desk_worker_profile):
        """Test profile deserialization restores an equal snapshot."""
        restored = ProfileSnapshot.from_dict(desk_worker_profile.to_dict())
        assert restored == desk_worker_profile

    def test_from_dict_ignores_unknown_values(self):
        """Test unknown enum strings are dropped instead of failing."""
        profile = ProfileSnapshot.from_dict(
            {
                "goal": "become_a_wizard",
                "focus_areas": ["neck", "elbows"],
                "sedentary_hours_bucket": "forever",
                "stiffness_times": ["midnight", "evening"],
            }
        )
        assert profile.goal is None
        assert profile.focus_areas == {FocusArea.NECK}
        assert profile.sedentary_hours_bucket is None
        assert profile.stiffness_times == {EVENING}

    def test_fingerprint_is_stable(self, desk_worker_profile, active_profile):
        """Test the fingerprint depends only on profile contents."""
        copy = ProfileSnapshot.from_dict(desk_worker_profile.to_dict())
        assert copy.fingerprint() == desk_worker_profile.fingerprint()
        assert desk_worker_profile.fingerprint() != active_profile.fingerprint()

    def test_get_summary(self, desk_worker_profile):
        """Test the readable summary."""
        summary = desk_worker_profile.get_summary()
        assert "Goal: Reduce Stiffness" in summary
        assert "Discomfort: Neck, Upper Back, Lower Back" in summary
        assert "Sitting: 8+ hours a day" in summary
        assert "Work hours: 09:00-17:00" in summary

    def test_high_risk_buckets(self):
        """Test only the two heaviest sitting buckets are high risk."""
        high = [bucket for bucket in SedentaryHoursBucket if bucket.is_high_risk]
        assert high == [SedentaryHoursBucket.SIX_TO_EIGHT, SedentaryHoursBucket.MORE_THAN_8]

    def test_goal_display_name(self):
        """Test enum display names."""
        assert UserGoal.BUILD_HABIT.display_name == "Build a Habit"
        assert PainArea.UPPER_BACK.display_name == "Upper Back"


class TestProfileRepository:
    """Tests for ProfileRepository loading."""

    @pytest.fixture
    def path(self, tmp_path):
        return tmp_path / "profile.json"

    def test_missing_file(self, path):
        """Test no file means no profile."""
        assert ProfileRepository(path).get() is None

    def test_save_and_get(self, path):
        """Test a saved profile loads back."""
        profile = ProfileSnapshot(pain_areas=frozenset({PainArea.NECK}), daily_time_minutes=10)
        ProfileRepository(path).save(profile)
        assert ProfileRepository(path).get() == profile

    @pytest.mark.parametrize(
        "document",
        [
            "oops",
            {"version": 1, "profile": "oops"},
            {"version": 1, "profile": ["neck"]},
        ],
    )
    def test_wrong_shape_is_no_profile(self, path, document):
        """Test documents of the wrong shape load as no profile."""
        path.write_text(json.dumps(document))
        assert ProfileRepository(path).get() is None

    def test_string_minutes_are_coerced(self, path):
        """Test numeric fields stored as strings load as integers."""
        path.write_text(json.dumps({"version": 1, "profile": {"daily_time_minutes": "10"}}))
        assert ProfileRepository(path).get().sessions_per_day == 3


class TestDailyScoreEntry:
    """Tests for DailyScoreEntry model."""

    def test_score_is_clamped(self):
        """Test stored scores stay within 0-100."""
        assert DailyScoreEntry(day=date(2024, 3, 1), score=140).score == 100
        assert DailyScoreEntry(day=date(2024, 3, 1), score=-5).score == 0

    def test_has_activity(self):
        """Test activity means at least one session."""
        assert not DailyScoreEntry(day=date(2024, 3, 1), score=60).has_activity
        assert DailyScoreEntry(day=date(2024, 3, 1), score=68, sessions_completed=1).has_activity

    def test_entry_round_trip(self):
        """Test entry serialization uses ISO dates."""
        entry = DailyScoreEntry(
            day=date(2024, 3, 1),
            score=76,
            minutes_completed=6,
            sessions_completed=2,
            focus_areas=["neck"],
            stiffness_times_triggered=["morning"],
            updated_at=datetime(2024, 3, 1, 9, 15),
        )
        data = entry.to_dict()
        assert data["date"] == "2024-03-01"
        assert data["updated_at"] == "2024-03-01T09:15:00"
        assert DailyScoreEntry.from_dict(data) == entry

    def test_from_dict_accepts_datetime_strings(self):
        """Test a full timestamp in the date field is reduced to its day."""
        entry = DailyScoreEntry.from_dict({"date": "2024-03-01T00:00:00", "score": 70})
        assert entry.day == date(2024, 3, 1)

    def test_from_dict_coerces_counts(self):
        """Test counts stored as strings load as integers."""
        entry = DailyScoreEntry.from_dict(
            {"date": "2024-03-01", "score": "70", "sessions_completed": "2", "minutes_completed": "6"}
        )
        assert entry.sessions_completed == 2
        assert entry.minutes_completed == 6
        assert entry.has_activity

    @pytest.mark.parametrize("record", ["garbage", 42, ["2024-03-01", 70], None])
    def test_from_dict_rejects_non_objects(self, record):
        """Test a record that is not an object raises TypeError."""
        with pytest.raises(TypeError):
            DailyScoreEntry.from_dict(record)

    @pytest.mark.parametrize(
        "score,category",
        [
            (100, ScoreDisplayCategory.EXCELLENT),
            (85, ScoreDisplayCategory.EXCELLENT),
            (84, ScoreDisplayCategory.GOOD),
            (70, ScoreDisplayCategory.GOOD),
            (69, ScoreDisplayCategory.BUILDING),
            (50, ScoreDisplayCategory.BUILDING),
            (49, ScoreDisplayCategory.STARTING),
        ],
    )
    def test_score_category(self, score, category):
        """Test display band boundaries."""
        assert ScoreDisplayCategory.from_score(score) == category


class TestProgressSummary:
    """Tests for ProgressSummary model."""

    def test_empty_summary(self):
        """Test an empty summary still has seven chart days."""
        summary = ProgressSummary.empty(date(2024, 3, 13))

        assert len(summary.last_7_days) == 7
        assert summary.last_7_days[0].day == date(2024, 3, 7)
        assert summary.last_7_days[-1].day == date(2024, 3, 13)
        assert not summary.has_enough_data
        assert summary.week_start_date == date(2024, 3, 11)

    def test_streak_display(self):
        """Test streak wording."""
        summary = ProgressSummary.empty(date(2024, 3, 13))
        assert summary.get_streak_display() == "Start your streak"
        summary.streak_days = 1
        assert summary.get_streak_display() == "1 day"
        summary.streak_days = 4
        assert summary.get_streak_display() == "4 days"

    def test_week_start_is_monday(self):
        """Test week start for each weekday."""
        assert week_start(date(2024, 3, 11)) == date(2024, 3, 11)
        assert week_start(date(2024, 3, 17)) == date(2024, 3, 11)


class TestAnalysisScore:
    """Tests for AnalysisScore model."""

    def test_value_is_clamped(self):
        """Test risk scores stay within 0-100."""
        assert AnalysisScore(150).value == 100
        assert AnalysisScore(-1).value == 0

    @pytest.mark.parametrize(
        "value,category",
        [
            (0, ScoreCategory.LOW),
            (33, ScoreCategory.LOW),
            (34, ScoreCategory.MODERATE),
            (66, ScoreCategory.MODERATE),
            (67, ScoreCategory.ELEVATED),
            (100, ScoreCategory.ELEVATED),
        ],
    )
    def test_category_boundaries(self, value, category):
        """Test risk band boundaries."""
        assert AnalysisScore(value).category == category

    def test_severity_rank(self):
        """Test high severity sorts first."""
        ranked = sorted(Severity, key=lambda s: s.sort_rank)
        assert ranked == [Severity.HIGH, Severity.MEDIUM, Severity.LOW]
