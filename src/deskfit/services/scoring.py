"""Daily engagement score calculator.

Scores reward showing up: everyone starts at BASE_SCORE, sessions, streaks
and well-timed sessions add points, and heavy sitting only costs points on a
day with no sessions at all. Results are always clamped to 30-100.
"""

from dataclasses import dataclass
from datetime import date, datetime

from ..models.profile import ProfileSnapshot, SedentaryHoursBucket, StiffnessTime
from ..models.progress import DailyScoreEntry

BASE_SCORE = 60
MIN_SCORE = 30
MAX_SCORE = 100

POINTS_PER_SESSION = 8
MAX_SESSION_POINTS = 25
POINTS_PER_STREAK_DAY = 2
MAX_STREAK_BONUS = 10
STIFFNESS_MATCH_BONUS = 3
MAX_STIFFNESS_BONUS = 6

SEDENTARY_PENALTIES = {
    SedentaryHoursBucket.LESS_THAN_2: 0,
    SedentaryHoursBucket.TWO_TO_FOUR: 0,
    SedentaryHoursBucket.FOUR_TO_SIX: 3,
    SedentaryHoursBucket.SIX_TO_EIGHT: 6,
    SedentaryHoursBucket.MORE_THAN_8: 10,
}


@dataclass(frozen=True)
class ScoreBreakdown:
    """Every component that goes into a daily score."""

    base: int
    session_points: int
    streak_bonus: int
    timing_bonus: int
    sedentary_penalty: int
    variety_bonus: int

    @property
    def total(self) -> int:
        raw = (
            self.base
            + self.session_points
            + self.streak_bonus
            + self.timing_bonus
            - self.sedentary_penalty
            + self.variety_bonus
        )
        return max(MIN_SCORE, min(MAX_SCORE, raw))

    def explain(self) -> str:
        """Readable breakdown, e.g. 'Base: 60 • Sessions: +16 • Streak: +6'."""
        parts = [f"Base: {self.base}"]
        if self.session_points > 0:
            parts.append(f"Sessions: +{self.session_points}")
        if self.streak_bonus > 0:
            parts.append(f"Streak: +{self.streak_bonus}")
        if self.timing_bonus > 0:
            parts.append(f"Timing: +{self.timing_bonus}")
        if self.sedentary_penalty > 0:
            parts.append(f"Sedentary: -{self.sedentary_penalty}")
        if self.variety_bonus > 0:
            parts.append(f"Variety: +{self.variety_bonus}")
        return " • ".join(parts)


def _variety_bonus(focus_areas) -> int:
    distinct = len(set(focus_areas))
    if distinct >= 3:
        return 2
    if distinct >= 2:
        return 1
    return 0


def score_components(
    sessions_completed: int,
    minutes_completed: int,
    streak_days: int,
    stiffness_times_matched: int = 0,
    sedentary_bucket: SedentaryHoursBucket | None = None,
    focus_areas=(),
) -> ScoreBreakdown:
    """Work out each score component.

    Negative counts contribute nothing rather than subtracting points.
    minutes_completed does not affect the score.
    """
    session_points = min(max(sessions_completed, 0) * POINTS_PER_SESSION, MAX_SESSION_POINTS)
    streak_bonus = min(max(streak_days, 0) * POINTS_PER_STREAK_DAY, MAX_STREAK_BONUS)
    timing_bonus = min(max(stiffness_times_matched, 0) * STIFFNESS_MATCH_BONUS, MAX_STIFFNESS_BONUS)

    sedentary_penalty = 0
    if sessions_completed == 0 and sedentary_bucket is not None:
        sedentary_penalty = SEDENTARY_PENALTIES[sedentary_bucket]

    return ScoreBreakdown(
        base=BASE_SCORE,
        session_points=session_points,
        streak_bonus=streak_bonus,
        timing_bonus=timing_bonus,
        sedentary_penalty=sedentary_penalty,
        variety_bonus=_variety_bonus(focus_areas),
    )


def calculate_score(
    sessions_completed: int,
    minutes_completed: int,
    streak_days: int,
    stiffness_times_matched: int = 0,
    sedentary_bucket: SedentaryHoursBucket | None = None,
    focus_areas=(),
) -> int:
    """Calculate the daily engagement score, always within [30, 100]."""
    return score_components(
        sessions_completed,
        minutes_completed,
        streak_days,
        stiffness_times_matched,
        sedentary_bucket,
        focus_areas,
    ).total


def explain_score(
    sessions_completed: int,
    minutes_completed: int,
    streak_days: int,
    stiffness_times_matched: int = 0,
    sedentary_bucket: SedentaryHoursBucket | None = None,
    focus_areas=(),
) -> str:
    """Explain the score calculate_score would give for the same arguments."""
    return score_components(
        sessions_completed,
        minutes_completed,
        streak_days,
        stiffness_times_matched,
        sedentary_bucket,
        focus_areas,
    ).explain()


def session_time_category(moment: datetime) -> StiffnessTime:
    """Bucket a wall-clock time into morning (5-11), midday (12-16) or evening."""
    hour = moment.hour
    if 5 <= hour < 12:
        return StiffnessTime.MORNING
    if 12 <= hour < 17:
        return StiffnessTime.MIDDAY
    return StiffnessTime.EVENING


def count_stiffness_matches(triggered, profile: ProfileSnapshot | None) -> int:
    """Triggered times that fall in the profile's self-reported stiff periods."""
    if profile is None:
        return 0
    reported = {t.value for t in profile.effective_stiffness_times}
    return len({getattr(t, "value", t) for t in triggered} & reported)


def calculate_daily_score(
    day: date,
    sessions_completed: int,
    minutes_completed: int,
    focus_areas,
    stiffness_times_triggered,
    profile: ProfileSnapshot | None,
    current_streak: int,
) -> DailyScoreEntry:
    """Build a full entry for one day, scoring it against the profile."""
    focus = sorted({getattr(a, "value", a) for a in focus_areas})
    triggered = sorted({getattr(t, "value", t) for t in stiffness_times_triggered})

    score = calculate_score(
        sessions_completed=sessions_completed,
        minutes_completed=minutes_completed,
        streak_days=current_streak,
        stiffness_times_matched=count_stiffness_matches(triggered, profile),
        sedentary_bucket=profile.sedentary_hours_bucket if profile else None,
        focus_areas=focus,
    )
    return DailyScoreEntry(
        day=day,
        score=score,
        minutes_completed=minutes_completed,
        sessions_completed=sessions_completed,
        focus_areas=focus,
        stiffness_times_triggered=triggered,
    )


def projected_score_after_session(current_score: int, current_sessions: int) -> int:
    """Score after one more session, counting only the extra session points."""
    current_points = min(max(current_sessions, 0) * POINTS_PER_SESSION, MAX_SESSION_POINTS)
    next_points = min((max(current_sessions, 0) + 1) * POINTS_PER_SESSION, MAX_SESSION_POINTS)
    return min(current_score + next_points - current_points, MAX_SCORE)


def projection_message(gain: int) -> str:
    if gain >= 8:
        return "One session could boost your score significantly!"
    if gain > 0:
        return "Keep building. Small resets add up."
    return "You're already at a great score for today!"


def weekly_average(entries) -> int:
    """Integer mean of active-day scores; 0 when no day had activity."""
    active = [entry.score for entry in entries if entry.has_activity]
    if not active:
        return 0
    return sum(active) // len(active)


def total_sessions(entries) -> int:
    return sum(entry.sessions_completed for entry in entries)


def total_minutes(entries) -> int:
    return sum(entry.minutes_completed for entry in entries)


def collect_focus_areas(entries) -> list[str]:
    """Sorted, de-duplicated focus areas touched across entries."""
    areas = set()
    for entry in entries:
        areas.update(entry.focus_areas)
    return sorted(areas)
