"""Weekly progress summary calculations.

All functions are pure: they take the stored entries plus today's date and
never touch storage.
"""

from datetime import date, timedelta

from ..models.progress import DailyScoreEntry, ProgressSummary, ProgressTrend, week_start
from . import scoring
from .wins import generate_wins

SUMMARY_WINDOW_DAYS = 7
TREND_MIN_ACTIVE_DAYS = 3
TREND_THRESHOLD = 5


def entries_in_window(entries, today: date, days: int) -> list[DailyScoreEntry]:
    """Entries dated within the last `days` days up to today, newest first."""
    start = today - timedelta(days=days - 1)
    window = [entry for entry in entries if start <= entry.day <= today]
    return sorted(window, key=lambda entry: entry.day, reverse=True)


def active_run_ending(entries, last_day: date) -> int:
    """Number of consecutive active days ending exactly on last_day."""
    by_day = {entry.day: entry for entry in entries}
    run = 0
    check = last_day
    while True:
        entry = by_day.get(check)
        if entry is None or not entry.has_activity:
            return run
        run += 1
        check -= timedelta(days=1)


def calculate_streak(entries, today: date) -> int:
    """Count consecutive active days ending today, or yesterday if today is inactive."""
    streak = active_run_ending(entries, today)
    if streak == 0:
        streak = active_run_ending(entries, today - timedelta(days=1))
    return streak


def calculate_trend(entries) -> ProgressTrend:
    """Compare the older and newer halves of the active-day scores.

    Scores are taken oldest first; with an odd count the extra score goes
    to the newer half.
    """
    active = sorted((e for e in entries if e.has_activity), key=lambda e: e.day)
    if len(active) < TREND_MIN_ACTIVE_DAYS:
        return ProgressTrend.NEUTRAL

    scores = [entry.score for entry in active]
    half = len(scores) // 2
    first_half = scores[:half]
    second_half = scores[half:]

    first_avg = sum(first_half) // len(first_half)
    second_avg = sum(second_half) // len(second_half)

    if second_avg > first_avg + TREND_THRESHOLD:
        return ProgressTrend.IMPROVING
    if second_avg < first_avg - TREND_THRESHOLD:
        return ProgressTrend.DECLINING
    return ProgressTrend.NEUTRAL


def fill_missing_days(entries, today: date, days: int = SUMMARY_WINDOW_DAYS) -> list[DailyScoreEntry]:
    """One entry per day for the window, oldest first, with placeholders for gaps."""
    by_day = {entry.day: entry for entry in entries}
    filled = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        filled.append(by_day.get(day) or DailyScoreEntry.placeholder(day))
    return filled


def build_summary(entries, today: date) -> ProgressSummary:
    """Rebuild the weekly summary from every stored entry."""
    if not entries:
        return ProgressSummary.empty(today)

    window = entries_in_window(entries, today, SUMMARY_WINDOW_DAYS)

    average = scoring.weekly_average(window)
    sessions = scoring.total_sessions(window)
    minutes = scoring.total_minutes(window)
    focus_areas = scoring.collect_focus_areas(window)
    streak = calculate_streak(entries, today)
    trend = calculate_trend(window)

    return ProgressSummary(
        week_start_date=week_start(today),
        weekly_average_score=average,
        weekly_sessions_completed=sessions,
        weekly_minutes_completed=minutes,
        streak_days=streak,
        last_7_days=fill_missing_days(window, today),
        wins=generate_wins(streak, sessions, average, trend, focus_areas),
        trend=trend,
        focus_areas_covered=focus_areas,
    )
