"""Congratulatory wins for the weekly progress summary."""

from ..models.progress import ProgressTrend, ProgressWin


def generate_wins(
    streak_days: int,
    weekly_sessions_completed: int,
    weekly_average_score: int,
    trend: ProgressTrend,
    focus_areas_covered,
) -> list[ProgressWin]:
    """Generate wins in a fixed order: streak, sessions, score, trend, variety."""
    wins = []

    if streak_days >= 7:
        wins.append(ProgressWin("Week Warrior", f"{streak_days} days consistent"))
    elif streak_days >= 3:
        wins.append(ProgressWin("Building Momentum", f"{streak_days} days in a row"))

    if weekly_sessions_completed >= 15:
        wins.append(
            ProgressWin("Reset Champion", f"{weekly_sessions_completed} sessions this week")
        )
    elif weekly_sessions_completed >= 7:
        wins.append(
            ProgressWin("Active Week", f"{weekly_sessions_completed} sessions completed")
        )

    if weekly_average_score >= 80:
        wins.append(ProgressWin("High Performer", "Weekly score above 80"))

    if trend == ProgressTrend.IMPROVING:
        wins.append(ProgressWin("On the Rise", "Your scores are improving"))

    area_count = len(set(focus_areas_covered))
    if area_count >= 4:
        wins.append(ProgressWin("Well-Rounded", f"Targeting {area_count} focus areas"))

    return wins
