"""Daily score and weekly progress models."""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum


class ScoreDisplayCategory(str, Enum):
    """Display band for a daily engagement score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    BUILDING = "building"
    STARTING = "starting"

    @classmethod
    def from_score(cls, score: int) -> "ScoreDisplayCategory":
        if score >= 85:
            return cls.EXCELLENT
        if score >= 70:
            return cls.GOOD
        if score >= 50:
            return cls.BUILDING
        return cls.STARTING

    @property
    def encouragement(self) -> str:
        return {
            ScoreDisplayCategory.EXCELLENT: "Outstanding consistency!",
            ScoreDisplayCategory.GOOD: "Keep up the great work!",
            ScoreDisplayCategory.BUILDING: "You're building momentum.",
            ScoreDisplayCategory.STARTING: "Every reset counts.",
        }[self]


class ProgressTrend(str, Enum):
    """Direction of recent active-day scores."""

    IMPROVING = "improving"
    NEUTRAL = "neutral"
    DECLINING = "declining"

    def get_display(self) -> str:
        return {
            ProgressTrend.IMPROVING: "Trending up",
            ProgressTrend.NEUTRAL: "Steady",
            ProgressTrend.DECLINING: "Room to grow",
        }[self]


@dataclass
class DailyScoreEntry:
    """One calendar day of activity and its engagement score."""

    day: date
    score: int
    minutes_completed: int = 0
    sessions_completed: int = 0
    focus_areas: list[str] = field(default_factory=list)
    stiffness_times_triggered: list[str] = field(default_factory=list)
    notes: str | None = None
    updated_at: datetime | None = None

    def __post_init__(self):
        if isinstance(self.day, datetime):
            self.day = self.day.date()
        self.score = max(0, min(100, self.score))

    @property
    def has_activity(self) -> bool:
        """Whether any session was completed on this day."""
        return self.sessions_completed > 0

    @property
    def score_category(self) -> ScoreDisplayCategory:
        return ScoreDisplayCategory.from_score(self.score)

    @classmethod
    def placeholder(cls, day: date) -> "DailyScoreEntry":
        """Zero-activity entry used to fill chart gaps. Never persisted."""
        return cls(day=day, score=0)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "date": self.day.isoformat(),
            "score": self.score,
            "minutes_completed": self.minutes_completed,
            "sessions_completed": self.sessions_completed,
            "focus_areas": list(self.focus_areas),
            "stiffness_times_triggered": list(self.stiffness_times_triggered),
            "notes": self.notes,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DailyScoreEntry":
        """Create from dictionary.

        Raises:
            TypeError, ValueError, KeyError: If the record is malformed
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected an entry object, got {type(data).__name__}")

        updated_at = None
        if data.get("updated_at"):
            updated_at = datetime.fromisoformat(data["updated_at"])

        return cls(
            day=date.fromisoformat(data["date"][:10]),
            score=int(data["score"]),
            minutes_completed=int(data.get("minutes_completed", 0)),
            sessions_completed=int(data.get("sessions_completed", 0)),
            focus_areas=list(data.get("focus_areas", [])),
            stiffness_times_triggered=list(data.get("stiffness_times_triggered", [])),
            notes=data.get("notes"),
            updated_at=updated_at,
        )


@dataclass
class ProgressWin:
    """Auto-generated achievement shown with the weekly summary."""

    title: str
    description: str

    def to_dict(self) -> dict:
        return {"title": self.title, "description": self.description}


def week_start(day: date) -> date:
    """Monday of the week containing day."""
    return day - timedelta(days=day.weekday())


@dataclass
class ProgressSummary:
    """Weekly summary rebuilt from the stored entries after every change.

    last_7_days always holds seven entries, oldest first; days without a
    stored entry are zero-activity placeholders.
    """

    week_start_date: date
    weekly_average_score: int
    weekly_sessions_completed: int
    weekly_minutes_completed: int
    streak_days: int
    last_7_days: list[DailyScoreEntry]
    wins: list[ProgressWin] = field(default_factory=list)
    trend: ProgressTrend = ProgressTrend.NEUTRAL
    focus_areas_covered: list[str] = field(default_factory=list)

    @property
    def has_enough_data(self) -> bool:
        """True once any day in the window has a completed session."""
        return any(entry.has_activity for entry in self.last_7_days)

    @property
    def active_days_count(self) -> int:
        return sum(1 for entry in self.last_7_days if entry.has_activity)

    @classmethod
    def empty(cls, today: date) -> "ProgressSummary":
        """Summary for a user with no entries."""
        return cls(
            week_start_date=week_start(today),
            weekly_average_score=0,
            weekly_sessions_completed=0,
            weekly_minutes_completed=0,
            streak_days=0,
            last_7_days=[
                DailyScoreEntry.placeholder(today - timedelta(days=offset))
                for offset in range(6, -1, -1)
            ],
        )

    def get_streak_display(self) -> str:
        if self.streak_days == 0:
            return "Start your streak"
        if self.streak_days == 1:
            return "1 day"
        return f"{self.streak_days} days"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "week_start_date": self.week_start_date.isoformat(),
            "weekly_average_score": self.weekly_average_score,
            "weekly_sessions_completed": self.weekly_sessions_completed,
            "weekly_minutes_completed": self.weekly_minutes_completed,
            "streak_days": self.streak_days,
            "last_7_days": [entry.to_dict() for entry in self.last_7_days],
            "wins": [win.to_dict() for win in self.wins],
            "trend": self.trend.value,
            "focus_areas_covered": list(self.focus_areas_covered),
            "has_enough_data": self.has_enough_data,
        }
