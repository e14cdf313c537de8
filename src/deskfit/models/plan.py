"""Daily plan models."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from .profile import StiffnessTime


class SessionType(str, Enum):
    """Slot of a planned session within the workday."""

    MORNING = "morning"
    MIDDAY = "midday"
    AFTERNOON = "afternoon"

    @property
    def display_name(self) -> str:
        return {
            SessionType.MORNING: "Morning Reset",
            SessionType.MIDDAY: "Midday Refresh",
            SessionType.AFTERNOON: "Afternoon Stretch",
        }[self]

    @property
    def stiffness_time(self) -> StiffnessTime:
        """Stiffness time this slot relieves."""
        return {
            SessionType.MORNING: StiffnessTime.MORNING,
            SessionType.MIDDAY: StiffnessTime.MIDDAY,
            SessionType.AFTERNOON: StiffnessTime.EVENING,
        }[self]

    @property
    def relief_title(self) -> str:
        """Title used when the user is stiff at this time of day."""
        return {
            SessionType.MORNING: "Morning Relief",
            SessionType.MIDDAY: "Midday Unwind",
            SessionType.AFTERNOON: "Evening Reset",
        }[self]


@dataclass
class PlannedSession:
    """One short routine in today's plan."""

    session_type: SessionType
    title: str
    exercise_ids: list[str] = field(default_factory=list)
    duration_seconds: int = 0
    is_completed: bool = False

    def to_dict(self) -> dict:
        return {
            "session_type": self.session_type.value,
            "title": self.title,
            "exercise_ids": list(self.exercise_ids),
            "duration_seconds": self.duration_seconds,
            "is_completed": self.is_completed,
        }


@dataclass
class DailyPlan:
    """The sessions planned for one calendar day."""

    day: date
    sessions: list[PlannedSession] = field(default_factory=list)

    @property
    def session_count(self) -> int:
        return len(self.sessions)

    @property
    def completed_count(self) -> int:
        return sum(1 for session in self.sessions if session.is_completed)

    @property
    def total_seconds(self) -> int:
        return sum(session.duration_seconds for session in self.sessions)

    @property
    def next_session(self) -> PlannedSession | None:
        """First session not yet completed, or None when the plan is done."""
        for session in self.sessions:
            if not session.is_completed:
                return session
        return None

    def mark_completed(self, count: int) -> None:
        """Mark the first count sessions as completed, in plan order."""
        for index, session in enumerate(self.sessions):
            session.is_completed = index < count

    def to_dict(self) -> dict:
        """Convert to dictionary for the API."""
        return {
            "date": self.day.isoformat(),
            "session_count": self.session_count,
            "completed_count": self.completed_count,
            "total_seconds": self.total_seconds,
            "sessions": [session.to_dict() for session in self.sessions],
        }
