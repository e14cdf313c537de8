"""Daily plan generation.

Three sessions per day, each filled from the exercise catalog for a third
of the user's daily minutes. Sessions at a time the user feels stiff get
a relief title.
"""

from datetime import date

import structlog

from ..data.exercise_loader import ExerciseCatalog
from ..models.plan import DailyPlan, PlannedSession, SessionType
from ..models.profile import FocusArea, ProfileSnapshot

logger = structlog.get_logger()

SESSIONS_PER_PLAN = 3


def session_seconds(daily_time_minutes: int) -> int:
    """Target length of each session for a daily time budget."""
    return max(0, daily_time_minutes) * 60 // SESSIONS_PER_PLAN


def plan_focus_areas(profile: ProfileSnapshot) -> list[str]:
    """Profile focus areas in display order, or every area when none is chosen."""
    areas = profile.ordered_focus_areas() or list(FocusArea)
    return [area.value for area in areas]


def session_title(session_type: SessionType, profile: ProfileSnapshot) -> str:
    if session_type.stiffness_time in profile.effective_stiffness_times:
        return session_type.relief_title
    return session_type.display_name


class PlanGenerator:
    """Builds a DailyPlan from a profile and the exercise catalog."""

    def __init__(self, catalog: ExerciseCatalog | None = None):
        self.catalog = catalog if catalog is not None else ExerciseCatalog()

    def generate(self, profile: ProfileSnapshot, day: date) -> DailyPlan:
        target = session_seconds(profile.daily_time_minutes)
        focus_areas = plan_focus_areas(profile)

        sessions = []
        for session_type in SessionType:
            exercises = self.catalog.for_duration(target, focus_areas)
            sessions.append(
                PlannedSession(
                    session_type=session_type,
                    title=session_title(session_type, profile),
                    exercise_ids=[exercise.id for exercise in exercises],
                    duration_seconds=sum(exercise.duration_seconds for exercise in exercises),
                )
            )

        plan = DailyPlan(day=day, sessions=sessions)
        logger.debug(
            "Generated daily plan",
            day=day.isoformat(),
            target_seconds=target,
            total_seconds=plan.total_seconds,
        )
        return plan
