"""Explicit service wiring.

One DeskFitServices instance owns every store for the lifetime of a CLI
invocation or web app. Nothing here is a module-level singleton.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

import structlog

from ..config import Settings, configure_logging
from ..data.exercise_loader import ExerciseCatalog
from ..db.repositories import (
    AnalysisReportStore,
    InsightCacheRepository,
    ProfileRepository,
    ProgressRepository,
)
from ..models.insight import PlanInfo
from ..models.plan import DailyPlan
from ..models.profile import ProfileSnapshot
from ..models.progress import DailyScoreEntry
from .analysis import AnalysisEngine
from .analytics import AnalyticsSink, LoggingAnalytics
from .insights import DailyInsightEngine, DailyInsightService
from .plan import PlanGenerator

logger = structlog.get_logger()


@dataclass
class DeskFitServices:
    """Every store and engine the app uses."""

    settings: Settings
    profiles: ProfileRepository
    progress: ProgressRepository
    insights: DailyInsightService
    reports: AnalysisReportStore
    catalog: ExerciseCatalog
    plans: PlanGenerator
    analytics: AnalyticsSink

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        clock: Callable[[], datetime] = datetime.now,
        analytics: AnalyticsSink | None = None,
        catalog: ExerciseCatalog | None = None,
    ) -> "DeskFitServices":
        """Build the services for a data directory.

        Args:
            settings: Loaded settings; decides where files live
            clock: Source of the current time, injectable for tests
            analytics: Event sink; defaults to writing events to the log
            catalog: Exercise catalog; defaults to the packaged one
        """
        configure_logging(settings)
        analytics = analytics or LoggingAnalytics()
        if catalog is None:
            catalog = ExerciseCatalog()
        return cls(
            settings=settings,
            profiles=ProfileRepository(settings.profile_path()),
            progress=ProgressRepository(settings.progress_path(), clock=clock, analytics=analytics),
            insights=DailyInsightService(
                InsightCacheRepository(settings.insight_cache_path()),
                engine=DailyInsightEngine(analytics=analytics),
                clock=clock,
            ),
            reports=AnalysisReportStore(
                settings.report_path(), engine=AnalysisEngine(), clock=clock
            ),
            catalog=catalog,
            plans=PlanGenerator(catalog),
            analytics=analytics,
        )

    def save_profile(self, profile: ProfileSnapshot) -> None:
        """Save a new onboarding profile and drop today's cached insights."""
        self.profiles.save(profile)
        self.insights.cache.clear()
        logger.info("Saved profile", fingerprint=profile.fingerprint())

    def todays_plan(self) -> DailyPlan | None:
        """Today's sessions for the saved profile, or None before onboarding.

        Sessions are marked completed in order, one per session recorded today.
        """
        return self._plan_for(self.profiles.get())

    def _plan_for(self, profile: ProfileSnapshot | None) -> DailyPlan | None:
        if profile is None:
            return None
        plan = self.plans.generate(profile, self.progress.clock().date())
        entry = self.progress.todays_entry()
        plan.mark_completed(entry.sessions_completed if entry else 0)
        return plan

    def todays_insights(self, force: bool = False):
        """Insights for today from the saved profile and current progress."""
        profile = self.profiles.get()
        plan = self._plan_for(profile)
        plan_info = PlanInfo(session_count=plan.session_count) if plan else None
        return self.insights.today(
            profile, self.progress.refresh_summary(), plan_info=plan_info, force=force
        )

    def record_session(
        self,
        duration_seconds: int | None = None,
        focus_areas=(),
        exercise_ids=(),
    ) -> DailyScoreEntry:
        """Record one completed session against today's entry.

        Exercise ids add their catalog focus areas, and their durations
        when duration_seconds is not given.

        Raises:
            UnknownExerciseError: If an exercise id is not in the catalog
        """
        exercises = []
        for exercise_id in exercise_ids:
            exercise = self.catalog.get(exercise_id)
            if exercise is None:
                raise UnknownExerciseError(exercise_id)
            exercises.append(exercise)

        if duration_seconds is None:
            duration_seconds = sum(exercise.duration_seconds for exercise in exercises)

        areas = {getattr(area, "value", area) for area in focus_areas}
        for exercise in exercises:
            areas.update(exercise.focus_areas)

        return self.progress.record_session_completion(
            duration_seconds=duration_seconds,
            focus_areas=sorted(areas),
            profile=self.profiles.get(),
        )


class UnknownExerciseError(LookupError):
    """Raised when a session names an exercise the catalog does not have."""

    def __init__(self, exercise_id: str):
        super().__init__(f"Unknown exercise '{exercise_id}'")
        self.exercise_id = exercise_id
