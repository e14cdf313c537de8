"""Daily insight engine.

Picks two or three short insights per calendar day. Selection is seeded by
the day of the year and a stable hash of the profile, so the same user sees
the same insights all day and different wording on other days.
"""

from datetime import datetime
from typing import Callable

import structlog

from ..models.insight import DailyInsight, InsightCategory, PlanInfo
from ..models.profile import ProfileSnapshot, WorkType
from ..models.progress import ProgressSummary, ProgressTrend
from . import templates
from .analytics import INSIGHT_GENERATED, AnalyticsSink, safe_track
from .templates import InsightTemplate, render

logger = structlog.get_logger()

SECONDARY_ROTATION = (
    InsightCategory.PROGRESS_TIP,
    InsightCategory.PLAN_TIP,
    InsightCategory.MOTIVATIONAL,
    InsightCategory.RECOVERY,
    InsightCategory.WORK_ENVIRONMENT,
    InsightCategory.SEDENTARY_RISK,
    InsightCategory.STIFFNESS_TIMING,
)

WORK_PHRASES = {
    WorkType.DESK_OFFICE: "an office desk",
    WorkType.DESK_HOME: "a home desk",
    WorkType.HYBRID: "a hybrid setup",
    WorkType.STANDING: "a standing desk",
    WorkType.MIXED: "a mixed setup",
}


def insight_seed(moment: datetime, profile: ProfileSnapshot | None) -> int:
    """Seed in 0-999 from the day of the year and the profile hash."""
    day_of_year = moment.timetuple().tm_yday
    profile_hash = profile.fingerprint() if profile is not None else 0
    return abs(day_of_year + profile_hash) % 1000


def persona_hash(profile: ProfileSnapshot | None) -> str:
    """Coarse description of a profile for analytics. Holds counts and buckets only."""
    if profile is None:
        return "unknown"

    components = []
    if profile.pain_areas:
        components.append(f"pain_{len(profile.pain_areas)}")
    if profile.sedentary_hours_bucket is not None:
        components.append(f"sed_{profile.sedentary_hours_bucket.value}")
    if profile.stiffness_times:
        components.append(f"stiff_{len(profile.effective_stiffness_times)}")
    return "_".join(components)


def _focus_phrase(profile: ProfileSnapshot | None, default: str) -> str:
    if profile is None:
        return default
    names = [a.display_name.lower() for a in profile.ordered_focus_areas()[:2]]
    return " and ".join(names) if names else default


class DailyInsightEngine:
    """Generates the day's insights. Pure apart from the analytics events."""

    def __init__(self, analytics: AnalyticsSink | None = None):
        self.analytics = analytics

    def generate(
        self,
        profile: ProfileSnapshot | None,
        summary: ProgressSummary | None,
        plan_info: PlanInfo | None,
        now: datetime,
    ) -> list[DailyInsight]:
        """Generate the primary, secondary and optional tertiary insights for now's day."""
        seed = insight_seed(now, profile)
        used = set()
        insights = []

        primary = self._primary(profile, seed, now)
        insights.append(primary)
        used.add(primary.category)

        secondary = self._secondary(profile, summary, plan_info, used, seed, now)
        insights.append(secondary)
        used.add(secondary.category)

        tertiary = self._tertiary(summary, used, seed, now)
        if tertiary is not None:
            insights.append(tertiary)

        persona = persona_hash(profile)
        for insight in insights:
            safe_track(
                self.analytics,
                INSIGHT_GENERATED,
                category=insight.category.value,
                persona_hash=persona,
            )

        logger.debug(
            "Generated daily insights",
            categories=[i.category.value for i in insights],
            seed=seed,
        )
        return insights

    # Slot selection

    def _primary(self, profile, seed, now) -> DailyInsight:
        if profile is None:
            return self._motivational(seed, now)
        if profile.pain_areas:
            return self._pain(profile, seed, now)
        if profile.sedentary_hours_bucket is not None and profile.sedentary_hours_bucket.is_high_risk:
            return self._sedentary(profile, seed, now)
        if profile.stiffness_times:
            return self._stiffness(profile, seed, now)
        return self._motivational(seed, now)

    def _secondary(self, profile, summary, plan_info, used, seed, now) -> DailyInsight:
        # Sunday=1 through Saturday=7
        weekday = now.isoweekday() % 7 + 1
        index = (weekday + seed) % len(SECONDARY_ROTATION)
        category = SECONDARY_ROTATION[index]
        if category in used:
            category = SECONDARY_ROTATION[(index + 1) % len(SECONDARY_ROTATION)]

        if category == InsightCategory.PROGRESS_TIP:
            return self._progress(summary, seed, now)
        if category == InsightCategory.PLAN_TIP:
            return self._plan(profile, plan_info, seed, now)
        if category == InsightCategory.MOTIVATIONAL:
            return self._motivational(seed, now)
        if category == InsightCategory.RECOVERY:
            return self._recovery(seed, now)
        if category == InsightCategory.WORK_ENVIRONMENT:
            return self._work(profile, seed, now)
        if (
            category == InsightCategory.SEDENTARY_RISK
            and profile is not None
            and profile.sedentary_hours_bucket is not None
            and profile.sedentary_hours_bucket.is_high_risk
        ):
            return self._sedentary(profile, seed, now)
        if category == InsightCategory.STIFFNESS_TIMING and profile is not None and profile.stiffness_times:
            return self._stiffness(profile, seed, now)

        # No profile data for the rotated category
        if InsightCategory.MOTIVATIONAL not in used:
            return self._motivational(seed, now)
        return self._recovery(seed, now)

    def _tertiary(self, summary, used, seed, now) -> DailyInsight | None:
        if summary is None:
            return None
        if summary.streak_days < 3 and summary.weekly_sessions_completed < 5:
            return None
        if InsightCategory.MOTIVATIONAL not in used:
            return self._motivational(seed + 100, now)
        if InsightCategory.RECOVERY not in used:
            return self._recovery(seed, now)
        return None

    # Category builders

    def _build(
        self,
        category: InsightCategory,
        template: InsightTemplate,
        now: datetime,
        tags: list[str],
        title_values: dict | None = None,
        body_values: dict | None = None,
    ) -> DailyInsight:
        return DailyInsight(
            category=category,
            title=render(template.title, **(title_values or {})),
            body=render(template.body, **(body_values or {})),
            badge=template.badge,
            cta_text=template.cta,
            debug_tags=tags,
            generated_at=now,
        )

    def _pick(self, bank, seed) -> tuple[int, InsightTemplate]:
        index = seed % len(bank)
        return index, bank[index]

    def _pain(self, profile, seed, now) -> DailyInsight:
        index, template = self._pick(templates.PAIN_TEMPLATES, seed)
        area = profile.ordered_pain_areas()[0]
        sedentary = (
            profile.sedentary_hours_bucket.display_name
            if profile.sedentary_hours_bucket
            else "desk time"
        )
        return self._build(
            InsightCategory.PAIN_SPECIFIC,
            template,
            now,
            [f"pain_{area.value}", f"template_{index}"],
            title_values={"pain_area": area.display_name},
            body_values={"pain_area": area.display_name.lower(), "sedentary": sedentary},
        )

    def _sedentary(self, profile, seed, now) -> DailyInsight:
        index, template = self._pick(templates.SEDENTARY_TEMPLATES, seed)
        bucket = profile.sedentary_hours_bucket
        times = profile.ordered_stiffness_times()
        if times:
            timing = "in the " + " and ".join(t.display_name.lower() for t in times)
        else:
            timing = "throughout the day"
        return self._build(
            InsightCategory.SEDENTARY_RISK,
            template,
            now,
            [f"sedentary_{bucket.value}", f"template_{index}"],
            body_values={"hours": bucket.display_name, "timing": timing},
        )

    def _stiffness(self, profile, seed, now) -> DailyInsight:
        index, template = self._pick(templates.STIFFNESS_TEMPLATES, seed)
        time = profile.ordered_stiffness_times()[0]
        return self._build(
            InsightCategory.STIFFNESS_TIMING,
            template,
            now,
            [f"stiffness_{time.value}", f"template_{index}"],
            title_values={"time": time.display_name},
            body_values={
                "time": time.display_name.lower(),
                "focus": _focus_phrase(profile, "your target areas"),
            },
        )

    def _progress(self, summary, seed, now) -> DailyInsight:
        if summary is not None and summary.trend == ProgressTrend.IMPROVING:
            branch, bank = "improving", templates.PROGRESS_IMPROVING_TEMPLATES
        elif summary is not None and summary.streak_days >= 3:
            branch, bank = "streak", templates.PROGRESS_STREAK_TEMPLATES
        elif summary is not None and summary.weekly_sessions_completed == 0:
            branch, bank = "restart", templates.PROGRESS_RESTART_TEMPLATES
        else:
            branch, bank = "general", templates.PROGRESS_GENERAL_TEMPLATES

        index, template = self._pick(bank, seed)
        values = {
            "streak": summary.streak_days if summary else 0,
            "sessions": summary.weekly_sessions_completed if summary else 0,
            "score": summary.weekly_average_score if summary else 0,
        }
        return self._build(
            InsightCategory.PROGRESS_TIP,
            template,
            now,
            ["progress", branch, f"template_{index}"],
            title_values=values,
            body_values=values,
        )

    def _plan(self, profile, plan_info, seed, now) -> DailyInsight:
        index, template = self._pick(templates.PLAN_TEMPLATES, seed)
        session_count = plan_info.session_count if plan_info is not None else 3
        return self._build(
            InsightCategory.PLAN_TIP,
            template,
            now,
            ["plan", f"template_{index}"],
            body_values={
                "session_count": session_count,
                "focus": _focus_phrase(profile, "your focus areas"),
            },
        )

    def _motivational(self, seed, now) -> DailyInsight:
        index, template = self._pick(templates.MOTIVATIONAL_TEMPLATES, seed)
        return self._build(
            InsightCategory.MOTIVATIONAL, template, now, ["motivational", f"template_{index}"]
        )

    def _recovery(self, seed, now) -> DailyInsight:
        index, template = self._pick(templates.RECOVERY_TEMPLATES, seed)
        return self._build(InsightCategory.RECOVERY, template, now, ["recovery", f"template_{index}"])

    def _work(self, profile, seed, now) -> DailyInsight:
        index, template = self._pick(templates.WORK_TEMPLATES, seed)
        work_type = profile.work_type if profile is not None else None
        phrase = WORK_PHRASES.get(work_type, "your desk")
        return self._build(
            InsightCategory.WORK_ENVIRONMENT,
            template,
            now,
            ["work_environment", f"template_{index}"],
            body_values={"work_type": phrase},
        )


class DailyInsightService:
    """Serves today's insights, generating them at most once per calendar day."""

    def __init__(
        self,
        cache,
        engine: DailyInsightEngine | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.cache = cache
        self.engine = engine or DailyInsightEngine()
        self.clock = clock

    def today(
        self,
        profile: ProfileSnapshot | None,
        summary: ProgressSummary | None,
        plan_info: PlanInfo | None = None,
        force: bool = False,
    ) -> list[DailyInsight]:
        """Today's insights; cached ones are reused unless stale or force is set."""
        now = self.clock()
        if not force:
            cached = self.cache.load()
            if cached is not None:
                generated_on, insights = cached
                if generated_on == now.date() and insights:
                    return insights
                logger.debug("Insight cache is stale", generated_on=generated_on.isoformat())

        insights = self.engine.generate(profile, summary, plan_info, now)
        self.cache.save(now.date(), insights)
        return insights
