"""Profile analysis engine.

Turns onboarding answers into a posture-risk report. Every choice is a pure
function of the profile: wording variants are picked with a seed derived from
the profile itself, so the same answers always produce the same report.
"""

from ..models.profile import (
    ExerciseFrequency,
    MotivationLevel,
    PainArea,
    PostureIssue,
    ProfileSnapshot,
    SedentaryHoursBucket,
    StiffnessTime,
    WorkType,
)
from ..models.report import AnalysisReport, AnalysisScore, InsightCard, ScoreCategory, Severity
from ..utils.hashing import seed_from_parts

MAX_INSIGHTS = 6
MAX_RISK_FACTORS = 8
MAX_PRIORITIES = 4
MAX_WEEKLY_ACTIONS = 4

SEDENTARY_POINTS = {
    SedentaryHoursBucket.LESS_THAN_2: 5,
    SedentaryHoursBucket.TWO_TO_FOUR: 10,
    SedentaryHoursBucket.FOUR_TO_SIX: 15,
    SedentaryHoursBucket.SIX_TO_EIGHT: 20,
    SedentaryHoursBucket.MORE_THAN_8: 25,
}
SEDENTARY_DEFAULT_POINTS = 12

STIFFNESS_POINTS = (5, 8, 14, 20)
PAIN_POINTS = (0, 5, 10, 14, 17, 20)
POSTURE_POINTS = (0, 4, 8, 11, 15)

EXERCISE_POINTS = {
    ExerciseFrequency.RARELY: 15,
    ExerciseFrequency.ONCE_WEEK: 12,
    ExerciseFrequency.TWO_THREE_WEEK: 8,
    ExerciseFrequency.FOUR_PLUS_WEEK: 4,
    ExerciseFrequency.DAILY: 2,
}
EXERCISE_DEFAULT_POINTS = 8

# Per-axis maxima: sedentary, stiffness, pain, posture, exercise, work hours
MAX_POINTS = 25 + 20 + 20 + 15 + 15 + 5


def _stepped(table: tuple[int, ...], count: int) -> int:
    """Look up count in a stepped table, saturating at the last step."""
    return table[min(max(count, 0), len(table) - 1)]


def _work_hours_points(work_hours: int) -> int:
    if work_hours <= 6:
        return 1
    if work_hours <= 8:
        return 2
    if work_hours <= 10:
        return 4
    return 5


def _join_lower(names) -> str:
    return " and ".join(name.lower() for name in names)


SEDENTARY_VARIANTS = (
    (
        "Sitting {hours} daily is commonly linked with increased muscle tension and reduced "
        "circulation. Regular movement breaks can help counteract these effects.",
        "We'll schedule micro-resets throughout your workday.",
    ),
    (
        "Desk days of {hours} may contribute to the stiffness you're experiencing. Brief, "
        "targeted movements throughout the day often help.",
        "Your plan includes exercises timed for your work schedule.",
    ),
    (
        "With {hours} of daily sitting, muscle tension can accumulate gradually. Consistent "
        "movement breaks are often effective at managing this.",
        "We'll help you build a sustainable movement routine.",
    ),
)

# (all-day body, partial body, all-day action, partial action)
STIFFNESS_VARIANTS = (
    (
        "You're experiencing stiffness throughout your entire day. This widespread pattern "
        "often correlates with prolonged sitting and limited movement variety.",
        "You feel stiffest during the {times}. This timing pattern can help us target your "
        "exercises when they'll have the most impact.",
        "We'll spread exercises across your day for continuous relief.",
        "We'll prioritize sessions during your peak stiffness times.",
    ),
    (
        "All-day stiffness suggests your body may need more frequent movement throughout your "
        "workday. Small, consistent breaks often help.",
        "Your {times} stiffness pattern tells us when your body most needs movement. We'll "
        "time your resets accordingly.",
        "Your plan includes exercises distributed throughout the day.",
        "Sessions are timed for when you typically feel most tense.",
    ),
    (
        "Feeling stiff all day indicates tension is accumulating faster than it's releasing. "
        "More frequent micro-movements can help break this cycle.",
        "The {times} stiffness you mentioned points to specific windows where movement can be "
        "most beneficial.",
        "We'll help you build movement habits for every part of your day.",
        "Your resets are scheduled for maximum impact.",
    ),
)

NECK_VARIANTS = (
    (
        "Your {concerns} may be connected to desk posture habits. These areas often benefit "
        "from targeted mobility and strengthening exercises.",
        "We'll include specific neck and upper back exercises in your plan.",
    ),
    (
        "The {concerns} you mentioned are common among desk workers. Gentle, consistent "
        "movement can help address the underlying tension patterns.",
        "Your plan prioritizes exercises for these key areas.",
    ),
    (
        "Screen time and desk positioning often contribute to {concerns}. Regular mobility "
        "work can help maintain comfort throughout your day.",
        "We've designed exercises specifically for your upper body needs.",
    ),
)

WORK_CONTEXT = {
    WorkType.DESK_OFFICE: (
        "Office desk work often means less control over your environment and potentially more "
        "screen time. Your plan will include exercises suitable for an office setting.",
        "We'll focus on discreet, desk-friendly movements.",
    ),
    WorkType.DESK_HOME: (
        "Working from home can blur boundaries between work and rest. Your setup flexibility "
        "is an advantage, so we can include exercises that use your space effectively.",
        "We'll include exercises you can do right at your desk.",
    ),
    WorkType.HYBRID: (
        "Switching between locations means varying setups and routines. Consistent movement "
        "habits can help maintain comfort across both environments.",
        "We'll create a routine that works in any setting.",
    ),
    WorkType.STANDING: (
        "Standing desks are great for reducing sitting time, but static standing creates its "
        "own patterns. We'll balance your routine accordingly.",
        "We'll include exercises for standing desk users.",
    ),
    WorkType.MIXED: (
        "Moving between desk work and other activities means varied physical demands. Your "
        "routine will complement this variety.",
        "We'll design a flexible routine for your active workday.",
    ),
}

SEDENTARY_RISK_FACTORS = {
    SedentaryHoursBucket.MORE_THAN_8: (
        "Sitting 8+ hours daily can contribute to muscle tension and reduced circulation"
    ),
    SedentaryHoursBucket.SIX_TO_EIGHT: (
        "6-8 hours of daily sitting may increase likelihood of stiffness buildup"
    ),
    SedentaryHoursBucket.FOUR_TO_SIX: (
        "4-6 hours of sitting is common but benefits from regular movement breaks"
    ),
}

PAIN_RISK_FACTORS = (
    (PainArea.NECK, "Neck discomfort is commonly linked with screen positioning and forward head posture"),
    (PainArea.LOWER_BACK, "Lower back discomfort may correlate with prolonged sitting and hip tightness"),
    (PainArea.SHOULDERS, "Shoulder tension often develops from keyboard and mouse positioning"),
    (PainArea.WRISTS, "Wrist strain can result from repetitive typing and mouse movements"),
    (PainArea.HEADACHES, "Tension headaches may be connected to neck and shoulder tightness"),
)

SUMMARIES = {
    ScoreCategory.LOW: (
        "Your desk habits show lower risk factors",
        "Based on your answers, you have a solid foundation. Our plan will help you maintain "
        "good habits and address any specific areas you'd like to improve.",
    ),
    ScoreCategory.MODERATE: (
        "Your routine has patterns worth addressing",
        "Your answers reveal some common desk-related patterns that can contribute to "
        "stiffness over time. The good news? Targeted micro-movements can make a real "
        "difference.",
    ),
    ScoreCategory.ELEVATED: (
        "Your habits suggest room for improvement",
        "Based on what you've shared, your daily patterns may be contributing to the "
        "discomfort you're experiencing. A consistent movement routine can help address these "
        "factors.",
    ),
}

DEFAULT_PRIORITIES = ("General mobility", "Posture awareness", "Movement breaks")


class AnalysisEngine:
    """Builds an AnalysisReport from a ProfileSnapshot."""

    def generate(self, profile: ProfileSnapshot) -> AnalysisReport:
        """Generate the complete report for a profile."""
        score = self.calculate_score(profile)
        headline, body = self.generate_summary(score)
        return AnalysisReport(
            summary_headline=headline,
            summary_body=body,
            score=score,
            insights=self.generate_insights(profile),
            risk_factors=self.generate_risk_factors(profile),
            focus_areas=self.derive_focus_areas(profile),
            recommended_priorities=self.derive_recommended_priorities(profile),
            weekly_actions=self.generate_weekly_actions(profile),
        )

    # Scoring

    def calculate_score(self, profile: ProfileSnapshot) -> AnalysisScore:
        """Posture/stiffness load score, 0-100. Higher means more risk factors.

        Missing answers count as a mid-table value rather than zero.
        """
        points = 0
        if profile.sedentary_hours_bucket is not None:
            points += SEDENTARY_POINTS[profile.sedentary_hours_bucket]
        else:
            points += SEDENTARY_DEFAULT_POINTS

        points += _stepped(STIFFNESS_POINTS, len(profile.effective_stiffness_times))
        points += _stepped(PAIN_POINTS, len(profile.pain_areas))
        points += _stepped(POSTURE_POINTS, len(profile.posture_issues))

        if profile.exercise_frequency is not None:
            points += EXERCISE_POINTS[profile.exercise_frequency]
        else:
            points += EXERCISE_DEFAULT_POINTS

        points += _work_hours_points(profile.work_hours)

        return AnalysisScore(value=points * 100 // MAX_POINTS)

    # Insight cards

    def template_seed(self, profile: ProfileSnapshot) -> int:
        """Seed for wording variants, 0-99, derived from the profile alone."""
        return seed_from_parts(
            "".join(sorted(a.value for a in profile.pain_areas)),
            "".join(sorted(t.value for t in profile.stiffness_times)),
            profile.sedentary_hours_bucket.value if profile.sedentary_hours_bucket else "",
            "".join(sorted(a.value for a in profile.focus_areas)),
        ) % 100

    def generate_insights(self, profile: ProfileSnapshot) -> list[InsightCard]:
        """Run every card generator, then keep the six most severe.

        Cards of equal severity keep generator order.
        """
        seed = self.template_seed(profile)
        generators = (
            lambda: self._sedentary_load(profile, seed),
            lambda: self._stiffness_timing(profile, seed),
            lambda: self._neck_upper_back(profile, seed),
            lambda: self._lower_back_hips(profile),
            lambda: self._movement_baseline(profile),
            lambda: self._time_efficiency(profile),
            lambda: self._work_context(profile),
        )
        cards = [card for card in (generate() for generate in generators) if card is not None]
        cards.sort(key=lambda card: card.severity.sort_rank)
        return cards[:MAX_INSIGHTS]

    def _sedentary_load(self, profile: ProfileSnapshot, seed: int) -> InsightCard | None:
        bucket = profile.sedentary_hours_bucket
        if bucket is None or not bucket.is_high_risk:
            return None

        body, action = SEDENTARY_VARIANTS[seed % len(SEDENTARY_VARIANTS)]
        return InsightCard(
            title="Sedentary Load",
            body=body.replace("{hours}", bucket.display_name),
            severity=Severity.HIGH if bucket == SedentaryHoursBucket.MORE_THAN_8 else Severity.MEDIUM,
            action_label=action,
            tags=["sedentary", "sitting", bucket.value],
        )

    def _stiffness_timing(self, profile: ProfileSnapshot, seed: int) -> InsightCard | None:
        times = profile.ordered_stiffness_times()
        if len(times) < 2:
            return None

        all_day = len(times) == len(StiffnessTime.individual())
        body_all, body_partial, action_all, action_partial = STIFFNESS_VARIANTS[
            seed % len(STIFFNESS_VARIANTS)
        ]
        times_text = _join_lower(t.display_name for t in times)
        return InsightCard(
            title="Stiffness Pattern",
            body=body_all if all_day else body_partial.replace("{times}", times_text),
            severity=Severity.HIGH if all_day else Severity.MEDIUM,
            action_label=action_all if all_day else action_partial,
            tags=["stiffness", "timing"] + [t.value for t in times],
        )

    def _neck_upper_back(self, profile: ProfileSnapshot, seed: int) -> InsightCard | None:
        pain = profile.pain_areas
        posture = profile.posture_issues

        has_neck = PainArea.NECK in pain
        has_shoulders = PainArea.SHOULDERS in pain
        has_upper_back = PainArea.UPPER_BACK in pain
        has_headaches = PainArea.HEADACHES in pain
        has_forward_head = PostureIssue.FORWARD_HEAD in posture
        has_text_neck = PostureIssue.TEXT_NECK in posture
        has_rounded = PostureIssue.ROUNDED_SHOULDERS in posture

        triggers = sum(
            (has_neck, has_shoulders, has_upper_back, has_headaches,
             has_forward_head, has_text_neck, has_rounded)
        )
        if triggers == 0:
            return None

        if triggers == 1:
            severity = Severity.LOW
        elif triggers <= 3:
            severity = Severity.MEDIUM
        else:
            severity = Severity.HIGH

        concerns = []
        if has_neck:
            concerns.append("neck discomfort")
        if has_shoulders:
            concerns.append("shoulder tension")
        if has_upper_back:
            concerns.append("upper back stiffness")
        if has_forward_head or has_text_neck:
            concerns.append("forward head positioning")
        if has_rounded:
            concerns.append("rounded shoulders")
        if has_headaches:
            concerns.append("tension headaches")

        body, action = NECK_VARIANTS[seed % len(NECK_VARIANTS)]
        return InsightCard(
            title="Neck & Upper Back Focus",
            body=body.replace("{concerns}", " and ".join(concerns[:2])),
            severity=severity,
            action_label=action,
            tags=["neck", "upper_back", "shoulders", "posture"],
        )

    def _lower_back_hips(self, profile: ProfileSnapshot) -> InsightCard | None:
        pain = profile.pain_areas
        posture = profile.posture_issues

        has_lower_back = PainArea.LOWER_BACK in pain
        has_hips = PainArea.HIPS in pain
        has_uneven = PostureIssue.UNEVEN_HIPS in posture
        has_tilt = PostureIssue.ANTERIOR_PELVIC_TILT in posture
        slouching_heavy_sitter = (
            PostureIssue.SLOUCHING in posture
            and profile.sedentary_hours_bucket == SedentaryHoursBucket.MORE_THAN_8
        )

        triggers = sum((has_lower_back, has_hips, has_uneven, has_tilt, slouching_heavy_sitter))
        if triggers == 0:
            return None

        severity = {1: Severity.LOW, 2: Severity.MEDIUM}.get(triggers, Severity.HIGH)

        concerns = []
        if has_lower_back:
            concerns.append("lower back discomfort")
        if has_hips:
            concerns.append("hip tightness")
        if has_uneven:
            concerns.append("uneven hips")
        if has_tilt:
            concerns.append("pelvic positioning")
        concerns_text = " and ".join(concerns[:2]) if concerns else "lower body tension"

        return InsightCard(
            title="Lower Back & Hips",
            body=(
                f"Your {concerns_text} can be influenced by prolonged sitting. Hip flexors often "
                "tighten while glutes weaken, creating imbalances that affect the lower back."
            ),
            severity=severity,
            action_label="We'll add hip mobility and lower back relief exercises.",
            tags=["lower_back", "hips", "mobility"],
        )

    def _movement_baseline(self, profile: ProfileSnapshot) -> InsightCard | None:
        frequency = profile.exercise_frequency
        if frequency == ExerciseFrequency.RARELY:
            severity = Severity.MEDIUM
            body = (
                "Starting from a lower activity baseline means your body may respond quickly to "
                "consistent movement. We'll start gentle and build progressively."
            )
        elif frequency == ExerciseFrequency.ONCE_WEEK:
            severity = Severity.LOW
            body = (
                "With once-weekly activity, adding daily micro-movements can help maintain "
                "flexibility between your regular workouts."
            )
        else:
            return None

        return InsightCard(
            title="Movement Baseline",
            body=body,
            severity=severity,
            action_label=(
                "We'll start with approachable exercises and progress as you build consistency."
            ),
            tags=["exercise", "baseline", frequency.value],
        )

    def _time_efficiency(self, profile: ProfileSnapshot) -> InsightCard | None:
        if profile.daily_time_minutes > 5:
            return None
        return InsightCard(
            title="Time-Efficient Approach",
            body=(
                f"You've got {profile.daily_time_minutes} minutes to work with. Research "
                "suggests even brief, consistent movement breaks can help reduce stiffness and "
                "improve focus."
            ),
            severity=Severity.LOW,
            action_label="We'll design quick, focused sessions that fit your schedule.",
            tags=["time", "efficiency", "micro_sessions"],
        )

    def _work_context(self, profile: ProfileSnapshot) -> InsightCard | None:
        if profile.work_type is None:
            return None
        body, action = WORK_CONTEXT[profile.work_type]
        return InsightCard(
            title="Work Environment",
            body=body,
            severity=Severity.LOW,
            action_label=action,
            tags=["work", profile.work_type.value],
        )

    # Lists

    def generate_risk_factors(self, profile: ProfileSnapshot) -> list[str]:
        """Plain-language risk factors in rule order, at most eight."""
        factors = []

        bucket = profile.sedentary_hours_bucket
        if bucket in SEDENTARY_RISK_FACTORS:
            factors.append(SEDENTARY_RISK_FACTORS[bucket])

        stiffness_count = len(profile.effective_stiffness_times)
        if stiffness_count == len(StiffnessTime.individual()):
            factors.append("All-day stiffness pattern often correlates with limited movement variety")
        elif stiffness_count == 2:
            factors.append("Stiffness at multiple times of day may indicate cumulative tension")

        for area, text in PAIN_RISK_FACTORS:
            if area in profile.pain_areas:
                factors.append(text)

        posture = profile.posture_issues
        if PostureIssue.FORWARD_HEAD in posture or PostureIssue.TEXT_NECK in posture:
            factors.append("Forward head posture can increase strain on neck muscles")
        if PostureIssue.ROUNDED_SHOULDERS in posture:
            factors.append("Rounded shoulders may contribute to upper back and chest tightness")
        if PostureIssue.SLOUCHING in posture:
            factors.append(
                "Slouching patterns often lead to reduced core engagement and back support"
            )
        if PostureIssue.ANTERIOR_PELVIC_TILT in posture:
            factors.append("Anterior pelvic tilt can affect lower back comfort during sitting")

        if profile.exercise_frequency == ExerciseFrequency.RARELY:
            factors.append("Limited regular exercise may reduce muscle support for desk posture")
        elif profile.exercise_frequency == ExerciseFrequency.ONCE_WEEK:
            factors.append("Once-weekly activity may not fully offset daily sitting effects")

        work_hours = profile.work_hours
        if work_hours >= 10:
            factors.append(
                f"Extended work hours ({work_hours}+ hours) increase cumulative sitting time"
            )

        return factors[:MAX_RISK_FACTORS]

    def derive_focus_areas(self, profile: ProfileSnapshot) -> list[str]:
        """Display names from pain areas, posture issues and focus picks, sorted."""
        areas = {a.display_name for a in profile.pain_areas}
        areas.update(i.display_name for i in profile.posture_issues)
        areas.update(a.display_name for a in profile.focus_areas)
        return sorted(areas)

    def derive_recommended_priorities(self, profile: ProfileSnapshot) -> list[str]:
        pain = profile.pain_areas
        posture = profile.posture_issues
        priorities = []

        if (
            PainArea.NECK in pain
            or PostureIssue.FORWARD_HEAD in posture
            or PostureIssue.TEXT_NECK in posture
        ):
            priorities.append("Neck mobility")
        if PainArea.SHOULDERS in pain or PostureIssue.ROUNDED_SHOULDERS in posture:
            priorities.append("Shoulder opening")
        if PainArea.UPPER_BACK in pain or PostureIssue.SLOUCHING in posture:
            priorities.append("Upper back activation")
        if PainArea.HIPS in pain or PostureIssue.ANTERIOR_PELVIC_TILT in posture:
            priorities.append("Hip flexor stretching")
        if PainArea.LOWER_BACK in pain or PostureIssue.UNEVEN_HIPS in posture:
            priorities.append("Lower back relief")
        if PainArea.WRISTS in pain:
            priorities.append("Wrist mobility")

        if not priorities:
            priorities = list(DEFAULT_PRIORITIES)
        return priorities[:MAX_PRIORITIES]

    def generate_weekly_actions(self, profile: ProfileSnapshot) -> list[str]:
        actions = []

        sessions = profile.sessions_per_day
        session_word = "session" if sessions == 1 else "sessions"
        actions.append(
            f"{sessions} quick {session_word} per day, {profile.daily_time_minutes} minutes total"
        )

        times = profile.ordered_stiffness_times()
        if len(times) == len(StiffnessTime.individual()):
            actions.append("Exercises spread throughout your day for all-day relief")
        elif times:
            actions.append(
                f"Sessions timed for your {_join_lower(t.display_name for t in times)} stiffness"
            )

        focus = profile.ordered_focus_areas()[:2]
        if focus:
            actions.append(
                f"Targeted exercises for your {_join_lower(a.display_name for a in focus)}"
            )

        if profile.motivation_level == MotivationLevel.CURIOUS:
            actions.append("Gentle progression as you build your routine")
        elif profile.motivation_level == MotivationLevel.READY:
            actions.append("Steady progression through the week")
        elif profile.motivation_level == MotivationLevel.VERY_MOTIVATED:
            actions.append("Progressive challenge to match your motivation")
        else:
            actions.append("Progressive exercises that build throughout the week")

        return actions[:MAX_WEEKLY_ACTIONS]

    def generate_summary(self, score: AnalysisScore) -> tuple[str, str]:
        """Headline and body for the score's risk band."""
        return SUMMARIES[score.category]
