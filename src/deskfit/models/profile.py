"""Onboarding profile data models."""

import json
from dataclasses import dataclass, field
from enum import Enum

from ..utils.hashing import stable_hash


class UserGoal(str, Enum):
    """Primary goal picked during onboarding."""

    MOVE_MORE = "move_more"
    REDUCE_STIFFNESS = "reduce_stiffness"
    BUILD_HABIT = "build_habit"
    IMPROVE_POSTURE = "improve_posture"

    @property
    def display_name(self) -> str:
        return _GOAL_NAMES[self]


class FocusArea(str, Enum):
    """Body areas a user wants to work on."""

    NECK = "neck"
    SHOULDERS = "shoulders"
    UPPER_BACK = "upper_back"
    LOWER_BACK = "lower_back"
    WRISTS = "wrists"
    HIPS = "hips"

    @property
    def display_name(self) -> str:
        return _AREA_NAMES[self.value]


class PainArea(str, Enum):
    """Areas where the user reports discomfort."""

    NECK = "neck"
    SHOULDERS = "shoulders"
    UPPER_BACK = "upper_back"
    LOWER_BACK = "lower_back"
    WRISTS = "wrists"
    HIPS = "hips"
    HEADACHES = "headaches"

    @property
    def display_name(self) -> str:
        return _AREA_NAMES[self.value]


class PostureIssue(str, Enum):
    """Self-reported posture patterns."""

    FORWARD_HEAD = "forward_head"
    TEXT_NECK = "text_neck"
    ROUNDED_SHOULDERS = "rounded_shoulders"
    SLOUCHING = "slouching"
    ANTERIOR_PELVIC_TILT = "anterior_pelvic_tilt"
    UNEVEN_HIPS = "uneven_hips"

    @property
    def display_name(self) -> str:
        return _POSTURE_NAMES[self]


class StiffnessTime(str, Enum):
    """Time-of-day buckets when the user feels stiff."""

    MORNING = "morning"
    MIDDAY = "midday"
    EVENING = "evening"
    ALL_DAY = "all_day"  # Mutually exclusive with the individual times

    @property
    def display_name(self) -> str:
        return _STIFFNESS_NAMES[self]

    @classmethod
    def individual(cls) -> tuple["StiffnessTime", ...]:
        """The selectable times excluding ALL_DAY."""
        return (cls.MORNING, cls.MIDDAY, cls.EVENING)


class WorkType(str, Enum):
    """Work setting."""

    DESK_OFFICE = "desk_office"
    DESK_HOME = "desk_home"
    HYBRID = "hybrid"
    STANDING = "standing"
    MIXED = "mixed"

    @property
    def display_name(self) -> str:
        return _WORK_NAMES[self]


class SedentaryHoursBucket(str, Enum):
    """Daily sitting time, ordered lightest to heaviest."""

    LESS_THAN_2 = "less_than_2"
    TWO_TO_FOUR = "two_to_four"
    FOUR_TO_SIX = "four_to_six"
    SIX_TO_EIGHT = "six_to_eight"
    MORE_THAN_8 = "more_than_8"

    @property
    def display_name(self) -> str:
        """Hours phrase, e.g. '6-8 hours'."""
        return _SEDENTARY_NAMES[self]

    @property
    def is_high_risk(self) -> bool:
        return self in (SedentaryHoursBucket.SIX_TO_EIGHT, SedentaryHoursBucket.MORE_THAN_8)


class ExerciseFrequency(str, Enum):
    """How often the user exercises, ordered least to most."""

    RARELY = "rarely"
    ONCE_WEEK = "once_week"
    TWO_THREE_WEEK = "two_three_week"
    FOUR_PLUS_WEEK = "four_plus_week"
    DAILY = "daily"


class MotivationLevel(str, Enum):
    """Self-reported motivation."""

    CURIOUS = "curious"
    READY = "ready"
    VERY_MOTIVATED = "very_motivated"


_GOAL_NAMES = {
    UserGoal.MOVE_MORE: "Move More",
    UserGoal.REDUCE_STIFFNESS: "Reduce Stiffness",
    UserGoal.BUILD_HABIT: "Build a Habit",
    UserGoal.IMPROVE_POSTURE: "Improve Posture",
}

_AREA_NAMES = {
    "neck": "Neck",
    "shoulders": "Shoulders",
    "upper_back": "Upper Back",
    "lower_back": "Lower Back",
    "wrists": "Wrists",
    "hips": "Hips",
    "headaches": "Headaches",
}

_POSTURE_NAMES = {
    PostureIssue.FORWARD_HEAD: "Forward Head",
    PostureIssue.TEXT_NECK: "Text Neck",
    PostureIssue.ROUNDED_SHOULDERS: "Rounded Shoulders",
    PostureIssue.SLOUCHING: "Slouching",
    PostureIssue.ANTERIOR_PELVIC_TILT: "Anterior Pelvic Tilt",
    PostureIssue.UNEVEN_HIPS: "Uneven Hips",
}

_STIFFNESS_NAMES = {
    StiffnessTime.MORNING: "Morning",
    StiffnessTime.MIDDAY: "Midday",
    StiffnessTime.EVENING: "Evening",
    StiffnessTime.ALL_DAY: "All day",
}

_WORK_NAMES = {
    WorkType.DESK_OFFICE: "Office desk",
    WorkType.DESK_HOME: "Home desk",
    WorkType.HYBRID: "Hybrid",
    WorkType.STANDING: "Standing desk",
    WorkType.MIXED: "Mixed",
}

_SEDENTARY_NAMES = {
    SedentaryHoursBucket.LESS_THAN_2: "under 2 hours",
    SedentaryHoursBucket.TWO_TO_FOUR: "2-4 hours",
    SedentaryHoursBucket.FOUR_TO_SIX: "4-6 hours",
    SedentaryHoursBucket.SIX_TO_EIGHT: "6-8 hours",
    SedentaryHoursBucket.MORE_THAN_8: "8+ hours",
}


def toggle_stiffness_time(
    candidate: StiffnessTime, current: frozenset[StiffnessTime]
) -> frozenset[StiffnessTime]:
    """Apply a tap on a stiffness-time option to the current selection.

    ALL_DAY clears the individual picks and vice versa. Tapping a selected
    option unselects it.
    """
    if candidate == StiffnessTime.ALL_DAY:
        if StiffnessTime.ALL_DAY in current:
            return frozenset()
        return frozenset({StiffnessTime.ALL_DAY})

    if StiffnessTime.ALL_DAY in current:
        return frozenset({candidate})

    if candidate in current:
        return current - {candidate}
    return current | {candidate}


def stiffness_from_selection(selected) -> frozenset[StiffnessTime]:
    """Apply a multi-select answer one option at a time through the toggle.

    Options are applied in declaration order, so picking ALL_DAY alongside
    individual times leaves only ALL_DAY.
    """
    current = frozenset()
    for time in StiffnessTime:
        if time in selected:
            current = toggle_stiffness_time(time, current)
    return current


def _parse_set(enum_cls, values) -> frozenset:
    """Parse enum strings, dropping unknown values."""
    parsed = set()
    for value in values or []:
        try:
            parsed.add(enum_cls(value))
        except ValueError:
            continue
    return frozenset(parsed)


def _parse_optional(enum_cls, value):
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _ordered(values, enum_cls) -> list:
    """Sort enum members in declaration order."""
    order = list(enum_cls)
    return sorted(values, key=order.index)


@dataclass(frozen=True)
class ProfileSnapshot:
    """Onboarding answers captured once and read by the engine.

    Work hours are minutes since midnight, e.g. 9:00 = 540, 17:00 = 1020.
    """

    goal: UserGoal | None = None
    focus_areas: frozenset[FocusArea] = field(default_factory=frozenset)
    pain_areas: frozenset[PainArea] = field(default_factory=frozenset)
    posture_issues: frozenset[PostureIssue] = field(default_factory=frozenset)
    stiffness_times: frozenset[StiffnessTime] = field(default_factory=frozenset)
    work_type: WorkType | None = None
    sedentary_hours_bucket: SedentaryHoursBucket | None = None
    exercise_frequency: ExerciseFrequency | None = None
    motivation_level: MotivationLevel | None = None
    daily_time_minutes: int = 5
    work_start_minutes: int = 540
    work_end_minutes: int = 1020

    @property
    def effective_stiffness_times(self) -> frozenset[StiffnessTime]:
        """Individual stiffness times, with ALL_DAY expanded."""
        if StiffnessTime.ALL_DAY in self.stiffness_times:
            return frozenset(StiffnessTime.individual())
        return self.stiffness_times

    @property
    def sessions_per_day(self) -> int:
        """Number of sessions per day based on available time."""
        if self.daily_time_minutes <= 4:
            return 1
        if self.daily_time_minutes <= 8:
            return 2
        return 3

    @property
    def work_hours(self) -> int:
        """Whole hours between work start and end."""
        return (self.work_end_minutes - self.work_start_minutes) // 60

    def ordered_focus_areas(self) -> list[FocusArea]:
        return _ordered(self.focus_areas, FocusArea)

    def ordered_pain_areas(self) -> list[PainArea]:
        return _ordered(self.pain_areas, PainArea)

    def ordered_posture_issues(self) -> list[PostureIssue]:
        return _ordered(self.posture_issues, PostureIssue)

    def ordered_stiffness_times(self) -> list[StiffnessTime]:
        return _ordered(self.effective_stiffness_times, StiffnessTime)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "goal": self.goal.value if self.goal else None,
            "focus_areas": sorted(a.value for a in self.focus_areas),
            "pain_areas": sorted(a.value for a in self.pain_areas),
            "posture_issues": sorted(i.value for i in self.posture_issues),
            "stiffness_times": sorted(t.value for t in self.stiffness_times),
            "work_type": self.work_type.value if self.work_type else None,
            "sedentary_hours_bucket": (
                self.sedentary_hours_bucket.value if self.sedentary_hours_bucket else None
            ),
            "exercise_frequency": (
                self.exercise_frequency.value if self.exercise_frequency else None
            ),
            "motivation_level": (
                self.motivation_level.value if self.motivation_level else None
            ),
            "daily_time_minutes": self.daily_time_minutes,
            "work_start_minutes": self.work_start_minutes,
            "work_end_minutes": self.work_end_minutes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProfileSnapshot":
        """Create from dictionary. Unknown enum strings are ignored."""
        return cls(
            goal=_parse_optional(UserGoal, data.get("goal")),
            focus_areas=_parse_set(FocusArea, data.get("focus_areas")),
            pain_areas=_parse_set(PainArea, data.get("pain_areas")),
            posture_issues=_parse_set(PostureIssue, data.get("posture_issues")),
            stiffness_times=_parse_set(StiffnessTime, data.get("stiffness_times")),
            work_type=_parse_optional(WorkType, data.get("work_type")),
            sedentary_hours_bucket=_parse_optional(
                SedentaryHoursBucket, data.get("sedentary_hours_bucket")
            ),
            exercise_frequency=_parse_optional(
                ExerciseFrequency, data.get("exercise_frequency")
            ),
            motivation_level=_parse_optional(MotivationLevel, data.get("motivation_level")),
            daily_time_minutes=int(data.get("daily_time_minutes", 5)),
            work_start_minutes=int(data.get("work_start_minutes", 540)),
            work_end_minutes=int(data.get("work_end_minutes", 1020)),
        )

    def fingerprint(self) -> int:
        """Stable hash of the whole profile, identical across processes."""
        return stable_hash(json.dumps(self.to_dict(), sort_keys=True))

    def get_summary(self) -> str:
        """Generate a short human-readable summary."""
        summary = f"Goal: {self.goal.display_name if self.goal else 'Not set'}\n"
        if self.focus_areas:
            summary += (
                "Focus areas: "
                + ", ".join(a.display_name for a in self.ordered_focus_areas())
                + "\n"
            )
        if self.pain_areas:
            summary += (
                "Discomfort: "
                + ", ".join(a.display_name for a in self.ordered_pain_areas())
                + "\n"
            )
        if self.posture_issues:
            summary += (
                "Posture: "
                + ", ".join(i.display_name for i in self.ordered_posture_issues())
                + "\n"
            )
        if self.stiffness_times:
            times = _ordered(self.stiffness_times, StiffnessTime)
            summary += "Stiff: " + ", ".join(t.display_name for t in times) + "\n"
        if self.sedentary_hours_bucket:
            summary += f"Sitting: {self.sedentary_hours_bucket.display_name} a day\n"
        if self.work_type:
            summary += f"Work: {self.work_type.display_name}\n"
        summary += f"Daily time: {self.daily_time_minutes} min\n"
        summary += (
            f"Work hours: {self.work_start_minutes // 60:02d}:{self.work_start_minutes % 60:02d}"
            f"-{self.work_end_minutes // 60:02d}:{self.work_end_minutes % 60:02d}\n"
        )
        return summary
