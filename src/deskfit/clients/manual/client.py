"""Onboarding profile input via interactive questionnaire."""

import questionary
from questionary import Style

from ...models.profile import (
    ExerciseFrequency,
    FocusArea,
    MotivationLevel,
    PainArea,
    PostureIssue,
    ProfileSnapshot,
    SedentaryHoursBucket,
    StiffnessTime,
    UserGoal,
    WorkType,
    stiffness_from_selection,
)

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#00897b bold"),
        ("question", "bold"),
        ("answer", "fg:#ff7043 bold"),
        ("pointer", "fg:#00897b bold"),
        ("highlighted", "fg:#00897b bold"),
        ("selected", "fg:#ff7043"),
        ("separator", "fg:#ff7043"),
        ("instruction", ""),
        ("text", ""),
    ]
)

STIFFNESS_DESCRIPTIONS = {
    StiffnessTime.MORNING: "When I start work",
    StiffnessTime.MIDDAY: "After lunch",
    StiffnessTime.EVENING: "By the end of the day",
    StiffnessTime.ALL_DAY: "It varies throughout my workday",
}


def parse_clock(value: str | None, default: int) -> int:
    """Parse 'HH:MM' into minutes since midnight."""
    if not value:
        return default
    try:
        hours, minutes = value.strip().split(":")
        total = int(hours) * 60 + int(minutes)
    except (ValueError, AttributeError):
        return default
    if not 0 <= total < 24 * 60:
        return default
    return total


def _choices(enum_cls, label=lambda member: member.display_name):
    return [questionary.Choice(label(member), member) for member in enum_cls]


class ManualInputClient:
    """Interactive questionnaire for collecting the onboarding profile."""

    async def collect_profile(self) -> ProfileSnapshot:
        """Run interactive questionnaire to collect the profile."""
        print("\n=== Desk Habits Questionnaire ===\n")

        goal = await questionary.select(
            "What's your main goal?",
            choices=_choices(UserGoal),
            style=custom_style,
        ).ask_async()

        focus_areas = await questionary.checkbox(
            "Which areas do you want to work on? (Select all that apply)",
            choices=_choices(FocusArea),
            style=custom_style,
        ).ask_async()

        pain_areas = await questionary.checkbox(
            "Where do you feel discomfort?",
            choices=_choices(PainArea),
            style=custom_style,
        ).ask_async()

        posture_issues = await questionary.checkbox(
            "Do any of these posture patterns sound familiar?",
            choices=_choices(PostureIssue),
            style=custom_style,
        ).ask_async()

        stiffness = await questionary.checkbox(
            "When do you feel stiffest?",
            choices=_choices(
                StiffnessTime,
                lambda t: f"{t.display_name} ({STIFFNESS_DESCRIPTIONS[t]})",
            ),
            style=custom_style,
        ).ask_async()

        work_type = await questionary.select(
            "Where do you usually work?",
            choices=_choices(WorkType),
            style=custom_style,
        ).ask_async()

        sedentary = await questionary.select(
            "How long do you sit on a typical workday?",
            choices=_choices(SedentaryHoursBucket, lambda b: b.display_name.capitalize()),
            style=custom_style,
        ).ask_async()

        exercise = await questionary.select(
            "How often do you exercise?",
            choices=[
                questionary.Choice("Rarely", ExerciseFrequency.RARELY),
                questionary.Choice("Once a week", ExerciseFrequency.ONCE_WEEK),
                questionary.Choice("2-3 times a week", ExerciseFrequency.TWO_THREE_WEEK),
                questionary.Choice("4+ times a week", ExerciseFrequency.FOUR_PLUS_WEEK),
                questionary.Choice("Daily", ExerciseFrequency.DAILY),
            ],
            style=custom_style,
        ).ask_async()

        motivation = await questionary.select(
            "How motivated are you feeling?",
            choices=[
                questionary.Choice("Just curious", MotivationLevel.CURIOUS),
                questionary.Choice("Ready to start", MotivationLevel.READY),
                questionary.Choice("Very motivated", MotivationLevel.VERY_MOTIVATED),
            ],
            style=custom_style,
        ).ask_async()

        daily_minutes = await questionary.select(
            "How much time can you give each day?",
            choices=[
                questionary.Choice("3 minutes", 3),
                questionary.Choice("5 minutes", 5),
                questionary.Choice("10 minutes", 10),
                questionary.Choice("15 minutes", 15),
            ],
            style=custom_style,
        ).ask_async()

        work_start = await questionary.text(
            "When does your workday start? (HH:MM)",
            default="09:00",
            style=custom_style,
        ).ask_async()

        work_end = await questionary.text(
            "When does it end? (HH:MM)",
            default="17:00",
            style=custom_style,
        ).ask_async()

        start_minutes = parse_clock(work_start, 540)
        end_minutes = parse_clock(work_end, 1020)
        if end_minutes <= start_minutes:
            start_minutes, end_minutes = 540, 1020

        return ProfileSnapshot(
            goal=goal,
            focus_areas=frozenset(focus_areas or []),
            pain_areas=frozenset(pain_areas or []),
            posture_issues=frozenset(posture_issues or []),
            stiffness_times=stiffness_from_selection(stiffness or []),
            work_type=work_type,
            sedentary_hours_bucket=sedentary,
            exercise_frequency=exercise,
            motivation_level=motivation,
            daily_time_minutes=daily_minutes or 5,
            work_start_minutes=start_minutes,
            work_end_minutes=end_minutes,
        )
