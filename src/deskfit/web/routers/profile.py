"""Profile and analysis report routes."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, model_validator

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
from ...services.container import DeskFitServices
from ..dependencies import get_services, require_profile

router = APIRouter(prefix="/profile", tags=["profile"])


class ProfileIn(BaseModel):
    """Onboarding answers. Unknown enum values are rejected with 422."""

    goal: UserGoal | None = None
    focus_areas: list[FocusArea] = Field(default_factory=list)
    pain_areas: list[PainArea] = Field(default_factory=list)
    posture_issues: list[PostureIssue] = Field(default_factory=list)
    stiffness_times: list[StiffnessTime] = Field(default_factory=list)
    work_type: WorkType | None = None
    sedentary_hours_bucket: SedentaryHoursBucket | None = None
    exercise_frequency: ExerciseFrequency | None = None
    motivation_level: MotivationLevel | None = None
    daily_time_minutes: int = Field(5, ge=1, le=120)
    work_start_minutes: int = Field(540, ge=0, lt=24 * 60)
    work_end_minutes: int = Field(1020, ge=0, le=24 * 60)

    @model_validator(mode="after")
    def check_work_hours(self) -> "ProfileIn":
        if self.work_end_minutes <= self.work_start_minutes:
            raise ValueError("work_end_minutes must be after work_start_minutes")
        return self

    def to_snapshot(self) -> ProfileSnapshot:
        return ProfileSnapshot(
            goal=self.goal,
            focus_areas=frozenset(self.focus_areas),
            pain_areas=frozenset(self.pain_areas),
            posture_issues=frozenset(self.posture_issues),
            stiffness_times=stiffness_from_selection(self.stiffness_times),
            work_type=self.work_type,
            sedentary_hours_bucket=self.sedentary_hours_bucket,
            exercise_frequency=self.exercise_frequency,
            motivation_level=self.motivation_level,
            daily_time_minutes=self.daily_time_minutes,
            work_start_minutes=self.work_start_minutes,
            work_end_minutes=self.work_end_minutes,
        )


@router.get("")
def get_profile(services: DeskFitServices = Depends(get_services)):
    """Get the saved profile."""
    return require_profile(services).to_dict()


@router.put("")
def save_profile(body: ProfileIn, services: DeskFitServices = Depends(get_services)):
    """Save or replace the profile."""
    snapshot = body.to_snapshot()
    services.save_profile(snapshot)
    return snapshot.to_dict()


@router.get("/report")
def get_report(refresh: bool = False, services: DeskFitServices = Depends(get_services)):
    """Analysis report for the saved profile, cached until the profile changes."""
    snapshot = require_profile(services)
    return services.reports.get_or_generate(snapshot, force=refresh).to_dict()
