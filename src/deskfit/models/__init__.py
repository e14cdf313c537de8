"""Data models for deskfit."""

from .exercises import Exercise, ExerciseDifficulty
from .insight import DailyInsight, InsightCategory, PlanInfo
from .plan import DailyPlan, PlannedSession, SessionType
from .profile import (
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
    toggle_stiffness_time,
)
from .progress import (
    DailyScoreEntry,
    ProgressSummary,
    ProgressTrend,
    ProgressWin,
    ScoreDisplayCategory,
)
from .report import AnalysisReport, AnalysisScore, InsightCard, ScoreCategory, Severity

__all__ = [
    "AnalysisReport",
    "AnalysisScore",
    "DailyInsight",
    "DailyPlan",
    "DailyScoreEntry",
    "Exercise",
    "ExerciseDifficulty",
    "ExerciseFrequency",
    "FocusArea",
    "InsightCard",
    "InsightCategory",
    "MotivationLevel",
    "PainArea",
    "PlanInfo",
    "PlannedSession",
    "PostureIssue",
    "ProfileSnapshot",
    "ProgressSummary",
    "ProgressTrend",
    "ProgressWin",
    "ScoreCategory",
    "ScoreDisplayCategory",
    "SedentaryHoursBucket",
    "SessionType",
    "Severity",
    "StiffnessTime",
    "UserGoal",
    "WorkType",
    "stiffness_from_selection",
    "toggle_stiffness_time",
]
