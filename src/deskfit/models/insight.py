"""Daily insight models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class InsightCategory(str, Enum):
    """Category of a daily insight."""

    PAIN_SPECIFIC = "pain_specific"
    SEDENTARY_RISK = "sedentary_risk"
    STIFFNESS_TIMING = "stiffness_timing"
    PROGRESS_TIP = "progress_tip"
    PLAN_TIP = "plan_tip"
    MOTIVATIONAL = "motivational"
    RECOVERY = "recovery"
    WORK_ENVIRONMENT = "work_environment"

    @property
    def display_name(self) -> str:
        return {
            InsightCategory.PAIN_SPECIFIC: "Pain Relief",
            InsightCategory.SEDENTARY_RISK: "Movement",
            InsightCategory.STIFFNESS_TIMING: "Timing",
            InsightCategory.PROGRESS_TIP: "Progress",
            InsightCategory.PLAN_TIP: "Today's Focus",
            InsightCategory.MOTIVATIONAL: "Motivation",
            InsightCategory.RECOVERY: "Recovery",
            InsightCategory.WORK_ENVIRONMENT: "Work Wellness",
        }[self]


@dataclass
class DailyInsight:
    """A short personalized message shown on the home screen."""

    category: InsightCategory
    title: str
    body: str
    generated_at: datetime
    badge: str | None = None
    cta_text: str | None = None
    debug_tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "category": self.category.value,
            "title": self.title,
            "body": self.body,
            "badge": self.badge,
            "cta_text": self.cta_text,
            "debug_tags": list(self.debug_tags),
            "generated_at": self.generated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DailyInsight":
        """Create from dictionary."""
        return cls(
            category=InsightCategory(data["category"]),
            title=data["title"],
            body=data["body"],
            badge=data.get("badge"),
            cta_text=data.get("cta_text"),
            debug_tags=list(data.get("debug_tags", [])),
            generated_at=datetime.fromisoformat(data["generated_at"]),
        )


@dataclass(frozen=True)
class PlanInfo:
    """What today's plan looks like, used by plan tips."""

    session_count: int = 3
