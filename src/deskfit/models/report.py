"""Posture-risk analysis report models."""

from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    """How strongly an insight card applies."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def sort_rank(self) -> int:
        """0 sorts first."""
        return {Severity.HIGH: 0, Severity.MEDIUM: 1, Severity.LOW: 2}[self]


class ScoreCategory(str, Enum):
    """Risk band for an analysis score."""

    LOW = "low"
    MODERATE = "moderate"
    ELEVATED = "elevated"

    @classmethod
    def from_score(cls, value: int) -> "ScoreCategory":
        if value <= 33:
            return cls.LOW
        if value <= 66:
            return cls.MODERATE
        return cls.ELEVATED

    @property
    def display_name(self) -> str:
        return {
            ScoreCategory.LOW: "Low",
            ScoreCategory.MODERATE: "Moderate",
            ScoreCategory.ELEVATED: "Elevated",
        }[self]


@dataclass(frozen=True)
class AnalysisScore:
    """Posture/stiffness load score, 0-100. Higher means more risk factors."""

    value: int

    def __post_init__(self):
        object.__setattr__(self, "value", max(0, min(100, self.value)))

    @property
    def category(self) -> ScoreCategory:
        return ScoreCategory.from_score(self.value)

    def to_dict(self) -> dict:
        return {"value": self.value, "category": self.category.value}


@dataclass
class InsightCard:
    """One explanatory card in the analysis report."""

    title: str
    body: str
    severity: Severity
    action_label: str | None = None
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "body": self.body,
            "severity": self.severity.value,
            "action_label": self.action_label,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "InsightCard":
        return cls(
            title=data["title"],
            body=data["body"],
            severity=Severity(data["severity"]),
            action_label=data.get("action_label"),
            tags=list(data.get("tags", [])),
        )


DEFAULT_DISCLAIMERS = (
    "This assessment is based on your self-reported answers and is not a medical diagnosis.",
    "Consult a healthcare professional if you experience persistent pain or discomfort.",
    "Results are meant to guide your movement routine, not replace professional advice.",
)


@dataclass
class AnalysisReport:
    """Full report generated from an onboarding profile.

    Holds no timestamps or ids, so the same profile always serializes to the
    same document.
    """

    summary_headline: str
    summary_body: str
    score: AnalysisScore
    insights: list[InsightCard] = field(default_factory=list)
    risk_factors: list[str] = field(default_factory=list)
    focus_areas: list[str] = field(default_factory=list)
    recommended_priorities: list[str] = field(default_factory=list)
    weekly_actions: list[str] = field(default_factory=list)
    disclaimers: list[str] = field(default_factory=lambda: list(DEFAULT_DISCLAIMERS))

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "summary_headline": self.summary_headline,
            "summary_body": self.summary_body,
            "score": self.score.to_dict(),
            "insights": [card.to_dict() for card in self.insights],
            "risk_factors": list(self.risk_factors),
            "focus_areas": list(self.focus_areas),
            "recommended_priorities": list(self.recommended_priorities),
            "weekly_actions": list(self.weekly_actions),
            "disclaimers": list(self.disclaimers),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisReport":
        """Create from dictionary."""
        return cls(
            summary_headline=data["summary_headline"],
            summary_body=data["summary_body"],
            score=AnalysisScore(value=data["score"]["value"]),
            insights=[InsightCard.from_dict(c) for c in data.get("insights", [])],
            risk_factors=list(data.get("risk_factors", [])),
            focus_areas=list(data.get("focus_areas", [])),
            recommended_priorities=list(data.get("recommended_priorities", [])),
            weekly_actions=list(data.get("weekly_actions", [])),
            disclaimers=list(data.get("disclaimers", DEFAULT_DISCLAIMERS)),
        )
