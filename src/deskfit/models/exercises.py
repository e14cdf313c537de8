"""Exercise models for the static desk exercise catalog."""

from dataclasses import dataclass, field
from enum import Enum


class ExerciseDifficulty(str, Enum):
    """Exercise difficulty."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


@dataclass(frozen=True)
class Exercise:
    """A single desk-friendly movement."""

    id: str
    name: str
    description: str
    cue: str
    duration_seconds: int
    focus_areas: tuple[str, ...]
    difficulty: ExerciseDifficulty = ExerciseDifficulty.EASY
    contraindication: str = ""
    issue_tags: tuple[str, ...] = field(default_factory=tuple)
    intent_tags: tuple[str, ...] = field(default_factory=tuple)
    context_tags: tuple[str, ...] = field(default_factory=tuple)
    equipment: str = "none"

    @property
    def is_desk_friendly(self) -> bool:
        """Whether this can be done at or near a desk."""
        if "desk" in self.context_tags or "microbreak" in self.context_tags:
            return True
        return self.equipment in ("none", "chair", "desk")

    def targets_any(self, focus_areas) -> bool:
        return not set(self.focus_areas).isdisjoint(focus_areas)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "cue": self.cue,
            "duration_seconds": self.duration_seconds,
            "focus_areas": list(self.focus_areas),
            "difficulty": self.difficulty.value,
            "contraindication": self.contraindication,
            "issue_tags": list(self.issue_tags),
            "intent_tags": list(self.intent_tags),
            "context_tags": list(self.context_tags),
            "equipment": self.equipment,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary. Raises KeyError/ValueError on bad records."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data["description"],
            cue=data.get("cue", ""),
            duration_seconds=int(data["duration_seconds"]),
            focus_areas=tuple(data.get("focus_areas", [])),
            difficulty=ExerciseDifficulty(data.get("difficulty", "easy")),
            contraindication=data.get("contraindication", ""),
            issue_tags=tuple(data.get("issue_tags") or []),
            intent_tags=tuple(data.get("intent_tags") or []),
            context_tags=tuple(data.get("context_tags") or []),
            equipment=data.get("equipment") or "none",
        )
