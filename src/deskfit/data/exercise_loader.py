"""Exercise catalog loader from JSON."""

import json
from functools import lru_cache
from pathlib import Path

import structlog

from ..models.exercises import Exercise

logger = structlog.get_logger()


def get_exercises_json_path() -> Path:
    """Get the path to the packaged exercises JSON file."""
    return Path(__file__).parent / "exercises.json"


def parse_exercises(data: dict) -> list[Exercise]:
    """Build exercises from a decoded catalog document.

    Invalid records are skipped and logged.
    """
    records = data.get("exercises", []) if isinstance(data, dict) else None
    if not isinstance(records, list):
        logger.warning("Exercise catalog is not an object with an exercises list")
        return []

    exercises = []
    seen_ids = set()
    for ex_data in records:
        try:
            exercise = Exercise.from_dict(ex_data)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning(
                "Skipping invalid exercise",
                exercise_id=ex_data.get("id", "unknown") if isinstance(ex_data, dict) else None,
                error=str(e),
            )
            continue
        if exercise.id in seen_ids:
            logger.warning("Skipping duplicate exercise", exercise_id=exercise.id)
            continue
        seen_ids.add(exercise.id)
        exercises.append(exercise)
    return exercises


def load_exercises_from(json_path: Path) -> list[Exercise]:
    """Load exercises from a catalog file. A missing or corrupt file yields []."""
    try:
        with open(json_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Failed to load exercise catalog", path=str(json_path), error=str(e))
        return []
    return parse_exercises(data)


@lru_cache(maxsize=1)
def load_exercises() -> tuple[Exercise, ...]:
    """Load the packaged catalog once per process."""
    return tuple(load_exercises_from(get_exercises_json_path()))


class ExerciseCatalog:
    """Read-only lookups over the exercise list, in catalog order."""

    def __init__(self, exercises=None):
        self._exercises = tuple(exercises) if exercises is not None else load_exercises()
        self._by_id = {exercise.id: exercise for exercise in self._exercises}

    def __len__(self) -> int:
        return len(self._exercises)

    def all(self) -> list[Exercise]:
        return list(self._exercises)

    def get(self, exercise_id: str) -> Exercise | None:
        return self._by_id.get(exercise_id)

    def by_ids(self, ids) -> list[Exercise]:
        """Exercises for the given ids in the given order. Unknown ids are skipped."""
        return [self._by_id[i] for i in ids if i in self._by_id]

    def for_focus_areas(self, focus_areas) -> list[Exercise]:
        """Exercises targeting at least one of the focus areas."""
        wanted = {getattr(area, "value", area) for area in focus_areas}
        return [exercise for exercise in self._exercises if exercise.targets_any(wanted)]

    def for_duration(self, target_seconds: int, focus_areas) -> list[Exercise]:
        """Greedily fill target_seconds with matching exercises.

        Walks the matching exercises in catalog order, taking each one that
        still fits, and stops once within 10 seconds of the target.
        """
        selected = []
        total = 0
        for exercise in self.for_focus_areas(focus_areas):
            if total + exercise.duration_seconds <= target_seconds:
                selected.append(exercise)
                total += exercise.duration_seconds
            if total >= target_seconds - 10:
                break
        return selected
