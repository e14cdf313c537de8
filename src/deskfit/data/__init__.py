"""Static reference data for deskfit."""

from .exercise_loader import ExerciseCatalog, load_exercises

__all__ = ["ExerciseCatalog", "load_exercises"]
