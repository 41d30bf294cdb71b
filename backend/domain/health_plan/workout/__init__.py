"""Home workout plan."""

from .exercise_guide import EXERCISE_GUIDE
from .workout_builder import WorkoutBuilder

__all__ = [
    "EXERCISE_GUIDE",
    "WorkoutBuilder",
]
