"""Value objects for the health plan domain."""

from .activity_level import ActivityLevel
from .bmi import BMI
from .energy import BMR, TDEE, EnergyTarget
from .gender import Gender
from .goal import Goal
from .health_flags import HealthFlags
from .menu import (
    ComposedMenu,
    FoodItem,
    MenuEntry,
    ScaledEntry,
    SubstitutionConflict,
)
from .plan_result import (
    DietPlan,
    Exercise,
    ExerciseGuide,
    Meal,
    MealItem,
    PlanResult,
    WorkoutPlan,
)
from .plan_status import PlanStatus
from .profile import Profile

__all__ = [
    "ActivityLevel",
    "Gender",
    "Goal",
    "Profile",
    "BMI",
    "BMR",
    "TDEE",
    "EnergyTarget",
    "HealthFlags",
    "PlanStatus",
    "FoodItem",
    "MenuEntry",
    "ScaledEntry",
    "SubstitutionConflict",
    "ComposedMenu",
    "MealItem",
    "Meal",
    "DietPlan",
    "ExerciseGuide",
    "Exercise",
    "WorkoutPlan",
    "PlanResult",
]
