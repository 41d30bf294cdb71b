"""
Plan result models.

Immutable output of the engine, handed to the presentation layer for
rendering. Serializable with ``model_dump`` / ``model_dump_json``.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .goal import Goal
from .plan_status import PlanStatus


class MealItem(BaseModel):
    """One food portion inside a meal."""

    model_config = ConfigDict(frozen=True)

    food_key: str
    name: str
    unit: str
    quantity: float = Field(..., gt=0)
    calories: float = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fats: float = Field(..., ge=0)

    def display(self) -> str:
        """Human readable portion, e.g. ``"1.5 unid. (50g) de Ovo Cozido"``."""
        return f"{format_quantity(self.quantity)} {self.unit} de {self.name}"


class Meal(BaseModel):
    """
    A timed meal with its portions and subtotals.

    Attributes:
        name: Meal slot name (Café da Manhã, Almoço, Lanche, Jantar)
        time: Display time window
        items: Portions in template order
        options: Display lines for each portion
        macros: Summary line ``~kcal | P: C: G:``
        calories/protein/carbs/fats: Rounded subtotals
        rationale: Fixed one-line explanation of the meal
    """

    model_config = ConfigDict(frozen=True)

    name: str
    time: str
    items: Tuple[MealItem, ...] = ()
    options: Tuple[str, ...] = ()
    macros: str
    calories: int
    protein: int
    carbs: int
    fats: int
    rationale: str
    note: Optional[str] = None


class DietPlan(BaseModel):
    """
    Daily diet with totals computed from the rounded portions.

    ``calorie_drift`` is ``calories - target_calories``; a small drift is
    expected because portions are rounded to usable sizes.
    """

    model_config = ConfigDict(frozen=True)

    calories: int
    protein: int
    carbs: int
    fats: int
    water: float = Field(..., description="Daily water target in liters")
    target_calories: int
    calorie_drift: int
    meals: Tuple[Meal, ...]
    warnings: Tuple[str, ...] = ()
    substitution_conflicts: Tuple[str, ...] = ()


class ExerciseGuide(BaseModel):
    """Technique guide for an exercise."""

    model_config = ConfigDict(frozen=True)

    position: str
    execution: str
    care: str
    common_mistakes: str
    breathing: str


class Exercise(BaseModel):
    """Exercise prescription."""

    model_config = ConfigDict(frozen=True)

    name: str
    sets: str
    reps: str
    note: Optional[str] = None
    guide: Optional[ExerciseGuide] = None


class WorkoutPlan(BaseModel):
    """
    Home workout section.

    ``allowed`` is False for restricted profiles: ``reason`` explains why
    and ``exercises`` is None.
    """

    model_config = ConfigDict(frozen=True)

    allowed: bool
    reason: Optional[str] = None
    type: Optional[str] = None
    frequency: Optional[str] = None
    exercises: Optional[Tuple[Exercise, ...]] = None
    cardio: Optional[str] = None
    focus: Optional[str] = None
    warnings: Tuple[str, ...] = ()


class PlanResult(BaseModel):
    """
    Complete engine output for one profile.

    Energy values are rounded to integers and BMI to one decimal.
    Minors get ``bmi == 0`` and no diet, workout or energy values.
    """

    model_config = ConfigDict(frozen=True)

    status: PlanStatus
    justification: Tuple[str, ...]
    diet: Optional[DietPlan] = None
    workout: Optional[WorkoutPlan] = None
    bmr: Optional[int] = None
    tdee: Optional[int] = None
    target_calories: Optional[int] = None
    goal: Optional[Goal] = None
    bmi: float
    bmi_class: str
    flags: Tuple[str, ...] = ()

    @property
    def approved(self) -> bool:
        return self.status == PlanStatus.APPROVED


def format_quantity(qty: float) -> str:
    """Render 2.0 as "2" and 1.5 as "1.5"."""
    if float(qty).is_integer():
        return str(int(qty))
    return f"{qty:g}"
