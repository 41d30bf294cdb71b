"""DietAssembler - group the composed menu into timed meals."""

from typing import Dict, List, Mapping, Sequence, Tuple

from ..core.value_objects.health_flags import HealthFlags
from ..core.value_objects.menu import ComposedMenu, FoodItem, ScaledEntry, SubstitutionConflict
from ..core.value_objects.plan_result import DietPlan, Meal, MealItem
from ..core.value_objects.profile import Profile
from ..menu.portion_rounding import round_half_up
from ..menu.template import MealSlot

WATER_LITERS_PER_KG = 0.035

USDA_DISCLAIMER = (
    "Os valores nutricionais apresentados são estimativas calculadas com base na "
    "base de dados USDA, podendo variar conforme preparo e porção."
)
INFORMATIVE_USE = "O app tem caráter informativo e educacional."
DIABETIC_WARNING = "Atenção rigorosa aos carboidratos."
HYPERTENSIVE_WARNING = "Controle severo de sódio."
HYDRATION_WARNING = "Hidratação constante."


def round_int(value: float) -> int:
    """Round half up to an integer."""
    return int(round_half_up(value, 1))


class DietAssembler:
    """Build the DietPlan from a composed menu.

    Totals come from the rounded portions, so they drift slightly from
    the calorie target; the drift is reported on the plan.
    """

    def __init__(self, meal_slots: Sequence[MealSlot], foods: Mapping[str, FoodItem]):
        self._slots = tuple(meal_slots)
        self._foods = foods

    def build(self, profile: Profile, flags: HealthFlags, menu: ComposedMenu) -> DietPlan:
        groups: Dict[str, List[ScaledEntry]] = {slot.name: [] for slot in self._slots}
        for scaled in menu.entries:
            if scaled.entry.meal in groups:
                groups[scaled.entry.meal].append(scaled)

        meals = tuple(self._meal(slot, groups[slot.name]) for slot in self._slots)

        calories = round_int(menu.calories)
        target = round_int(menu.target_calories)
        conflicts = tuple(self._describe(c) for c in menu.conflicts)

        return DietPlan(
            calories=calories,
            protein=round_int(menu.protein),
            carbs=round_int(menu.carbs),
            fats=round_int(menu.fats),
            water=water_target(profile.weight),
            target_calories=target,
            calorie_drift=calories - target,
            meals=meals,
            warnings=self.warnings(flags) + conflicts,
            substitution_conflicts=conflicts,
        )

    @staticmethod
    def warnings(flags: HealthFlags) -> Tuple[str, ...]:
        lines = [USDA_DISCLAIMER, INFORMATIVE_USE]
        if flags.diabetic:
            lines.append(DIABETIC_WARNING)
        if flags.hypertensive:
            lines.append(HYPERTENSIVE_WARNING)
        lines.append(HYDRATION_WARNING)
        return tuple(lines)

    def _meal(self, slot: MealSlot, entries: List[ScaledEntry]) -> Meal:
        items = tuple(
            MealItem(
                food_key=s.food.key,
                name=s.food.name,
                unit=s.food.unit,
                quantity=s.qty,
                calories=round(s.calories, 1),
                protein=round(s.protein, 1),
                carbs=round(s.carbs, 1),
                fats=round(s.fats, 1),
            )
            for s in entries
            if s.food is not None
        )
        cals = sum(s.calories for s in entries)
        prot = sum(s.protein for s in entries)
        carb = sum(s.carbs for s in entries)
        fat = sum(s.fats for s in entries)

        return Meal(
            name=slot.name,
            time=slot.time,
            items=items,
            options=tuple(i.display() for i in items),
            macros=f"~{round_int(cals)} kcal | P:{round_int(prot)} C:{round_int(carb)} G:{round_int(fat)}",
            calories=round_int(cals),
            protein=round_int(prot),
            carbs=round_int(carb),
            fats=round_int(fat),
            rationale=slot.rationale,
        )

    def _describe(self, conflict: SubstitutionConflict) -> str:
        kept = self._foods.get(conflict.to_key)
        dropped = self._foods.get(conflict.from_key)
        kept_name = kept.name if kept else conflict.to_key
        dropped_name = dropped.name if dropped else conflict.from_key
        return (
            f"{conflict.meal}: {kept_name} mantido no lugar de {dropped_name} "
            f"(regra '{conflict.overriding_rule}' prevalece sobre '{conflict.overridden_rule}')."
        )


def water_target(weight: float) -> float:
    """Daily water in liters, one decimal."""
    return round_half_up(weight * WATER_LITERS_PER_KG * 10, 1) / 10
