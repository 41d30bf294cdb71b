"""Menu value objects - foods, template entries and scaled portions."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class FoodItem:
    """Reference food with nutrients per unit.

    For gram-based foods (unit ``"g"``) the nutrient values are per gram;
    for every other unit they are per piece, slice, spoon, etc.

    Attributes:
        key: Identifier used by the menu template and substitution rules
        name: Display name
        unit: Unit label, e.g. "g", "unid. (50g)", "col. sopa (15g)"
        calories: kcal per unit
        protein: Protein grams per unit
        carbs: Carbohydrate grams per unit
        fats: Fat grams per unit
        default_portion: Typical portion in units
    """

    key: str
    name: str
    unit: str
    calories: float
    protein: float
    carbs: float
    fats: float
    default_portion: float

    @property
    def is_gram_based(self) -> bool:
        return self.unit.lower() == "g"


@dataclass(frozen=True)
class MenuEntry:
    """One (meal slot, food, base quantity) line of the menu.

    Attributes:
        meal: Meal slot name
        food_key: Key into the food table
        base_qty: Quantity before calorie scaling
        applied_rules: Ids of the substitution rules that rewrote this entry
        replaced_keys: Food keys this entry held before each rewrite,
            aligned with ``applied_rules``
    """

    meal: str
    food_key: str
    base_qty: float
    applied_rules: Tuple[str, ...] = ()
    replaced_keys: Tuple[str, ...] = ()

    def rewrite(self, food_key: str, base_qty: float, rule_id: str) -> "MenuEntry":
        """Return a new entry pointing at another food."""
        return MenuEntry(
            meal=self.meal,
            food_key=food_key,
            base_qty=base_qty,
            applied_rules=self.applied_rules + (rule_id,),
            replaced_keys=self.replaced_keys + (self.food_key,),
        )

    def rule_that_replaced(self, food_key: str) -> Optional[str]:
        """Id of the rule that substituted ``food_key`` away, if any."""
        for rule_id, key in zip(self.applied_rules, self.replaced_keys):
            if key == food_key:
                return rule_id
        return None


@dataclass(frozen=True)
class SubstitutionConflict:
    """A later rule reverted a substitution made by an earlier rule.

    Attributes:
        meal: Meal slot of the entry
        overridden_rule: Rule whose substitution was undone
        overriding_rule: Rule that rewrote the entry again
        from_key: Food key replaced by the overriding rule
        to_key: Food key restored by the overriding rule
    """

    meal: str
    overridden_rule: str
    overriding_rule: str
    from_key: str
    to_key: str


@dataclass(frozen=True)
class ScaledEntry:
    """A menu entry after scaling and rounding.

    ``food`` is None when the key did not resolve; such entries carry a
    zero quantity and contribute nothing to the totals.
    """

    entry: MenuEntry
    food: Optional[FoodItem]
    raw_qty: float
    qty: float

    @property
    def calories(self) -> float:
        return self.food.calories * self.qty if self.food else 0.0

    @property
    def protein(self) -> float:
        return self.food.protein * self.qty if self.food else 0.0

    @property
    def carbs(self) -> float:
        return self.food.carbs * self.qty if self.food else 0.0

    @property
    def fats(self) -> float:
        return self.food.fats * self.qty if self.food else 0.0


@dataclass(frozen=True)
class ComposedMenu:
    """Output of the menu composer.

    Attributes:
        entries: Scaled entries in template order (unresolved ones included)
        base_calories: Calories of the substituted menu before scaling
        ratio: target_calories / base_calories
        target_calories: Calorie target used for scaling
        conflicts: Substitution conflicts detected along the way
    """

    entries: Tuple[ScaledEntry, ...]
    base_calories: float
    ratio: float
    target_calories: float
    conflicts: Tuple[SubstitutionConflict, ...] = ()

    @property
    def calories(self) -> float:
        return sum(e.calories for e in self.entries)

    @property
    def protein(self) -> float:
        return sum(e.protein for e in self.entries)

    @property
    def carbs(self) -> float:
        return sum(e.carbs for e in self.entries)

    @property
    def fats(self) -> float:
        return sum(e.fats for e in self.entries)
