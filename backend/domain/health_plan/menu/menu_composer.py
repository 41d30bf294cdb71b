"""MenuComposer - substitution rules, calorie scaling and portion rounding."""

from __future__ import annotations

import logging
from typing import List, Mapping, Sequence, Tuple

from rules.parser import SubstitutionRule, order_rules

from ..core.exceptions.domain_errors import ConfigurationError
from ..core.value_objects.health_flags import HealthFlags
from ..core.value_objects.menu import (
    ComposedMenu,
    FoodItem,
    MenuEntry,
    ScaledEntry,
    SubstitutionConflict,
)
from .portion_rounding import round_portion

logger = logging.getLogger(__name__)


class MenuComposer:
    """Build the daily menu for a calorie target.

    Flow:
    1. Start from the template entries
    2. Apply each enabled substitution rule whose flag is set, by
       ascending priority, producing a new tuple per pass
    3. Scale base quantities by target / base calories
    4. Round portions per unit type
    """

    def __init__(
        self,
        foods: Mapping[str, FoodItem],
        template: Sequence[MenuEntry],
        rules: Sequence[SubstitutionRule],
    ):
        self._foods = foods
        self._template = tuple(template)
        self._rules = order_rules(rules)
        for rule in self._rules:
            for rw in rule.rewrites:
                if rw.to_key not in foods:
                    raise ConfigurationError(
                        f"Rule {rule.id} rewrites to unknown food '{rw.to_key}'"
                    )

    @property
    def rules(self) -> Tuple[SubstitutionRule, ...]:
        return self._rules

    def apply_substitutions(
        self, flags: HealthFlags
    ) -> Tuple[Tuple[MenuEntry, ...], Tuple[SubstitutionConflict, ...]]:
        """Run the substitution passes for the active flags.

        Returns:
            (entries, conflicts): rewritten entries in template order and
            the substitutions that a later rule reverted
        """
        entries = self._template
        conflicts: List[SubstitutionConflict] = []

        for rule in self._rules:
            if not flags.is_set(rule.when):
                continue
            entries, found = _apply_rule(rule, entries)
            conflicts.extend(found)

        for c in conflicts:
            logger.warning(
                "Substitution conflict in %s: rule %s reverted %s (%s -> %s)",
                c.meal,
                c.overriding_rule,
                c.overridden_rule,
                c.from_key,
                c.to_key,
            )
        return entries, tuple(conflicts)

    def base_calories(self, entries: Sequence[MenuEntry]) -> float:
        """Sum of calories at base quantity; unknown foods count as zero."""
        total = 0.0
        for entry in entries:
            food = self._foods.get(entry.food_key)
            if food is not None:
                total += food.calories * entry.base_qty
        return total

    def compose(self, flags: HealthFlags, target_calories: float) -> ComposedMenu:
        """Compose the scaled and rounded menu.

        Args:
            flags: Restriction/condition flags driving substitutions
            target_calories: Daily calorie target

        Returns:
            ComposedMenu with rounded portions

        Raises:
            ConfigurationError: If the menu has no calories to scale from
        """
        entries, conflicts = self.apply_substitutions(flags)

        base_cals = self.base_calories(entries)
        if base_cals <= 0:
            raise ConfigurationError(
                f"Template menu base calories must be positive, got {base_cals}"
            )
        ratio = target_calories / base_cals

        scaled: List[ScaledEntry] = []
        for entry in entries:
            food = self._foods.get(entry.food_key)
            if food is None:
                logger.warning(
                    "Unknown food '%s' in %s dropped from menu",
                    entry.food_key,
                    entry.meal,
                )
                scaled.append(ScaledEntry(entry=entry, food=None, raw_qty=0.0, qty=0.0))
                continue
            raw_qty = entry.base_qty * ratio
            scaled.append(
                ScaledEntry(
                    entry=entry,
                    food=food,
                    raw_qty=raw_qty,
                    qty=round_portion(raw_qty, food.unit),
                )
            )

        return ComposedMenu(
            entries=tuple(scaled),
            base_calories=base_cals,
            ratio=ratio,
            target_calories=target_calories,
            conflicts=conflicts,
        )


def _apply_rule(
    rule: SubstitutionRule, entries: Tuple[MenuEntry, ...]
) -> Tuple[Tuple[MenuEntry, ...], List[SubstitutionConflict]]:
    result: List[MenuEntry] = []
    conflicts: List[SubstitutionConflict] = []
    for entry in entries:
        rw = rule.rewrite_for(entry.food_key)
        if rw is None:
            result.append(entry)
            continue
        reverted = entry.rule_that_replaced(rw.to_key)
        if reverted is not None:
            conflicts.append(
                SubstitutionConflict(
                    meal=entry.meal,
                    overridden_rule=reverted,
                    overriding_rule=rule.id,
                    from_key=entry.food_key,
                    to_key=rw.to_key,
                )
            )
        result.append(entry.rewrite(rw.to_key, rw.qty, rule.id))
    return tuple(result), conflicts
