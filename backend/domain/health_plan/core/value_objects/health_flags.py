"""HealthFlags value object - risk and restriction flags for a profile."""

from dataclasses import dataclass, fields
from typing import Tuple


@dataclass(frozen=True)
class HealthFlags:
    """Flags detected from the questionnaire.

    Flags are independent: any combination may be true at once and each
    one drives its own substitutions and warnings downstream.

    Attributes:
        heart_condition: Cardiac keyword found in conditions
        elderly: Age above 70
        diabetic: Diabetes/glucose keyword found in conditions
        hypertensive: Hypertension keyword found in conditions
        lactose_intolerant: Lactose/milk keyword found in restrictions
        gluten_intolerant: Gluten/wheat keyword found in restrictions
        vegetarian: Meat/vegetarian/vegan keyword found in restrictions
    """

    heart_condition: bool = False
    elderly: bool = False
    diabetic: bool = False
    hypertensive: bool = False
    lactose_intolerant: bool = False
    gluten_intolerant: bool = False
    vegetarian: bool = False

    @property
    def at_risk(self) -> bool:
        """Whether the profile must not receive a deficit or surplus."""
        return self.heart_condition or self.elderly

    def active(self) -> Tuple[str, ...]:
        """Names of the flags that are set, in declaration order."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name))

    def is_set(self, name: str) -> bool:
        """Look a flag up by name.

        Raises:
            KeyError: If ``name`` is not a known flag
        """
        if name not in FLAG_NAMES:
            raise KeyError(name)
        return bool(getattr(self, name))


FLAG_NAMES = frozenset(f.name for f in fields(HealthFlags))
