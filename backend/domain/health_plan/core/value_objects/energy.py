"""Energy value objects - BMR, TDEE and the daily calorie target."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the calories needed for basic bodily functions at rest.
    Not validated: the formula is total over finite inputs and range
    checks belong to the form.
    """

    value: float

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"


@dataclass(frozen=True)
class TDEE:
    """Total Daily Energy Expenditure in kcal/day.

    Calculated as: TDEE = BMR × PAL (Physical Activity Level)
    """

    value: float

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"


@dataclass(frozen=True)
class EnergyTarget:
    """Resolved energy numbers for a profile.

    Attributes:
        bmr: Basal metabolic rate
        tdee: Total daily energy expenditure
        target_calories: Daily intake prescribed after goal adjustment,
            gender floor and safety override
        floor_applied: True when the weight loss floor raised the target
        safety_override: True when an at-risk profile was pinned to TDEE
    """

    bmr: BMR
    tdee: TDEE
    target_calories: float
    floor_applied: bool = False
    safety_override: bool = False
