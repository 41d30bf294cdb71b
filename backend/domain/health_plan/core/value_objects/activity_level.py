"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from types import MappingProxyType


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) selected in the questionnaire.

    - SEDENTARY: Little or no exercise
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - ATHLETE: Very hard exercise or physical job
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    ATHLETE = "athlete"

    def pal_multiplier(self) -> float:
        """Get PAL multiplier applied to BMR.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return ACTIVITY_MULTIPLIERS[self]


ACTIVITY_MULTIPLIERS = MappingProxyType({
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.ATHLETE: 1.9,
})
