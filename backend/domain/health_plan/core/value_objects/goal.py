"""Goal value object - user's body composition objective."""

from enum import Enum


class Goal(str, Enum):
    """User's goal determining the calorie adjustment over TDEE.

    - LOSE: Weight loss with calorie deficit (-500 kcal/day)
    - MAINTAIN: Weight maintenance at TDEE
    - GAIN: Weight gain with calorie surplus (+300 kcal/day)
    """

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"

    def calorie_adjustment(self, tdee: float) -> float:
        """Apply goal adjustment to TDEE (floors are applied elsewhere).

        Example:
            >>> Goal.LOSE.calorie_adjustment(2500.0)
            2000.0
        """
        adjustments = {
            Goal.LOSE: -500,
            Goal.MAINTAIN: 0,
            Goal.GAIN: +300,
        }
        return tdee + adjustments[self]
