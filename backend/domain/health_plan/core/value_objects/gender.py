"""Gender value object."""

from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the Mifflin-St Jeor equation and calorie floors."""

    MALE = "male"
    FEMALE = "female"

    def minimum_calories(self) -> float:
        """Lowest daily target prescribed for a weight loss goal.

        Example:
            >>> Gender.FEMALE.minimum_calories()
            1200.0
        """
        return 1500.0 if self is Gender.MALE else 1200.0
