"""Calculator ports - interfaces for BMI/BMR/TDEE calculations."""

from abc import ABC, abstractmethod

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmi import BMI
from ..value_objects.energy import BMR, TDEE
from ..value_objects.profile import Profile


class IBMICalculator(ABC):
    """Port for Body Mass Index calculation."""

    @abstractmethod
    def calculate(self, weight: float, height: float) -> BMI:
        """Calculate BMI.

        Args:
            weight: Body weight in kg
            height: Height in cm

        Returns:
            BMI: Body mass index
        """
        pass


class IBMRCalculator(ABC):
    """Port for BMR calculation.

    Calculates Basal Metabolic Rate using Mifflin-St Jeor formula.
    """

    @abstractmethod
    def calculate(self, profile: Profile) -> BMR:
        """Calculate BMR from profile biometrics.

        Args:
            profile: User questionnaire data

        Returns:
            BMR: Calculated basal metabolic rate
        """
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation.

    Calculates Total Daily Energy Expenditure from BMR and activity.
    """

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: ActivityLevel) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Args:
            bmr: Basal metabolic rate
            activity_level: Physical activity level

        Returns:
            TDEE: Total daily energy expenditure
        """
        pass
