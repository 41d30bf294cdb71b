"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.energy import BMR
from ..core.value_objects.gender import Gender
from ..core.value_objects.profile import Profile


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, profile: Profile) -> BMR:
        """Calculate BMR from profile biometrics.

        Args:
            profile: Questionnaire data (weight, height, age, gender)

        Returns:
            BMR: Calculated basal metabolic rate in kcal/day

        Example:
            >>> profile = Profile(
            ...     age=30, gender=Gender.FEMALE, weight=70.0, height=165.0,
            ...     activity_level=ActivityLevel.SEDENTARY, goal=Goal.LOSE,
            ... )
            >>> BMRService().calculate(profile).value
            1420.25
        """
        base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age

        if profile.gender == Gender.MALE:
            bmr_value = base + 5
        else:
            bmr_value = base - 161

        return BMR(value=bmr_value)
