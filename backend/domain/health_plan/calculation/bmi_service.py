"""BMIService - Body Mass Index calculation."""

from ..core.ports.calculators import IBMICalculator
from ..core.value_objects.bmi import BMI


class BMIService(IBMICalculator):
    """Calculate BMI = weight (kg) / (height (m))^2."""

    def calculate(self, weight: float, height: float) -> BMI:
        height_m = height / 100
        return BMI(value=weight / (height_m * height_m))
