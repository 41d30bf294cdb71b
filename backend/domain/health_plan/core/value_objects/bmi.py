"""BMI value object - Body Mass Index and its classification."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

# Upper bounds are exclusive; anything at or above the last bound is grade III.
BMI_CLASSES = (
    (18.5, "Abaixo do peso"),
    (24.9, "Peso adequado"),
    (29.9, "Sobrepeso"),
    (34.9, "Obesidade grau I"),
    (39.9, "Obesidade grau II"),
)
BMI_TOP_CLASS = "Obesidade grau III"


@dataclass(frozen=True)
class BMI:
    """Body Mass Index = weight (kg) / (height (m))^2.

    Example:
        >>> BMI(value=25.7).classification()
        'Sobrepeso'
    """

    value: float

    def classification(self) -> str:
        """Get the Portuguese BMI class label."""
        for upper_bound, label in BMI_CLASSES:
            if self.value < upper_bound:
                return label
        return BMI_TOP_CLASS

    def rounded(self) -> float:
        """BMI rounded to one decimal for display, halves going up.

        Works on the exact binary value, so 22.25 gives 22.3 while a value
        stored just below x.x5 rounds down.
        """
        return float(Decimal(self.value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
