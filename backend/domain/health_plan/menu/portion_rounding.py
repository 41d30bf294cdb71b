"""Portion rounding per unit type."""

import math

GRAM_STEP = 10.0
UNIT_STEP = 0.5


def round_half_up(value: float, step: float) -> float:
    """Round to the nearest multiple of ``step``, halves going up."""
    return math.floor(value / step + 0.5) * step


def round_portion(raw_qty: float, unit: str) -> float:
    """Round a scaled quantity to a usable portion.

    - grams: nearest 10 g, at least 10 g
    - unid./fatia/pote, spoons, plates and every other unit: nearest 0.5,
      at least 0.5

    Example:
        >>> round_portion(134.9, "g")
        130.0
        >>> round_portion(1.74, "unid. (50g)")
        1.5
    """
    if unit.lower() == "g":
        return max(round_half_up(raw_qty, GRAM_STEP), GRAM_STEP)
    return max(round_half_up(raw_qty, UNIT_STEP), UNIT_STEP)
