"""Plan assembly: meals, totals and warnings."""

from .diet_assembler import DietAssembler, water_target

__all__ = [
    "DietAssembler",
    "water_target",
]
