"""Ports for the health plan domain."""

from .calculators import IBMICalculator, IBMRCalculator, ITDEECalculator

__all__ = [
    "IBMICalculator",
    "IBMRCalculator",
    "ITDEECalculator",
]
