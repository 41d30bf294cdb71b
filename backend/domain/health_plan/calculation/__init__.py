"""Calculation services for the health plan."""

from .bmi_service import BMIService
from .bmr_service import BMRService
from .energy_target_service import EnergyTargetService
from .tdee_service import TDEEService

__all__ = [
    "BMIService",
    "BMRService",
    "TDEEService",
    "EnergyTargetService",
]
