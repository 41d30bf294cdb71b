"""Safety screening: eligibility gate and health risk classifier."""

from .eligibility_service import MINIMUM_AGE, EligibilityService
from .health_risk_classifier import ELDERLY_AGE, HealthRiskClassifier, normalize_text

__all__ = [
    "MINIMUM_AGE",
    "ELDERLY_AGE",
    "EligibilityService",
    "HealthRiskClassifier",
    "normalize_text",
]
