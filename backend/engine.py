"""Health plan engine entrypoint.

The form collects a Profile, calls ``compute_plan`` once and renders the
returned PlanResult. Nothing is persisted.

Example:
    >>> from engine import Profile, compute_plan
    >>> result = compute_plan(Profile(
    ...     age=30, gender="female", weight=70, height=165,
    ...     activity_level="sedentary", goal="lose",
    ... ))
    >>> result.status.value
    'approved'
"""

from typing import Any, Mapping

from domain.health_plan.core.exceptions import (
    ConfigurationError,
    HealthPlanDomainError,
    InvalidProfileError,
)
from domain.health_plan.core.value_objects import PlanResult, PlanStatus, Profile
from infrastructure.health_plan.factory import get_plan_orchestrator


def compute_plan(profile: Profile) -> PlanResult:
    """Run the full pipeline for a profile with the default tables."""
    return get_plan_orchestrator().compute_plan(profile)


def compute_plan_from_form(data: Mapping[str, Any]) -> PlanResult:
    """Coerce raw form values into a Profile and compute its plan.

    Raises:
        InvalidProfileError: If the form values are missing or malformed
    """
    return compute_plan(Profile.from_form(data))


__all__ = [
    "compute_plan",
    "compute_plan_from_form",
    "Profile",
    "PlanResult",
    "PlanStatus",
    "HealthPlanDomainError",
    "InvalidProfileError",
    "ConfigurationError",
]
