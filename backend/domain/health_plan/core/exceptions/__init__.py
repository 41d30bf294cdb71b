"""Domain exceptions for the health plan engine."""

from .domain_errors import (
    ConfigurationError,
    HealthPlanDomainError,
    InvalidProfileError,
)

__all__ = [
    "HealthPlanDomainError",
    "InvalidProfileError",
    "ConfigurationError",
]
