"""Domain exceptions for the health plan engine."""


class HealthPlanDomainError(Exception):
    """Base exception for health plan domain errors."""

    pass


class InvalidProfileError(HealthPlanDomainError):
    """Raised when profile data falls outside its declared domain."""

    pass


class ConfigurationError(HealthPlanDomainError):
    """Raised when static tables or rule files are inconsistent.

    Examples: a template menu whose base calories sum to zero, a
    substitution rule pointing at an unknown food, duplicate rule ids.
    """

    pass
