"""Profile value object - questionnaire answers submitted by the form."""

import math
from dataclasses import dataclass
from typing import Any, Mapping

from ..exceptions.domain_errors import InvalidProfileError
from .activity_level import ActivityLevel
from .gender import Gender
from .goal import Goal


@dataclass(frozen=True)
class Profile:
    """User biometric and lifestyle data consumed once by the engine.

    Immutable value object. Enum fields accept their string values
    ("female", "sedentary", ...) and are coerced on construction.

    Attributes:
        age: Age in years (>= 0; minors are rejected by the eligibility gate)
        gender: Biological sex
        weight: Body weight in kilograms (> 0)
        height: Height in centimeters (> 0)
        activity_level: Physical activity level
        goal: Weight goal
        restrictions: Free text with allergies and dietary restrictions
        conditions: Free text with health conditions
    """

    age: int
    gender: Gender
    weight: float
    height: float
    activity_level: ActivityLevel
    goal: Goal
    restrictions: str = ""
    conditions: str = ""

    def __post_init__(self) -> None:
        """Validate and coerce fields.

        Raises:
            InvalidProfileError: If any field is outside its domain
        """
        object.__setattr__(self, "gender", _coerce(Gender, self.gender, "gender"))
        object.__setattr__(
            self,
            "activity_level",
            _coerce(ActivityLevel, self.activity_level, "activity_level"),
        )
        object.__setattr__(self, "goal", _coerce(Goal, self.goal, "goal"))

        if isinstance(self.age, bool) or not isinstance(self.age, int):
            raise InvalidProfileError(f"Age must be an integer, got {self.age!r}")
        if self.age < 0:
            raise InvalidProfileError(f"Age must be >= 0, got {self.age}")

        for name in ("weight", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidProfileError(f"{name.capitalize()} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise InvalidProfileError(f"{name.capitalize()} must be positive, got {value}")

        if self.restrictions is None:
            object.__setattr__(self, "restrictions", "")
        if self.conditions is None:
            object.__setattr__(self, "conditions", "")

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "Profile":
        """Build a Profile from raw form values.

        Numeric fields may arrive as strings; both snake_case and the
        form's camelCase ``activityLevel`` key are accepted.

        Raises:
            InvalidProfileError: If a field is missing or cannot be coerced
        """
        try:
            activity = data.get("activity_level", data.get("activityLevel"))
            return cls(
                age=int(float(data["age"])),
                gender=data["gender"],
                weight=float(data["weight"]),
                height=float(data["height"]),
                activity_level=activity,
                goal=data["goal"],
                restrictions=str(data.get("restrictions") or ""),
                conditions=str(data.get("conditions") or ""),
            )
        except KeyError as e:
            raise InvalidProfileError(f"Missing profile field: {e.args[0]}") from e
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidProfileError(f"Invalid profile value: {e}") from e


def _coerce(enum_cls, value, field_name):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidProfileError(
            f"{field_name} must be one of: {allowed}; got {value!r}"
        ) from e
