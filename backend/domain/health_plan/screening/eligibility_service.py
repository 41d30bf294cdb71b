"""EligibilityService - hard stop for minors."""

from ..core.value_objects.profile import Profile

MINIMUM_AGE = 18


class EligibilityService:
    """Reject profiles under the minimum age before anything is computed."""

    def __init__(self, minimum_age: int = MINIMUM_AGE):
        self._minimum_age = minimum_age

    def is_eligible(self, profile: Profile) -> bool:
        return profile.age >= self._minimum_age
