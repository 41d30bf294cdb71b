"""HealthRiskClassifier - keyword table over the free-text fields."""

from __future__ import annotations

import logging
import unicodedata
from typing import Dict, Sequence, Tuple

from rules.parser import KeywordCategory

from ..core.value_objects.health_flags import HealthFlags
from ..core.value_objects.plan_status import PlanStatus
from ..core.value_objects.profile import Profile

logger = logging.getLogger(__name__)

ELDERLY_AGE = 70


def normalize_text(text: str) -> str:
    """Lowercase and strip accents so "Coração" matches "coracao"."""
    decomposed = unicodedata.normalize("NFD", text or "")
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


class HealthRiskClassifier:
    """Detect risk and restriction flags from the questionnaire.

    Each keyword category maps one flag to trigger phrases searched as
    substrings of one profile field. Flags are independent; ``elderly``
    comes from age alone (strictly above 70).
    """

    def __init__(
        self,
        categories: Sequence[KeywordCategory],
        elderly_age: int = ELDERLY_AGE,
    ):
        self._elderly_age = elderly_age
        self._table: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = tuple(
            (c.flag, c.field, tuple(normalize_text(k) for k in c.keywords))
            for c in categories
        )

    def classify(self, profile: Profile) -> HealthFlags:
        """Scan the profile and return its flags."""
        fields = {
            "conditions": normalize_text(profile.conditions),
            "restrictions": normalize_text(profile.restrictions),
        }
        detected: Dict[str, bool] = {}
        for flag, field_name, keywords in self._table:
            text = fields[field_name]
            if any(k in text for k in keywords):
                detected[flag] = True

        elderly = profile.age > self._elderly_age or detected.pop("elderly", False)
        flags = HealthFlags(elderly=elderly, **detected)
        if flags.active():
            logger.debug("Health flags detected: %s", ", ".join(flags.active()))
        return flags

    @staticmethod
    def status_for(flags: HealthFlags) -> PlanStatus:
        """Safety status with tie-break heart > elderly > approved."""
        if flags.heart_condition:
            return PlanStatus.RESTRICTED_HEALTH
        if flags.elderly:
            return PlanStatus.RESTRICTED_ELDERLY
        return PlanStatus.APPROVED
