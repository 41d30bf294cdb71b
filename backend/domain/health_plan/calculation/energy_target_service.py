"""EnergyTargetService - resolve BMR, TDEE and the daily calorie target."""

import logging

from ..core.value_objects.energy import EnergyTarget
from ..core.value_objects.goal import Goal
from ..core.value_objects.health_flags import HealthFlags
from ..core.value_objects.profile import Profile
from .bmr_service import BMRService
from .tdee_service import TDEEService

logger = logging.getLogger(__name__)


class EnergyTargetService:
    """Compute the calorie target for a profile.

    Rules, in order:
        1. TDEE = BMR × activity multiplier
        2. Goal adjustment: lose -500, gain +300, maintain 0
        3. Weight loss floor: 1200 kcal (female) / 1500 kcal (male)
        4. Safety override: elderly or cardiac profiles get exactly TDEE
    """

    def __init__(
        self,
        bmr_service: BMRService,
        tdee_service: TDEEService,
    ):
        self._bmr_service = bmr_service
        self._tdee_service = tdee_service

    def resolve(self, profile: Profile, flags: HealthFlags) -> EnergyTarget:
        """Resolve energy numbers.

        Args:
            profile: Questionnaire data
            flags: Detected health flags (only ``at_risk`` is used)

        Returns:
            EnergyTarget with unrounded values
        """
        bmr = self._bmr_service.calculate(profile)
        tdee = self._tdee_service.calculate(bmr, profile.activity_level)

        target = profile.goal.calorie_adjustment(tdee.value)
        floor_applied = False
        if profile.goal == Goal.LOSE:
            floor = profile.gender.minimum_calories()
            if target < floor:
                target = floor
                floor_applied = True

        safety_override = flags.at_risk
        if safety_override:
            target = tdee.value
            floor_applied = False
            logger.debug(
                "Calorie target pinned to TDEE for at-risk profile (goal=%s)",
                profile.goal.value,
            )

        return EnergyTarget(
            bmr=bmr,
            tdee=tdee,
            target_calories=target,
            floor_applied=floor_applied,
            safety_override=safety_override,
        )
