"""PlanOrchestrator - runs the health plan pipeline for one profile."""

import structlog

from domain.health_plan.assembly.diet_assembler import DietAssembler
from domain.health_plan.calculation.bmi_service import BMIService
from domain.health_plan.calculation.energy_target_service import (
    EnergyTargetService,
)
from domain.health_plan.menu.menu_composer import MenuComposer
from domain.health_plan.menu.portion_rounding import round_half_up
from domain.health_plan.screening.eligibility_service import EligibilityService
from domain.health_plan.screening.health_risk_classifier import (
    HealthRiskClassifier,
)
from domain.health_plan.core.value_objects.plan_result import PlanResult
from domain.health_plan.core.value_objects.plan_status import PlanStatus
from domain.health_plan.core.value_objects.profile import Profile
from domain.health_plan.workout.workout_builder import WorkoutBuilder

logger = structlog.get_logger(__name__)


class PlanOrchestrator:
    """
    Orchestrates the health plan services.

    Flow:
    1. Eligibility gate (minors stop here)
    2. BMI and BMI class
    3. Health risk flags and safety status
    4. BMR, TDEE and calorie target
    5. Menu substitutions, scaling and rounding
    6. Diet and workout assembly
    """

    def __init__(
        self,
        eligibility_service: EligibilityService,
        bmi_service: BMIService,
        classifier: HealthRiskClassifier,
        energy_service: EnergyTargetService,
        menu_composer: MenuComposer,
        diet_assembler: DietAssembler,
        workout_builder: WorkoutBuilder,
    ):
        self._eligibility = eligibility_service
        self._bmi = bmi_service
        self._classifier = classifier
        self._energy = energy_service
        self._composer = menu_composer
        self._diet = diet_assembler
        self._workout = workout_builder

    def compute_plan(self, profile: Profile) -> PlanResult:
        """
        Compute the complete plan for a profile.

        Args:
            profile: Validated questionnaire data

        Returns:
            PlanResult; policy outcomes (minor, elderly, cardiac) are
            expressed through ``status``, never raised

        Raises:
            ConfigurationError: If the menu tables cannot be scaled
        """
        if not self._eligibility.is_eligible(profile):
            logger.info("plan_denied_minor", age=profile.age)
            return PlanResult(
                status=PlanStatus.DENIED_MINOR,
                justification=PlanStatus.DENIED_MINOR.justification(),
                bmi=0,
                bmi_class="",
            )

        bmi = self._bmi.calculate(profile.weight, profile.height)
        flags = self._classifier.classify(profile)
        status = self._classifier.status_for(flags)

        energy = self._energy.resolve(profile, flags)
        menu = self._composer.compose(flags, energy.target_calories)
        diet = self._diet.build(profile, flags, menu)
        workout = self._workout.build(profile, flags, status)

        result = PlanResult(
            status=status,
            justification=status.justification(),
            diet=diet,
            workout=workout,
            bmr=int(round_half_up(energy.bmr.value, 1)),
            tdee=int(round_half_up(energy.tdee.value, 1)),
            target_calories=int(round_half_up(energy.target_calories, 1)),
            goal=profile.goal,
            bmi=bmi.rounded(),
            bmi_class=bmi.classification(),
            flags=flags.active(),
        )

        logger.info(
            "plan_computed",
            status=status.value,
            flags=list(result.flags),
            target_calories=result.target_calories,
            diet_calories=diet.calories,
            calorie_drift=diet.calorie_drift,
            conflicts=len(menu.conflicts),
        )
        return result
