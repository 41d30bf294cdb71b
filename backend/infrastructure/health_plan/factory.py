"""Factory for creating the health plan orchestrator."""

from pathlib import Path
from typing import Optional

from application.health_plan.orchestrators.plan_orchestrator import (
    PlanOrchestrator,
)
from domain.health_plan.assembly.diet_assembler import DietAssembler
from domain.health_plan.calculation.bmi_service import BMIService
from domain.health_plan.calculation.bmr_service import BMRService
from domain.health_plan.calculation.energy_target_service import (
    EnergyTargetService,
)
from domain.health_plan.calculation.tdee_service import TDEEService
from domain.health_plan.menu.food_catalog import FOOD_TABLE
from domain.health_plan.menu.menu_composer import MenuComposer
from domain.health_plan.menu.template import MEAL_SLOTS, TEMPLATE_MENU
from domain.health_plan.screening.eligibility_service import EligibilityService
from domain.health_plan.screening.health_risk_classifier import (
    HealthRiskClassifier,
)
from domain.health_plan.workout.workout_builder import WorkoutBuilder
from infrastructure.config import get_keywords_file, get_substitutions_file
from rules.parser import load_keyword_table, load_substitution_rules


# Singleton instance
_plan_orchestrator: Optional[PlanOrchestrator] = None


def create_plan_orchestrator(
    keywords_file: Optional[Path] = None,
    substitutions_file: Optional[Path] = None,
) -> PlanOrchestrator:
    """
    Create a fully wired orchestrator.

    Environment Variables:
        HEALTH_PLAN_KEYWORDS_FILE: Keyword table YAML (optional)
        HEALTH_PLAN_SUBSTITUTIONS_FILE: Substitution rules YAML (optional)

    Explicit arguments take precedence over the environment; without
    either, the bundled tables under ``rules/defaults`` are used.

    Raises:
        ConfigurationError: If a rule file is missing or invalid
    """
    categories = load_keyword_table(keywords_file or get_keywords_file())
    rules = load_substitution_rules(substitutions_file or get_substitutions_file())

    return PlanOrchestrator(
        eligibility_service=EligibilityService(),
        bmi_service=BMIService(),
        classifier=HealthRiskClassifier(categories),
        energy_service=EnergyTargetService(
            bmr_service=BMRService(),
            tdee_service=TDEEService(),
        ),
        menu_composer=MenuComposer(
            foods=FOOD_TABLE,
            template=TEMPLATE_MENU,
            rules=rules,
        ),
        diet_assembler=DietAssembler(meal_slots=MEAL_SLOTS, foods=FOOD_TABLE),
        workout_builder=WorkoutBuilder(),
    )


def get_plan_orchestrator() -> PlanOrchestrator:
    """
    Get singleton orchestrator instance.

    Tables are loaded once per process and shared read-only.

    Returns:
        PlanOrchestrator singleton
    """
    global _plan_orchestrator

    if _plan_orchestrator is None:
        _plan_orchestrator = create_plan_orchestrator()

    return _plan_orchestrator


def reset_plan_orchestrator() -> None:
    """Reset singleton (for testing only)."""
    global _plan_orchestrator
    _plan_orchestrator = None
