"""Unit tests for DietAssembler."""

import pytest

from domain.health_plan.assembly.diet_assembler import (
    DIABETIC_WARNING,
    HYDRATION_WARNING,
    HYPERTENSIVE_WARNING,
    USDA_DISCLAIMER,
    DietAssembler,
    round_int,
    water_target,
)
from domain.health_plan.core.value_objects import HealthFlags, MenuEntry
from domain.health_plan.menu.food_catalog import FOOD_TABLE
from domain.health_plan.menu.menu_composer import MenuComposer
from domain.health_plan.menu.template import BREAKFAST, MEAL_SLOTS, TEMPLATE_MENU


@pytest.fixture
def composer(substitution_rules):
    return MenuComposer(FOOD_TABLE, TEMPLATE_MENU, substitution_rules)


@pytest.fixture
def assembler():
    return DietAssembler(meal_slots=MEAL_SLOTS, foods=FOOD_TABLE)


class TestDietAssembler:
    """Test DietAssembler."""

    def test_reference_diet(self, make_profile, composer, assembler):
        """Test totals for a 70 kg profile with a 1204.3 kcal target."""
        flags = HealthFlags()
        menu = composer.compose(flags, 1204.3)

        diet = assembler.build(make_profile(), flags, menu)

        assert diet.calories == 1248
        assert diet.target_calories == 1204
        assert diet.calorie_drift == 44
        assert diet.protein == 105
        assert diet.carbs == 123
        assert diet.fats == 37
        assert diet.water == 2.5

    def test_meals_in_slot_order(self, make_profile, composer, assembler):
        flags = HealthFlags()
        diet = assembler.build(make_profile(), flags, composer.compose(flags, 1204.3))

        assert [m.name for m in diet.meals] == [s.name for s in MEAL_SLOTS]
        assert [m.time for m in diet.meals] == [
            "07:00 - 08:00", "12:00 - 13:00", "16:00", "19:30",
        ]
        assert sum(len(m.items) for m in diet.meals) == 13

    def test_breakfast_lines(self, make_profile, composer, assembler):
        flags = HealthFlags()
        diet = assembler.build(make_profile(), flags, composer.compose(flags, 1204.3))

        breakfast = diet.meals[0]
        assert breakfast.name == BREAKFAST
        assert breakfast.options == (
            "1.5 unid. (50g) de Ovo Cozido",
            "2.5 col. sopa (15g) de Aveia em Flocos",
            "1 unid. (100g) de Banana Prata",
        )
        assert breakfast.macros == "~349 kcal | P:16 C:49 G:11"
        assert breakfast.calories == 349

    def test_warnings_by_flag(self, make_profile, composer, assembler):
        flags = HealthFlags(diabetic=True, hypertensive=True)
        diet = assembler.build(make_profile(), flags, composer.compose(flags, 1500.0))

        assert diet.warnings[0] == USDA_DISCLAIMER
        assert DIABETIC_WARNING in diet.warnings
        assert HYPERTENSIVE_WARNING in diet.warnings
        assert diet.warnings[-1] == HYDRATION_WARNING

    def test_no_condition_warnings_without_flags(self, make_profile, composer, assembler):
        flags = HealthFlags()
        diet = assembler.build(make_profile(), flags, composer.compose(flags, 1500.0))

        assert len(diet.warnings) == 3
        assert diet.substitution_conflicts == ()

    def test_conflicts_are_described(self, make_profile, composer, assembler):
        flags = HealthFlags(gluten_intolerant=True, diabetic=True)
        diet = assembler.build(make_profile(), flags, composer.compose(flags, 1500.0))

        expected = (
            "Café da Manhã: Aveia em Flocos mantido no lugar de Goma de Tapioca "
            "(regra 'glycemic_control' prevalece sobre 'gluten_free')."
        )
        assert diet.substitution_conflicts == (expected,)
        assert diet.warnings[-1] == expected

    def test_unresolved_entries_are_left_out(self, make_profile, assembler):
        template = (
            MenuEntry(BREAKFAST, "Ovo", 2),
            MenuEntry(BREAKFAST, "Tofu", 100),
        )
        menu = MenuComposer(FOOD_TABLE, template, ()).compose(HealthFlags(), 156.0)

        diet = assembler.build(make_profile(), HealthFlags(), menu)

        assert [i.food_key for i in diet.meals[0].items] == ["Ovo"]
        assert diet.meals[1].items == ()
        assert diet.meals[1].macros == "~0 kcal | P:0 C:0 G:0"
        assert diet.calories == 156


@pytest.mark.parametrize(
    "weight,expected", [(70.0, 2.5), (80.0, 2.8), (55.0, 1.9), (100.0, 3.5)]
)
def test_water_target(weight, expected):
    assert water_target(weight) == pytest.approx(expected)


def test_round_int_half_up():
    assert round_int(1247.5) == 1248
    assert round_int(0.5) == 1
    assert round_int(43.49) == 43
