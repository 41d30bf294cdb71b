"""Unit tests for health plan value objects."""

import dataclasses

import pytest

from domain.health_plan.core.exceptions import InvalidProfileError
from domain.health_plan.core.value_objects import (
    BMI,
    ActivityLevel,
    Gender,
    Goal,
    HealthFlags,
    MenuEntry,
    PlanStatus,
    Profile,
)
from domain.health_plan.core.value_objects.plan_result import MealItem


class TestProfile:
    """Test Profile value object."""

    def test_string_enums_are_coerced(self, make_profile):
        """Test enum fields accept their string values."""
        profile = make_profile(gender="male", activity_level="athlete", goal="gain")

        assert profile.gender is Gender.MALE
        assert profile.activity_level is ActivityLevel.ATHLETE
        assert profile.goal is Goal.GAIN

    def test_profile_is_immutable(self, make_profile):
        """Test profile cannot be mutated after creation."""
        profile = make_profile()

        with pytest.raises(dataclasses.FrozenInstanceError):
            profile.age = 40

    def test_negative_age_raises(self, make_profile):
        with pytest.raises(InvalidProfileError, match="Age must be >= 0"):
            make_profile(age=-1)

    def test_zero_age_is_accepted(self, make_profile):
        """Age zero is in the domain; the eligibility gate rejects it later."""
        assert make_profile(age=0).age == 0

    @pytest.mark.parametrize("field", ["weight", "height"])
    def test_non_positive_measurements_raise(self, make_profile, field):
        with pytest.raises(InvalidProfileError, match="must be positive"):
            make_profile(**{field: 0})

    def test_nan_weight_raises(self, make_profile):
        with pytest.raises(InvalidProfileError):
            make_profile(weight=float("nan"))

    def test_unknown_goal_raises(self, make_profile):
        with pytest.raises(InvalidProfileError, match="goal must be one of"):
            make_profile(goal="bulk")

    def test_none_free_text_becomes_empty(self, make_profile):
        profile = make_profile(restrictions=None, conditions=None)

        assert profile.restrictions == ""
        assert profile.conditions == ""

    def test_from_form_coerces_strings(self):
        """Test raw form values (strings, camelCase key) are coerced."""
        profile = Profile.from_form(
            {
                "age": "42",
                "gender": "male",
                "weight": "81.5",
                "height": "178",
                "activityLevel": "moderate",
                "goal": "maintain",
                "restrictions": "sem lactose",
            }
        )

        assert profile.age == 42
        assert profile.weight == 81.5
        assert profile.height == 178.0
        assert profile.activity_level is ActivityLevel.MODERATE
        assert profile.restrictions == "sem lactose"
        assert profile.conditions == ""

    @pytest.mark.parametrize("value", ["inf", "-inf", "nan"])
    def test_from_form_non_finite_age(self, value):
        """Test non-finite ages are reported as invalid values."""
        with pytest.raises(InvalidProfileError, match="Invalid profile value"):
            Profile.from_form(
                {"age": value, "gender": "female", "weight": 70, "height": 165,
                 "activity_level": "light", "goal": "lose"}
            )

    def test_from_form_missing_field(self):
        with pytest.raises(InvalidProfileError, match="Missing profile field: weight"):
            Profile.from_form(
                {"age": 30, "gender": "female", "height": 165,
                 "activity_level": "light", "goal": "lose"}
            )

    def test_from_form_non_numeric(self):
        with pytest.raises(InvalidProfileError, match="Invalid profile value"):
            Profile.from_form(
                {"age": "trinta", "gender": "female", "weight": 70, "height": 165,
                 "activity_level": "light", "goal": "lose"}
            )


class TestBMI:
    """Test BMI classification thresholds."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (18.4, "Abaixo do peso"),
            (18.5, "Peso adequado"),
            (24.89, "Peso adequado"),
            (24.9, "Sobrepeso"),
            (29.9, "Obesidade grau I"),
            (34.9, "Obesidade grau II"),
            (39.89, "Obesidade grau II"),
            (39.9, "Obesidade grau III"),
            (55.0, "Obesidade grau III"),
        ],
    )
    def test_classification(self, value, expected):
        assert BMI(value=value).classification() == expected

    def test_rounded(self):
        assert BMI(value=25.7116).rounded() == 25.7

    def test_rounded_tie_goes_up(self):
        """Test an exact tie (89 kg, 2 m) rounds up, not to even."""
        assert BMI(value=89 / 2.0 ** 2).rounded() == 22.3


class TestEnums:
    """Test enum helpers."""

    def test_activity_multipliers(self):
        assert ActivityLevel.SEDENTARY.pal_multiplier() == 1.2
        assert ActivityLevel.LIGHT.pal_multiplier() == 1.375
        assert ActivityLevel.MODERATE.pal_multiplier() == 1.55
        assert ActivityLevel.ACTIVE.pal_multiplier() == 1.725
        assert ActivityLevel.ATHLETE.pal_multiplier() == 1.9

    def test_goal_adjustment(self):
        assert Goal.LOSE.calorie_adjustment(2500.0) == 2000.0
        assert Goal.MAINTAIN.calorie_adjustment(2500.0) == 2500.0
        assert Goal.GAIN.calorie_adjustment(2500.0) == 2800.0

    def test_gender_floors(self):
        assert Gender.FEMALE.minimum_calories() == 1200.0
        assert Gender.MALE.minimum_calories() == 1500.0

    def test_status_justifications(self):
        assert len(PlanStatus.DENIED_MINOR.justification()) == 2
        assert PlanStatus.APPROVED.justification() == ("Perfil apto para plano completo.",)


class TestHealthFlags:
    """Test HealthFlags value object."""

    def test_at_risk(self):
        assert HealthFlags(heart_condition=True).at_risk
        assert HealthFlags(elderly=True).at_risk
        assert not HealthFlags(diabetic=True, hypertensive=True).at_risk

    def test_active_in_declaration_order(self):
        flags = HealthFlags(vegetarian=True, diabetic=True)

        assert flags.active() == ("diabetic", "vegetarian")

    def test_is_set_unknown_flag(self):
        with pytest.raises(KeyError):
            HealthFlags().is_set("pregnant")


class TestMenuEntry:
    """Test MenuEntry rewrite history."""

    def test_rewrite_returns_new_entry(self):
        entry = MenuEntry("Café da Manhã", "Aveia", 3)

        rewritten = entry.rewrite("Tapioca", 40, "gluten_free")

        assert entry.food_key == "Aveia"
        assert rewritten.food_key == "Tapioca"
        assert rewritten.base_qty == 40
        assert rewritten.applied_rules == ("gluten_free",)
        assert rewritten.replaced_keys == ("Aveia",)
        assert rewritten.rule_that_replaced("Aveia") == "gluten_free"
        assert rewritten.rule_that_replaced("Banana") is None


class TestMealItem:
    """Test MealItem display."""

    @pytest.mark.parametrize(
        "qty,expected",
        [
            (1.5, "1.5 unid. (50g) de Ovo Cozido"),
            (2.0, "2 unid. (50g) de Ovo Cozido"),
        ],
    )
    def test_display(self, qty, expected):
        item = MealItem(
            food_key="Ovo", name="Ovo Cozido", unit="unid. (50g)", quantity=qty,
            calories=0, protein=0, carbs=0, fats=0,
        )

        assert item.display() == expected
