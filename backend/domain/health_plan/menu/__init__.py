"""Menu composition: food table, template, substitutions and scaling."""

from .food_catalog import FOOD_TABLE, get_food
from .menu_composer import MenuComposer
from .portion_rounding import round_portion
from .template import MEAL_SLOTS, TEMPLATE_MENU, MealSlot

__all__ = [
    "FOOD_TABLE",
    "get_food",
    "MenuComposer",
    "round_portion",
    "MEAL_SLOTS",
    "TEMPLATE_MENU",
    "MealSlot",
]
