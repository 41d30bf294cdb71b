"""Template menu and meal slots (approx. 1400 kcal before scaling)."""

from dataclasses import dataclass
from typing import Tuple

from ..core.value_objects.menu import MenuEntry

BREAKFAST = "Café da Manhã"
LUNCH = "Almoço"
SNACK = "Lanche"
DINNER = "Jantar"


@dataclass(frozen=True)
class MealSlot:
    name: str
    time: str
    rationale: str


MEAL_SLOTS: Tuple[MealSlot, ...] = (
    MealSlot(BREAKFAST, "07:00 - 08:00", "Energia sustentada para o início do dia."),
    MealSlot(LUNCH, "12:00 - 13:00", "Refeição completa com todos os macronutrientes."),
    MealSlot(SNACK, "16:00", "Manutenção da saciedade e glicemia."),
    MealSlot(DINNER, "19:30", "Leve e nutritivo para recuperação noturna."),
)

TEMPLATE_MENU: Tuple[MenuEntry, ...] = (
    MenuEntry(BREAKFAST, "Ovo", 2),
    MenuEntry(BREAKFAST, "Aveia", 3),
    MenuEntry(BREAKFAST, "Banana", 1),

    MenuEntry(LUNCH, "Arroz Integral", 4),
    MenuEntry(LUNCH, "Frango Grelhado", 150),
    MenuEntry(LUNCH, "Salada Verde", 1),
    MenuEntry(LUNCH, "Legumes Cozidos", 1),
    MenuEntry(LUNCH, "Azeite de Oliva", 1),

    MenuEntry(SNACK, "Iogurte Natural", 1),
    MenuEntry(SNACK, "Maçã", 1),

    MenuEntry(DINNER, "Peixe Grelhado", 150),
    MenuEntry(DINNER, "Legumes Cozidos", 1),
    MenuEntry(DINNER, "Azeite de Oliva", 1),
)
