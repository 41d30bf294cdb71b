"""Food reference table (USDA-based values, per unit).

Read-only process-wide table keyed by food key. Gram-based foods carry
nutrients per gram; all other units carry nutrients per piece/spoon/slice.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from ..core.value_objects.menu import FoodItem


def _food(key, name, unit, calories, protein, carbs, fats, default_portion):
    return key, FoodItem(
        key=key,
        name=name,
        unit=unit,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fats=fats,
        default_portion=default_portion,
    )


# ---- Food table ----

FOOD_TABLE: Mapping[str, FoodItem] = MappingProxyType(dict([
    # proteins
    _food("Ovo", "Ovo Cozido", "unid. (50g)", 78, 6.3, 0.6, 5.3, 2),
    _food("Frango Grelhado", "Frango Grelhado", "g", 1.65, 0.31, 0, 0.036, 150),
    _food("Carne Moída Magra", "Carne Moída Magra (95%)", "g", 1.64, 0.28, 0, 0.05, 120),
    _food("Peixe Grelhado", "Peixe Grelhado (Tilápia)", "g", 1.28, 0.26, 0, 0.03, 150),
    _food("Queijo Cottage", "Queijo Cottage (1%)", "col. sopa (30g)", 22, 3.6, 0.9, 0.3, 2),
    _food("Iogurte Natural", "Iogurte Natural Integral", "pote (170g)", 104, 6, 8, 5.6, 1),
    _food("Whey Protein", "Whey Protein (Padrão)", "dose (30g)", 120, 24, 3, 1, 1),
    # carbs
    _food("Aveia", "Aveia em Flocos", "col. sopa (15g)", 57, 2, 10, 1, 3),
    _food("Arroz Integral", "Arroz Integral Cozido", "col. sopa (25g)", 31, 0.7, 6.4, 0.25, 4),
    _food("Batata Doce", "Batata Doce Cozida", "g", 0.76, 0.014, 0.177, 0.001, 150),
    _food("Pão Integral", "Pão Integral", "fatia (28g)", 70, 3.6, 11.6, 1, 2),
    _food("Banana", "Banana Prata", "unid. (100g)", 89, 1.1, 23, 0.3, 1),
    _food("Maçã", "Maçã", "unid. (150g)", 78, 0.4, 21, 0.3, 1),
    _food("Tapioca", "Goma de Tapioca", "g", 2.4, 0, 0.6, 0, 60),
    # fats / veggies / others
    _food("Azeite de Oliva", "Azeite de Oliva", "fio (5g)", 44, 0, 0, 5, 1),
    _food("Castanha do Pará", "Castanha do Pará", "unid. (5g)", 33, 0.7, 0.6, 3.3, 2),
    _food("Salada Verde", "Salada Verde (Variada)", "prato", 20, 1.5, 3, 0.2, 1),
    _food("Legumes Cozidos", "Mix de Legumes", "pires (100g)", 60, 2.5, 10, 0.2, 1),
]))


def get_food(key: str, table: Mapping[str, FoodItem] = FOOD_TABLE) -> Optional[FoodItem]:
    """Lookup a food by key; None when the key is unknown."""
    return table.get(key)
