"""Units of measure and conversion constants."""

from enum import Enum
from typing import NewType

Kilograms = NewType("Kilograms", float)
Pounds = NewType("Pounds", float)
Percentage = NewType("Percentage", float)
Grams = NewType("Grams", float)
Calories = NewType("Calories", float)

LB_PER_KG = 2.20462262
KG_PER_LB = 1.0 / LB_PER_KG

PROTEIN_CALORIES_PER_GRAM = 4.0
CARBOHYDRATE_CALORIES_PER_GRAM = 4.0
FAT_CALORIES_PER_GRAM = 9.0


class MassUnit(Enum):
    """Unit a mass is denominated in."""

    KG = "kg"
    LB = "lb"

    @property
    def is_kilogram(self) -> bool:
        return self is MassUnit.KG

    @property
    def is_pound(self) -> bool:
        return self is MassUnit.LB

    @property
    def label(self) -> str:
        """Short display label."""
        return "kgs" if self is MassUnit.KG else "lbs"
