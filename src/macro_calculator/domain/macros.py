"""Daily macronutrient domain models."""

from collections.abc import Iterator
from dataclasses import dataclass, replace
from enum import Enum

from macro_calculator.domain.activity import DailyActivityLevel
from macro_calculator.domain.body_composition import (
    PROJECTION_FLOOR_PERCENTAGE,
    PROJECTION_STEP,
    BodyComposition,
)
from macro_calculator.domain.errors import UnreachableStateError
from macro_calculator.domain.units import (
    CARBOHYDRATE_CALORIES_PER_GRAM,
    FAT_CALORIES_PER_GRAM,
    PROTEIN_CALORIES_PER_GRAM,
    Calories,
    Grams,
    Percentage,
)
from macro_calculator.domain.validation import Valid, Validation, invalid

PERCENTAGE_SUM_TOLERANCE = 0.001


class Macronutrient(Enum):
    """Macronutrient kinds with their calorie density."""

    PROTEIN = "protein"
    CARBOHYDRATE = "carbohydrate"
    FAT = "fat"

    @property
    def calories_per_gram(self) -> float:
        densities = {
            Macronutrient.PROTEIN: PROTEIN_CALORIES_PER_GRAM,
            Macronutrient.CARBOHYDRATE: CARBOHYDRATE_CALORIES_PER_GRAM,
            Macronutrient.FAT: FAT_CALORIES_PER_GRAM,
        }
        return densities[self]


@dataclass(frozen=True)
class DailyMacronutrient:
    """Daily grams, calories and share of calories for one macronutrient."""

    grams: Grams
    calories: Calories
    percentage: Percentage

    @classmethod
    def from_calories(
        cls, kind: Macronutrient, calories: float, total_calories: float
    ) -> "DailyMacronutrient":
        percentage = calories / total_calories * 100 if total_calories else 0.0
        return cls(
            grams=Grams(calories / kind.calories_per_gram),
            calories=Calories(calories),
            percentage=Percentage(percentage),
        )


@dataclass(frozen=True)
class ProteinRatio:
    """Fixed protein grams per kg of lean mass; the rest is split evenly."""

    grams_per_kg_lean_mass: float


def _clamp(value: float) -> float:
    return min(max(value, 0.0), 100.0)


@dataclass(frozen=True)
class PercentageSplit:
    """Explicit protein/carbohydrate/fat percentages of total calories."""

    protein: float
    carbs: float
    fat: float

    def update_protein(self, protein: float) -> "PercentageSplit":
        """Set protein and rebalance from carbs first, then fat.

        The change in protein is taken from carbs; whatever carbs cannot
        absorb without going below zero is taken from fat.
        """
        new_protein = _clamp(protein)
        delta = new_protein - self.protein
        carbs_wanted = self.carbs - delta
        new_carbs = _clamp(carbs_wanted)
        overflow = min(carbs_wanted, 0.0)
        new_fat = _clamp(self.fat + overflow)
        return replace(self, protein=new_protein, carbs=new_carbs, fat=new_fat)

    def update_carbs(self, carbs: float) -> "PercentageSplit":
        """Set carbs; only fat absorbs the change.

        Carbs are capped at what protein leaves over, so fat never has to
        go below zero; the cap is what keeps the three summing to 100.
        """
        new_carbs = min(_clamp(carbs), 100.0 - self.protein)
        new_fat = _clamp(self.fat - (new_carbs - self.carbs))
        return replace(self, carbs=new_carbs, fat=new_fat)

    @property
    def total(self) -> float:
        return self.protein + self.carbs + self.fat

    def validate(
        self, tolerance: float = PERCENTAGE_SUM_TOLERANCE
    ) -> Validation["PercentageSplit"]:
        """Require the three percentages to sum to 100 within ``tolerance``."""
        if abs(self.total - 100.0) > tolerance:
            return invalid(
                "macro_percentages",
                "percentages must sum to 100: "
                f"protein {self.protein:g} + carbs {self.carbs:g} + "
                f"fat {self.fat:g} = {self.total:g}",
            )
        return Valid(self)


MacroPolicy = ProteinRatio | PercentageSplit


@dataclass(frozen=True)
class DailyMacros:
    """Daily calorie target apportioned between macronutrients.

    Every figure is recomputed on access.
    """

    body_composition: BodyComposition
    daily_activity_level: DailyActivityLevel
    macro_policy: MacroPolicy

    @property
    def total_calories(self) -> Calories:
        return self.daily_activity_level.total_daily_expenditure(
            self.body_composition.basal_metabolic_rate
        )

    def _calories_for(self, kind: Macronutrient) -> float:
        total = self.total_calories
        match self.macro_policy:
            case PercentageSplit(protein=protein, carbs=carbs, fat=fat):
                percentages = {
                    Macronutrient.PROTEIN: protein,
                    Macronutrient.CARBOHYDRATE: carbs,
                    Macronutrient.FAT: fat,
                }
                return total * percentages[kind] / 100
            case ProteinRatio(grams_per_kg_lean_mass=ratio):
                lean_kg = self.body_composition.lean_muscle_mass.kilograms
                protein_calories = (
                    ratio * lean_kg * Macronutrient.PROTEIN.calories_per_gram
                )
                if kind is Macronutrient.PROTEIN:
                    return protein_calories
                return max(total - protein_calories, 0.0) / 2
        raise UnreachableStateError(self.macro_policy)

    def macronutrient(self, kind: Macronutrient) -> DailyMacronutrient:
        return DailyMacronutrient.from_calories(
            kind, self._calories_for(kind), self.total_calories
        )

    @property
    def protein(self) -> DailyMacronutrient:
        return self.macronutrient(Macronutrient.PROTEIN)

    @property
    def carbohydrate(self) -> DailyMacronutrient:
        return self.macronutrient(Macronutrient.CARBOHYDRATE)

    @property
    def fat(self) -> DailyMacronutrient:
        return self.macronutrient(Macronutrient.FAT)

    def breakdown(self) -> dict[Macronutrient, DailyMacronutrient]:
        return {kind: self.macronutrient(kind) for kind in Macronutrient}

    def at_body_composition(self, body_composition: BodyComposition) -> "DailyMacros":
        """Recompute for another composition, keeping activity and policy."""
        return replace(self, body_composition=body_composition)

    def projections(
        self,
        floor: int = PROJECTION_FLOOR_PERCENTAGE,
        step: int = PROJECTION_STEP,
    ) -> Iterator["DailyMacros"]:
        """Yield macros for each body composition projection."""
        for projected in self.body_composition.projections(floor, step):
            yield self.at_body_composition(projected)
