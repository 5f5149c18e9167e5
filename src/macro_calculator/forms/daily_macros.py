"""Editable daily macros form."""

from dataclasses import dataclass, replace
from enum import Enum

from macro_calculator.domain.activity import DailyActivityLevel
from macro_calculator.domain.body_composition import BodyComposition
from macro_calculator.domain.errors import UnreachableStateError
from macro_calculator.domain.macros import (
    PERCENTAGE_SUM_TOLERANCE,
    DailyMacros,
    MacroPolicy,
    PercentageSplit,
    ProteinRatio,
)
from macro_calculator.domain.validation import Valid, Validation, combine, invalid
from macro_calculator.forms.weight import RawNumber, parse_optional_number

DEFAULT_PROTEIN_GRAMS_PER_KG = 2.2
DEFAULT_PERCENTAGES = PercentageSplit(protein=34.0, carbs=33.0, fat=33.0)


class MacroSplitMode(Enum):
    """Which macro policy the form currently edits."""

    PROTEIN_RATIO = "protein_ratio"
    PERCENTAGES = "percentages"


def validate_activity_level(raw: str | None) -> Validation[DailyActivityLevel]:
    if raw is None or not raw.strip():
        return invalid("daily_activity_level", "daily activity level must be present")
    return DailyActivityLevel.validate(raw)


@dataclass(frozen=True)
class ProteinRatioInput:
    """Optional protein grams per kg of lean mass."""

    grams_per_kg: float | None

    def update(self, grams_per_kg: RawNumber) -> "ProteinRatioInput":
        return replace(self, grams_per_kg=parse_optional_number(grams_per_kg))

    def validate(self) -> Validation[ProteinRatio]:
        if self.grams_per_kg is None:
            return invalid("protein_ratio", "protein ratio must be present")
        if self.grams_per_kg <= 0:
            return invalid("protein_ratio", "protein ratio must be > 0")
        return Valid(ProteinRatio(self.grams_per_kg))


@dataclass(frozen=True)
class PercentageSplitInput:
    """Percentage split being edited; each edit keeps the total at 100."""

    split: PercentageSplit
    tolerance: float = PERCENTAGE_SUM_TOLERANCE

    def update_protein(self, protein: RawNumber) -> "PercentageSplitInput":
        value = parse_optional_number(protein)
        if value is None:
            return self
        return replace(self, split=self.split.update_protein(value))

    def update_carbs(self, carbs: RawNumber) -> "PercentageSplitInput":
        value = parse_optional_number(carbs)
        if value is None:
            return self
        return replace(self, split=self.split.update_carbs(value))

    def validate(self) -> Validation[PercentageSplit]:
        return self.split.validate(self.tolerance)


@dataclass(frozen=True)
class DailyMacrosInput:
    """Activity level and macro policy entered for a validated composition.

    Both policy sub-forms are kept so switching modes does not lose values.
    """

    body_composition: BodyComposition
    activity_level: str | None
    mode: MacroSplitMode
    protein_ratio: ProteinRatioInput
    percentages: PercentageSplitInput

    @classmethod
    def create(
        cls,
        body_composition: BodyComposition,
        protein_grams_per_kg: float = DEFAULT_PROTEIN_GRAMS_PER_KG,
        percentages: PercentageSplit = DEFAULT_PERCENTAGES,
        tolerance: float = PERCENTAGE_SUM_TOLERANCE,
    ) -> "DailyMacrosInput":
        return cls(
            body_composition=body_composition,
            activity_level=None,
            mode=MacroSplitMode.PROTEIN_RATIO,
            protein_ratio=ProteinRatioInput(protein_grams_per_kg),
            percentages=PercentageSplitInput(percentages, tolerance),
        )

    @classmethod
    def from_daily_macros(
        cls,
        daily_macros: DailyMacros,
        tolerance: float = PERCENTAGE_SUM_TOLERANCE,
    ) -> "DailyMacrosInput":
        """Pre-fill the form from validated macros."""
        level = daily_macros.daily_activity_level
        form = cls.create(daily_macros.body_composition, tolerance=tolerance)
        form = form.update_activity_level(level.display_name)
        match daily_macros.macro_policy:
            case ProteinRatio(grams_per_kg_lean_mass=ratio):
                return replace(
                    form,
                    mode=MacroSplitMode.PROTEIN_RATIO,
                    protein_ratio=ProteinRatioInput(ratio),
                )
            case PercentageSplit() as split:
                return replace(
                    form,
                    mode=MacroSplitMode.PERCENTAGES,
                    percentages=PercentageSplitInput(split, tolerance),
                )
        raise UnreachableStateError(daily_macros.macro_policy)

    def update_activity_level(self, raw: str | None) -> "DailyMacrosInput":
        return replace(self, activity_level=raw)

    def update_body_composition(
        self, body_composition: BodyComposition
    ) -> "DailyMacrosInput":
        return replace(self, body_composition=body_composition)

    def update_protein_ratio(self, grams_per_kg: RawNumber) -> "DailyMacrosInput":
        return replace(self, protein_ratio=self.protein_ratio.update(grams_per_kg))

    def update_protein_percentage(self, protein: RawNumber) -> "DailyMacrosInput":
        return replace(self, percentages=self.percentages.update_protein(protein))

    def update_carbs_percentage(self, carbs: RawNumber) -> "DailyMacrosInput":
        return replace(self, percentages=self.percentages.update_carbs(carbs))

    def use_protein_ratio(self) -> "DailyMacrosInput":
        return replace(self, mode=MacroSplitMode.PROTEIN_RATIO)

    def use_percentages(self) -> "DailyMacrosInput":
        return replace(self, mode=MacroSplitMode.PERCENTAGES)

    def _validate_policy(self) -> Validation[MacroPolicy]:
        match self.mode:
            case MacroSplitMode.PROTEIN_RATIO:
                return self.protein_ratio.validate()
            case MacroSplitMode.PERCENTAGES:
                return self.percentages.validate()
        raise UnreachableStateError(self.mode)

    def validate(self) -> Validation[DailyMacros]:
        """Validate activity level and the selected policy together."""
        return combine(
            lambda level, policy: DailyMacros(self.body_composition, level, policy),
            validate_activity_level(self.activity_level),
            self._validate_policy(),
        )
