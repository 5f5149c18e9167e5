"""Calculator service used by the presentation layer."""

import logging
from dataclasses import dataclass

from macro_calculator.domain.activity import DailyActivityLevel
from macro_calculator.domain.body_composition import (
    PROJECTION_FLOOR_PERCENTAGE,
    PROJECTION_STEP,
    BodyComposition,
)
from macro_calculator.domain.macros import (
    PERCENTAGE_SUM_TOLERANCE,
    DailyMacronutrient,
    DailyMacros,
    PercentageSplit,
)
from macro_calculator.domain.mass import Mass
from macro_calculator.domain.units import Calories, MassUnit
from macro_calculator.domain.validation import Invalid, Validation
from macro_calculator.forms.body_composition import BodyCompositionInput
from macro_calculator.forms.daily_macros import (
    DEFAULT_PERCENTAGES,
    DEFAULT_PROTEIN_GRAMS_PER_KG,
    DailyMacrosInput,
    validate_activity_level,
)
from macro_calculator.forms.weight import RawNumber, WeightInput

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MacroSummary:
    """Computed figures for one body composition and macro policy."""

    body_weight: Mass
    body_fat_percentage: int
    lean_muscle_mass: Mass
    fat_mass: Mass
    basal_metabolic_rate: Calories
    total_calories: Calories
    protein: DailyMacronutrient
    carbohydrate: DailyMacronutrient
    fat: DailyMacronutrient


@dataclass
class CalculatorService:
    """Builds forms with configured defaults and validates them."""

    mass_unit: MassUnit = MassUnit.LB
    protein_grams_per_kg: float = DEFAULT_PROTEIN_GRAMS_PER_KG
    percentages: PercentageSplit = DEFAULT_PERCENTAGES
    percentage_sum_tolerance: float = PERCENTAGE_SUM_TOLERANCE
    projection_floor: int = PROJECTION_FLOOR_PERCENTAGE
    projection_step: int = PROJECTION_STEP
    debug: bool = False

    def new_body_composition_input(self) -> BodyCompositionInput:
        return BodyCompositionInput.empty(self.mass_unit)

    def new_daily_macros_input(
        self, body_composition: BodyComposition
    ) -> DailyMacrosInput:
        return DailyMacrosInput.create(
            body_composition,
            protein_grams_per_kg=self.protein_grams_per_kg,
            percentages=self.percentages,
            tolerance=self.percentage_sum_tolerance,
        )

    def validate_weight(self, amount: RawNumber, unit: MassUnit) -> Validation[Mass]:
        """Validate a raw weight amount in the given unit."""
        form = WeightInput.empty(unit).update_amount(amount)
        return self._log_result("weight", form.validate())

    def validate_body_composition(
        self, amount: RawNumber, unit: MassUnit, bodyfat_percentage: RawNumber
    ) -> Validation[BodyComposition]:
        """Validate raw weight and body fat entries together."""
        form = (
            BodyCompositionInput.empty(unit)
            .update_weight_amount(amount)
            .update_bodyfat_percentage(bodyfat_percentage)
        )
        return self._log_result("body composition", form.validate())

    def validate_activity_level(
        self, raw: str | None
    ) -> Validation[DailyActivityLevel]:
        return self._log_result("activity level", validate_activity_level(raw))

    def validate_daily_macros(self, form: DailyMacrosInput) -> Validation[DailyMacros]:
        result = self._log_result("daily macros", form.validate())
        if self.debug and result.is_valid:
            _logger.info(
                "Daily macros computed: total_calories=%.1f",
                result.unwrap().total_calories,
            )
        return result

    def summarize(self, daily_macros: DailyMacros) -> MacroSummary:
        """Collect every derived figure of the given macros."""
        body_composition = daily_macros.body_composition
        return MacroSummary(
            body_weight=body_composition.body_weight,
            body_fat_percentage=body_composition.body_fat_percentage,
            lean_muscle_mass=body_composition.lean_muscle_mass,
            fat_mass=body_composition.fat_mass,
            basal_metabolic_rate=body_composition.basal_metabolic_rate,
            total_calories=daily_macros.total_calories,
            protein=daily_macros.protein,
            carbohydrate=daily_macros.carbohydrate,
            fat=daily_macros.fat,
        )

    def project(self, daily_macros: DailyMacros) -> list[MacroSummary]:
        """Summaries at each lower body fat % down to the configured floor."""
        summaries = [
            self.summarize(projected)
            for projected in daily_macros.projections(
                self.projection_floor, self.projection_step
            )
        ]
        if self.debug:
            _logger.info(
                "Projected %s compositions from %s%% body fat",
                len(summaries),
                daily_macros.body_composition.body_fat_percentage,
            )
        return summaries

    def _log_result(self, action: str, result: Validation) -> Validation:
        if self.debug and isinstance(result, Invalid):
            _logger.info("Validation failed for %s: %s", action, result.messages)
        return result
