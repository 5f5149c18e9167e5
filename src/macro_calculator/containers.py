"""Dependency container wiring for the calculator."""

import logging
from dataclasses import dataclass

from macro_calculator.app_logging import configure_logging
from macro_calculator.config import Settings
from macro_calculator.domain.macros import PercentageSplit
from macro_calculator.services.calculator import CalculatorService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    calculator_service: CalculatorService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.debug:
        configure_logging(logging.DEBUG)
    calculator_service = CalculatorService(
        mass_unit=resolved_settings.mass_unit,
        protein_grams_per_kg=resolved_settings.default_protein_grams_per_kg,
        percentages=PercentageSplit(
            protein=resolved_settings.default_protein_percentage,
            carbs=resolved_settings.default_carbs_percentage,
            fat=resolved_settings.default_fat_percentage,
        ),
        percentage_sum_tolerance=resolved_settings.percentage_sum_tolerance,
        projection_floor=resolved_settings.projection_floor_percentage,
        projection_step=resolved_settings.projection_step,
        debug=resolved_settings.debug,
    )
    return AppContainer(
        settings=resolved_settings,
        calculator_service=calculator_service,
    )
