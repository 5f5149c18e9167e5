"""Shared test fixtures."""

import pytest

from macro_calculator.config import Settings
from macro_calculator.domain.activity import DailyActivityLevel
from macro_calculator.domain.body_composition import BodyComposition
from macro_calculator.domain.macros import DailyMacros, PercentageSplit, ProteinRatio
from macro_calculator.domain.mass import Mass


def make_body_composition(
    pounds: float = 200.0, bodyfat_percentage: int = 20
) -> BodyComposition:
    """Build a composition in pounds."""
    return BodyComposition(
        body_weight=Mass.create_lb(pounds),
        body_fat_percentage=bodyfat_percentage,
    )


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    for key in (
        "MACRO_CALCULATOR_DEFAULT_MASS_UNIT",
        "MACRO_CALCULATOR_DEBUG",
        "MACRO_CALCULATOR_PROJECTION_STEP",
    ):
        monkeypatch.delenv(key, raising=False)
    return Settings(_env_file=None, default_mass_unit="kg", debug=False)


@pytest.fixture
def body_composition() -> BodyComposition:
    return make_body_composition()


@pytest.fixture
def percentage_macros(body_composition: BodyComposition) -> DailyMacros:
    return DailyMacros(
        body_composition=body_composition,
        daily_activity_level=DailyActivityLevel.SEDENTARY,
        macro_policy=PercentageSplit(protein=40.0, carbs=30.0, fat=30.0),
    )


@pytest.fixture
def ratio_macros(body_composition: BodyComposition) -> DailyMacros:
    return DailyMacros(
        body_composition=body_composition,
        daily_activity_level=DailyActivityLevel.LIGHTLY_ACTIVE,
        macro_policy=ProteinRatio(grams_per_kg_lean_mass=2.0),
    )
