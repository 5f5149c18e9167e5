"""Tests for daily macros and percentage splits."""

import pytest

from macro_calculator.domain.activity import DailyActivityLevel
from macro_calculator.domain.body_composition import BodyComposition
from macro_calculator.domain.macros import (
    DailyMacros,
    Macronutrient,
    PercentageSplit,
    ProteinRatio,
)
from macro_calculator.domain.validation import Invalid, Valid
from tests.conftest import make_body_composition


def test_update_protein_takes_delta_from_carbs() -> None:
    split = PercentageSplit(protein=34, carbs=33, fat=33)

    updated = split.update_protein(40)

    assert updated == PercentageSplit(protein=40, carbs=27, fat=33)
    assert updated.total == pytest.approx(100)


def test_update_protein_overflows_into_fat() -> None:
    split = PercentageSplit(protein=30, carbs=10, fat=60)

    updated = split.update_protein(50)

    assert updated == PercentageSplit(protein=50, carbs=0, fat=50)


def test_update_protein_decrease_gives_to_carbs() -> None:
    split = PercentageSplit(protein=40, carbs=30, fat=30)

    assert split.update_protein(25) == PercentageSplit(protein=25, carbs=45, fat=30)


def test_update_protein_clamps_input() -> None:
    split = PercentageSplit(protein=34, carbs=33, fat=33)

    assert split.update_protein(150) == PercentageSplit(protein=100, carbs=0, fat=0)
    assert split.update_protein(-5) == PercentageSplit(protein=0, carbs=67, fat=33)


def test_update_carbs_only_rebalances_fat() -> None:
    split = PercentageSplit(protein=34, carbs=33, fat=33)

    updated = split.update_carbs(40)

    assert updated == PercentageSplit(protein=34, carbs=40, fat=26)


def test_update_carbs_never_drives_fat_negative() -> None:
    split = PercentageSplit(protein=50, carbs=30, fat=20)

    updated = split.update_carbs(90)

    assert updated == PercentageSplit(protein=50, carbs=50, fat=0)


def test_sum_stays_100_across_edit_sequence() -> None:
    split = PercentageSplit(protein=34, carbs=33, fat=33)
    edits = [
        ("protein", 60),
        ("carbs", 10),
        ("protein", 95),
        ("carbs", 80),
        ("protein", 12.5),
        ("carbs", -20),
        ("protein", 0),
        ("carbs", 100),
    ]

    for field, value in edits:
        if field == "protein":
            split = split.update_protein(value)
        else:
            split = split.update_carbs(value)
        assert split.total == pytest.approx(100)
        for part in (split.protein, split.carbs, split.fat):
            assert 0 <= part <= 100


def test_split_validation_requires_sum_of_100() -> None:
    split = PercentageSplit(protein=40, carbs=40, fat=30)

    result = split.validate()

    assert isinstance(result, Invalid)
    assert result.messages == [
        "percentages must sum to 100: protein 40 + carbs 40 + fat 30 = 110"
    ]


def test_split_validation_tolerates_round_off() -> None:
    split = PercentageSplit(protein=33.3333, carbs=33.3333, fat=33.3334)

    assert split.validate() == Valid(split)
    assert isinstance(PercentageSplit(33.3, 33.3, 33.3).validate(), Invalid)


def test_total_calories_is_bmr_times_multiplier(
    percentage_macros: DailyMacros,
) -> None:
    bmr = percentage_macros.body_composition.basal_metabolic_rate

    assert percentage_macros.total_calories == pytest.approx(bmr * 1.15)


def test_percentage_policy_apportions_calories(percentage_macros: DailyMacros) -> None:
    total = percentage_macros.total_calories
    protein = percentage_macros.protein
    fat = percentage_macros.fat

    assert protein.calories == pytest.approx(total * 0.4)
    assert protein.grams == pytest.approx(total * 0.4 / 4)
    assert protein.percentage == pytest.approx(40)
    assert fat.grams == pytest.approx(total * 0.3 / 9)
    assert percentage_macros.carbohydrate.percentage == pytest.approx(30)


def test_protein_ratio_policy_splits_remainder_evenly(ratio_macros: DailyMacros) -> None:
    lean_kg = ratio_macros.body_composition.lean_muscle_mass.kilograms
    total = ratio_macros.total_calories
    protein_calories = 2.0 * lean_kg * 4

    protein = ratio_macros.protein
    carbohydrate = ratio_macros.carbohydrate
    fat = ratio_macros.fat

    assert protein.grams == pytest.approx(2.0 * lean_kg)
    assert protein.calories == pytest.approx(protein_calories)
    assert carbohydrate.calories == pytest.approx((total - protein_calories) / 2)
    assert fat.calories == pytest.approx(carbohydrate.calories)
    assert fat.grams == pytest.approx(fat.calories / 9)
    assert carbohydrate.grams == pytest.approx(carbohydrate.calories / 4)
    assert (
        protein.percentage + carbohydrate.percentage + fat.percentage
    ) == pytest.approx(100)


def test_protein_ratio_above_total_leaves_no_remainder() -> None:
    macros = DailyMacros(
        body_composition=make_body_composition(),
        daily_activity_level=DailyActivityLevel.SEDENTARY,
        macro_policy=ProteinRatio(grams_per_kg_lean_mass=20.0),
    )

    assert macros.carbohydrate.calories == 0
    assert macros.fat.grams == 0
    assert macros.protein.percentage > 100


def test_breakdown_covers_every_macronutrient(percentage_macros: DailyMacros) -> None:
    breakdown = percentage_macros.breakdown()

    assert set(breakdown) == set(Macronutrient)
    assert breakdown[Macronutrient.PROTEIN] == percentage_macros.protein


def test_calorie_densities() -> None:
    assert Macronutrient.PROTEIN.calories_per_gram == 4
    assert Macronutrient.CARBOHYDRATE.calories_per_gram == 4
    assert Macronutrient.FAT.calories_per_gram == 9


def test_projections_keep_activity_and_policy(ratio_macros: DailyMacros) -> None:
    projections = list(ratio_macros.projections())

    assert [p.body_composition.body_fat_percentage for p in projections] == [
        18,
        16,
        14,
        12,
        10,
        8,
        6,
    ]
    for projected in projections:
        assert projected.daily_activity_level is ratio_macros.daily_activity_level
        assert projected.macro_policy == ratio_macros.macro_policy
        assert projected.total_calories == pytest.approx(ratio_macros.total_calories)


def test_at_body_composition_recomputes(
    ratio_macros: DailyMacros, body_composition: BodyComposition
) -> None:
    heavier = make_body_composition(250, 20)

    moved = ratio_macros.at_body_composition(heavier)

    assert moved.body_composition == heavier
    assert moved.total_calories > ratio_macros.total_calories
    assert ratio_macros.body_composition == body_composition
