"""Body composition domain model."""

from collections.abc import Iterator
from dataclasses import dataclass

from macro_calculator.domain.errors import InvalidBodyFatPercentageError
from macro_calculator.domain.mass import Mass
from macro_calculator.domain.units import Calories

KATCH_MCARDLE_BASE = 370.0
KATCH_MCARDLE_LEAN_FACTOR = 21.6

PROJECTION_FLOOR_PERCENTAGE = 6
PROJECTION_STEP = 2


@dataclass(frozen=True)
class BodyComposition:
    """Validated body weight and body fat percentage.

    Fat mass, lean mass and basal metabolic rate are derived on access and
    never stored.
    """

    body_weight: Mass
    body_fat_percentage: int

    @property
    def fat_mass(self) -> Mass:
        return self.body_weight.scale(self.body_fat_percentage / 100)

    @property
    def lean_muscle_mass(self) -> Mass:
        return self.body_weight.subtract(self.fat_mass)

    @property
    def basal_metabolic_rate(self) -> Calories:
        """Katch-McArdle BMR in kcal/day: 370 + 21.6 x lean mass in kg."""
        return Calories(
            KATCH_MCARDLE_BASE
            + KATCH_MCARDLE_LEAN_FACTOR * self.lean_muscle_mass.kilograms
        )

    def at_body_fat_percentage(self, percentage: int) -> "BodyComposition":
        """Return the composition at another body fat %, holding lean mass fixed.

        The new weight keeps the unit of the current weight. A percentage of
        100 has no finite weight and is rejected.
        """
        if percentage == self.body_fat_percentage:
            return self
        if not 0 <= percentage < 100:  # noqa: PLR2004
            raise InvalidBodyFatPercentageError(percentage)
        new_weight = self.lean_muscle_mass.scale(100 / (100 - percentage))
        return BodyComposition(body_weight=new_weight, body_fat_percentage=percentage)

    def projections(
        self,
        floor: int = PROJECTION_FLOOR_PERCENTAGE,
        step: int = PROJECTION_STEP,
    ) -> Iterator["BodyComposition"]:
        """Yield compositions at descending body fat % down to ``floor``.

        Starts from the current percentage and steps down by ``step``; the
        current composition itself is skipped.
        """
        for percentage in range(self.body_fat_percentage, floor - 1, -step):
            projected = self.at_body_fat_percentage(percentage)
            if projected == self:
                continue
            yield projected
