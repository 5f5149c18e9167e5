"""Editable body composition form."""

from dataclasses import dataclass, replace

from macro_calculator.domain.body_composition import BodyComposition
from macro_calculator.domain.units import MassUnit
from macro_calculator.domain.validation import Valid, Validation, combine, invalid
from macro_calculator.forms.weight import RawNumber, WeightInput, parse_optional_number


def validate_bodyfat_percentage(percentage: float | None) -> Validation[int]:
    if percentage is None:
        return invalid("bodyfat_percentage", "bodyfat % must be present")
    if not 0 <= percentage <= 100:  # noqa: PLR2004
        return invalid("bodyfat_percentage", "bodyfat % must be between 0 and 100")
    if not float(percentage).is_integer():
        return invalid("bodyfat_percentage", "bodyfat % must be a whole number")
    return Valid(int(percentage))


@dataclass(frozen=True)
class BodyCompositionInput:
    """Partially filled weight and body fat percentage."""

    weight: WeightInput
    bodyfat_percentage: float | None

    @classmethod
    def empty(cls, unit: MassUnit = MassUnit.LB) -> "BodyCompositionInput":
        return cls(weight=WeightInput.empty(unit), bodyfat_percentage=None)

    @classmethod
    def from_body_composition(
        cls, body_composition: BodyComposition
    ) -> "BodyCompositionInput":
        """Pre-fill the form from a validated composition."""
        return cls(
            weight=WeightInput.from_mass(body_composition.body_weight),
            bodyfat_percentage=int(body_composition.body_fat_percentage),
        )

    def update_weight_amount(self, amount: RawNumber) -> "BodyCompositionInput":
        return replace(self, weight=self.weight.update_amount(amount))

    def update_bodyfat_percentage(
        self, percentage: RawNumber
    ) -> "BodyCompositionInput":
        return replace(self, bodyfat_percentage=parse_optional_number(percentage))

    def to_kg(self) -> "BodyCompositionInput":
        return replace(self, weight=self.weight.to_kg())

    def to_lb(self) -> "BodyCompositionInput":
        return replace(self, weight=self.weight.to_lb())

    def validate(self) -> Validation[BodyComposition]:
        """Validate weight and body fat independently, collecting all errors."""
        return combine(
            BodyComposition,
            self.weight.validate(),
            validate_bodyfat_percentage(self.bodyfat_percentage),
        )
