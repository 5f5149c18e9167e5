"""Editable weight form."""

import math
from dataclasses import dataclass, replace

from macro_calculator.domain.mass import Mass
from macro_calculator.domain.units import MassUnit
from macro_calculator.domain.validation import Valid, Validation, invalid

RawNumber = float | int | str | None


def parse_optional_number(raw: RawNumber) -> float | None:
    """Parse user-entered text or a number; blank or garbage means absent."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int | float):
        value = float(raw)
    else:
        cleaned = raw.strip()
        if not cleaned:
            return None
        try:
            value = float(cleaned)
        except ValueError:
            return None
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class WeightInput:
    """Partially filled weight: an optional amount plus the selected unit."""

    amount: float | None
    unit: MassUnit

    @classmethod
    def empty(cls, unit: MassUnit = MassUnit.LB) -> "WeightInput":
        return cls(amount=None, unit=unit)

    @classmethod
    def from_mass(cls, mass: Mass) -> "WeightInput":
        return cls(amount=mass.amount, unit=mass.unit)

    def update_amount(self, amount: RawNumber) -> "WeightInput":
        return replace(self, amount=parse_optional_number(amount))

    def validate(self) -> Validation[Mass]:
        if self.amount is None:
            return invalid("weight", "weight amount must be present")
        if self.amount < 0:
            return invalid("weight", "weight amount must be >= 0")
        return Valid(Mass.create(self.amount, self.unit))

    def _convert(self, unit: MassUnit) -> "WeightInput":
        validation = self.validate()
        if isinstance(validation, Valid):
            return WeightInput.from_mass(validation.value.to_unit(unit))
        return replace(self, unit=unit)

    def to_kg(self) -> "WeightInput":
        """Switch to kilograms, converting the amount when it is valid."""
        return self._convert(MassUnit.KG)

    def to_lb(self) -> "WeightInput":
        """Switch to pounds, converting the amount when it is valid."""
        return self._convert(MassUnit.LB)
