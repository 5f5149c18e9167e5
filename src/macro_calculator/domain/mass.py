"""Mass value denominated in kilograms or pounds."""

from dataclasses import dataclass

from macro_calculator.domain.errors import UnreachableStateError
from macro_calculator.domain.units import KG_PER_LB, LB_PER_KG, MassUnit


@dataclass(frozen=True)
class Mass:
    """A magnitude tagged with exactly one mass unit.

    Arithmetic between masses of different units converts the right-hand
    operand into the left-hand operand's unit first. Negative magnitudes are
    representable; forms reject them before they reach the domain.
    """

    amount: float
    unit: MassUnit

    @classmethod
    def create(cls, amount: float, unit: MassUnit) -> "Mass":
        return cls(float(amount), unit)

    @classmethod
    def create_kg(cls, amount: float) -> "Mass":
        return cls(float(amount), MassUnit.KG)

    @classmethod
    def create_lb(cls, amount: float) -> "Mass":
        return cls(float(amount), MassUnit.LB)

    def to_kg(self) -> "Mass":
        """Return this mass in kilograms."""
        match self.unit:
            case MassUnit.KG:
                return self
            case MassUnit.LB:
                return Mass(self.amount * KG_PER_LB, MassUnit.KG)
        raise UnreachableStateError(self.unit)

    def to_lb(self) -> "Mass":
        """Return this mass in pounds."""
        match self.unit:
            case MassUnit.LB:
                return self
            case MassUnit.KG:
                return Mass(self.amount * LB_PER_KG, MassUnit.LB)
        raise UnreachableStateError(self.unit)

    def to_unit(self, unit: MassUnit) -> "Mass":
        return self.to_kg() if unit.is_kilogram else self.to_lb()

    @property
    def kilograms(self) -> float:
        return self.to_kg().amount

    @property
    def pounds(self) -> float:
        return self.to_lb().amount

    def update_amount(self, amount: float) -> "Mass":
        """Replace the magnitude, keeping the unit."""
        return Mass(float(amount), self.unit)

    def add(self, other: "Mass") -> "Mass":
        return Mass(self.amount + other.to_unit(self.unit).amount, self.unit)

    def subtract(self, other: "Mass") -> "Mass":
        return Mass(self.amount - other.to_unit(self.unit).amount, self.unit)

    def scale(self, factor: float) -> "Mass":
        return Mass(self.amount * factor, self.unit)

    def __str__(self) -> str:
        return f"{self.amount:.1f} {self.unit.label}"
