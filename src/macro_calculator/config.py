"""Application configuration."""

import os

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from macro_calculator.domain.units import MassUnit

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

_MASS_UNIT_ALIASES = {
    "kg": MassUnit.KG,
    "kgs": MassUnit.KG,
    "kilogram": MassUnit.KG,
    "kilograms": MassUnit.KG,
    "lb": MassUnit.LB,
    "lbs": MassUnit.LB,
    "pound": MassUnit.LB,
    "pounds": MassUnit.LB,
}


class Settings(BaseSettings):
    """Calculator settings loaded from environment variables."""

    default_mass_unit: str = "lb"
    default_protein_grams_per_kg: float = 2.2
    default_protein_percentage: float = 34.0
    default_carbs_percentage: float = 33.0
    default_fat_percentage: float = 33.0
    percentage_sum_tolerance: float = 0.001
    projection_floor_percentage: int = 6
    projection_step: int = 2
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="MACRO_CALCULATOR_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("default_mass_unit")
    @classmethod
    def _known_mass_unit(cls, value: str) -> str:
        if parse_mass_unit(value) is None:
            raise ValueError(f"unknown mass unit: {value}")
        return value

    @field_validator("projection_step")
    @classmethod
    def _positive_step(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("projection_step must be positive")
        return value

    @field_validator("projection_floor_percentage")
    @classmethod
    def _floor_in_range(cls, value: int) -> int:
        if not 0 <= value < 100:  # noqa: PLR2004
            raise ValueError("projection_floor_percentage must be in [0, 100)")
        return value

    @model_validator(mode="after")
    def _percentages_sum_to_100(self) -> "Settings":
        total = (
            self.default_protein_percentage
            + self.default_carbs_percentage
            + self.default_fat_percentage
        )
        if abs(total - 100.0) > self.percentage_sum_tolerance:
            raise ValueError(
                f"default macro percentages must sum to 100, got {total:g}"
            )
        return self

    @property
    def mass_unit(self) -> MassUnit:
        return parse_mass_unit(self.default_mass_unit) or MassUnit.LB


def parse_mass_unit(raw: str | None) -> MassUnit | None:
    """Parse a mass unit label such as ``kg`` or ``lbs``."""
    if raw is None:
        return None
    return _MASS_UNIT_ALIASES.get(raw.strip().lower())
