"""Daily activity levels and their energy multipliers."""

from dataclasses import dataclass
from enum import Enum

from macro_calculator.domain.units import Calories
from macro_calculator.domain.validation import Valid, Validation, invalid


@dataclass(frozen=True)
class ActivityProfile:
    """Display name and BMR multiplier of an activity level."""

    name: str
    multiplier: float


class DailyActivityLevel(Enum):
    """Activity level applied to BMR to get total daily expenditure."""

    SEDENTARY = ActivityProfile("Sedentary", 1.15)
    MOSTLY_SEDENTARY = ActivityProfile("Mostly Sedentary", 1.35)
    LIGHTLY_ACTIVE = ActivityProfile("Lightly Active", 1.55)
    HIGHLY_ACTIVE = ActivityProfile("Highly Active", 1.75)

    @property
    def display_name(self) -> str:
        return self.value.name

    @property
    def multiplier(self) -> float:
        return self.value.multiplier

    def total_daily_expenditure(self, basal_metabolic_rate: float) -> Calories:
        return Calories(basal_metabolic_rate * self.multiplier)

    @classmethod
    def validate(cls, raw: str) -> Validation["DailyActivityLevel"]:
        """Match ``raw`` case-insensitively against the canonical names."""
        wanted = raw.lower()
        for level in cls:
            if level.display_name.lower() == wanted:
                return Valid(level)
        return invalid("daily_activity_level", f"invalid daily activity level: {raw}")


def activity_level_names() -> list[str]:
    """Return canonical names in display order."""
    return [level.display_name for level in DailyActivityLevel]
