"""Domain models for intake logging."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from uuid import UUID

from deficiency_tracker.domain.nutrients import Amount, NutrientType


@dataclass(frozen=True)
class FoodEntry:
    """A food eaten, with the nutrient amounts in its serving."""

    name: str
    serving_size: Amount
    nutrients: Mapping[NutrientType, Amount]
    id: UUID | None = None


@dataclass(frozen=True)
class DailyLog:
    """Stored log for one calendar day."""

    id: UUID
    day: date
    entries: list[FoodEntry] = field(default_factory=list)


@dataclass(frozen=True)
class DailyIntakeRecord:
    """Nutrient totals for one calendar day."""

    day: date
    totals: Mapping[NutrientType, Amount]

    def total_for(self, nutrient: NutrientType) -> Amount | None:
        """Return the day's total for a nutrient, if any was logged."""
        return self.totals.get(nutrient)
