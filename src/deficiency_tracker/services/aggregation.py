"""Daily intake aggregation."""

from collections.abc import Iterable
from datetime import date, datetime
from types import MappingProxyType
from zoneinfo import ZoneInfo

from deficiency_tracker.domain.errors import UnitMismatchError
from deficiency_tracker.domain.logs import DailyIntakeRecord, FoodEntry
from deficiency_tracker.domain.nutrients import Amount, NutrientType


def day_key(timestamp: datetime, timezone_name: str) -> date:
    """Return the calendar day of a timestamp in the given timezone.

    Naive timestamps are treated as already local to the profile.
    """
    if timestamp.tzinfo is None:
        return timestamp.date()
    return timestamp.astimezone(ZoneInfo(timezone_name)).date()


def aggregate_day(day: date, entries: Iterable[FoodEntry]) -> DailyIntakeRecord:
    """Sum nutrient amounts across one day's food entries."""
    totals: dict[NutrientType, Amount] = {}
    for entry in entries:
        for nutrient, amount in entry.nutrients.items():
            current = totals.get(nutrient, Amount.zero(amount.unit))
            if current.unit != amount.unit:
                raise UnitMismatchError(
                    expected_unit=current.unit,
                    actual_unit=amount.unit,
                    nutrient=nutrient.value,
                )
            totals[nutrient] = current + amount
    return DailyIntakeRecord(day=day, totals=MappingProxyType(totals))
