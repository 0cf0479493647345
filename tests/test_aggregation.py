"""Tests for daily aggregation."""

from datetime import UTC, date, datetime

import pytest

from deficiency_tracker.domain.errors import UnitMismatchError
from deficiency_tracker.domain.nutrients import Amount, NutrientType
from deficiency_tracker.services.aggregation import aggregate_day, day_key
from tests.conftest import food


def test_aggregate_day_sums_matching_units() -> None:
    record = aggregate_day(
        date(2024, 3, 1),
        [
            food("Orange", vitaminC=(30, "mg")),
            food("Kiwi", vitaminC=(20, "mg"), iron=(0.3, "mg")),
        ],
    )

    assert record.day == date(2024, 3, 1)
    assert record.total_for(NutrientType.VITAMIN_C) == Amount(50, "mg")
    assert record.total_for(NutrientType.IRON) == Amount(0.3, "mg")
    assert record.total_for(NutrientType.WATER) is None


def test_aggregate_day_rejects_unit_mismatch() -> None:
    with pytest.raises(UnitMismatchError) as excinfo:
        aggregate_day(
            date(2024, 3, 1),
            [
                food("Orange", vitaminC=(30, "mg")),
                food("Supplement", vitaminC=(1, "g")),
            ],
        )

    assert excinfo.value.nutrient == "vitaminC"
    assert excinfo.value.expected_unit == "mg"
    assert excinfo.value.actual_unit == "g"


def test_aggregate_day_without_entries_is_empty() -> None:
    record = aggregate_day(date(2024, 3, 1), [])

    assert dict(record.totals) == {}


def test_aggregated_totals_are_read_only() -> None:
    record = aggregate_day(date(2024, 3, 1), [food("Orange", vitaminC=(30, "mg"))])

    with pytest.raises(TypeError):
        record.totals[NutrientType.IRON] = Amount(1, "mg")  # type: ignore[index]


def test_day_key_uses_profile_timezone() -> None:
    late_evening_utc = datetime(2024, 3, 1, 23, 30, tzinfo=UTC)

    assert day_key(late_evening_utc, "UTC") == date(2024, 3, 1)
    assert day_key(late_evening_utc, "Asia/Tokyo") == date(2024, 3, 2)
    assert day_key(late_evening_utc, "America/New_York") == date(2024, 3, 1)


def test_day_key_keeps_naive_timestamps_local() -> None:
    assert day_key(datetime(2024, 3, 1, 23, 30), "Asia/Tokyo") == date(2024, 3, 1)
