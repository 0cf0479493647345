"""Supabase repository for daily intake logs."""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from deficiency_tracker.domain.errors import StoreUnavailableError
from deficiency_tracker.domain.logs import DailyLog, FoodEntry
from deficiency_tracker.domain.nutrients import Amount, NutrientType
from deficiency_tracker.services.intake_log import IntakeLogRepository

_logger = logging.getLogger(__name__)

_ENTRY_COLUMNS = "id, name, serving_size, nutrients"
_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseIntakeLogRepository(IntakeLogRepository):
    """Supabase implementation for daily logs and food entries."""

    client: Client

    def list_daily_logs(self, profile_id: UUID) -> list[DailyLog]:
        """Return all daily logs with their entries, newest first."""
        response = _execute(
            self.client.table("daily_logs")
            .select(f"id, day, food_entries({_ENTRY_COLUMNS})")
            .eq("profile_id", str(profile_id))
            .order("day", desc=True),
            action="list daily logs",
        )
        return [_parse_log(row) for row in response.data or []]

    def get_daily_log(self, profile_id: UUID, day: date) -> DailyLog | None:
        """Return the log for a day with its entries."""
        response = _execute(
            self.client.table("daily_logs")
            .select(f"id, day, food_entries({_ENTRY_COLUMNS})")
            .eq("profile_id", str(profile_id))
            .eq("day", day.isoformat())
            .limit(1),
            action="get daily log",
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def create_daily_log(self, profile_id: UUID, day: date) -> DailyLog:
        """Create an empty daily log row, or return the one a concurrent writer made.

        Relies on the unique (profile_id, day) constraint on ``daily_logs``.
        """
        try:
            response = _execute(
                self.client.table("daily_logs").insert(
                    {"profile_id": str(profile_id), "day": day.isoformat()}
                ),
                action="create daily log",
            )
        except StoreUnavailableError as exc:
            cause = exc.__cause__
            if not isinstance(cause, APIError) or cause.code != _UNIQUE_VIOLATION:
                raise
            _logger.info("Daily log already exists: profile=%s day=%s", profile_id, day)
            existing = self.get_daily_log(profile_id, day)
            if existing is None:
                raise
            return existing
        if not response.data:
            raise StoreUnavailableError("Failed to create daily log")
        row = response.data[0]
        return DailyLog(id=UUID(row["id"]), day=date.fromisoformat(row["day"]))

    def create_food_entry(
        self, profile_id: UUID, daily_log_id: UUID, entry: FoodEntry
    ) -> UUID:
        """Create a food entry row and return its id."""
        response = _execute(
            self.client.table("food_entries").insert(
                {
                    "profile_id": str(profile_id),
                    "daily_log_id": str(daily_log_id),
                    "name": entry.name,
                    "serving_size": _dump_amount(entry.serving_size),
                    "nutrients": {
                        nutrient.value: _dump_amount(amount)
                        for nutrient, amount in entry.nutrients.items()
                    },
                }
            ),
            action="create food entry",
        )
        if not response.data:
            raise StoreUnavailableError("Failed to create food entry")
        return UUID(response.data[0]["id"])

    def delete_food_entry(self, profile_id: UUID, entry_id: UUID) -> bool:
        """Delete a food entry owned by the profile."""
        response = _execute(
            self.client.table("food_entries")
            .delete()
            .eq("id", str(entry_id))
            .eq("profile_id", str(profile_id)),
            action="delete food entry",
        )
        return bool(response.data)

    def delete_daily_log(self, profile_id: UUID, daily_log_id: UUID) -> bool:
        """Delete a daily log; entries cascade in the database."""
        response = _execute(
            self.client.table("daily_logs")
            .delete()
            .eq("id", str(daily_log_id))
            .eq("profile_id", str(profile_id)),
            action="delete daily log",
        )
        return bool(response.data)


def _execute(query, *, action: str):  # type: ignore[no-untyped-def]
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as exc:
        raise StoreUnavailableError(f"Intake log store failed to {action}") from exc


def _parse_log(row: dict[str, object]) -> DailyLog:
    entries = row.get("food_entries") or []
    return DailyLog(
        id=UUID(str(row["id"])),
        day=date.fromisoformat(str(row["day"])),
        entries=[_parse_entry(entry) for entry in entries],
    )


def _parse_entry(row: dict[str, object]) -> FoodEntry:
    nutrients: dict[NutrientType, Amount] = {}
    raw_nutrients = row.get("nutrients") or {}
    for key, raw_amount in raw_nutrients.items():
        try:
            nutrient = NutrientType(key)
        except ValueError:
            _logger.warning("Ignoring unknown nutrient %r in entry %s", key, row["id"])
            continue
        nutrients[nutrient] = _parse_amount(raw_amount)
    return FoodEntry(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        serving_size=_parse_amount(row.get("serving_size") or {}),
        nutrients=nutrients,
    )


def _parse_amount(raw: dict[str, object]) -> Amount:
    return Amount(value=float(raw.get("value", 0.0)), unit=str(raw.get("unit", "")))


def _dump_amount(amount: Amount) -> dict[str, object]:
    return {"value": amount.value, "unit": amount.unit}
