"""Intake log service with per-profile serialized access."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from deficiency_tracker.domain.deficiency import PotentialDeficiencyWarning
from deficiency_tracker.domain.errors import UnitMismatchError
from deficiency_tracker.domain.logs import DailyIntakeRecord, DailyLog, FoodEntry
from deficiency_tracker.domain.nutrients import DemographicGroup
from deficiency_tracker.services.aggregation import aggregate_day, day_key
from deficiency_tracker.services.analysis import DeficiencyAnalyzer

_logger = logging.getLogger(__name__)


class IntakeLogRepository(Protocol):
    """Persistence interface for daily logs and food entries."""

    def list_daily_logs(self, profile_id: UUID) -> list[DailyLog]:
        """Return all daily logs with entries, newest day first."""

    def get_daily_log(self, profile_id: UUID, day: date) -> DailyLog | None:
        """Return the log for a day, if present."""

    def create_daily_log(self, profile_id: UUID, day: date) -> DailyLog:
        """Create an empty log for a day.

        If another writer created the day first, return that log instead.
        """

    def create_food_entry(
        self, profile_id: UUID, daily_log_id: UUID, entry: FoodEntry
    ) -> UUID:
        """Attach a food entry to a daily log and return its id."""

    def delete_food_entry(self, profile_id: UUID, entry_id: UUID) -> bool:
        """Delete a food entry; return whether it existed."""

    def delete_daily_log(self, profile_id: UUID, daily_log_id: UUID) -> bool:
        """Delete a daily log and its entries; return whether it existed."""


class ProfileLocks:
    """Registry handing out one lock per profile while the profile is in use.

    A lock is dropped once no caller holds or waits on it, so the registry only
    tracks profiles with operations in flight.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[UUID, threading.Lock] = {}
        self._users: dict[UUID, int] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def hold(self, profile_id: UUID) -> Iterator[None]:
        """Hold a profile's lock for the duration of the block."""
        lock = self._checkout(profile_id)
        try:
            with lock:
                yield
        finally:
            self._release(profile_id)

    def _checkout(self, profile_id: UUID) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(profile_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[profile_id] = lock
            self._users[profile_id] = self._users.get(profile_id, 0) + 1
            return lock

    def _release(self, profile_id: UUID) -> None:
        with self._guard:
            remaining = self._users[profile_id] - 1
            if remaining:
                self._users[profile_id] = remaining
            else:
                del self._users[profile_id]
                del self._locks[profile_id]


@dataclass(frozen=True)
class LoggedFood:
    """Result of adding a food entry."""

    entry_id: UUID
    daily_log_id: UUID
    day: date


@dataclass
class IntakeLogService:
    """Application service for logging food and analysing a profile's history.

    Every operation on a profile's log runs under that profile's lock, so a
    mutation never interleaves with an analysis of the same profile.
    """

    repository: IntakeLogRepository
    analyzer: DeficiencyAnalyzer
    timezone_name: str = "UTC"
    locks: ProfileLocks = field(default_factory=ProfileLocks)

    def add_food(
        self,
        profile_id: UUID,
        entry: FoodEntry,
        logged_at: datetime | None = None,
    ) -> LoggedFood:
        """Add a food entry to the day it was eaten, creating the day if needed.

        Amounts must be in the nutrient's reference unit and agree with the
        units already logged that day; otherwise nothing is written.
        """
        self._check_reference_units(entry)
        timestamp = logged_at or datetime.now(tz=UTC)
        day = day_key(timestamp, self.timezone_name)
        with self.locks.hold(profile_id):
            daily_log = self.repository.get_daily_log(profile_id, day)
            existing = daily_log.entries if daily_log else []
            aggregate_day(day, [*existing, entry])
            if daily_log is None:
                daily_log = self.repository.create_daily_log(profile_id, day)
            entry_id = self.repository.create_food_entry(
                profile_id, daily_log.id, entry
            )
        _logger.info(
            "Logged food: profile=%s day=%s entry=%s", profile_id, day, entry_id
        )
        return LoggedFood(entry_id=entry_id, daily_log_id=daily_log.id, day=day)

    def delete_food(self, profile_id: UUID, entry_id: UUID) -> bool:
        """Delete one food entry."""
        with self.locks.hold(profile_id):
            return self.repository.delete_food_entry(profile_id, entry_id)

    def delete_day(self, profile_id: UUID, daily_log_id: UUID) -> bool:
        """Delete a whole day with its food entries."""
        with self.locks.hold(profile_id):
            return self.repository.delete_daily_log(profile_id, daily_log_id)

    def fetch_all_daily_records(self, profile_id: UUID) -> list[DailyIntakeRecord]:
        """Return aggregated daily totals, newest day first."""
        with self.locks.hold(profile_id):
            return self._load_records(profile_id)

    def analyze(
        self,
        profile_id: UUID,
        demographic: DemographicGroup,
        assumes_prior_deficiency: bool = False,
    ) -> list[PotentialDeficiencyWarning]:
        """Return ranked deficiency warnings for a profile."""
        with self.locks.hold(profile_id):
            history = self._load_records(profile_id)
            return self.analyzer.analyze(
                history,
                demographic,
                assumes_prior_deficiency=assumes_prior_deficiency,
            )

    def _check_reference_units(self, entry: FoodEntry) -> None:
        knowledge_base = self.analyzer.knowledge_base
        for nutrient, amount in entry.nutrients.items():
            unit = knowledge_base.reference_unit(nutrient)
            if unit is not None and amount.unit != unit:
                raise UnitMismatchError(
                    expected_unit=unit, actual_unit=amount.unit, nutrient=nutrient.value
                )

    def _load_records(self, profile_id: UUID) -> list[DailyIntakeRecord]:
        logs = sorted(
            self.repository.list_daily_logs(profile_id),
            key=lambda log: log.day,
            reverse=True,
        )
        return [aggregate_day(log.day, log.entries) for log in logs]
