"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

import pytest

from deficiency_tracker.config import Settings
from deficiency_tracker.containers import AppContainer
from deficiency_tracker.domain.errors import StoreUnavailableError
from deficiency_tracker.domain.logs import DailyLog, FoodEntry
from deficiency_tracker.domain.nutrients import Amount, DemographicGroup, NutrientType
from deficiency_tracker.services.analysis import DeficiencyAnalyzer
from deficiency_tracker.services.intake_log import IntakeLogRepository, IntakeLogService
from deficiency_tracker.services.knowledge_base import StaticKnowledgeBase


@dataclass
class InMemoryIntakeLogRepository(IntakeLogRepository):
    """In-memory intake log repository for tests."""

    logs: dict[UUID, dict[str, object]] = field(default_factory=dict)
    entries: dict[UUID, dict[str, object]] = field(default_factory=dict)

    def list_daily_logs(self, profile_id: UUID) -> list[DailyLog]:
        rows = [
            (log_id, row)
            for log_id, row in self.logs.items()
            if row["profile_id"] == profile_id
        ]
        rows.sort(key=lambda item: item[1]["day"], reverse=True)
        return [self._to_log(log_id, row) for log_id, row in rows]

    def get_daily_log(self, profile_id: UUID, day: date) -> DailyLog | None:
        for log_id, row in self.logs.items():
            if row["profile_id"] == profile_id and row["day"] == day:
                return self._to_log(log_id, row)
        return None

    def create_daily_log(self, profile_id: UUID, day: date) -> DailyLog:
        existing = self.get_daily_log(profile_id, day)
        if existing is not None:
            return existing
        log_id = uuid4()
        self.logs[log_id] = {"profile_id": profile_id, "day": day}
        return DailyLog(id=log_id, day=day)

    def create_food_entry(
        self, profile_id: UUID, daily_log_id: UUID, entry: FoodEntry
    ) -> UUID:
        entry_id = uuid4()
        self.entries[entry_id] = {
            "profile_id": profile_id,
            "daily_log_id": daily_log_id,
            "entry": entry,
        }
        return entry_id

    def delete_food_entry(self, profile_id: UUID, entry_id: UUID) -> bool:
        row = self.entries.get(entry_id)
        if row is None or row["profile_id"] != profile_id:
            return False
        del self.entries[entry_id]
        return True

    def delete_daily_log(self, profile_id: UUID, daily_log_id: UUID) -> bool:
        row = self.logs.get(daily_log_id)
        if row is None or row["profile_id"] != profile_id:
            return False
        del self.logs[daily_log_id]
        for entry_id in [
            entry_id
            for entry_id, entry in self.entries.items()
            if entry["daily_log_id"] == daily_log_id
        ]:
            del self.entries[entry_id]
        return True

    def _to_log(self, log_id: UUID, row: dict[str, object]) -> DailyLog:
        entries = [
            FoodEntry(
                id=entry_id,
                name=data["entry"].name,
                serving_size=data["entry"].serving_size,
                nutrients=data["entry"].nutrients,
            )
            for entry_id, data in self.entries.items()
            if data["daily_log_id"] == log_id
        ]
        return DailyLog(id=log_id, day=row["day"], entries=entries)


@dataclass
class UnavailableIntakeLogRepository(IntakeLogRepository):
    """Repository whose every call fails as if the store were down."""

    def list_daily_logs(self, profile_id: UUID) -> list[DailyLog]:
        raise StoreUnavailableError("store down")

    def get_daily_log(self, profile_id: UUID, day: date) -> DailyLog | None:
        raise StoreUnavailableError("store down")

    def create_daily_log(self, profile_id: UUID, day: date) -> DailyLog:
        raise StoreUnavailableError("store down")

    def create_food_entry(
        self, profile_id: UUID, daily_log_id: UUID, entry: FoodEntry
    ) -> UUID:
        raise StoreUnavailableError("store down")

    def delete_food_entry(self, profile_id: UUID, entry_id: UUID) -> bool:
        raise StoreUnavailableError("store down")

    def delete_daily_log(self, profile_id: UUID, daily_log_id: UUID) -> bool:
        raise StoreUnavailableError("store down")


def food(name: str, **nutrients: tuple[float, str]) -> FoodEntry:
    """Build a food entry from nutrient values keyed by enum value."""
    return FoodEntry(
        name=name,
        serving_size=Amount(100, "g"),
        nutrients={
            NutrientType(key): Amount(value, unit)
            for key, (value, unit) in nutrients.items()
        },
    )


def full_day() -> FoodEntry:
    """A food entry meeting every adult female allowance."""
    knowledge_base = StaticKnowledgeBase()
    nutrients = {}
    for nutrient in NutrientType:
        allowance = knowledge_base.allowance(nutrient, DemographicGroup.ADULT_FEMALE)
        if allowance is not None:
            nutrients[nutrient] = Amount(allowance.value, allowance.unit)
    return FoodEntry(
        name="Everything", serving_size=Amount(1, "serving"), nutrients=nutrients
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def knowledge_base() -> StaticKnowledgeBase:
    return StaticKnowledgeBase()


@pytest.fixture
def analyzer(knowledge_base: StaticKnowledgeBase) -> DeficiencyAnalyzer:
    return DeficiencyAnalyzer(knowledge_base)


@pytest.fixture
def intake_log_repository() -> InMemoryIntakeLogRepository:
    return InMemoryIntakeLogRepository()


@pytest.fixture
def intake_log_service(
    intake_log_repository: InMemoryIntakeLogRepository,
    analyzer: DeficiencyAnalyzer,
) -> IntakeLogService:
    return IntakeLogService(repository=intake_log_repository, analyzer=analyzer)


@pytest.fixture
def container(
    settings: Settings,
    knowledge_base: StaticKnowledgeBase,
    analyzer: DeficiencyAnalyzer,
    intake_log_service: IntakeLogService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        knowledge_base=knowledge_base,
        analyzer=analyzer,
        intake_log_service=intake_log_service,
        default_demographic=DemographicGroup.ADULT_FEMALE,
    )
