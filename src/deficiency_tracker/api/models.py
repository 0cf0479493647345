"""Pydantic models for the HTTP API."""

from dataclasses import asdict
from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from deficiency_tracker.domain.deficiency import (
    AcuteRegulated,
    Adaptive,
    DailyEssential,
    DailyTurnover,
    DeficiencyProfile,
    LongTermStorage,
    PotentialDeficiencyWarning,
    RiskModel,
    Severity,
    Structural,
)
from deficiency_tracker.domain.logs import DailyIntakeRecord, FoodEntry
from deficiency_tracker.domain.nutrients import Amount, NutrientType
from deficiency_tracker.domain.reference import NutrientData

_RISK_MODEL_KINDS: dict[type[RiskModel], str] = {
    DailyEssential: "dailyEssential",
    DailyTurnover: "dailyTurnover",
    LongTermStorage: "longTermStorage",
    Structural: "structural",
    AcuteRegulated: "acuteRegulated",
    Adaptive: "adaptive",
}


class AmountModel(BaseModel):
    """Amount payload."""

    value: float = Field(ge=0)
    unit: str = Field(min_length=1)

    def to_domain(self) -> Amount:
        return Amount(value=self.value, unit=self.unit)

    @classmethod
    def from_domain(cls, amount: Amount) -> "AmountModel":
        return cls(value=amount.value, unit=amount.unit)


class FoodEntryRequest(BaseModel):
    """Food entry to log for a profile."""

    name: str = Field(min_length=1)
    serving_size: AmountModel
    nutrients: dict[NutrientType, AmountModel] = Field(default_factory=dict)
    logged_at: datetime | None = None

    def to_domain(self) -> FoodEntry:
        return FoodEntry(
            name=self.name,
            serving_size=self.serving_size.to_domain(),
            nutrients={
                nutrient: amount.to_domain()
                for nutrient, amount in self.nutrients.items()
            },
        )


class LoggedFoodResponse(BaseModel):
    """Identifiers of a logged food entry."""

    entry_id: UUID
    daily_log_id: UUID
    day: date


class DailyRecordResponse(BaseModel):
    """Aggregated nutrient totals for one day."""

    day: date
    totals: dict[NutrientType, AmountModel]

    @classmethod
    def from_domain(cls, record: DailyIntakeRecord) -> "DailyRecordResponse":
        return cls(
            day=record.day,
            totals={
                nutrient: AmountModel.from_domain(amount)
                for nutrient, amount in record.totals.items()
            },
        )


class DeficiencyProfileResponse(BaseModel):
    """Deficiency profile payload."""

    common_name: str
    risk_model: dict[str, object]
    key_symptoms: list[str]
    at_risk_populations: list[str]

    @classmethod
    def from_domain(cls, profile: DeficiencyProfile) -> "DeficiencyProfileResponse":
        return cls(
            common_name=profile.common_name,
            risk_model={
                "kind": _RISK_MODEL_KINDS[type(profile.risk_model)],
                **asdict(profile.risk_model),
            },
            key_symptoms=list(profile.key_symptoms),
            at_risk_populations=list(profile.at_risk_populations),
        )


class WarningResponse(BaseModel):
    """Potential deficiency warning payload."""

    nutrient: NutrientType
    consecutive_days_low: int
    severity: Severity
    message: str
    deficiency_profile: DeficiencyProfileResponse

    @classmethod
    def from_domain(cls, warning: PotentialDeficiencyWarning) -> "WarningResponse":
        return cls(
            nutrient=warning.nutrient,
            consecutive_days_low=warning.consecutive_days_low,
            severity=warning.severity,
            message=warning.message,
            deficiency_profile=DeficiencyProfileResponse.from_domain(
                warning.deficiency_profile
            ),
        )


class NutrientResponse(BaseModel):
    """Reference data for one nutrient."""

    nutrient: NutrientType
    name: str
    category: str
    chemical_name: str | None = None
    solubility: str | None = None
    allowances: dict[str, AmountModel]
    dietary_sources: list[str]
    deficiency_profile: DeficiencyProfileResponse | None = None

    @classmethod
    def from_domain(
        cls, nutrient: NutrientType, data: NutrientData
    ) -> "NutrientResponse":
        return cls(
            nutrient=nutrient,
            name=data.name,
            category=data.category.value,
            chemical_name=data.chemical_name,
            solubility=data.solubility.value if data.solubility else None,
            allowances={
                group.value: AmountModel.from_domain(amount)
                for group, amount in data.allowances.items()
            },
            dietary_sources=list(data.dietary_sources),
            deficiency_profile=(
                DeficiencyProfileResponse.from_domain(data.deficiency_profile)
                if data.deficiency_profile
                else None
            ),
        )
