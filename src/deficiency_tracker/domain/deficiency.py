"""Deficiency risk models and analysis output."""

from dataclasses import dataclass
from enum import Enum

from deficiency_tracker.domain.nutrients import NutrientType


class RiskModel:
    """Base of the closed set of nutrient depletion models."""

    __slots__ = ()


@dataclass(frozen=True)
class DailyEssential(RiskModel):
    """Very fast turnover with no body reserve."""

    onset_hours: int


@dataclass(frozen=True)
class DailyTurnover(RiskModel):
    """Moderate reserve measured in weeks."""

    onset_weeks: int


@dataclass(frozen=True)
class LongTermStorage(RiskModel):
    """Large reserve that takes months to deplete."""

    depletion_months: int


@dataclass(frozen=True)
class Structural(RiskModel):
    """Reserve bound into body structures such as bone."""

    depletion_months: int


@dataclass(frozen=True)
class AcuteRegulated(RiskModel):
    """Tightly regulated; diet alone rarely causes deficiency."""


@dataclass(frozen=True)
class Adaptive(RiskModel):
    """No dietary-onset deficiency model."""


@dataclass(frozen=True)
class DeficiencyProfile:
    """Describes how and in whom a nutrient deficiency develops."""

    common_name: str
    risk_model: RiskModel
    key_symptoms: tuple[str, ...] = ()
    at_risk_populations: tuple[str, ...] = ()


class Severity(str, Enum):
    """Ordinal warning level."""

    MONITORING = "monitoring"
    WARNING = "warning"
    HIGH_RISK = "highRisk"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {
    Severity.MONITORING: 1,
    Severity.WARNING: 2,
    Severity.HIGH_RISK: 3,
}


@dataclass(frozen=True)
class PotentialDeficiencyWarning:
    """A nutrient whose recent intake streak warrants attention."""

    nutrient: NutrientType
    consecutive_days_low: int
    message: str
    severity: Severity
    deficiency_profile: DeficiencyProfile
