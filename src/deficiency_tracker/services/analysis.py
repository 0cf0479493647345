"""Longitudinal deficiency analysis over daily intake history."""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

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
from deficiency_tracker.domain.errors import UnitMismatchError
from deficiency_tracker.domain.logs import DailyIntakeRecord
from deficiency_tracker.domain.nutrients import Amount, DemographicGroup, NutrientType
from deficiency_tracker.services.knowledge_base import KnowledgeBase

_logger = logging.getLogger(__name__)

FAST_TRACK_MIN_DAYS = 7
TURNOVER_MONITORING_DAYS = 3
STORAGE_MONITORING_DAYS = 30
STRUCTURAL_MONITORING_DAYS = 60
ACUTE_MONITORING_DAYS = 3
DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30
HOURS_PER_DAY = 24

Classification = tuple[Severity, str]
_Rule = Callable[[RiskModel, DeficiencyProfile, int, bool], Classification | None]


def count_low_streak(
    nutrient: NutrientType,
    allowance: Amount,
    history: Sequence[DailyIntakeRecord],
) -> int:
    """Count consecutive newest-first records with intake below the allowance.

    Days with no record at all are not part of the sequence and neither
    extend nor break the streak. Raises ``UnitMismatchError`` if a stored total
    is not in the allowance's unit.
    """
    streak = 0
    for record in history:
        intake = record.total_for(nutrient) or Amount.zero(allowance.unit)
        try:
            below = intake < allowance
        except UnitMismatchError as exc:
            raise UnitMismatchError(
                expected_unit=allowance.unit,
                actual_unit=intake.unit,
                nutrient=nutrient.value,
            ) from exc
        if not below:
            break
        streak += 1
    return streak


def classify_streak(
    nutrient: NutrientType,
    profile: DeficiencyProfile,
    days: int,
    assumes_prior_deficiency: bool = False,
) -> Classification | None:
    """Map a low-intake streak to a severity and message, if warranted."""
    rule = _RULES.get(type(profile.risk_model))
    if rule is None:
        raise TypeError(
            f"No risk rule for {type(profile.risk_model).__name__} ({nutrient.value})"
        )
    return rule(profile.risk_model, profile, days, assumes_prior_deficiency)


def rank_warnings(
    warnings: Iterable[PotentialDeficiencyWarning],
) -> list[PotentialDeficiencyWarning]:
    """Order warnings by severity, highest first, keeping evaluation order."""
    return sorted(warnings, key=lambda warning: -warning.severity.rank)


def _daily_essential(
    model: DailyEssential, profile: DeficiencyProfile, days: int, _fast_track: bool
) -> Classification | None:
    onset_days = max(1, model.onset_hours // HOURS_PER_DAY)
    if days >= onset_days:
        return (
            Severity.HIGH_RISK,
            f"Intake has been critically low for {days} day(s). "
            f"Risk of {profile.common_name} is imminent.",
        )
    return None


def _daily_turnover(
    model: DailyTurnover, profile: DeficiencyProfile, days: int, _fast_track: bool
) -> Classification | None:
    onset_days = model.onset_weeks * DAYS_PER_WEEK
    if days >= onset_days:
        return (
            Severity.HIGH_RISK,
            f"Intake low for {days} days, exceeding the {model.onset_weeks}-week "
            f"onset time for {profile.common_name}.",
        )
    if days > onset_days // 2:
        return (
            Severity.WARNING,
            f"Intake low for {days} days. You are approaching the risk window "
            f"for {profile.common_name}.",
        )
    if days > TURNOVER_MONITORING_DAYS:
        return (
            Severity.MONITORING,
            f"Intake low for {days} days. Consistent intake is required to "
            f"avoid {profile.common_name}.",
        )
    return None


def _fast_track(
    depletion_days: int, profile: DeficiencyProfile, days: int, fast_track: bool
) -> Classification | None:
    if fast_track and FAST_TRACK_MIN_DAYS <= days < depletion_days // 2:
        return (
            Severity.MONITORING,
            f"Intake low for {days} days. Fast-track warning: this diet may not "
            f"be meeting long-term needs, risking {profile.common_name}.",
        )
    return None


def _long_term_storage(
    model: LongTermStorage, profile: DeficiencyProfile, days: int, fast_track: bool
) -> Classification | None:
    depletion_days = model.depletion_months * DAYS_PER_MONTH
    fast = _fast_track(depletion_days, profile, days, fast_track)
    if fast:
        return fast
    if days >= depletion_days:
        return (
            Severity.HIGH_RISK,
            f"Intake has been chronically low for {days} days. Body stores may "
            f"be depleted, risking {profile.common_name}.",
        )
    if days > depletion_days // 2:
        return (
            Severity.WARNING,
            f"Intake low for {days} days. This is not sustainable and may be "
            f"depleting body stores ({profile.common_name}).",
        )
    if days > STORAGE_MONITORING_DAYS:
        return (
            Severity.MONITORING,
            f"Intake low for {days} days, over a month. While you have stores, "
            f"{profile.common_name} is a long-term concern.",
        )
    return None


def _structural(
    model: Structural, profile: DeficiencyProfile, days: int, fast_track: bool
) -> Classification | None:
    depletion_days = model.depletion_months * DAYS_PER_MONTH
    fast = _fast_track(depletion_days, profile, days, fast_track)
    if fast:
        return fast
    if days > depletion_days // 2:
        return (
            Severity.WARNING,
            f"Intake has been chronically low for {days} days. "
            f"Risk of {profile.common_name}.",
        )
    if days > STRUCTURAL_MONITORING_DAYS:
        issue = profile.key_symptoms[0] if profile.key_symptoms else "poor health"
        return (
            Severity.MONITORING,
            f"Intake low for {days} days, over 2 months. This can lead to "
            f"long-term issues like {issue.lower()} ({profile.common_name}).",
        )
    return None


def _acute_regulated(
    _model: AcuteRegulated, profile: DeficiencyProfile, days: int, _fast_track: bool
) -> Classification | None:
    if days > ACUTE_MONITORING_DAYS:
        return (
            Severity.MONITORING,
            f"Intake has been low for {days} days. Body levels are tightly "
            f"regulated with no buffer; watch for {profile.common_name}.",
        )
    return None


def _adaptive(
    _model: Adaptive, _profile: DeficiencyProfile, _days: int, _fast_track: bool
) -> Classification | None:
    return None


_RULES: dict[type[RiskModel], _Rule] = {
    DailyEssential: _daily_essential,
    DailyTurnover: _daily_turnover,
    LongTermStorage: _long_term_storage,
    Structural: _structural,
    AcuteRegulated: _acute_regulated,
    Adaptive: _adaptive,
}


@dataclass
class DeficiencyAnalyzer:
    """Turns an intake history into ranked deficiency warnings."""

    knowledge_base: KnowledgeBase

    def analyze(
        self,
        history: Sequence[DailyIntakeRecord],
        demographic: DemographicGroup,
        assumes_prior_deficiency: bool = False,
    ) -> list[PotentialDeficiencyWarning]:
        """Return warnings for a history sorted by day, newest first."""
        if not history:
            return []

        warnings: list[PotentialDeficiencyWarning] = []
        for nutrient in NutrientType:
            allowance = self.knowledge_base.allowance(nutrient, demographic)
            profile = self.knowledge_base.deficiency_profile(nutrient)
            if allowance is None or profile is None:
                _logger.debug(
                    "Skipping %s: allowance=%s profile=%s",
                    nutrient.value,
                    allowance is not None,
                    profile is not None,
                )
                continue

            days = count_low_streak(nutrient, allowance, history)
            if days == 0:
                continue
            result = classify_streak(nutrient, profile, days, assumes_prior_deficiency)
            if result is None:
                continue
            severity, message = result
            warnings.append(
                PotentialDeficiencyWarning(
                    nutrient=nutrient,
                    consecutive_days_low=days,
                    message=message,
                    severity=severity,
                    deficiency_profile=profile,
                )
            )

        ranked = rank_warnings(warnings)
        _logger.info(
            "Deficiency analysis: days=%s demographic=%s fast_track=%s warnings=%s",
            len(history),
            demographic.value,
            assumes_prior_deficiency,
            len(ranked),
        )
        return ranked
