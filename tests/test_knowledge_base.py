"""Tests for the built-in nutrient knowledge base."""

import pytest

from deficiency_tracker.domain.deficiency import (
    AcuteRegulated,
    Adaptive,
    DailyEssential,
    DailyTurnover,
    LongTermStorage,
    Structural,
)
from deficiency_tracker.domain.nutrients import (
    Amount,
    DemographicGroup,
    NutrientCategory,
    NutrientType,
    Solubility,
)
from deficiency_tracker.domain.reference import NUTRIENT_REGISTRY
from deficiency_tracker.services.knowledge_base import StaticKnowledgeBase


def test_registry_covers_every_nutrient_in_order() -> None:
    assert list(NUTRIENT_REGISTRY) == list(NutrientType)


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        NUTRIENT_REGISTRY[NutrientType.IRON] = None  # type: ignore[index]


def test_every_nutrient_has_an_allowance_per_group() -> None:
    for nutrient, data in NUTRIENT_REGISTRY.items():
        assert set(data.allowances) == set(DemographicGroup), nutrient
        units = {amount.unit for amount in data.allowances.values()}
        assert len(units) == 1, nutrient


def test_allowance_lookup(knowledge_base) -> None:
    assert knowledge_base.allowance(
        NutrientType.VITAMIN_C, DemographicGroup.ADULT_FEMALE
    ) == Amount(75, "mg")
    assert knowledge_base.allowance(
        NutrientType.IRON, DemographicGroup.PREGNANT_FEMALE
    ) == Amount(27, "mg")
    assert knowledge_base.allowance(
        NutrientType.WATER, DemographicGroup.ADULT_MALE
    ) == Amount(3.7, "L")


def test_vitamin_d_allowance_uses_plain_micrograms(knowledge_base) -> None:
    allowance = knowledge_base.allowance(
        NutrientType.VITAMIN_D, DemographicGroup.ELDERLY_FEMALE
    )

    assert allowance == Amount(20, "µg")


def test_fiber_has_no_deficiency_profile(knowledge_base) -> None:
    assert knowledge_base.deficiency_profile(NutrientType.FIBER) is None
    assert knowledge_base.allowance(
        NutrientType.FIBER, DemographicGroup.ADULT_FEMALE
    ) == Amount(25, "g")


@pytest.mark.parametrize(
    ("nutrient", "model"),
    [
        (NutrientType.WATER, DailyEssential(onset_hours=72)),
        (NutrientType.VITAMIN_C, DailyTurnover(onset_weeks=4)),
        (NutrientType.VITAMIN_B12, LongTermStorage(depletion_months=36)),
        (NutrientType.CALCIUM, Structural(depletion_months=12)),
        (NutrientType.SODIUM, AcuteRegulated()),
        (NutrientType.MANGANESE, Adaptive()),
    ],
)
def test_risk_models(knowledge_base, nutrient: NutrientType, model) -> None:
    profile = knowledge_base.deficiency_profile(nutrient)

    assert profile is not None
    assert profile.risk_model == model


def test_reference_record_details(knowledge_base) -> None:
    data = knowledge_base.get(NutrientType.VITAMIN_B1)
    assert data is not None
    assert data.chemical_name == "Thiamine"
    assert data.category is NutrientCategory.VITAMIN
    assert data.solubility is Solubility.WATER_SOLUBLE


def test_reference_unit_matches_allowances(knowledge_base) -> None:
    assert knowledge_base.reference_unit(NutrientType.VITAMIN_C) == "mg"
    assert knowledge_base.reference_unit(NutrientType.VITAMIN_D) == "µg"
    assert knowledge_base.reference_unit(NutrientType.WATER) == "L"
    assert knowledge_base.reference_unit(NutrientType.FIBER) == "g"


def test_lookups_outside_registry_return_none() -> None:
    knowledge_base = StaticKnowledgeBase(registry={})

    assert (
        knowledge_base.allowance(NutrientType.IRON, DemographicGroup.ADULT_MALE)
        is None
    )
    assert knowledge_base.deficiency_profile(NutrientType.IRON) is None
    assert knowledge_base.reference_unit(NutrientType.IRON) is None
