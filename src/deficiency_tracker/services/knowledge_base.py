"""Read-only nutrient knowledge base lookups."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from deficiency_tracker.domain.deficiency import DeficiencyProfile
from deficiency_tracker.domain.nutrients import Amount, DemographicGroup, NutrientType
from deficiency_tracker.domain.reference import NUTRIENT_REGISTRY, NutrientData


class KnowledgeBase(Protocol):
    """Lookup interface for nutrient reference data."""

    def allowance(
        self, nutrient: NutrientType, demographic: DemographicGroup
    ) -> Amount | None:
        """Return the recommended daily allowance, if one is defined."""

    def deficiency_profile(self, nutrient: NutrientType) -> DeficiencyProfile | None:
        """Return the deficiency profile, if the nutrient has one."""

    def reference_unit(self, nutrient: NutrientType) -> str | None:
        """Return the unit intake of a nutrient must be logged in, if known."""


@dataclass
class StaticKnowledgeBase(KnowledgeBase):
    """Knowledge base backed by the built-in nutrient registry."""

    registry: Mapping[NutrientType, NutrientData] = field(
        default_factory=lambda: NUTRIENT_REGISTRY
    )

    def allowance(
        self, nutrient: NutrientType, demographic: DemographicGroup
    ) -> Amount | None:
        """Return the allowance for a demographic group."""
        data = self.registry.get(nutrient)
        if data is None:
            return None
        return data.allowances.get(demographic)

    def deficiency_profile(self, nutrient: NutrientType) -> DeficiencyProfile | None:
        """Return the deficiency profile for a nutrient."""
        data = self.registry.get(nutrient)
        if data is None:
            return None
        return data.deficiency_profile

    def reference_unit(self, nutrient: NutrientType) -> str | None:
        """Return the unit all allowances for a nutrient are expressed in."""
        data = self.registry.get(nutrient)
        if data is None or not data.allowances:
            return None
        return next(iter(data.allowances.values())).unit

    def get(self, nutrient: NutrientType) -> NutrientData | None:
        """Return the full reference record."""
        return self.registry.get(nutrient)
