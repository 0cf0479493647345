"""Nutrient identifiers, demographic groups and amounts."""

from dataclasses import dataclass
from enum import Enum

from deficiency_tracker.domain.errors import UnitMismatchError


class NutrientType(str, Enum):
    """Tracked nutrients; definition order is the analysis order."""

    VITAMIN_A = "vitaminA"
    VITAMIN_B1 = "vitaminB1"
    VITAMIN_B2 = "vitaminB2"
    VITAMIN_B3 = "vitaminB3"
    VITAMIN_B5 = "vitaminB5"
    VITAMIN_B6 = "vitaminB6"
    VITAMIN_B7 = "vitaminB7"
    VITAMIN_B9 = "vitaminB9"
    VITAMIN_B12 = "vitaminB12"
    VITAMIN_C = "vitaminC"
    VITAMIN_D = "vitaminD"
    VITAMIN_E = "vitaminE"
    VITAMIN_K = "vitaminK"
    CALCIUM = "calcium"
    MAGNESIUM = "magnesium"
    PHOSPHORUS = "phosphorus"
    POTASSIUM = "potassium"
    SODIUM = "sodium"
    CHLORIDE = "chloride"
    IRON = "iron"
    ZINC = "zinc"
    COPPER = "copper"
    MANGANESE = "manganese"
    IODINE = "iodine"
    SELENIUM = "selenium"
    MOLYBDENUM = "molybdenum"
    CHROMIUM = "chromium"
    FLUORIDE = "fluoride"
    CARBOHYDRATES = "carbohydrates"
    PROTEINS = "proteins"
    FATS = "fats"
    WATER = "water"
    FIBER = "fiber"


class NutrientCategory(str, Enum):
    """Broad nutrient family."""

    VITAMIN = "vitamin"
    MINERAL = "mineral"
    MACRONUTRIENT = "macronutrient"


class Solubility(str, Enum):
    """Vitamin solubility."""

    WATER_SOLUBLE = "waterSoluble"
    FAT_SOLUBLE = "fatSoluble"


class DemographicGroup(str, Enum):
    """Age, sex and physiological-state bands used to pick an allowance."""

    INFANT = "infant"
    CHILD = "child"
    TEENAGE_MALE = "teenageMale"
    TEENAGE_FEMALE = "teenageFemale"
    ADULT_MALE = "adultMale"
    ADULT_FEMALE = "adultFemale"
    PREGNANT_FEMALE = "pregnantFemale"
    LACTATING_FEMALE = "lactatingFemale"
    ELDERLY_MALE = "elderlyMale"
    ELDERLY_FEMALE = "elderlyFemale"


@dataclass(frozen=True)
class Amount:
    """A quantity with a unit; arithmetic and ordering require equal units."""

    value: float
    unit: str

    @classmethod
    def zero(cls, unit: str) -> "Amount":
        """Return a zero amount in the given unit."""
        return cls(0.0, unit)

    def __add__(self, other: "Amount") -> "Amount":
        if not isinstance(other, Amount):
            return NotImplemented
        self._require_same_unit(other)
        return Amount(self.value + other.value, self.unit)

    def __lt__(self, other: "Amount") -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        self._require_same_unit(other)
        return self.value < other.value

    def __le__(self, other: "Amount") -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        self._require_same_unit(other)
        return self.value <= other.value

    def __gt__(self, other: "Amount") -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        self._require_same_unit(other)
        return self.value > other.value

    def __ge__(self, other: "Amount") -> bool:
        if not isinstance(other, Amount):
            return NotImplemented
        self._require_same_unit(other)
        return self.value >= other.value

    def __str__(self) -> str:
        return f"{self.value:g} {self.unit}"

    def _require_same_unit(self, other: "Amount") -> None:
        if other.unit != self.unit:
            raise UnitMismatchError(expected_unit=self.unit, actual_unit=other.unit)
