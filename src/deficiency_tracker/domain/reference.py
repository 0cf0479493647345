"""Static nutrient reference data.

Allowances are per demographic group, listed in ``DemographicGroup`` order:
infant, child, teenage male, teenage female, adult male, adult female,
pregnant, lactating, elderly male, elderly female.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from deficiency_tracker.domain.deficiency import (
    AcuteRegulated,
    Adaptive,
    DailyEssential,
    DailyTurnover,
    DeficiencyProfile,
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


@dataclass(frozen=True)
class NutrientData:
    """Reference record for one nutrient."""

    name: str
    category: NutrientCategory
    allowances: Mapping[DemographicGroup, Amount]
    dietary_sources: tuple[str, ...] = ()
    deficiency_profile: DeficiencyProfile | None = None
    chemical_name: str | None = None
    solubility: Solubility | None = None


def _allowances(unit: str, *values: float) -> Mapping[DemographicGroup, Amount]:
    groups = list(DemographicGroup)
    if len(values) != len(groups):
        raise ValueError(f"Expected {len(groups)} allowances, got {len(values)}")
    return MappingProxyType(
        {group: Amount(float(value), unit) for group, value in zip(groups, values)}
    )


_VITAMINS = {
    NutrientType.VITAMIN_A: NutrientData(
        name="Vitamin A",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.FAT_SOLUBLE,
        allowances=_allowances(
            "µg RAE", 400, 600, 900, 700, 900, 700, 770, 1300, 900, 700
        ),
        dietary_sources=("Liver", "Carrots", "Eggs", "Leafy greens"),
        deficiency_profile=DeficiencyProfile(
            common_name="Vitamin A deficiency",
            risk_model=LongTermStorage(depletion_months=12),
            key_symptoms=("Night blindness", "Dry eyes", "Frequent infections"),
            at_risk_populations=(
                "Young children",
                "Pregnant and lactating women",
                "People with fat malabsorption",
            ),
        ),
    ),
    NutrientType.VITAMIN_B1: NutrientData(
        name="Vitamin B1",
        chemical_name="Thiamine",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.WATER_SOLUBLE,
        allowances=_allowances("mg", 0.3, 0.6, 1.2, 1.0, 1.2, 1.1, 1.4, 1.4, 1.2, 1.1),
        deficiency_profile=DeficiencyProfile(
            common_name="Beriberi",
            risk_model=DailyTurnover(onset_weeks=3),
            key_symptoms=("Fatigue", "Irritability", "Peripheral neuropathy"),
            at_risk_populations=(
                "People with alcohol use disorder",
                "Older adults",
                "Diets based on polished rice",
            ),
        ),
    ),
    NutrientType.VITAMIN_B2: NutrientData(
        name="Vitamin B2",
        chemical_name="Riboflavin",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.WATER_SOLUBLE,
        allowances=_allowances("mg", 0.4, 0.6, 1.3, 1.0, 1.3, 1.1, 1.4, 1.6, 1.3, 1.1),
        deficiency_profile=DeficiencyProfile(
            common_name="Ariboflavinosis",
            risk_model=DailyTurnover(onset_weeks=8),
            key_symptoms=("Cracked lips", "Sore throat", "Inflamed tongue"),
            at_risk_populations=("Vegans", "Athletes who avoid dairy"),
        ),
    ),
    NutrientType.VITAMIN_B3: NutrientData(
        name="Vitamin B3",
        chemical_name="Niacin",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.WATER_SOLUBLE,
        allowances=_allowances("mg", 2, 8, 16, 14, 16, 14, 18, 17, 16, 14),
        deficiency_profile=DeficiencyProfile(
            common_name="Pellagra",
            risk_model=DailyTurnover(onset_weeks=8),
            key_symptoms=("Dermatitis", "Diarrhea", "Confusion"),
            at_risk_populations=(
                "Diets based on untreated maize",
                "People with alcohol use disorder",
            ),
        ),
    ),
    NutrientType.VITAMIN_B5: NutrientData(
        name="Vitamin B5",
        chemical_name="Pantothenic Acid",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.WATER_SOLUBLE,
        allowances=_allowances("mg", 1.8, 3, 5, 5, 5, 5, 6, 7, 5, 5),
        deficiency_profile=DeficiencyProfile(
            common_name="Pantothenic acid deficiency",
            risk_model=Adaptive(),
            key_symptoms=("Numbness and burning of the feet",),
            at_risk_populations=("Severe malnutrition",),
        ),
    ),
    NutrientType.VITAMIN_B6: NutrientData(
        name="Vitamin B6",
        chemical_name="Pyridoxine",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.WATER_SOLUBLE,
        allowances=_allowances("mg", 0.3, 0.6, 1.3, 1.2, 1.3, 1.3, 1.9, 2.0, 1.7, 1.5),
        deficiency_profile=DeficiencyProfile(
            common_name="Vitamin B6 deficiency",
            risk_model=DailyTurnover(onset_weeks=6),
            key_symptoms=("Microcytic anemia", "Depression", "Cheilosis"),
            at_risk_populations=(
                "People with kidney disease",
                "People with autoimmune disorders",
            ),
        ),
    ),
    NutrientType.VITAMIN_B7: NutrientData(
        name="Vitamin B7",
        chemical_name="Biotin",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.WATER_SOLUBLE,
        allowances=_allowances("µg", 5, 12, 25, 25, 30, 30, 30, 35, 30, 30),
        deficiency_profile=DeficiencyProfile(
            common_name="Biotin deficiency",
            risk_model=Adaptive(),
            key_symptoms=("Thinning hair", "Scaly rash"),
            at_risk_populations=("People regularly eating raw egg whites",),
        ),
    ),
    NutrientType.VITAMIN_B9: NutrientData(
        name="Vitamin B9",
        chemical_name="Folate (Folic Acid)",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.WATER_SOLUBLE,
        allowances=_allowances(
            "µg DFE", 65, 150, 400, 400, 400, 400, 600, 500, 400, 400
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Folate deficiency anemia",
            risk_model=LongTermStorage(depletion_months=4),
            key_symptoms=("Fatigue", "Megaloblastic anemia", "Mouth sores"),
            at_risk_populations=(
                "Pregnant women",
                "People with alcohol use disorder",
                "People with malabsorption",
            ),
        ),
    ),
    NutrientType.VITAMIN_B12: NutrientData(
        name="Vitamin B12",
        chemical_name="Cobalamin",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.WATER_SOLUBLE,
        allowances=_allowances("µg", 0.4, 1.2, 2.4, 2.4, 2.4, 2.4, 2.6, 2.8, 2.4, 2.4),
        deficiency_profile=DeficiencyProfile(
            common_name="Vitamin B12 deficiency anemia",
            risk_model=LongTermStorage(depletion_months=36),
            key_symptoms=("Fatigue", "Tingling in hands and feet", "Memory problems"),
            at_risk_populations=("Vegans", "Older adults", "People taking metformin"),
        ),
    ),
    NutrientType.VITAMIN_C: NutrientData(
        name="Vitamin C",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.WATER_SOLUBLE,
        allowances=_allowances("mg", 40, 45, 75, 65, 90, 75, 85, 120, 90, 75),
        dietary_sources=("Citrus fruits", "Berries", "Bell peppers"),
        deficiency_profile=DeficiencyProfile(
            common_name="Scurvy",
            risk_model=DailyTurnover(onset_weeks=4),
            key_symptoms=("Bleeding gums", "Easy bruising", "Slow wound healing"),
            at_risk_populations=("Smokers", "People with very limited diets"),
        ),
    ),
    NutrientType.VITAMIN_D: NutrientData(
        name="Vitamin D",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.FAT_SOLUBLE,
        allowances=_allowances("µg", 10, 15, 15, 15, 15, 15, 15, 15, 20, 20),
        dietary_sources=("Sunlight", "Fatty fish", "Fortified milk"),
        deficiency_profile=DeficiencyProfile(
            common_name="Rickets / osteomalacia",
            risk_model=LongTermStorage(depletion_months=2),
            key_symptoms=("Bone pain", "Muscle weakness", "Frequent fractures"),
            at_risk_populations=(
                "People with limited sun exposure",
                "Older adults",
                "Breastfed infants",
            ),
        ),
    ),
    NutrientType.VITAMIN_E: NutrientData(
        name="Vitamin E",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.FAT_SOLUBLE,
        allowances=_allowances("mg", 4, 7, 15, 15, 15, 15, 15, 19, 15, 15),
        dietary_sources=("Nuts", "Seeds", "Vegetable oils"),
        deficiency_profile=DeficiencyProfile(
            common_name="Vitamin E deficiency",
            risk_model=LongTermStorage(depletion_months=12),
            key_symptoms=("Muscle weakness", "Loss of coordination", "Vision problems"),
            at_risk_populations=("People with fat malabsorption", "Premature infants"),
        ),
    ),
    NutrientType.VITAMIN_K: NutrientData(
        name="Vitamin K",
        category=NutrientCategory.VITAMIN,
        solubility=Solubility.FAT_SOLUBLE,
        allowances=_allowances("µg", 2, 30, 75, 75, 120, 90, 90, 90, 120, 90),
        dietary_sources=("Leafy greens", "Vegetable oils"),
        deficiency_profile=DeficiencyProfile(
            common_name="Vitamin K deficiency bleeding",
            risk_model=DailyTurnover(onset_weeks=2),
            key_symptoms=("Easy bruising", "Excessive bleeding"),
            at_risk_populations=("Newborns", "People on long-term antibiotics"),
        ),
    ),
}

_MINERALS = {
    NutrientType.CALCIUM: NutrientData(
        name="Calcium",
        category=NutrientCategory.MINERAL,
        allowances=_allowances(
            "mg", 200, 700, 1300, 1300, 1000, 1000, 1000, 1000, 1200, 1200
        ),
        dietary_sources=(
            "Cheese",
            "Yogurt",
            "Milk",
            "Sardines with bones",
            "Spinach",
            "Tofu",
            "Fortified plant milk",
            "Almonds",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Osteoporosis",
            risk_model=Structural(depletion_months=12),
            key_symptoms=("Reduced bone density", "Muscle cramps", "Brittle nails"),
            at_risk_populations=(
                "Postmenopausal women",
                "People with lactose intolerance",
                "Vegans",
            ),
        ),
    ),
    NutrientType.MAGNESIUM: NutrientData(
        name="Magnesium",
        category=NutrientCategory.MINERAL,
        allowances=_allowances("mg", 30, 130, 410, 360, 420, 320, 350, 310, 420, 320),
        dietary_sources=(
            "Pumpkin seeds",
            "Almonds",
            "Spinach",
            "Cashews",
            "Black beans",
            "Dark chocolate",
            "Avocado",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Hypomagnesemia",
            risk_model=AcuteRegulated(),
            key_symptoms=("Muscle cramps", "Fatigue", "Irregular heartbeat"),
            at_risk_populations=(
                "People with type 2 diabetes",
                "People with alcohol use disorder",
                "Older adults",
            ),
        ),
    ),
    NutrientType.PHOSPHORUS: NutrientData(
        name="Phosphorus",
        category=NutrientCategory.MINERAL,
        allowances=_allowances(
            "mg", 100, 460, 1250, 1250, 700, 700, 700, 700, 700, 700
        ),
        dietary_sources=(
            "Meat",
            "Fish",
            "Dairy products",
            "Eggs",
            "Nuts",
            "Legumes",
            "Whole grains",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Hypophosphatemia",
            risk_model=Structural(depletion_months=6),
            key_symptoms=("Bone pain", "Weakness", "Loss of appetite"),
            at_risk_populations=("Premature infants", "People with refeeding syndrome"),
        ),
    ),
    NutrientType.POTASSIUM: NutrientData(
        name="Potassium",
        category=NutrientCategory.MINERAL,
        allowances=_allowances(
            "mg", 400, 3000, 4700, 4700, 4700, 4700, 4700, 5100, 4700, 4700
        ),
        dietary_sources=(
            "Potatoes",
            "Bananas",
            "Spinach",
            "Beans",
            "Avocado",
            "Tomatoes",
            "Orange juice",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Hypokalemia",
            risk_model=AcuteRegulated(),
            key_symptoms=("Muscle weakness", "Constipation", "Palpitations"),
            at_risk_populations=(
                "People taking diuretics",
                "People with chronic diarrhea",
            ),
        ),
    ),
    NutrientType.SODIUM: NutrientData(
        name="Sodium",
        category=NutrientCategory.MINERAL,
        allowances=_allowances(
            "mg", 120, 1000, 1500, 1500, 1500, 1500, 1500, 1500, 1500, 1500
        ),
        dietary_sources=(
            "Table salt",
            "Processed foods",
            "Soy sauce",
            "Cured meats",
            "Cheese",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Hyponatremia",
            risk_model=AcuteRegulated(),
            key_symptoms=("Headache", "Nausea", "Confusion"),
            at_risk_populations=("Endurance athletes", "Older adults"),
        ),
    ),
    NutrientType.CHLORIDE: NutrientData(
        name="Chloride",
        category=NutrientCategory.MINERAL,
        allowances=_allowances("g", 0.5, 1.5, 2.3, 2.3, 2.3, 2.3, 2.3, 2.3, 2.3, 2.3),
        dietary_sources=("Table salt", "Seaweed", "Rye", "Tomatoes", "Lettuce"),
        deficiency_profile=DeficiencyProfile(
            common_name="Hypochloremia",
            risk_model=AcuteRegulated(),
            key_symptoms=("Dehydration", "Weakness"),
            at_risk_populations=("People with prolonged vomiting",),
        ),
    ),
    NutrientType.IRON: NutrientData(
        name="Iron",
        category=NutrientCategory.MINERAL,
        allowances=_allowances("mg", 11, 7, 11, 15, 8, 18, 27, 9, 8, 8),
        dietary_sources=(
            "Beef liver",
            "Clams",
            "Red meat",
            "Spinach",
            "Lentils",
            "Fortified cereals",
            "Tofu",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Iron deficiency anemia",
            risk_model=LongTermStorage(depletion_months=6),
            key_symptoms=("Fatigue", "Pale skin", "Shortness of breath"),
            at_risk_populations=(
                "Menstruating women",
                "Pregnant women",
                "Infants and young children",
                "Vegetarians",
            ),
        ),
    ),
    NutrientType.ZINC: NutrientData(
        name="Zinc",
        category=NutrientCategory.MINERAL,
        allowances=_allowances("mg", 3, 5, 11, 9, 11, 8, 11, 12, 11, 8),
        dietary_sources=(
            "Oysters",
            "Beef",
            "Crab",
            "Lamb",
            "Pumpkin seeds",
            "Chickpeas",
            "Cashews",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Zinc deficiency",
            risk_model=DailyTurnover(onset_weeks=2),
            key_symptoms=("Loss of taste", "Hair loss", "Impaired immunity"),
            at_risk_populations=("Vegetarians", "Older adults", "Pregnant women"),
        ),
    ),
    NutrientType.COPPER: NutrientData(
        name="Copper",
        category=NutrientCategory.MINERAL,
        allowances=_allowances(
            "mg", 0.22, 0.34, 0.9, 0.9, 0.9, 0.9, 1.0, 1.3, 0.9, 0.9
        ),
        dietary_sources=(
            "Liver",
            "Shellfish",
            "Nuts",
            "Seeds",
            "Dark chocolate",
            "Legumes",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Copper deficiency",
            risk_model=LongTermStorage(depletion_months=6),
            key_symptoms=("Anemia", "Neutropenia", "Numbness"),
            at_risk_populations=(
                "People taking high-dose zinc",
                "People after bariatric surgery",
            ),
        ),
    ),
    NutrientType.MANGANESE: NutrientData(
        name="Manganese",
        category=NutrientCategory.MINERAL,
        allowances=_allowances(
            "mg", 0.003, 1.2, 2.2, 1.6, 2.3, 1.8, 2.0, 2.6, 2.3, 1.8
        ),
        dietary_sources=(
            "Nuts",
            "Whole grains",
            "Legumes",
            "Pineapple",
            "Leafy vegetables",
            "Tea",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Manganese deficiency",
            risk_model=Adaptive(),
            key_symptoms=("Impaired growth", "Skin rash"),
        ),
    ),
    NutrientType.IODINE: NutrientData(
        name="Iodine",
        category=NutrientCategory.MINERAL,
        allowances=_allowances("µg", 110, 90, 150, 150, 150, 150, 220, 290, 150, 150),
        dietary_sources=("Seaweed", "Iodized salt", "Dairy", "Fish", "Eggs"),
        deficiency_profile=DeficiencyProfile(
            common_name="Goiter",
            risk_model=LongTermStorage(depletion_months=3),
            key_symptoms=("Swollen thyroid", "Weight gain", "Fatigue"),
            at_risk_populations=(
                "Pregnant women",
                "People avoiding iodized salt",
                "Vegans",
            ),
        ),
    ),
    NutrientType.SELENIUM: NutrientData(
        name="Selenium",
        category=NutrientCategory.MINERAL,
        allowances=_allowances("µg", 15, 20, 55, 55, 55, 55, 60, 70, 55, 55),
        dietary_sources=("Brazil nuts", "Seafood", "Meat", "Eggs", "Cereal grains"),
        deficiency_profile=DeficiencyProfile(
            common_name="Keshan disease",
            risk_model=LongTermStorage(depletion_months=6),
            key_symptoms=("Muscle weakness", "Fatigue", "Hair loss"),
            at_risk_populations=(
                "People in regions with selenium-poor soil",
                "People on dialysis",
            ),
        ),
    ),
    NutrientType.MOLYBDENUM: NutrientData(
        name="Molybdenum",
        category=NutrientCategory.MINERAL,
        allowances=_allowances("µg", 2, 17, 45, 43, 45, 45, 50, 50, 45, 45),
        dietary_sources=("Legumes", "Grains", "Nuts", "Organ meats"),
        deficiency_profile=DeficiencyProfile(
            common_name="Molybdenum deficiency",
            risk_model=Adaptive(),
        ),
    ),
    NutrientType.CHROMIUM: NutrientData(
        name="Chromium",
        category=NutrientCategory.MINERAL,
        allowances=_allowances("µg", 0, 11, 35, 25, 35, 25, 30, 45, 35, 25),
        dietary_sources=("Whole grains", "Meat", "Broccoli", "Grape juice", "Potatoes"),
        deficiency_profile=DeficiencyProfile(
            common_name="Chromium deficiency",
            risk_model=Adaptive(),
            key_symptoms=("Impaired glucose tolerance",),
        ),
    ),
    NutrientType.FLUORIDE: NutrientData(
        name="Fluoride",
        category=NutrientCategory.MINERAL,
        allowances=_allowances("mg", 0.01, 0.5, 4, 3, 4, 3, 3, 3, 4, 3),
        dietary_sources=(
            "Fluoridated water",
            "Tea",
            "Fish with bones",
            "Toothpaste ingestion (non-food source)",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Dental caries",
            risk_model=Structural(depletion_months=24),
            key_symptoms=("Tooth decay",),
            at_risk_populations=("Children without fluoridated water",),
        ),
    ),
}

_MACRONUTRIENTS = {
    NutrientType.CARBOHYDRATES: NutrientData(
        name="Carbohydrates",
        category=NutrientCategory.MACRONUTRIENT,
        allowances=_allowances("g", 60, 130, 130, 130, 130, 130, 175, 210, 130, 130),
        dietary_sources=(
            "Whole grains",
            "Rice",
            "Wheat",
            "Oats",
            "Potatoes",
            "Fruits",
            "Legumes",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Ketosis",
            risk_model=Adaptive(),
            key_symptoms=("Fatigue", "Headache"),
        ),
    ),
    NutrientType.PROTEINS: NutrientData(
        name="Proteins",
        category=NutrientCategory.MACRONUTRIENT,
        allowances=_allowances("g", 9, 19, 52, 46, 56, 46, 71, 71, 56, 46),
        dietary_sources=(
            "Meat",
            "Fish",
            "Eggs",
            "Dairy",
            "Soy products",
            "Legumes",
            "Nuts",
            "Seeds",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Protein-energy malnutrition",
            risk_model=DailyTurnover(onset_weeks=4),
            key_symptoms=("Muscle wasting", "Edema", "Slow wound healing"),
            at_risk_populations=("Older adults", "People with eating disorders"),
        ),
    ),
    NutrientType.FATS: NutrientData(
        name="Total Fat",
        category=NutrientCategory.MACRONUTRIENT,
        allowances=_allowances("g", 31, 25, 70, 70, 70, 70, 70, 70, 70, 70),
        dietary_sources=(
            "Olive oil",
            "Nuts",
            "Seeds",
            "Avocado",
            "Fatty fish",
            "Butter",
            "Cheese",
        ),
        deficiency_profile=DeficiencyProfile(
            common_name="Essential fatty acid deficiency",
            risk_model=LongTermStorage(depletion_months=2),
            key_symptoms=("Dry scaly skin", "Hair loss", "Poor wound healing"),
            at_risk_populations=("People on very low-fat diets",),
        ),
    ),
    NutrientType.WATER: NutrientData(
        name="Water",
        category=NutrientCategory.MACRONUTRIENT,
        allowances=_allowances("L", 0.7, 1.3, 3.3, 2.3, 3.7, 2.7, 3.0, 3.8, 3.7, 2.7),
        dietary_sources=("Water", "Beverages", "Fruits", "Vegetables"),
        deficiency_profile=DeficiencyProfile(
            common_name="Dehydration",
            risk_model=DailyEssential(onset_hours=72),
            key_symptoms=("Thirst", "Dark urine", "Dizziness"),
            at_risk_populations=("Older adults", "Infants", "Athletes"),
        ),
    ),
    NutrientType.FIBER: NutrientData(
        name="Fiber",
        category=NutrientCategory.MACRONUTRIENT,
        allowances=_allowances("g", 0, 19, 38, 26, 38, 25, 28, 29, 30, 21),
        dietary_sources=(
            "Whole grains",
            "Fruits",
            "Vegetables",
            "Legumes",
            "Nuts",
            "Seeds",
        ),
    ),
}

_ALL_NUTRIENTS = {**_VITAMINS, **_MINERALS, **_MACRONUTRIENTS}

NUTRIENT_REGISTRY: Mapping[NutrientType, NutrientData] = MappingProxyType(
    {nutrient: _ALL_NUTRIENTS[nutrient] for nutrient in NutrientType}
)
