"""Food domain models."""

from dataclasses import dataclass

ENERGY_ATWATER_GENERAL = 2047
ENERGY_ATWATER_SPECIFIC = 2048
ENERGY = 1008
PROTEIN = 1003
TOTAL_FAT = 1004
TOTAL_CARBOHYDRATE = 1005
DIETARY_FIBER = 1079
SODIUM = 1093
CHOLESTEROL = 1253
SATURATED_FAT = 1258

CALORIE_SOURCES = (ENERGY_ATWATER_GENERAL, ENERGY_ATWATER_SPECIFIC, ENERGY)

DEFAULT_UNIT = "cup"
DEFAULT_QUANTITY = 1.0


@dataclass(frozen=True)
class NutrientSample:
    """Nutrient amount per 100 g of a food."""

    nutrient_id: int
    amount_per_100: float
    unit: str
    name: str | None = None


@dataclass(frozen=True)
class FoodRecord:
    """Food entry as reported by FoodData Central."""

    id: int
    description: str
    nutrients: tuple[NutrientSample, ...] = ()
    brand_owner: str | None = None
    food_category: str | None = None
    data_type: str | None = None

    def nutrient(self, nutrient_id: int) -> NutrientSample | None:
        """Return the first sample for a nutrient id, if any."""
        for sample in self.nutrients:
            if sample.nutrient_id == nutrient_id:
                return sample
        return None


@dataclass(frozen=True)
class SelectionEntry:
    """A selected food with its resolved serving parameters."""

    food: FoodRecord
    quantity: float = DEFAULT_QUANTITY
    unit: str = DEFAULT_UNIT
