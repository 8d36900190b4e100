"""Nutrition facts label domain models."""

from dataclasses import dataclass

from nutrition_label.domain.foods import (
    CALORIE_SOURCES,
    CHOLESTEROL,
    DIETARY_FIBER,
    ENERGY,
    PROTEIN,
    SATURATED_FAT,
    SODIUM,
    TOTAL_CARBOHYDRATE,
    TOTAL_FAT,
)


@dataclass(frozen=True)
class TrackedNutrient:
    """A nutrient shown on the label.

    ``sources`` lists the nutrient ids to look for on each food, in priority
    order. ``daily_value_id`` keys the daily value table.
    """

    key: str
    name: str
    unit: str
    sources: tuple[int, ...]
    daily_value_id: int
    indent: int = 0


TRACKED_NUTRIENTS: tuple[TrackedNutrient, ...] = (
    TrackedNutrient("calories", "Calories", "kcal", CALORIE_SOURCES, ENERGY),
    TrackedNutrient("total_fat", "Total Fat", "g", (TOTAL_FAT,), TOTAL_FAT),
    TrackedNutrient(
        "saturated_fat", "Saturated Fat", "g", (SATURATED_FAT,), SATURATED_FAT, 1
    ),
    TrackedNutrient("cholesterol", "Cholesterol", "mg", (CHOLESTEROL,), CHOLESTEROL),
    TrackedNutrient("sodium", "Sodium", "mg", (SODIUM,), SODIUM),
    TrackedNutrient(
        "total_carbohydrate",
        "Total Carbohydrate",
        "g",
        (TOTAL_CARBOHYDRATE,),
        TOTAL_CARBOHYDRATE,
    ),
    TrackedNutrient(
        "dietary_fiber", "Dietary Fiber", "g", (DIETARY_FIBER,), DIETARY_FIBER, 1
    ),
    TrackedNutrient("protein", "Protein", "g", (PROTEIN,), PROTEIN),
)


@dataclass(frozen=True)
class NutrientAmount:
    """Aggregated nutrient amount for one serving and the whole container."""

    per_serving: float
    total: float


@dataclass(frozen=True)
class LabelRow:
    """One nutrient row on the label."""

    key: str
    name: str
    unit: str
    indent: int
    amount_per_serving: float
    amount_total: float
    percent_daily_value: int | None


@dataclass(frozen=True)
class LabelSummary:
    """Everything a renderer needs to draw a nutrition facts label."""

    servings_per_container: float
    total_mass_grams: float
    calories_per_serving: float
    calories_total: float
    rows: tuple[LabelRow, ...]
    ingredients: str

    def row(self, key: str) -> LabelRow | None:
        """Return the row for a tracked nutrient key."""
        for row in self.rows:
            if row.key == key:
                return row
        return None
