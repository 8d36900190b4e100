"""Nutrient aggregation across selected foods."""

from collections.abc import Iterable, Sequence

from nutrition_label.domain.foods import CALORIE_SOURCES, SelectionEntry
from nutrition_label.domain.label import NutrientAmount
from nutrition_label.domain.reference import HOUSEHOLD_UNITS, UnitConversionTable
from nutrition_label.services.servings import entry_mass_grams

PER_100_GRAMS = 100


def aggregate(
    entries: Iterable[SelectionEntry],
    nutrient_id: int | Sequence[int],
    servings_per_container: float = 1,
    table: UnitConversionTable = HOUSEHOLD_UNITS,
) -> NutrientAmount:
    """Sum a nutrient over all entries, scaled to each entry's mass.

    ``nutrient_id`` may be a sequence of ids in priority order; each food
    contributes the first of them it reports. Foods reporting none of them
    contribute nothing.
    """
    sources = (nutrient_id,) if isinstance(nutrient_id, int) else tuple(nutrient_id)
    per_serving = 0.0
    for entry in entries:
        amount = _amount_per_100(entry, sources)
        per_serving += amount * entry_mass_grams(entry, table) / PER_100_GRAMS
    return NutrientAmount(
        per_serving=per_serving, total=per_serving * servings_per_container
    )


def aggregate_calories(
    entries: Iterable[SelectionEntry],
    servings_per_container: float = 1,
    table: UnitConversionTable = HOUSEHOLD_UNITS,
) -> NutrientAmount:
    """Sum energy using the Atwater general, Atwater specific, energy chain."""
    return aggregate(entries, CALORIE_SOURCES, servings_per_container, table)


def _amount_per_100(entry: SelectionEntry, sources: tuple[int, ...]) -> float:
    for source in sources:
        sample = entry.food.nutrient(source)
        if sample is not None:
            return sample.amount_per_100
    return 0.0
