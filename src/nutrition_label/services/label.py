"""Nutrition facts label computation."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from nutrition_label.domain.errors import InvalidServingSize
from nutrition_label.domain.foods import SelectionEntry
from nutrition_label.domain.label import (
    TRACKED_NUTRIENTS,
    LabelRow,
    LabelSummary,
    TrackedNutrient,
)
from nutrition_label.domain.reference import (
    DAILY_VALUES,
    HOUSEHOLD_UNITS,
    DailyValueTable,
    UnitConversionTable,
)
from nutrition_label.services.aggregation import aggregate
from nutrition_label.services.servings import entry_mass_grams, validate_quantity

_logger = logging.getLogger(__name__)


def percent_daily_value(
    nutrient_id: int, amount: float, table: DailyValueTable = DAILY_VALUES
) -> int | None:
    """Return ``amount`` as a whole percentage of the nutrient's daily value.

    Returns None when the nutrient has no reference value or it is zero.
    """
    reference = table.reference(nutrient_id)
    if not reference or not math.isfinite(amount):
        return None
    percent = Decimal(str(amount)) / Decimal(str(reference)) * 100
    return int(_round_half_up(percent, 0))


def round_amount(value: float, places: int = 2) -> float:
    """Round a displayed amount half up to ``places`` decimals."""
    if not math.isfinite(value):
        return value
    return float(_round_half_up(Decimal(str(value)), -places))


def _round_half_up(value: Decimal, exponent: int) -> Decimal:
    # quantize fails when the result has more digits than the context precision
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() - exponent + 2)
        return value.quantize(Decimal(1).scaleb(exponent), rounding=ROUND_HALF_UP)


@dataclass
class LabelService:
    """Builds label summaries from a selection of foods."""

    units: UnitConversionTable = HOUSEHOLD_UNITS
    daily_values: DailyValueTable = DAILY_VALUES
    nutrients: tuple[TrackedNutrient, ...] = TRACKED_NUTRIENTS

    def build_summary(
        self, entries: Sequence[SelectionEntry], servings_per_container: float = 1
    ) -> LabelSummary:
        """Aggregate every tracked nutrient into a label summary."""
        try:
            servings = validate_quantity(servings_per_container)
        except InvalidServingSize:
            _logger.warning(
                "Rejected servings per container: %r", servings_per_container
            )
            raise
        total_mass = sum(
            (entry_mass_grams(entry, self.units) for entry in entries), 0.0
        )
        rows = tuple(
            self._build_row(entries, nutrient, servings) for nutrient in self.nutrients
        )
        calories = next((row for row in rows if row.key == "calories"), None)
        return LabelSummary(
            servings_per_container=servings,
            total_mass_grams=total_mass,
            calories_per_serving=calories.amount_per_serving if calories else 0.0,
            calories_total=calories.amount_total if calories else 0.0,
            rows=rows,
            ingredients=", ".join(entry.food.description for entry in entries),
        )

    def _build_row(
        self,
        entries: Sequence[SelectionEntry],
        nutrient: TrackedNutrient,
        servings: float,
    ) -> LabelRow:
        amount = aggregate(entries, nutrient.sources, servings, self.units)
        return LabelRow(
            key=nutrient.key,
            name=nutrient.name,
            unit=nutrient.unit,
            indent=nutrient.indent,
            amount_per_serving=amount.per_serving,
            amount_total=amount.total,
            percent_daily_value=percent_daily_value(
                nutrient.daily_value_id, amount.per_serving, self.daily_values
            ),
        )


def build_summary(
    entries: Sequence[SelectionEntry], servings_per_container: float = 1
) -> LabelSummary:
    """Build a label summary with the default reference tables."""
    return LabelService().build_summary(entries, servings_per_container)
