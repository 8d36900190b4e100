"""Serving size resolution."""

import math

from nutrition_label.domain.errors import InvalidServingSize
from nutrition_label.domain.foods import SelectionEntry
from nutrition_label.domain.reference import HOUSEHOLD_UNITS, UnitConversionTable


def validate_quantity(value: object) -> float:
    """Return ``value`` as a float or raise if it is not a positive number."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidServingSize(value)
    quantity = float(value)
    if not math.isfinite(quantity) or quantity <= 0:
        raise InvalidServingSize(value)
    return quantity


def resolve_mass_grams(
    unit: str, quantity: float, table: UnitConversionTable = HOUSEHOLD_UNITS
) -> float:
    """Return the gram equivalent of ``quantity`` household ``unit``s.

    Units missing from the table count as grams. Callers that accept user
    input are expected to flag unknown units before they get here.
    """
    mass = validate_quantity(quantity) * table.factor(unit)
    if not math.isfinite(mass):
        raise InvalidServingSize(quantity)
    return mass


def entry_mass_grams(
    entry: SelectionEntry, table: UnitConversionTable = HOUSEHOLD_UNITS
) -> float:
    """Return the resolved mass of a selection entry."""
    return resolve_mass_grams(entry.unit, entry.quantity, table)
