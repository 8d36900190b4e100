"""Selected foods and their serving parameters."""

import logging
from dataclasses import dataclass, field

from nutrition_label.domain.errors import UnknownHouseholdUnit
from nutrition_label.domain.foods import (
    DEFAULT_QUANTITY,
    DEFAULT_UNIT,
    FoodRecord,
    SelectionEntry,
)
from nutrition_label.domain.reference import HOUSEHOLD_UNITS, UnitConversionTable
from nutrition_label.services.servings import validate_quantity

_logger = logging.getLogger(__name__)


@dataclass
class Selection:
    """Ordered list of selected foods owned by the caller.

    Defaults and validation are applied here, so every entry handed to the
    label service is fully populated.
    """

    units: UnitConversionTable = HOUSEHOLD_UNITS
    strict_units: bool = False
    _entries: list[SelectionEntry] = field(default_factory=list, init=False)
    _servings_per_container: float = field(default=1.0, init=False)

    @property
    def entries(self) -> tuple[SelectionEntry, ...]:
        """Snapshot of the selected entries in selection order."""
        return tuple(self._entries)

    @property
    def servings_per_container(self) -> float:
        return self._servings_per_container

    @servings_per_container.setter
    def servings_per_container(self, value: float) -> None:
        self._servings_per_container = validate_quantity(value)

    def add(
        self,
        food: FoodRecord,
        quantity: float | None = None,
        unit: str | None = None,
    ) -> SelectionEntry:
        """Append a food; the same food may be added more than once."""
        entry = self._make_entry(food, quantity, unit)
        self._entries.append(entry)
        return entry

    def remove(self, food_id: int) -> int:
        """Remove every entry for ``food_id`` and return how many were removed."""
        kept = [entry for entry in self._entries if entry.food.id != food_id]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        return removed

    def update_serving(self, food_id: int, quantity: float, unit: str) -> int:
        """Change quantity and unit for every entry of ``food_id``."""
        updated = 0
        for index, entry in enumerate(self._entries):
            if entry.food.id != food_id:
                continue
            self._entries[index] = self._make_entry(entry.food, quantity, unit)
            updated += 1
        return updated

    def clear(self) -> None:
        """Drop all selected foods."""
        self._entries = []

    def _make_entry(
        self, food: FoodRecord, quantity: float | None, unit: str | None
    ) -> SelectionEntry:
        resolved_quantity = validate_quantity(
            DEFAULT_QUANTITY if quantity is None else quantity
        )
        resolved_unit = DEFAULT_UNIT if unit is None else unit.strip()
        if resolved_unit not in self.units:
            if self.strict_units:
                raise UnknownHouseholdUnit(resolved_unit)
            _logger.warning(
                "Food %s uses unknown household unit %r; quantity counts as grams",
                food.id,
                resolved_unit,
            )
        return SelectionEntry(food=food, quantity=resolved_quantity, unit=resolved_unit)
