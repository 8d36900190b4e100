"""Reference tables for household units and FDA daily values.

Both tables are read-only. To use different values, build a new table and
inject it into the services instead of mutating the defaults.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from nutrition_label.domain.foods import (
    CHOLESTEROL,
    DIETARY_FIBER,
    ENERGY,
    PROTEIN,
    SATURATED_FAT,
    SODIUM,
    TOTAL_CARBOHYDRATE,
    TOTAL_FAT,
)

FALLBACK_FACTOR = 1.0


@dataclass(frozen=True)
class UnitConversionTable:
    """Grams (or millilitres) in one unit of each household measure."""

    factors: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "factors", MappingProxyType(dict(self.factors)))

    def __contains__(self, unit: object) -> bool:
        return unit in self.factors

    def __iter__(self) -> Iterator[str]:
        return iter(self.factors)

    def factor(self, unit: str) -> float:
        """Return the gram equivalent of one unit, or 1 for unknown units."""
        return self.factors.get(unit, FALLBACK_FACTOR)


@dataclass(frozen=True)
class DailyValueTable:
    """Reference daily intake per nutrient id."""

    reference_amounts: Mapping[int, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "reference_amounts", MappingProxyType(dict(self.reference_amounts))
        )

    def reference(self, nutrient_id: int) -> float | None:
        """Return the reference intake, or None when it is not defined."""
        return self.reference_amounts.get(nutrient_id)


HOUSEHOLD_UNITS = UnitConversionTable(
    {
        "cup": 240,
        "tbsp": 15,
        "tsp": 5,
        "fl oz": 30,
        "oz": 28,
        "slice": 1,
        "gr/ml": 1,
    }
)

DAILY_VALUES = DailyValueTable(
    {
        ENERGY: 2000,
        TOTAL_FAT: 65,
        SATURATED_FAT: 20,
        CHOLESTEROL: 300,
        SODIUM: 2400,
        TOTAL_CARBOHYDRATE: 300,
        DIETARY_FIBER: 25,
        PROTEIN: 50,
    }
)
