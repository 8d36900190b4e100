"""Tests for label summary construction."""

import logging
import math

import pytest

from nutrition_label.domain.errors import InvalidServingSize
from nutrition_label.domain.foods import (
    ENERGY,
    PROTEIN,
    SODIUM,
    TOTAL_FAT,
    FoodRecord,
    NutrientSample,
    SelectionEntry,
)
from nutrition_label.domain.reference import DailyValueTable
from nutrition_label.services.label import (
    LabelService,
    build_summary,
    percent_daily_value,
    round_amount,
)

LABEL_ORDER = [
    "calories",
    "total_fat",
    "saturated_fat",
    "cholesterol",
    "sodium",
    "total_carbohydrate",
    "dietary_fiber",
    "protein",
]


def test_percent_daily_value_for_half_of_total_fat() -> None:
    assert percent_daily_value(TOTAL_FAT, 32.5) == 50


def test_percent_daily_value_rounds_half_up() -> None:
    # 1 g of protein is 2% of 50 g; 0.25 g is 0.5%
    assert percent_daily_value(PROTEIN, 0.25) == 1
    assert percent_daily_value(PROTEIN, 0.24) == 0


def test_percent_daily_value_not_applicable() -> None:
    table = DailyValueTable({SODIUM: 0})

    assert percent_daily_value(SODIUM, 100, table) is None
    assert percent_daily_value(TOTAL_FAT, 10, table) is None
    assert percent_daily_value(12345, 10) is None


def test_round_amount_rounds_half_up() -> None:
    assert round_amount(0.125) == 0.13
    assert round_amount(2.675) == 2.68
    assert round_amount(1 / 3) == 0.33


def test_summary_from_one_food(apple) -> None:
    entries = [SelectionEntry(food=apple, quantity=1, unit="cup")]

    summary = build_summary(entries, servings_per_container=2)

    assert summary.total_mass_grams == 240
    assert summary.calories_per_serving == pytest.approx(124.8)
    assert summary.calories_total == pytest.approx(249.6)
    assert [row.key for row in summary.rows] == LABEL_ORDER
    fat = summary.row("total_fat")
    assert fat is not None
    assert fat.amount_per_serving == pytest.approx(0.48)
    assert fat.amount_total == pytest.approx(0.96)
    assert fat.percent_daily_value == 1
    calories = summary.row("calories")
    assert calories is not None
    assert calories.percent_daily_value == 6
    assert summary.ingredients == "Apple"


def test_summary_dv_uses_per_serving_amount() -> None:
    food = FoodRecord(
        id=3,
        description="Oil blend",
        nutrients=(NutrientSample(TOTAL_FAT, 32.5, "G"),),
    )
    entries = [SelectionEntry(food=food, quantity=100, unit="gr/ml")]

    summary = build_summary(entries, servings_per_container=4)

    fat = summary.row("total_fat")
    assert fat is not None
    assert fat.amount_total == pytest.approx(130)
    assert fat.percent_daily_value == 50


def test_empty_selection_yields_zero_label() -> None:
    summary = build_summary([], servings_per_container=1)

    assert summary.total_mass_grams == 0
    assert summary.calories_per_serving == 0
    assert summary.ingredients == ""
    assert [row.key for row in summary.rows] == LABEL_ORDER
    for row in summary.rows:
        assert row.amount_per_serving == 0
        assert row.amount_total == 0
        assert row.percent_daily_value in (0, None)


def test_duplicate_food_doubles_totals(apple) -> None:
    once = build_summary([SelectionEntry(food=apple)], 1)
    twice = build_summary([SelectionEntry(food=apple), SelectionEntry(food=apple)], 1)

    assert twice.ingredients == "Apple, Apple"
    assert twice.total_mass_grams == 2 * once.total_mass_grams
    for single, double in zip(once.rows, twice.rows, strict=True):
        assert double.amount_per_serving == pytest.approx(2 * single.amount_per_serving)
        assert double.amount_total == pytest.approx(2 * single.amount_total)


def test_ingredients_follow_selection_order(apple, butter) -> None:
    entries = [
        SelectionEntry(food=butter, quantity=1, unit="tbsp"),
        SelectionEntry(food=apple),
        SelectionEntry(food=butter, quantity=1, unit="tsp"),
    ]

    summary = build_summary(entries, 1)

    assert summary.ingredients == "Butter, salted, Apple, Butter, salted"


def test_build_summary_is_idempotent(apple, butter) -> None:
    entries = [
        SelectionEntry(food=apple, quantity=1.5, unit="cup"),
        SelectionEntry(food=butter, quantity=1, unit="tbsp"),
    ]

    first = build_summary(entries, 3)
    second = build_summary(entries, 3)

    assert first == second


def test_unknown_unit_in_summary_counts_as_grams(apple, caplog) -> None:
    entries = [SelectionEntry(food=apple, quantity=50, unit="bushel")]

    with caplog.at_level(logging.WARNING):
        summary = build_summary(entries, 1)

    assert summary.total_mass_grams == 50
    assert summary.calories_per_serving == pytest.approx(26)
    assert caplog.records == []


def test_custom_daily_values_table(apple) -> None:
    service = LabelService(daily_values=DailyValueTable({ENERGY: 1000}))

    summary = service.build_summary([SelectionEntry(food=apple)], 1)

    calories = summary.row("calories")
    fat = summary.row("total_fat")
    assert calories is not None
    assert fat is not None
    assert calories.percent_daily_value == 12
    assert fat.percent_daily_value is None


@pytest.mark.parametrize("servings", [0, -2, float("nan")])
def test_invalid_servings_per_container(apple, servings: float) -> None:
    with pytest.raises(InvalidServingSize):
        build_summary([SelectionEntry(food=apple)], servings)


def test_rounding_keeps_precision_for_large_values() -> None:
    assert round_amount(1e27) == 1e27
    assert percent_daily_value(PROTEIN, 1e30) == 2 * 10**30


def test_non_finite_amounts_pass_through_rounding() -> None:
    assert round_amount(math.inf) == math.inf
    assert percent_daily_value(PROTEIN, math.inf) is None


def test_summary_for_very_large_quantity(apple) -> None:
    entries = [SelectionEntry(food=apple, quantity=1e27, unit="cup")]

    summary = build_summary(entries, 1)

    calories = summary.row("calories")
    assert calories is not None
    assert summary.calories_per_serving == pytest.approx(1.248e29)
    assert round_amount(summary.calories_per_serving) == pytest.approx(1.248e29)
    assert calories.percent_daily_value == pytest.approx(6.24e27)


def test_summary_rejects_quantity_with_infinite_mass(apple) -> None:
    with pytest.raises(InvalidServingSize):
        build_summary([SelectionEntry(food=apple, quantity=1e307, unit="cup")], 1)
