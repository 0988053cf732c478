# tests/test_budget.py

import math

import pytest

from trip_planner.core.budget import (
    currency_symbol,
    daily_remaining_budget,
    detect_currency,
    format_currency,
    set_actual_cost,
    summarize_budget,
    total_actual_cost,
    total_estimated_cost,
)
from trip_planner.core.models import Activity, DayItinerary


def _itinerary():
    return [
        DayItinerary(
            day=1,
            location="Ubud",
            activities=[
                Activity("Rice terrace", "08:00 - 18:00", "IDR 50.000"),
                Activity("Monkey forest", "09:00 - 18:00", "IDR 80.000"),
            ],
        ),
        DayItinerary(day=2, location="Seminyak"),
        DayItinerary(day=3, activities=[Activity("Beach", "N/A", "Free")]),
    ]


def test_estimated_total_sums_parsed_values():
    assert total_estimated_cost(_itinerary()) == 130.0
    assert total_estimated_cost([]) == 0


def test_actual_total_falls_back_to_estimate():
    itin = _itinerary()
    assert total_actual_cost(itin) == 130.0

    set_actual_cost(itin, 0, 1, 100)
    set_actual_cost(itin, 2, 0, "15.5")
    assert total_actual_cost(itin) == 50.0 + 100.0 + 15.5


def test_set_actual_cost_clears_and_ignores_bad_indexes():
    itin = _itinerary()
    set_actual_cost(itin, 0, 0, 10)
    set_actual_cost(itin, 0, 0, "")
    assert itin[0].activities[0].actual_cost is None

    set_actual_cost(itin, 5, 0, 10)
    set_actual_cost(itin, 1, 0, 10)
    set_actual_cost(itin, -1, 0, 10)
    assert total_actual_cost(itin) == 130.0


@pytest.mark.parametrize("value", ["abc", "nan", "inf", "-inf", -5, "-1", "  ", object()])
def test_set_actual_cost_clears_on_invalid_input(value):
    """Typed text that is not a usable cost clears the field instead of raising."""
    itin = _itinerary()
    set_actual_cost(itin, 0, 0, 10)

    set_actual_cost(itin, 0, 0, value)

    assert itin[0].activities[0].actual_cost is None
    assert total_actual_cost(itin) == 130.0


def test_set_actual_cost_accepts_zero_and_padded_numbers():
    itin = _itinerary()
    set_actual_cost(itin, 0, 0, " 25.5 ")
    set_actual_cost(itin, 0, 1, 0)
    assert itin[0].activities[0].actual_cost == 25.5
    assert itin[0].activities[1].actual_cost == 0.0


def test_actual_cost_never_changes_the_estimate():
    itin = _itinerary()
    set_actual_cost(itin, 0, 0, 999)
    assert itin[0].activities[0].estimated_cost_value == 50.0


def test_daily_remaining_budget():
    assert daily_remaining_budget(1000, 4, 200) == 200
    assert daily_remaining_budget(100, 2, 300) == -100
    assert daily_remaining_budget(None, 3, 0) is None
    assert daily_remaining_budget(1000, 0, 0) is None


def test_currency_detection_and_symbols():
    assert detect_currency(_itinerary()) == "IDR"
    assert detect_currency([]) is None
    assert detect_currency([DayItinerary(day=1)]) is None

    assert currency_symbol("IDR") == "Rp"
    assert currency_symbol("USD") == "$"
    assert currency_symbol("EUR") == "€"
    assert currency_symbol("JPY") == "¥"
    assert currency_symbol("THB") == "THB"
    assert currency_symbol(None) == "Rp"
    assert currency_symbol(None, default="$") == "$"


def test_format_currency_uses_indonesian_grouping():
    assert format_currency(1500000, "Rp") == "Rp 1.500.000"
    assert format_currency(12.5, "$") == "$ 12,5"
    assert format_currency(1234.567, "€") == "€ 1.234,57"
    assert format_currency(0, "Rp") == "Rp 0"
    assert format_currency(None, "Rp") == "N/A"
    assert format_currency(math.nan, "Rp") == "N/A"


def test_summarize_budget():
    itin = _itinerary()
    set_actual_cost(itin, 0, 0, 70)

    summary = summarize_budget(itin, 450, 3, "$")

    assert summary.estimated_total == 130.0
    assert summary.actual_total == 150.0
    assert summary.total_budget == 450
    assert summary.budget_symbol == "$"
    assert summary.daily_remaining == 100.0
    assert summary.currency_symbol == "Rp"
    assert not summary.over_budget

    assert summarize_budget(itin, 10, 1).over_budget
    assert not summarize_budget(itin, None, 3).over_budget
