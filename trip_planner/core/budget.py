# core/budget.py

import math
from dataclasses import dataclass
from typing import List, Optional, Union

from trip_planner.core.models import DayItinerary

CURRENCY_SYMBOLS = {
    "IDR": "Rp",
    "USD": "$",
    "EUR": "€",
    "JPY": "¥",
}


@dataclass
class BudgetSummary:
    estimated_total: float
    actual_total: float
    total_budget: Optional[float]
    budget_symbol: str
    daily_remaining: Optional[float]
    currency_symbol: str

    @property
    def over_budget(self) -> bool:
        return self.daily_remaining is not None and self.daily_remaining < 0


def total_estimated_cost(itinerary: List[DayItinerary]) -> float:
    return sum(a.estimated_cost_value for d in itinerary for a in d.activities)


def total_actual_cost(itinerary: List[DayItinerary]) -> float:
    """Sum of the user's actual costs, using the estimate where none was entered."""
    return sum(
        a.actual_cost if a.actual_cost is not None else a.estimated_cost_value
        for d in itinerary
        for a in d.activities
    )


def daily_remaining_budget(
    total_budget: Optional[float], duration: Optional[int], actual_total: float
) -> Optional[float]:
    if total_budget is None or not duration:
        return None
    return (total_budget - actual_total) / duration


def detect_currency(itinerary: List[DayItinerary]) -> Optional[str]:
    """Currency code of the first activity; the prompt asks for one currency throughout."""
    if itinerary and itinerary[0].activities:
        return itinerary[0].activities[0].estimated_currency
    return None


def currency_symbol(code: Optional[str], default: str = "Rp") -> str:
    if not code:
        return default
    return CURRENCY_SYMBOLS.get(code, code)


def format_currency(value: Optional[float], symbol: str) -> str:
    """Format like the id-ID locale: ``Rp 1.500.000``, ``$ 12,5``."""
    if value is None or math.isnan(value):
        return "N/A"
    text = f"{value:,.2f}".rstrip("0").rstrip(".")
    # swap separators: 1,500.25 -> 1.500,25
    text = text.replace(",", "_").replace(".", ",").replace("_", ".")
    return f"{symbol} {text}"


def set_actual_cost(
    itinerary: List[DayItinerary],
    day_index: int,
    activity_index: int,
    value: Union[float, str, None],
) -> None:
    """
    Record what an activity really cost. Anything that is not a finite,
    non-negative number (``None``, ``""``, ``"abc"``, ``"nan"``) clears it.
    """
    if not 0 <= day_index < len(itinerary):
        return
    activities = itinerary[day_index].activities
    if not 0 <= activity_index < len(activities):
        return
    activities[activity_index].actual_cost = _to_cost(value)


def _to_cost(value: Union[float, str, None]) -> Optional[float]:
    try:
        cost = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(cost) or cost < 0:
        return None
    return cost


def summarize_budget(
    itinerary: List[DayItinerary],
    total_budget: Optional[float],
    duration: Optional[int],
    budget_symbol: str = "Rp",
) -> BudgetSummary:
    actual = total_actual_cost(itinerary)
    return BudgetSummary(
        estimated_total=total_estimated_cost(itinerary),
        actual_total=actual,
        total_budget=total_budget,
        budget_symbol=budget_symbol,
        daily_remaining=daily_remaining_budget(total_budget, duration, actual),
        currency_symbol=currency_symbol(detect_currency(itinerary)),
    )
