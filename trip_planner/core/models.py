# core/models.py

from dataclasses import dataclass, field
from typing import List, Optional

from trip_planner.core.costs import ParsedCost, parse_cost

__all__ = [
    "Activity",
    "DayItinerary",
    "ItineraryResponse",
    "ParsedCost",
    "SourceLink",
    "TripRequest",
]


@dataclass
class TripRequest:
    destination: str
    duration: int
    interests: str
    budget: Optional[float] = None
    budget_symbol: str = "Rp"


@dataclass
class Activity:
    name: str
    hours: str
    estimated_cost: str          # verbatim text, e.g. "IDR 50,000"
    description: str = ""
    actual_cost: Optional[float] = None

    @property
    def estimated_cost_value(self) -> float:
        return parse_cost(self.estimated_cost).value

    @property
    def estimated_currency(self) -> Optional[str]:
        return parse_cost(self.estimated_cost).currency


@dataclass
class DayItinerary:
    day: int
    location: Optional[str] = None
    activities: List[Activity] = field(default_factory=list)


@dataclass
class SourceLink:
    uri: str
    title: Optional[str] = None


@dataclass
class ItineraryResponse:
    itinerary: List[DayItinerary] = field(default_factory=list)
    source_urls: List[SourceLink] = field(default_factory=list)
