from trip_planner.core.costs import ParsedCost, parse_cost
from trip_planner.core.extractor import extract_itinerary

__all__ = ["ParsedCost", "extract_itinerary", "parse_cost"]
