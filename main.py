# main.py

import logging
import os
from typing import List, Literal, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from trip_planner.ai import gemini
from trip_planner.core.budget import BudgetSummary, summarize_budget
from trip_planner.core.errors import ItineraryGenerationError
from trip_planner.core.models import Activity, DayItinerary, TripRequest

# Charge les variables d'environnement (.env)
load_dotenv()

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="Trip Planner")


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


# Schéma pour la requête d'itinéraire
class ItineraryRequest(_CamelModel):
    destination: str = Field(min_length=1)
    duration: int = Field(ge=1)
    interests: str = Field(min_length=1)
    budget: Optional[float] = Field(default=None, ge=0)
    budget_currency: Literal["Rp", "$"] = Field(default="Rp", alias="budgetCurrency")


class ActivityIn(_CamelModel):
    name: str
    hours: str = ""
    estimated_cost: str = Field(default="", alias="estimatedCost")
    description: str = ""
    actual_cost: Optional[float] = Field(default=None, ge=0, alias="actualCost")


class DayIn(_CamelModel):
    day: int
    location: Optional[str] = None
    activities: List[ActivityIn] = []


# Schéma pour le recalcul du budget après saisie des coûts réels
class BudgetRequest(_CamelModel):
    itinerary: List[DayIn]
    duration: int = Field(ge=0)
    total_budget: Optional[float] = Field(default=None, alias="totalBudget")
    budget_currency: Literal["Rp", "$"] = Field(default="Rp", alias="budgetCurrency")


def _day_dict(d: DayItinerary) -> dict:
    return {
        "day": d.day,
        "location": d.location,
        "activities": [
            {
                "name": a.name,
                "hours": a.hours,
                "estimatedCost": a.estimated_cost,
                "estimatedCostValue": a.estimated_cost_value,
                "description": a.description,
                "actualCost": a.actual_cost,
            }
            for a in d.activities
        ],
    }


def _budget_dict(s: BudgetSummary) -> dict:
    return {
        "estimatedTotal": s.estimated_total,
        "actualTotal": s.actual_total,
        "totalBudget": s.total_budget,
        "budgetCurrency": s.budget_symbol,
        "dailyRemaining": s.daily_remaining,
        "currencySymbol": s.currency_symbol,
        "overBudget": s.over_budget,
    }


@app.post("/api/itinerary", response_model=dict)
def generate_itinerary_endpoint(req: ItineraryRequest):
    trip_req = TripRequest(
        destination=req.destination,
        duration=req.duration,
        interests=req.interests,
        budget=req.budget,
        budget_symbol=req.budget_currency,
    )
    try:
        result = gemini.generate_itinerary(trip_req)
    except ItineraryGenerationError as e:
        logger.warning("Itinerary request for %s failed: %s", req.destination, e)
        raise HTTPException(status_code=500, detail=e.to_dict())

    summary = summarize_budget(
        result.itinerary, trip_req.budget, trip_req.duration, trip_req.budget_symbol
    )
    return {
        "itinerary": [_day_dict(d) for d in result.itinerary],
        "sourceUrls": [{"uri": s.uri, "title": s.title} for s in result.source_urls],
        "budget": _budget_dict(summary),
    }


@app.post("/api/budget", response_model=dict)
def budget_endpoint(req: BudgetRequest):
    itinerary = [
        DayItinerary(
            day=d.day,
            location=d.location,
            activities=[
                Activity(
                    name=a.name,
                    hours=a.hours,
                    estimated_cost=a.estimated_cost,
                    description=a.description,
                    actual_cost=a.actual_cost,
                )
                for a in d.activities
            ],
        )
        for d in req.itinerary
    ]
    summary = summarize_budget(itinerary, req.total_budget, req.duration, req.budget_currency)
    return _budget_dict(summary)
