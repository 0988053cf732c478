# ai/gemini.py
# ------------------------------------------------------------------------------
import logging
import os
import textwrap
from typing import List

import google.generativeai as genai

from trip_planner.core.errors import ItineraryGenerationError
from trip_planner.core.extractor import extract_itinerary
from trip_planner.core.models import ItineraryResponse, SourceLink, TripRequest

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"

_GENERATION_CONFIG = {
    "temperature": 0.8,
    "max_output_tokens": 2000,
}

# ──────────────────────────────────────────────────────────────────────────────
# Helper: get a configured Gemini model
# ──────────────────────────────────────────────────────────────────────────────
def _get_model():
    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        raise RuntimeError("Environment variable GEMINI_API_KEY is missing.")
    genai.configure(api_key=api_key)
    return genai.GenerativeModel(os.getenv("GEMINI_MODEL") or DEFAULT_MODEL)


def _search_tools():
    if os.getenv("GEMINI_SEARCH_GROUNDING", "1") == "0":
        return None
    return "google_search_retrieval"

# ──────────────────────────────────────────────────────────────────────────────
# Prompt template – markdown itinerary
# ──────────────────────────────────────────────────────────────────────────────
_PROMPT_TEMPLATE = textwrap.dedent(
    """\
    You are a professional, helpful, and creative Travel Planner AI.
    Create a detailed, day-by-day travel itinerary for a trip to {destination} for {duration} days,
    focused on {interests}.

    For each activity, include:
    1.  **Activity Name**: The name of the place or activity.
    2.  **Hours**: Opening and closing hours (e.g., "09:00 AM - 05:00 PM"). If not applicable, state "N/A".
    3.  **Estimated Cost**: An estimated cost in the local currency (e.g., "IDR 50,000" or "USD 20"). If free, state "Free".
    4.  **Details**: A brief description of the activity.

    Format the output strictly in Markdown as follows:

    # Day X: [Location for Day X]

    ## [Activity Name 1]
    *   Hours: [HH:MM AM/PM - HH:MM AM/PM or N/A]
    *   Estimated Cost: [Currency Amount or Free]
    *   Details: [Brief description of activity 1.]

    ## [Activity Name 2]
    *   Hours: [HH:MM AM/PM - HH:MM AM/PM or N/A]
    *   Estimated Cost: [Currency Amount or Free]
    *   Details: [Brief description of activity 2.]

    ... (continue for all activities for Day X)

    # Day Y: [Location for Day Y]

    ... (continue for all days)

    Always use real-time, current information when suggesting activities, attractions, and estimated costs.
    The currency must be consistent for all estimated costs throughout the itinerary. For {destination}, use its local currency.
    """
)


def validate_request(req: TripRequest) -> None:
    if not req.destination.strip() or not req.interests.strip() or not req.duration:
        raise ItineraryGenerationError(
            "Please fill in all required fields (destination, duration, interests)."
        )
    if req.duration < 1:
        raise ItineraryGenerationError("Duration must be at least one day.")


def build_prompt(req: TripRequest) -> str:
    """Return the prompt asking Gemini for a markdown itinerary."""
    return _PROMPT_TEMPLATE.format(
        destination=req.destination.strip(),
        duration=req.duration,
        interests=req.interests.strip(),
    )

# ──────────────────────────────────────────────────────────────────────────────
# Grounding sources
# ──────────────────────────────────────────────────────────────────────────────
def extract_sources(resp) -> List[SourceLink]:
    """
    Web citations Gemini attached to the first candidate when search grounding
    was on. Chunks without a web URI are skipped.
    """
    candidates = getattr(resp, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    sources: List[SourceLink] = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None)
        if uri:
            sources.append(SourceLink(uri=uri, title=getattr(web, "title", None) or None))
    return sources


def _response_text(resp) -> str:
    # resp.text raises ValueError when the candidate has no text part
    try:
        return resp.text or ""
    except ValueError:
        return ""

# ──────────────────────────────────────────────────────────────────────────────
# Generate itinerary
# ──────────────────────────────────────────────────────────────────────────────
def generate_itinerary(req: TripRequest) -> ItineraryResponse:
    validate_request(req)
    try:
        model = _get_model()
        logger.info(
            "Requesting %d-day itinerary for %s from %s",
            req.duration, req.destination, model.model_name,
        )
        resp = model.generate_content(
            build_prompt(req),
            generation_config=_GENERATION_CONFIG,
            tools=_search_tools(),
        )
        full_text = _response_text(resp)
        if not full_text:
            raise RuntimeError("No text response received from Gemini API.")
    except Exception as e:
        logger.exception("Error generating itinerary")
        raise ItineraryGenerationError("Failed to generate itinerary", str(e)) from e

    return ItineraryResponse(
        itinerary=extract_itinerary(full_text),
        source_urls=extract_sources(resp),
    )
