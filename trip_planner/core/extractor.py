# core/extractor.py
"""
Markdown itinerary extraction.

The model is asked for the following layout, but nothing guarantees it::

    # Day 1: Ubud
    ## Tegallalang Rice Terrace
    *   Hours: 08:00 AM - 06:00 PM
    *   Estimated Cost: IDR 50,000
    *   Details: Walk the terraces early in the morning.

Anything that does not fit is skipped rather than reported, so a sloppy
response yields fewer days or activities instead of an exception.
"""

import logging
import re
from typing import List

from trip_planner.core.models import Activity, DayItinerary

logger = logging.getLogger(__name__)

_DAY_RE = re.compile(
    r"^[ \t]*#[ \t]*Day[ \t]+(\d+)[ \t]*:[ \t]*(.*?)[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)

# "*   Hours:", "- **Hours:**", "**Hours**:" ...
_FIELD = r"\n\s*(?:[*-][ \t]*)?\**{label}\**[ \t]*:[ \t]*\**[ \t]*"

_ACTIVITY_RE = re.compile(
    r"^[ \t]*##(?!#)[ \t]*(?P<name>[^\n]*?)[ \t]*"
    + _FIELD.format(label="Hours")
    + r"(?P<hours>[^\n]*?)[ \t]*"
    + _FIELD.format(label=r"Estimated[ \t]+Cost")
    + r"(?P<cost>.*?)"
    + r"(?:" + _FIELD.format(label="Details") + r"(?P<details>.*?))?"
    + r"(?=\n[ \t]*##|\Z)",
    re.IGNORECASE | re.MULTILINE | re.DOTALL,
)


def strip_citations(document: str) -> str:
    """Drop the bracketed grounding lines (``[1] https://...``) the model appends."""
    lines = document.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    return "\n".join(line for line in lines if not line.strip().startswith("["))


def extract_activities(segment: str) -> List[Activity]:
    activities: List[Activity] = []
    for m in _ACTIVITY_RE.finditer(segment):
        name = m.group("name").strip()
        if not name:
            continue
        activities.append(
            Activity(
                name=name,
                hours=m.group("hours").strip(),
                estimated_cost=m.group("cost").strip(),
                description=(m.group("details") or "").strip(),
            )
        )
    return activities


def extract_itinerary(document: str) -> List[DayItinerary]:
    """
    Split a markdown response into days and activities.

    Days keep the order they appear in, even when numbers repeat or go
    backwards. Text before the first ``# Day N:`` heading is ignored.
    """
    text = strip_citations(document or "")
    headings = list(_DAY_RE.finditer(text))

    days: List[DayItinerary] = []
    for i, heading in enumerate(headings):
        end = headings[i + 1].start() if i + 1 < len(headings) else len(text)
        segment = text[heading.end():end]
        days.append(
            DayItinerary(
                day=int(heading.group(1)),
                location=heading.group(2) or None,
                activities=extract_activities(segment),
            )
        )

    logger.debug(
        "Extracted %d day(s), %d activity block(s)",
        len(days),
        sum(len(d.activities) for d in days),
    )
    return days
