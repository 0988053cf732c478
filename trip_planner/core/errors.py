# core/errors.py

from typing import Optional


class ItineraryGenerationError(RuntimeError):
    """User-facing failure of an itinerary request: a short message plus details."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(f"{message}: {details}" if details else message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        return {"message": self.message, "details": self.details}
