"""Typed errors raised along the itinerary generation pipeline.

Only ``PlannerUnavailableError`` and ``TripPlanDecodeError`` ever leave the
component that raised them, and the pipeline turns both into a fallback plan.
``SanitizationUnavailableError`` is contained by the sanitizer, which fails
open with the original description.
"""
from __future__ import annotations

from typing import Optional


class ItineraryError(Exception):
    """Base error for the itinerary generation domain."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


class SanitizationUnavailableError(ItineraryError):
    """The lightweight model could not sanitize a description."""


class PlannerUnavailableError(ItineraryError):
    """The tool-augmented planning model failed or returned no text."""


class TripPlanDecodeError(ItineraryError):
    """The planner output could not be decoded into a ``TripPlan``."""

    def __init__(
        self,
        message: str,
        *,
        raw_output: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.raw_output = raw_output


__all__ = [
    "ItineraryError",
    "SanitizationUnavailableError",
    "PlannerUnavailableError",
    "TripPlanDecodeError",
]
