"""Deterministic trip plan used when generation or decoding fails."""
from __future__ import annotations

import logging

from travelapp.core.schemas import Flight, TripPlan, TripRequest

logger = logging.getLogger(__name__)

FALLBACK_SUMMARY = (
    "Your {days}-day trip from {origin} to {destination} promises an exciting adventure. "
    "Enjoy exploring new destinations and creating memorable experiences."
)

PLACEHOLDER_FLIGHT = Flight(
    airline="Various Airlines",
    price="Varies by season",
    departure_time="Multiple times available",
    arrival_time="Multiple times available",
    duration="Varies",
    stops=0,
    booking_class="Economy",
)


def build_fallback_plan(request: TripRequest) -> TripPlan:
    """Return a minimal valid plan built only from the request itself."""

    logger.warning("Using fallback trip plan for %s -> %s", request.origin, request.destination)
    return TripPlan(
        summary=FALLBACK_SUMMARY.format(
            days=request.trip_days,
            origin=request.origin,
            destination=request.destination,
        ),
        attractions=[],
        flights=[PLACEHOLDER_FLIGHT],
    )
