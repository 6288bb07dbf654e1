"""Pytest configuration for the itinerary project."""
from __future__ import annotations

import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict

import pytest

# Ensure the project root is on sys.path so that import travelapp works under pytest.
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from travelapp.core.schemas import TripRequest  # noqa: E402


def make_plan_payload(attractions: int = 10, flights: int = 5) -> Dict[str, Any]:
    """Return a planner JSON payload in the wire (camelCase) format."""

    return {
        "summary": "Paris blends world-class museums with a legendary food scene. "
        "Six days leave time for both.",
        "attractions": [
            {
                "name": f"Attraction {index}",
                "description": f"Sight number {index}",
                "distanceFromCenter": round(0.5 * index, 1),
                "address": f"{index} Rue de Rivoli, Paris",
            }
            for index in range(1, attractions + 1)
        ],
        "flights": [
            {
                "airline": f"Airline {index}",
                "price": f"${400 + 50 * index}",
                "departureTime": "18:30",
                "arrivalTime": "07:45",
                "duration": "7h 15m",
                "stops": index % 2,
                "bookingClass": "Economy",
            }
            for index in range(1, flights + 1)
        ],
    }


@pytest.fixture
def paris_request() -> TripRequest:
    return TripRequest.model_validate(
        {
            "from": "NYC",
            "to": "Paris",
            "startDate": "2025-06-01",
            "endDate": "2025-06-07",
            "numberOfAdults": 2,
            "description": "museums and food",
        }
    )


@pytest.fixture
def plan_payload() -> Dict[str, Any]:
    return make_plan_payload()


@pytest.fixture
def same_day_request() -> TripRequest:
    return TripRequest(
        origin="Berlin",
        destination="Prague",
        start_date=date(2025, 9, 1),
        end_date=date(2025, 9, 1),
        number_of_adults=1,
    )
