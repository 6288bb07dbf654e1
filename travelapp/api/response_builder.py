from datetime import datetime
from typing import Optional
from uuid import uuid4

from travelapp.api.schemas import ItineraryResponse
from travelapp.core.pipeline import PlanningOutcome
from travelapp.core.schemas import TripRequest

GENERATED_MESSAGE = "Itinerary created with AI-powered trip plan and suggestions"
FALLBACK_MESSAGE = (
    "Itinerary created with a basic trip plan; AI-powered suggestions are temporarily unavailable"
)


def _outcome_to_response(
    request: TripRequest,
    outcome: PlanningOutcome,
    *,
    created_at: Optional[datetime] = None,
) -> ItineraryResponse:
    return ItineraryResponse(
        id=str(uuid4()),
        destination=request.destination,
        origin=request.origin,
        start_date=request.start_date,
        end_date=request.end_date,
        number_of_adults=request.number_of_adults,
        description=outcome.sanitized_description,
        created_at=created_at or datetime.now(),
        status="CREATED",
        message=FALLBACK_MESSAGE if outcome.is_fallback else GENERATED_MESSAGE,
        trip_plan=outcome.trip_plan,
    )
