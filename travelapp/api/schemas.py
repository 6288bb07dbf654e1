from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from travelapp.core.schemas import TripPlan, TripRequest


class ItineraryRequest(TripRequest):
    """Request payload accepted by ``POST /api/itinerary``.

    Adds the boundary-only rule that trips cannot start in the past.
    """

    @field_validator("start_date")
    @classmethod
    def start_date_not_in_past(cls, value: date) -> date:
        if value < date.today():
            raise ValueError("Start date must be today or in the future")
        return value


class ItineraryResponse(BaseModel):
    """Created itinerary: request echo, status marker and the trip plan."""

    id: str = Field(..., description="Identifier of the created itinerary")
    destination: str = Field(..., alias="to")
    origin: str = Field(..., alias="from")
    start_date: date
    end_date: date
    number_of_adults: int
    description: Optional[str] = Field(
        default=None, description="Sanitized trip description"
    )
    created_at: datetime
    status: Literal["CREATED"] = Field(default="CREATED", description="Creation status")
    message: str = Field(..., description="Human readable outcome")
    trip_plan: Optional[TripPlan] = Field(
        default=None, description="Generated (or fallback) trip plan"
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
