"""Pydantic data models for the itinerary generation pipeline.

The models speak camelCase on the wire (``distanceFromCenter``,
``bookingClass``, ``startDate``...) because that is what the web client sends
and what the planning model is instructed to emit, while Python code uses the
snake_case attribute names. Both spellings are accepted on input.

Key models:
- TripRequest: the validated trip parameters handed to the pipeline
- Attraction / Flight: one entry of the generated plan
- TripPlan: the structured result decoded from the planner output
"""
from __future__ import annotations

from datetime import date
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from travelapp.core.types import (
    Description,
    Kilometers,
    NonEmptyText,
    PartySize,
    PlaceName,
    StopCount,
)


class TripRequest(BaseModel):
    """Immutable description of the trip being planned.

    ``origin`` and ``destination`` travel as ``from`` and ``to`` in JSON since
    ``from`` is a Python keyword.
    """

    origin: PlaceName = Field(alias="from", description="Departure city")
    destination: PlaceName = Field(alias="to", description="Destination city")
    start_date: date = Field(description="First day of the trip")
    end_date: date = Field(description="Last day of the trip")
    number_of_adults: PartySize = Field(description="Number of adult travellers (1-20)")
    description: Optional[Description] = Field(
        default=None, description="Free-text wishes for the trip"
    )

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @model_validator(mode="after")
    def validate_dates(self) -> "TripRequest":
        if self.end_date < self.start_date:
            raise ValueError("End date must be after start date")
        return self

    @property
    def trip_days(self) -> int:
        """Calendar days between start and end (0 for a same-day trip)."""

        return (self.end_date - self.start_date).days


class Attraction(BaseModel):
    """A sight or activity in the destination city."""

    name: NonEmptyText
    description: Optional[str] = None
    distance_from_center: Kilometers = Field(description="Distance from the city centre in km")
    address: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Flight(BaseModel):
    """A flight option between origin and destination.

    ``price`` is text (``"$450"``, ``"EUR 312.40"``, ``"Varies by season"``);
    bare numbers coming from the model are turned into text.
    """

    airline: NonEmptyText
    price: str
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    duration: Optional[str] = None
    stops: StopCount = 0
    booking_class: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        coerce_numbers_to_str=True,
    )


class TripPlan(BaseModel):
    """Structured itinerary returned to the caller."""

    summary: NonEmptyText = Field(description="2-3 sentence overview of the trip")
    attractions: List[Attraction] = Field(
        default_factory=list, description="Attractions, nearest to the city centre first"
    )
    flights: List[Flight] = Field(default_factory=list, description="Flights, cheapest first")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @field_validator("attractions", "flights", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


__all__ = [
    "TripRequest",
    "Attraction",
    "Flight",
    "TripPlan",
]
