from datetime import date
from typing import Optional, Literal
from pydantic import BaseModel, Field, field_serializer


class FlightSearchInput(BaseModel):
    """Input schema mirroring the Amadeus flight offers endpoint."""

    originLocationCode: str = Field(..., description="Origin airport/city IATA code, e.g. JFK or NYC")
    destinationLocationCode: str = Field(..., description="Destination airport/city IATA code, e.g. CDG or PAR")
    departureDate: date = Field(..., description="Outbound date (YYYY-MM-DD)")
    returnDate: Optional[date] = Field(None, description="Return date for round trip")
    adults: int = Field(1, ge=1, le=9, description="Number of adults")
    travelClass: Optional[Literal["ECONOMY", "PREMIUM_ECONOMY", "BUSINESS", "FIRST"]] = Field(
        None,
        description="Cabin class: ECONOMY, PREMIUM_ECONOMY, BUSINESS, FIRST",
    )
    nonStop: Optional[bool] = Field(None, description="Only return non-stop flights")
    currencyCode: Optional[str] = Field(None, pattern=r"^[A-Z]{3}$", description="Currency code, e.g. USD")
    max: int = Field(5, ge=1, le=50, description="Number of flight offers to return")

    @field_serializer("departureDate", "returnDate", when_used="json")
    def _serialize_dates(self, value: Optional[date], _info) -> Optional[str]:
        if value is None:
            return None
        return value.strftime("%Y-%m-%d")


class FlightOfferSummary(BaseModel):
    """Compact view of one Amadeus offer handed back to the planning model."""

    airline: str
    price: str
    price_amount: float
    departure_time: Optional[str] = None
    arrival_time: Optional[str] = None
    duration: Optional[str] = None
    stops: int = 0
    booking_class: Optional[str] = None
