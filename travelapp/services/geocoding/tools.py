import asyncio
from typing import Any, Dict

from langchain_core.tools import BaseTool, StructuredTool
from pydantic import BaseModel, Field

from travelapp.services.geocoding.geocoding import get_coordinates_nominatim, haversine_km


class DistanceLookupInput(BaseModel):
    """Parameters for the distance-from-centre lookup."""

    place: str = Field(description="Attraction name or street address")
    city: str = Field(description="City whose centre the distance is measured from, e.g. Paris")


def create_distance_tool(*, user_agent: str = "TravelApp/1.0") -> BaseTool:
    """Return a tool measuring how far a place is from its city centre."""

    async def _arun(**kwargs) -> Dict[str, Any]:
        payload = DistanceLookupInput(**kwargs)
        place_coords, centre_coords = await asyncio.gather(
            get_coordinates_nominatim(f"{payload.place}, {payload.city}", user_agent=user_agent),
            get_coordinates_nominatim(payload.city, user_agent=user_agent),
        )
        if place_coords is None or centre_coords is None:
            unresolved = payload.place if place_coords is None else payload.city
            return {
                "place": payload.place,
                "city": payload.city,
                "error": f"Could not geocode '{unresolved}'",
            }
        return {
            "place": payload.place,
            "city": payload.city,
            "distance_km": round(haversine_km(centre_coords, place_coords), 2),
        }

    return StructuredTool.from_function(
        coroutine=_arun,
        name="distance_from_center_tool",
        description="Get the straight-line distance in kilometers between a place and the center of its city.",
        args_schema=DistanceLookupInput,
    )
