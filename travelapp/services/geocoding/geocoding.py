"""Small helpers for using the public Nominatim geocoding service."""
from __future__ import annotations

import logging
import math
from typing import Optional, Tuple

import httpx

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
EARTH_RADIUS_KM = 6371.0088

Coordinates = Tuple[float, float]


async def get_coordinates_nominatim(
    location: Optional[str],
    *,
    user_agent: str = "TravelApp/1.0",
    timeout: float = 10.0,
) -> Optional[Coordinates]:
    """Return ``(lat, lon)`` for the requested location or ``None``."""

    if not location:
        return None

    try:
        async with httpx.AsyncClient(timeout=timeout, headers={"User-Agent": user_agent}) as client:
            response = await client.get(
                NOMINATIM_URL,
                params={"q": location, "format": "json", "limit": 1},
            )
            response.raise_for_status()
            data = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.warning("Geocoding failed for %r: %s", location, exc)
        return None

    if not data:
        return None

    first = data[0]
    try:
        return float(first["lat"]), float(first["lon"])
    except (KeyError, TypeError, ValueError):
        logger.warning("Unexpected Nominatim payload for %r: %s", location, first)
        return None


def haversine_km(origin: Coordinates, destination: Coordinates) -> float:
    """Great-circle distance between two coordinates in kilometres."""

    lat1, lon1 = map(math.radians, origin)
    lat2, lon2 = map(math.radians, destination)
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))
