from travelapp.api.itinerary_service import ItineraryBundle
from travelapp.core.config import ApiSettings
from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from functools import lru_cache


@lru_cache(maxsize=1)
def get_itinerary_bundle() -> ItineraryBundle:
    settings = ApiSettings.from_env()
    return ItineraryBundle(settings)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    try:
        yield
    finally:
        get_itinerary_bundle.cache_clear()
