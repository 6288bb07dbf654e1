"""FastAPI surface for AI-powered itinerary creation."""
from __future__ import annotations

import os
# Load environment variables from .env file
from dotenv import load_dotenv

# Load .env file before any other imports that might need environment variables
load_dotenv()


import logging
from typing import Dict

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from travelapp.api.dependencies import lifespan, get_itinerary_bundle
from travelapp.api.response_builder import _outcome_to_response
from travelapp.api.schemas import ItineraryRequest, ItineraryResponse
from travelapp.core.config import configure_logging

configure_logging(os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

if os.getenv("SENTRY_DSN"):  # pragma: no cover - runtime configuration
    sentry_sdk.init(
        dsn=os.getenv("SENTRY_DSN"),
        send_default_pii=False,
        traces_sample_rate=float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0")),
    )

app = FastAPI(title="Travel Itinerary API", version="0.1.0", lifespan=lifespan)

origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _validation_errors(exc: RequestValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(location) or "request"
        message = str(error.get("msg", "Invalid value")).removeprefix("Value error, ")
        errors[field] = message
    return errors


@app.exception_handler(RequestValidationError)
async def handle_validation_errors(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = _validation_errors(exc)
    logger.info("Rejected itinerary request: %s", errors)
    return JSONResponse(status_code=400, content=errors)


@app.post("/api/itinerary", response_model=ItineraryResponse, status_code=201)
async def create_itinerary(payload: ItineraryRequest):
    """Create an itinerary with an AI-generated trip plan.

    The description is sanitized by the local model, then the planning model
    researches attractions, distances and flights through its tools. If the
    planning model fails or answers with something that is not a valid plan,
    the itinerary is still created with a basic fallback plan.

    Example JSON payload:
        ```json
        {
            "from": "NYC",
            "to": "Paris",
            "startDate": "2025-06-01",
            "endDate": "2025-06-07",
            "numberOfAdults": 2,
            "description": "museums and food"
        }
        ```
    """

    logger.info(
        "Received itinerary request: from %s to %s, dates: %s to %s",
        payload.origin,
        payload.destination,
        payload.start_date,
        payload.end_date,
    )

    try:
        bundle = get_itinerary_bundle()
        outcome = await bundle.create_itinerary(payload)
    except Exception as exc:
        logger.error("Error processing itinerary request: %s", exc, exc_info=True)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    if outcome.is_fallback:
        logger.warning("Trip plan fell back to the basic plan: %s", outcome.error)
    else:
        logger.info("Trip plan generated successfully")
    return _outcome_to_response(payload, outcome)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health endpoint used for readiness probes."""

    return {"status": "healthy", "service": "itinerary-api"}
