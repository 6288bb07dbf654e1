"""Request-scoped orchestration of the itinerary generation pipeline.

Stages run strictly in order::

    SANITIZE -> PROMPT -> PLAN_CALL -> DECODE -> generated plan
                             \\__________\\____> fallback plan

The sanitizer fails open on its own, so it never leads to a fallback. A
failure of the planner call or of decoding (or anything unexpected) produces
the deterministic fallback plan instead of an error. The planner is called
exactly once per request.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from travelapp.core.errors import TripPlanDecodeError
from travelapp.core.fallback import build_fallback_plan
from travelapp.core.planner import TripPlanner
from travelapp.core.post_processing import decode_trip_plan
from travelapp.core.prompts import build_system_prompt, build_user_prompt
from travelapp.core.sanitizer import DescriptionSanitizer
from travelapp.core.schemas import TripPlan, TripRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlanningOutcome:
    """Result of one pipeline run."""

    trip_plan: TripPlan
    sanitized_description: Optional[str]
    source: Literal["generated", "fallback"]
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


class ItineraryPipeline:
    """Sequences sanitizer, prompt builder, planner and decoder for a request."""

    def __init__(self, sanitizer: DescriptionSanitizer, planner: TripPlanner) -> None:
        self.sanitizer = sanitizer
        self.planner = planner

    async def generate(self, request: TripRequest) -> PlanningOutcome:
        logger.info(
            "Generating trip plan for %s to %s (%s to %s)",
            request.origin,
            request.destination,
            request.start_date,
            request.end_date,
        )
        sanitized = request.description
        try:
            sanitized = await self.sanitizer.sanitize(request.description)
            logger.info("Original description: %s", request.description)
            logger.info("Sanitized description: %s", sanitized)

            system_prompt = build_system_prompt()
            user_prompt = build_user_prompt(request, sanitized)

            raw_output = await self.planner.plan(system_prompt, user_prompt)
            trip_plan = decode_trip_plan(raw_output)
        except TripPlanDecodeError as exc:
            logger.error("Error parsing planner JSON response: %s", exc)
            logger.debug("Raw response: %s", exc.raw_output)
            return self._fallback(request, sanitized, exc)
        except Exception as exc:
            logger.error("Error generating trip plan: %s", exc, exc_info=True)
            return self._fallback(request, sanitized, exc)

        return PlanningOutcome(
            trip_plan=trip_plan,
            sanitized_description=sanitized,
            source="generated",
        )

    @staticmethod
    def _fallback(
        request: TripRequest, sanitized: Optional[str], exc: Exception
    ) -> PlanningOutcome:
        return PlanningOutcome(
            trip_plan=build_fallback_plan(request),
            sanitized_description=sanitized,
            source="fallback",
            error=str(exc),
        )
