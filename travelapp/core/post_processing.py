"""Decoding of the planner's raw text into a validated ``TripPlan``.

Decoding is all-or-nothing: either a fully validated plan comes back or
``TripPlanDecodeError`` is raised. Partially valid payloads are never patched.
"""
import json
import logging
from typing import Optional

from pydantic import ValidationError

from travelapp.core.errors import TripPlanDecodeError
from travelapp.core.schemas import TripPlan

logger = logging.getLogger(__name__)

_JSON_FENCE = "```json"
_FENCE = "```"


def strip_code_fences(raw_output: str) -> str:
    """Remove Markdown code fences a model may wrap around its JSON."""

    cleaned = raw_output.strip()
    if cleaned.startswith(_JSON_FENCE):
        cleaned = cleaned[len(_JSON_FENCE):].strip()
    if cleaned.startswith(_FENCE):
        cleaned = cleaned[len(_FENCE):].strip()
    if cleaned.endswith(_FENCE):
        cleaned = cleaned[: -len(_FENCE)].strip()
    return cleaned


def decode_trip_plan(raw_output: Optional[str]) -> TripPlan:
    """Parse planner output into a ``TripPlan`` or raise ``TripPlanDecodeError``."""

    logger.info("Parsing planner JSON response into structured trip plan")
    if raw_output is None:
        raise TripPlanDecodeError("Planner output is empty", raw_output=raw_output)

    cleaned = strip_code_fences(raw_output)
    try:
        payload = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise TripPlanDecodeError(
            "Planner output is not valid JSON", raw_output=raw_output, cause=exc
        ) from exc

    if not isinstance(payload, dict):
        raise TripPlanDecodeError(
            f"Expected a JSON object, got {type(payload).__name__}", raw_output=raw_output
        )

    try:
        plan = TripPlan.model_validate(payload)
    except ValidationError as exc:
        raise TripPlanDecodeError(
            "Planner output does not match the trip plan shape", raw_output=raw_output, cause=exc
        ) from exc

    logger.info(
        "Successfully parsed trip plan with %d attractions and %d flights",
        len(plan.attractions),
        len(plan.flights),
    )
    return plan
