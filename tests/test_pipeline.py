"""End-to-end tests for the itinerary pipeline with stubbed models."""
from __future__ import annotations

import json
from typing import Any, List, Optional, Tuple

import pytest
from langchain_core.messages import AIMessage

from travelapp.core.errors import PlannerUnavailableError
from travelapp.core.pipeline import ItineraryPipeline, PlanningOutcome
from travelapp.core.planner import TripPlanner
from travelapp.core.prompts import build_system_prompt
from travelapp.core.sanitizer import DescriptionSanitizer


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class StubLLM:
    def __init__(self, reply: str = "", error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls = 0

    async def ainvoke(self, messages: List[Any]) -> AIMessage:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply)


class StubPlanner:
    def __init__(self, reply: str = "", error: Optional[Exception] = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    async def plan(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.reply


class FailingAgent:
    def __init__(self) -> None:
        self.calls = 0

    async def ainvoke(self, payload: Any, config: Any = None) -> Any:
        self.calls += 1
        raise TimeoutError("read timed out")


class ExplodingSanitizer:
    async def sanitize(self, description: Optional[str]) -> Optional[str]:
        raise KeyError("unexpected")


def _pipeline(planner: Any, llm: Optional[StubLLM] = None) -> ItineraryPipeline:
    return ItineraryPipeline(DescriptionSanitizer(llm or StubLLM(reply="museums and food")), planner)


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


async def test_scenario_a_generated_plan_is_returned(paris_request, plan_payload):
    planner = StubPlanner(reply=json.dumps(plan_payload))

    outcome = await _pipeline(planner).generate(paris_request)

    assert isinstance(outcome, PlanningOutcome)
    assert outcome.source == "generated"
    assert not outcome.is_fallback
    assert outcome.error is None
    assert len(outcome.trip_plan.attractions) == 10
    assert len(outcome.trip_plan.flights) == 5
    assert [a.name for a in outcome.trip_plan.attractions] == [
        a["name"] for a in plan_payload["attractions"]
    ]
    assert outcome.trip_plan.model_dump(by_alias=True) == plan_payload


async def test_scenario_b_transport_failure_falls_back(paris_request):
    planner = StubPlanner(error=PlannerUnavailableError("Planner model call failed"))

    outcome = await _pipeline(planner).generate(paris_request)

    assert outcome.is_fallback
    assert outcome.trip_plan.attractions == []
    assert len(outcome.trip_plan.flights) == 1
    summary = outcome.trip_plan.summary
    assert "NYC" in summary and "Paris" in summary and "6" in summary
    assert "Planner model call failed" in outcome.error


async def test_scenario_c_fenced_output_with_trailing_prose_never_raises(paris_request, plan_payload):
    raw = f"```json\n{json.dumps(plan_payload)}\n```\nEnjoy your trip!"
    planner = StubPlanner(reply=raw)

    outcome = await _pipeline(planner).generate(paris_request)

    assert outcome.is_fallback
    assert outcome.trip_plan.attractions == []
    assert len(planner.calls) == 1


async def test_fenced_output_decodes(paris_request, plan_payload):
    planner = StubPlanner(reply=f"```json\n{json.dumps(plan_payload)}\n```")

    outcome = await _pipeline(planner).generate(paris_request)

    assert outcome.source == "generated"
    assert len(outcome.trip_plan.flights) == 5


async def test_malformed_output_falls_back(paris_request):
    planner = StubPlanner(reply="Sorry, I could not find any flights.")

    outcome = await _pipeline(planner).generate(paris_request)

    assert outcome.is_fallback
    assert outcome.trip_plan.flights[0].airline == "Various Airlines"


# ---------------------------------------------------------------------------
# Ordering, retries, sanitizer asymmetry
# ---------------------------------------------------------------------------


async def test_sanitized_description_is_embedded_in_prompt(paris_request, plan_payload):
    llm = StubLLM(reply="  art museums  ")
    planner = StubPlanner(reply=json.dumps(plan_payload))

    outcome = await _pipeline(planner, llm).generate(paris_request)

    system_prompt, user_prompt = planner.calls[0]
    assert system_prompt == build_system_prompt()
    assert "Trip Details: art museums" in user_prompt
    assert outcome.sanitized_description == "art museums"


async def test_sanitizer_failure_does_not_fall_back(paris_request, plan_payload):
    llm = StubLLM(error=ConnectionError("local model down"))
    planner = StubPlanner(reply=json.dumps(plan_payload))

    outcome = await _pipeline(planner, llm).generate(paris_request)

    assert outcome.source == "generated"
    assert outcome.sanitized_description == "museums and food"
    assert "Trip Details: museums and food" in planner.calls[0][1]


async def test_planner_failure_is_not_retried(paris_request):
    agent = FailingAgent()
    planner = TripPlanner(agent)

    outcome = await _pipeline(planner).generate(paris_request)

    assert outcome.is_fallback
    assert agent.calls == 1


async def test_decode_failure_is_not_retried(paris_request):
    planner = StubPlanner(reply="{not json")

    await _pipeline(planner).generate(paris_request)

    assert len(planner.calls) == 1


async def test_unexpected_upstream_error_falls_back(paris_request):
    planner = StubPlanner(reply="{}")
    pipeline = ItineraryPipeline(ExplodingSanitizer(), planner)

    outcome = await pipeline.generate(paris_request)

    assert outcome.is_fallback
    assert outcome.sanitized_description == "museums and food"
    assert planner.calls == []


async def test_blank_description_uses_placeholder(same_day_request, plan_payload):
    llm = StubLLM(reply="never")
    planner = StubPlanner(reply=json.dumps(plan_payload))

    outcome = await _pipeline(planner, llm).generate(same_day_request)

    assert llm.calls == 0
    assert outcome.sanitized_description is None
    assert "Trip Details: General sightseeing and tourism" in planner.calls[0][1]


@pytest.mark.parametrize("reply", ["[]", '{"summary": ""}'])
async def test_invalid_shapes_fall_back(paris_request, reply):
    outcome = await _pipeline(StubPlanner(reply=reply)).generate(paris_request)

    assert outcome.is_fallback
