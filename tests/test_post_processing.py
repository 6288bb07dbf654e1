import json

import pytest

from travelapp.core.errors import TripPlanDecodeError
from travelapp.core.post_processing import decode_trip_plan, strip_code_fences
from travelapp.core.schemas import TripPlan


@pytest.mark.parametrize(
    "wrapped",
    [
        "```json\n{body}\n```",
        "```\n{body}\n```",
        "```json{body}```",
        "  \n```json\n{body}\n```  \n",
        "{body}\n```",
        "```json\n{body}",
        "{body}",
    ],
)
def test_fence_variants_decode_identically(plan_payload, wrapped):
    body = json.dumps(plan_payload, indent=2)
    reference = decode_trip_plan(body)

    decoded = decode_trip_plan(wrapped.replace("{body}", body))

    assert decoded == reference


def test_strip_code_fences_is_idempotent(plan_payload):
    body = json.dumps(plan_payload)
    once = strip_code_fences(f"```json\n{body}\n```")

    assert once == body
    assert strip_code_fences(once) == once


def test_decode_preserves_fields_and_order(plan_payload):
    plan = decode_trip_plan(json.dumps(plan_payload))

    assert isinstance(plan, TripPlan)
    assert plan.summary == plan_payload["summary"]
    assert [a.name for a in plan.attractions] == [a["name"] for a in plan_payload["attractions"]]
    assert [f.price for f in plan.flights] == [f["price"] for f in plan_payload["flights"]]
    assert plan.attractions[3].distance_from_center == plan_payload["attractions"][3]["distanceFromCenter"]
    assert plan.model_dump(by_alias=True) == plan_payload


def test_decode_ignores_unknown_fields(plan_payload):
    plan_payload["weather"] = "sunny"
    plan_payload["attractions"][0]["rating"] = 4.8

    plan = decode_trip_plan(json.dumps(plan_payload))

    assert len(plan.attractions) == 10


@pytest.mark.parametrize("missing", [{}, {"attractions": None, "flights": None}])
def test_missing_arrays_decode_to_empty(missing):
    payload = {"summary": "A short trip.", **missing}

    plan = decode_trip_plan(json.dumps(payload))

    assert plan.attractions == []
    assert plan.flights == []


def test_decode_does_not_enforce_cardinality():
    payload = {
        "summary": "Short.",
        "attractions": [{"name": "Far", "distanceFromCenter": 9.0}, {"name": "Near", "distanceFromCenter": 1.0}],
        "flights": [],
    }

    plan = decode_trip_plan(json.dumps(payload))

    assert [a.name for a in plan.attractions] == ["Far", "Near"]


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        '{"summary": "cut off", "attractions": [',
        "[1, 2, 3]",
        '"just a string"',
        "null",
        "",
        '{"attractions": []}',
        '{"summary": "x", "attractions": "none"}',
        '{"summary": "x", "attractions": [{"name": "Louvre", "distanceFromCenter": "far"}]}',
        '{"summary": "x", "flights": [{"airline": "AF", "price": "$1", "stops": -2}]}',
    ],
)
def test_malformed_output_raises_decode_error(raw):
    with pytest.raises(TripPlanDecodeError) as excinfo:
        decode_trip_plan(raw)

    assert excinfo.value.raw_output == raw


def test_none_output_raises_decode_error():
    with pytest.raises(TripPlanDecodeError):
        decode_trip_plan(None)


def test_trailing_prose_after_fence_is_a_decode_error(plan_payload):
    raw = f"```json\n{json.dumps(plan_payload)}\n```\nLet me know if you need anything else!"

    with pytest.raises(TripPlanDecodeError):
        decode_trip_plan(raw)
