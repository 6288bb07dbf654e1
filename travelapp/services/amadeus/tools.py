import logging
import re
from typing import Any, Dict, List, Mapping, Optional

from amadeus import Client
from amadeus.client.errors import ResponseError
from langchain_core.tools import BaseTool, StructuredTool

from travelapp.services.amadeus.client import _format_response_error
from travelapp.services.amadeus.schemas import FlightOfferSummary, FlightSearchInput

logger = logging.getLogger(__name__)

_ISO_DURATION = re.compile(r"^PT(?:(\d+)H)?(?:(\d+)M)?$")


def _format_duration(value: Optional[str]) -> Optional[str]:
    """Turn an ISO-8601 duration such as ``PT7H5M`` into ``7h 05m``."""

    if not value:
        return None
    match = _ISO_DURATION.match(value)
    if not match:
        return value
    hours, minutes = (int(part) if part else 0 for part in match.groups())
    return f"{hours}h {minutes:02d}m"


def _format_time(value: Optional[str]) -> Optional[str]:
    # Amadeus timestamps look like 2025-06-01T18:30:00
    if not value or "T" not in value:
        return value
    return value.split("T", 1)[1][:5]


def summarise_flight_offers(result: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Reduce a raw flight-offers payload to the fields a trip plan needs, cheapest first."""

    carriers = result.get("dictionaries", {}).get("carriers", {})
    summaries: List[FlightOfferSummary] = []

    for offer in result.get("data", []):
        itineraries = offer.get("itineraries") or []
        if not itineraries:
            continue
        outbound = itineraries[0]
        segments = outbound.get("segments") or []
        if not segments:
            continue

        price = offer.get("price", {})
        amount = price.get("grandTotal") or price.get("total")
        try:
            price_amount = float(amount)
        except (TypeError, ValueError):
            logger.debug("Skipping flight offer %s without a usable price", offer.get("id"))
            continue

        carrier_code = (offer.get("validatingAirlineCodes") or [segments[0].get("carrierCode")])[0]
        cabin = None
        for pricing in offer.get("travelerPricings") or []:
            fare_details = pricing.get("fareDetailsBySegment") or []
            if fare_details:
                cabin = fare_details[0].get("cabin")
                break

        summaries.append(
            FlightOfferSummary(
                airline=carriers.get(carrier_code, carrier_code or "Unknown"),
                price=f"{price.get('currency', '')} {price_amount:.2f}".strip(),
                price_amount=price_amount,
                departure_time=_format_time(segments[0].get("departure", {}).get("at")),
                arrival_time=_format_time(segments[-1].get("arrival", {}).get("at")),
                duration=_format_duration(outbound.get("duration")),
                stops=len(segments) - 1,
                booking_class=cabin.replace("_", " ").title() if cabin else None,
            )
        )

    summaries.sort(key=lambda summary: summary.price_amount)
    return [summary.model_dump(exclude_none=True) for summary in summaries]


def create_flight_search_tool(client: Client) -> BaseTool:
    """Expose the Amadeus flight search as a LangChain tool."""

    def _run(**kwargs) -> List[Dict[str, Any]]:
        payload = FlightSearchInput(**kwargs)
        search_params = payload.model_dump(mode="json", exclude_none=True)
        if "nonStop" in search_params:
            search_params["nonStop"] = "true" if search_params["nonStop"] else "false"
        try:
            response = client.shopping.flight_offers_search.get(**search_params)
        except ResponseError as exc:
            message = _format_response_error(exc)
            raise RuntimeError(message) from exc
        return summarise_flight_offers(response.result)

    return StructuredTool.from_function(
        name="search_flights_tool",
        description=(
            "Search flight offers with prices between two airports or cities (IATA codes) "
            "on a given date. Results are sorted cheapest first."
        ),
        func=_run,
        args_schema=FlightSearchInput,
    )
