"""Amadeus flight search API integration.

This module provides client and tool factories for the flight-pricing tool
offered to the planning model.

Public API:
    - create_amadeus_client: Factory function to create Amadeus client
    - create_flight_search_tool: Factory function to create flight search LangChain tool
    - summarise_flight_offers: Reduce a raw offers payload to plan-ready entries
    - FlightSearchInput: Pydantic schema for flight search parameters
"""
from travelapp.services.amadeus.client import create_amadeus_client
from travelapp.services.amadeus.tools import create_flight_search_tool, summarise_flight_offers
from travelapp.services.amadeus.schemas import FlightSearchInput, FlightOfferSummary

__all__ = [
    "create_amadeus_client",
    "create_flight_search_tool",
    "summarise_flight_offers",
    "FlightSearchInput",
    "FlightOfferSummary",
]
