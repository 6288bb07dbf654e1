"""Geocoding and distance lookup services.

This module provides the mapping tool offered to the planning model, backed by
the Nominatim OpenStreetMap API.

Public API:
    - get_coordinates_nominatim: Function to convert an address to coordinates
    - haversine_km: Great-circle distance between two coordinates
    - create_distance_tool: Factory for the distance-from-centre LangChain tool
"""
from travelapp.services.geocoding.geocoding import get_coordinates_nominatim, haversine_km
from travelapp.services.geocoding.tools import DistanceLookupInput, create_distance_tool

__all__ = [
    "get_coordinates_nominatim",
    "haversine_km",
    "create_distance_tool",
    "DistanceLookupInput",
]
