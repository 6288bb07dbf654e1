"""External tool providers for itinerary generation.

This package provides the clients and LangChain tool factories exposed to the
planning model, plus the catalog assembly that merges them:

- Tavily: web research of attractions
- Geocoding: distance of a place from its city centre (Nominatim)
- Amadeus: flight offers and pricing

Example Usage:
    >>> from travelapp.core.config import ApiSettings
    >>> from travelapp.services import assemble_tool_catalog, create_default_providers
    >>>
    >>> settings = ApiSettings.from_env()
    >>> tools = assemble_tool_catalog(create_default_providers(settings))
"""

# Amadeus flight search
from travelapp.services.amadeus import (
    create_amadeus_client,
    create_flight_search_tool,
    summarise_flight_offers,
    FlightSearchInput,
)

# Tavily attraction research
from travelapp.services.tavily_search import (
    create_attractions_search_tool,
    process_results,
    AttractionSearchInput,
)

# Geocoding / distance
from travelapp.services.geocoding import (
    create_distance_tool,
    get_coordinates_nominatim,
    haversine_km,
)

# Catalog
from travelapp.services.catalog import (
    StaticToolProvider,
    ToolProvider,
    assemble_tool_catalog,
    create_default_providers,
)

__all__ = [
    # Amadeus
    "create_amadeus_client",
    "create_flight_search_tool",
    "summarise_flight_offers",
    "FlightSearchInput",
    # Tavily
    "create_attractions_search_tool",
    "process_results",
    "AttractionSearchInput",
    # Geocoding
    "create_distance_tool",
    "get_coordinates_nominatim",
    "haversine_km",
    # Catalog
    "StaticToolProvider",
    "ToolProvider",
    "assemble_tool_catalog",
    "create_default_providers",
]
