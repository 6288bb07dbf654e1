"""Assembly of the read-only tool catalog handed to the planning model."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Protocol, Sequence, Tuple

from langchain_core.tools import BaseTool

from travelapp.core.config import ApiSettings
from travelapp.services.amadeus import create_amadeus_client, create_flight_search_tool
from travelapp.services.geocoding import create_distance_tool
from travelapp.services.tavily_search import create_attractions_search_tool

logger = logging.getLogger(__name__)


class ToolProvider(Protocol):
    """A connected source of named, schema-described tools."""

    name: str

    def get_tools(self) -> Sequence[BaseTool]: ...


@dataclass(frozen=True, slots=True)
class StaticToolProvider:
    """Provider whose tools are built once at start-up."""

    name: str
    tools: Tuple[BaseTool, ...]

    def get_tools(self) -> Sequence[BaseTool]:
        return self.tools


def assemble_tool_catalog(providers: Iterable[ToolProvider]) -> Tuple[BaseTool, ...]:
    """Flatten the tools of every provider, in provider order, into one tuple.

    Duplicate tool names are kept as-is and only reported.
    """

    catalog: List[BaseTool] = []
    owners: Dict[str, str] = {}
    for provider in providers:
        tools = list(provider.get_tools())
        logger.info("Tool provider %s exposes %d tools", provider.name, len(tools))
        for tool in tools:
            if tool.name in owners:
                logger.warning(
                    "Tool %s from provider %s shadows the one from %s",
                    tool.name,
                    provider.name,
                    owners[tool.name],
                )
            owners[tool.name] = provider.name
            catalog.append(tool)
    return tuple(catalog)


def create_default_providers(settings: ApiSettings) -> List[ToolProvider]:
    """Build the web-search, mapping and flight-pricing providers that are configured."""

    providers: List[ToolProvider] = []

    if settings.has_web_search:
        providers.append(
            StaticToolProvider("web_search", (create_attractions_search_tool(settings),))
        )
    else:
        logger.warning("TAVILY_API_KEY not set; attraction research tool disabled")

    providers.append(StaticToolProvider("maps", (create_distance_tool(),)))

    if settings.has_flight_search:
        client = create_amadeus_client(settings)
        providers.append(StaticToolProvider("flights", (create_flight_search_tool(client),)))
    else:
        logger.warning("Amadeus credentials not set; flight search tool disabled")

    return providers
