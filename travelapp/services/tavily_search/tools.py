from travelapp.core.config import ApiSettings
from travelapp.services.tavily_search.schemas import AttractionSearchInput
from travelapp.services.tavily_search.client import process_results
from langchain_core.tools import BaseTool, StructuredTool
from typing import Dict, List
from langchain_tavily import TavilySearch


def create_attractions_search_tool(settings: ApiSettings) -> BaseTool:
    """Return a LangChain tool that researches attractions on the web via Tavily."""

    tavily_key = settings.ensure("tavily_api_key")

    async def _arun(**kwargs) -> List[Dict[str, str]]:
        """Search the web and return cleaned ``{title, url, content}`` snippets.

        Returns an empty list when Tavily finds nothing.
        """

        payload = AttractionSearchInput(**kwargs)
        tavily_search = TavilySearch(
            max_results=payload.max_results,
            tavily_api_key=tavily_key,
            search_depth=payload.search_depth,
            country=payload.country,
        )

        search_results = await tavily_search.ainvoke({"query": payload.query})
        if not isinstance(search_results, dict):
            return []
        return process_results(search_results.get("results", []))

    return StructuredTool.from_function(
        coroutine=_arun,
        name="search_attractions_tool",
        description="Search the web for famous attractions and things to do in a city.",
        args_schema=AttractionSearchInput,
    )
