"""Tavily web search integration for attraction research.

Public API:
    - create_attractions_search_tool: Factory function to create the web search LangChain tool
    - process_results: Utility to clean Tavily search hits
    - AttractionSearchInput: Pydantic schema for the search parameters
"""
from travelapp.services.tavily_search.tools import create_attractions_search_tool
from travelapp.services.tavily_search.client import clean_snippet, process_results
from travelapp.services.tavily_search.schemas import AttractionSearchInput

__all__ = [
    "create_attractions_search_tool",
    "clean_snippet",
    "process_results",
    "AttractionSearchInput",
]
