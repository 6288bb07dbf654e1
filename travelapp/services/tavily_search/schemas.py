from pydantic import BaseModel, Field
from typing import Literal, Optional


class AttractionSearchInput(BaseModel):
    """Search parameters supported by the Tavily attraction research tool."""

    query: str = Field(description="Natural language query, e.g. 'top attractions in Paris'")
    country: Optional[str] = Field(default=None, description="Country name to influence Tavily results ex. france")
    search_depth: Literal["basic", "advanced"] = Field(default="basic", description="Depth of Tavily search (basic or advanced)")
    max_results: int = Field(default=10, ge=1, le=20, description="Number of results to return")
