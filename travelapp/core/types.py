"""Shared type aliases used across the itinerary models."""
from __future__ import annotations

from typing import Annotated

from pydantic import Field, StringConstraints

Kilometers = Annotated[float, Field(ge=0)]
StopCount = Annotated[int, Field(ge=0)]
PartySize = Annotated[int, Field(ge=1, le=20)]
PlaceName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Description = Annotated[str, StringConstraints(max_length=300)]
NonEmptyText = Annotated[str, StringConstraints(min_length=1)]
