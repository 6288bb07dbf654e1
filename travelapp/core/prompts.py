"""Prompt templates for the sanitizer and the tool-augmented planner.

All builders here are plain string formatting: no I/O, no model calls.
"""
from __future__ import annotations

from typing import Optional

from travelapp.core.schemas import TripRequest

ATTRACTIONS_TOOL = "search_attractions_tool"
DISTANCE_TOOL = "distance_from_center_tool"
FLIGHTS_TOOL = "search_flights_tool"

DEFAULT_TRIP_DETAILS = "General sightseeing and tourism"

ATTRACTIONS_COUNT = 10
FLIGHTS_COUNT = 5


sanitizer_system_prompt = """You are an AI assistant specialized in sanitizing travel itinerary descriptions.
Your task is to:
1. Remove any text that is NOT related to travel, destinations, activities, accommodation, or trip planning
2. Remove inappropriate language, spam, or irrelevant content
3. Keep only the relevant travel-related information
4. If the entire description is unrelated to travel, return an empty string
5. Preserve the original meaning and tone of valid travel content
6. Return ONLY the sanitized text without any explanations or additional commentary
7. If no sanitization is needed return text as is.
"""

sanitizer_user_prompt = """Please sanitize this travel itinerary description by removing any text unrelated to travel. Return only the sanitized text:

{description}
"""


planner_system_prompt = """You are an expert travel advisor with access to real-time data through tools.

Your task is to create a comprehensive trip plan using the following tools:

1. **{attractions_tool}**: Research the top {attractions_count} famous things to do/see in the destination city
2. **{distance_tool}**: Get the distance from the city center for each attraction
3. **{flights_tool}**: Find the top {flights_count} flight options with pricing

**IMPORTANT**: You MUST return your response as a valid JSON object with this exact structure:

{{
  "summary": "A compelling 2-3 sentence trip overview",
  "attractions": [
    {{
      "name": "Attraction name",
      "description": "Brief description of the attraction",
      "distanceFromCenter": 2.5,
      "address": "Full address"
    }}
  ],
  "flights": [
    {{
      "airline": "Airline name",
      "price": "$XXX",
      "departureTime": "HH:MM",
      "arrivalTime": "HH:MM",
      "duration": "Xh XXm",
      "stops": 0,
      "bookingClass": "Economy/Business"
    }}
  ]
}}

- Include exactly {attractions_count} attractions sorted by distance from city center (closest first)
- Include exactly {flights_count} flight options sorted by price (cheapest first)
- Return ONLY the JSON object, no additional text or markdown formatting
- Ensure distanceFromCenter is a number in kilometers
"""

planner_user_prompt = """Create a comprehensive trip plan for this itinerary:

Destination: {destination}
Origin: {origin}
Travel Dates: {start_date} to {end_date}
Number of Adults: {adults}
Trip Details: {trip_details}

Step-by-step instructions:
1. Use {attractions_tool} to research the top {attractions_count} famous attractions and things to do in {destination}
2. For each attraction, use {distance_tool} to get the distance from the city center of {destination}
3. Sort the attractions by distance (closest to city center first)
4. Use {flights_tool} to find the top {flights_count} flight options from {origin} to {destination} on {start_date} for {adults} adult(s)
5. Sort the flights by price (cheapest first)
6. Write a compelling 2-3 sentence trip summary
7. Return everything as a JSON object matching the schema provided in the system prompt

Remember: Return ONLY the JSON object, no markdown code blocks or additional text.
"""


def build_sanitizer_prompt(description: str) -> str:
    return sanitizer_user_prompt.format(description=description)


def build_system_prompt() -> str:
    """Return the fixed planner instructions: tool roles and the JSON contract."""

    return planner_system_prompt.format(
        attractions_tool=ATTRACTIONS_TOOL,
        distance_tool=DISTANCE_TOOL,
        flights_tool=FLIGHTS_TOOL,
        attractions_count=ATTRACTIONS_COUNT,
        flights_count=FLIGHTS_COUNT,
    )


def build_user_prompt(request: TripRequest, sanitized_description: Optional[str]) -> str:
    """Render the per-request planning task.

    A blank or missing sanitized description falls back to generic sightseeing.
    """

    trip_details = (
        sanitized_description
        if sanitized_description and sanitized_description.strip()
        else DEFAULT_TRIP_DETAILS
    )
    return planner_user_prompt.format(
        destination=request.destination,
        origin=request.origin,
        start_date=request.start_date.isoformat(),
        end_date=request.end_date.isoformat(),
        adults=request.number_of_adults,
        trip_details=trip_details,
        attractions_tool=ATTRACTIONS_TOOL,
        distance_tool=DISTANCE_TOOL,
        flights_tool=FLIGHTS_TOOL,
        attractions_count=ATTRACTIONS_COUNT,
        flights_count=FLIGHTS_COUNT,
    )
