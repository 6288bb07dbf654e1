from amadeus import Client
from amadeus.client.errors import ResponseError
import json
from travelapp.core.config import ApiSettings


def create_amadeus_client(settings: ApiSettings) -> Client:
    """Instantiate the Amadeus SDK client using project configuration."""

    client_id = settings.ensure("amadeus_api_key")
    client_secret = settings.ensure("amadeus_api_secret")
    return Client(client_id=client_id, client_secret=client_secret, hostname=settings.amadeus_hostname)


def _error_details(raw_body: str) -> str | None:
    try:
        parsed = json.loads(raw_body)
    except json.JSONDecodeError:
        return raw_body.strip() or None

    if not isinstance(parsed, dict):
        return None
    errors = parsed.get("errors")
    if isinstance(errors, list):
        parts = []
        for item in errors:
            if not isinstance(item, dict):
                continue
            section = " ".join(str(part) for part in (item.get("code"), item.get("title")) if part)
            detail = item.get("detail")
            if detail:
                section = f"{section}: {detail}" if section else detail
            if section:
                parts.append(section)
        if parts:
            return "; ".join(parts)
    for key in ("result", "message", "error"):
        if isinstance(parsed.get(key), str):
            return parsed[key]
    return None


def _format_response_error(exc: ResponseError) -> str:
    """Return a human-friendly message for Amadeus errors."""

    response = getattr(exc, "response", None)
    status = getattr(response, "status_code", None)
    raw_body = getattr(response, "body", None)

    details = _error_details(raw_body) if raw_body else None
    prefix = f"HTTP {status}" if status else "Amadeus API error"
    if details:
        return f"{prefix}: {details}"
    return prefix
