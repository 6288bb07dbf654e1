"""Configuration helpers for API keys and environment variables."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PLANNER_MODEL = "grok-4-fast-reasoning"
DEFAULT_SANITIZER_BASE_URL = "http://localhost:12434/engines/v1"
DEFAULT_SANITIZER_MODEL = "ai/gemma3"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(slots=True)
class ApiSettings:
    """Centralised container for model endpoints and tool-provider credentials."""

    xai_api_key: Optional[str] = None
    planner_model: str = DEFAULT_PLANNER_MODEL
    sanitizer_base_url: str = DEFAULT_SANITIZER_BASE_URL
    sanitizer_model: str = DEFAULT_SANITIZER_MODEL
    sanitizer_api_key: str = "not-needed"
    tavily_api_key: Optional[str] = None
    amadeus_api_key: Optional[str] = None
    amadeus_api_secret: Optional[str] = None
    amadeus_hostname: str = "test"
    langsmith_api_key: Optional[str] = None
    log_level: str = "INFO"
    request_timeout: float = 120.0

    @classmethod
    def from_env(cls) -> "ApiSettings":
        """Load settings from the process environment (after ``.env`` is applied)."""

        return cls(
            xai_api_key=os.getenv("XAI_API_KEY"),
            planner_model=os.getenv("PLANNER_MODEL", DEFAULT_PLANNER_MODEL),
            sanitizer_base_url=os.getenv("SANITIZER_BASE_URL", DEFAULT_SANITIZER_BASE_URL),
            sanitizer_model=os.getenv("SANITIZER_MODEL", DEFAULT_SANITIZER_MODEL),
            sanitizer_api_key=os.getenv("SANITIZER_API_KEY", "not-needed"),
            tavily_api_key=os.getenv("TAVILY_API_KEY"),
            amadeus_api_key=os.getenv("AMADEUS_API"),
            amadeus_api_secret=os.getenv("AMADEUS_SECRET"),
            amadeus_hostname=os.getenv("AMADEUS_HOSTNAME", "test"),
            langsmith_api_key=os.getenv("LANGSMITH_API_KEY"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            request_timeout=float(os.getenv("LLM_REQUEST_TIMEOUT", "120")),
        )

    def ensure(self, field: str) -> str:
        """Return the requested field and fail fast if it is missing."""

        value = getattr(self, field)
        if not value:
            raise RuntimeError(f"Missing configuration value: {field}")
        return value

    @property
    def has_web_search(self) -> bool:
        return bool(self.tavily_api_key)

    @property
    def has_flight_search(self) -> bool:
        return bool(self.amadeus_api_key and self.amadeus_api_secret)

    def apply_langsmith_tracing(self) -> None:
        """Turn on LangSmith tracing for the LangChain runtime when a key is configured."""

        if not self.langsmith_api_key:
            return
        os.environ.setdefault("LANGCHAIN_TRACING_V2", "true")
        os.environ.setdefault("LANGCHAIN_ENDPOINT", "https://api.smith.langchain.com")
        os.environ.setdefault("LANGCHAIN_API_KEY", self.langsmith_api_key)
        os.environ.setdefault("LANGCHAIN_PROJECT", "travelapp-itinerary")


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler once; later calls only adjust the level."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    else:
        root.setLevel(level.upper())
