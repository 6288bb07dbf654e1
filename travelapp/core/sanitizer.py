"""Free-text sanitization through the lightweight local model."""
from __future__ import annotations

import logging
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from travelapp.core.errors import SanitizationUnavailableError
from travelapp.core.prompts import build_sanitizer_prompt, sanitizer_system_prompt

logger = logging.getLogger(__name__)


def _message_text(message: object) -> Optional[str]:
    content = getattr(message, "content", message)
    if content is None or isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = [
            chunk.get("text", "") if isinstance(chunk, dict) else str(chunk)
            for chunk in content
        ]
        return "".join(parts)
    return str(content)


class DescriptionSanitizer:
    """Strips non-travel content from trip descriptions.

    Fails open: when the model cannot be reached the original text is passed
    through so itinerary creation is never blocked by the sanitizer.
    """

    def __init__(self, llm: BaseChatModel) -> None:
        self.llm = llm

    async def _ask_model(self, description: str) -> str:
        messages = [
            SystemMessage(content=sanitizer_system_prompt),
            HumanMessage(content=build_sanitizer_prompt(description)),
        ]
        try:
            response = await self.llm.ainvoke(messages)
            return _message_text(response) or ""
        except Exception as exc:
            raise SanitizationUnavailableError("Sanitizer model call failed", cause=exc) from exc

    async def sanitize(self, description: Optional[str]) -> Optional[str]:
        if description is None or not description.strip():
            return description

        logger.info("Sanitizing itinerary description: %s", description)
        try:
            sanitized = await self._ask_model(description)
        except SanitizationUnavailableError as exc:
            logger.error("Error sanitizing description with AI: %s", exc, exc_info=exc.cause)
            logger.warning("Returning original description due to AI sanitization failure")
            return description

        sanitized = sanitized.strip()
        logger.info("Sanitized description: %s", sanitized)
        return sanitized
