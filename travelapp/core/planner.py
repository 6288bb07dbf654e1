"""Tool-augmented planning call against the capability-rich model."""
from __future__ import annotations

import json
import logging
import os
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langchain_core.tools import BaseTool

from travelapp.core.agents_builder import build_planner_agent
from travelapp.core.errors import PlannerUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_RECURSION_LIMIT = int(os.getenv("GRAPH_RECURSION_LIMIT", "50"))


def _content_to_text(content: Any) -> Optional[str]:
    if content is None:
        return None
    if isinstance(content, str):
        return content
    if isinstance(content, dict):
        try:
            return json.dumps(content)
        except (TypeError, ValueError):
            return str(content)
    if isinstance(content, list):
        text_chunks: List[str] = []
        for chunk in content:
            if isinstance(chunk, dict) and chunk.get("type") == "text":
                text_chunks.append(chunk.get("text", ""))
            elif isinstance(chunk, str):
                text_chunks.append(chunk)
        return "\n".join(text_chunks) if text_chunks else None
    return str(content)


def extract_final_text(response: Mapping[str, Any]) -> Optional[str]:
    """Return the text of the last AI message in an agent response, if any."""

    messages = response.get("messages", []) if isinstance(response, Mapping) else []
    for message in reversed(messages):
        if isinstance(message, AIMessage):
            return _content_to_text(message.content)
    return None


class TripPlanner:
    """Runs one planning conversation with the tool catalog attached.

    The tool-call loop is owned by the agent: it resolves calls against the
    catalog and feeds results back until the model produces its final answer.
    The planner only returns that answer's text, without decoding it.
    """

    def __init__(
        self,
        agent: Any,
        *,
        tools: Sequence[BaseTool] = (),
        recursion_limit: int = DEFAULT_RECURSION_LIMIT,
    ) -> None:
        self.agent = agent
        self.tools: Tuple[BaseTool, ...] = tuple(tools)
        self.recursion_limit = recursion_limit

    @classmethod
    def from_llm(
        cls,
        llm: BaseChatModel,
        tools: Sequence[BaseTool],
        *,
        recursion_limit: int = DEFAULT_RECURSION_LIMIT,
    ) -> "TripPlanner":
        catalog = tuple(tools)
        return cls(build_planner_agent(llm, catalog), tools=catalog, recursion_limit=recursion_limit)

    async def plan(self, system_prompt: str, user_prompt: str) -> str:
        logger.info("Calling planner model with %d tools available", len(self.tools))
        agent_input = {
            "messages": [
                SystemMessage(content=system_prompt),
                HumanMessage(content=user_prompt.strip()),
            ]
        }
        try:
            response = await self.agent.ainvoke(
                agent_input, config={"recursion_limit": self.recursion_limit}
            )
        except Exception as exc:
            raise PlannerUnavailableError("Planner model call failed", cause=exc) from exc

        text = extract_final_text(response)
        if not text or not text.strip():
            raise PlannerUnavailableError("Planner returned no final text")

        logger.info("Planner response received: %d characters", len(text))
        return text
