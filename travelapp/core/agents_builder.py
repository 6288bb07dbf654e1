from typing import Any, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.tools import BaseTool


def build_planner_agent(llm: BaseChatModel, tools: Sequence[BaseTool]) -> Any:
    """Instantiate the ReAct agent that lets the planning model call the tool catalog."""

    from langgraph.prebuilt import create_react_agent

    return create_react_agent(llm, tools=list(tools), name="trip_planner")
