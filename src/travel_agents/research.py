"""Research agent that gathers live web context through tool calls."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from travel_tools import SearchTool

from .llm import ChatModel, Message, ToolCall
from .prompts import RESEARCH_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class ResearchError(RuntimeError):
    """Raised when the research loop ends without a usable answer."""


class Researcher(Protocol):
    def research(self, query: str) -> str:  # pragma: no cover - interface
        ...


class ResearchAgent(Researcher):
    """Lets the chat model call search tools until it can answer the query."""

    def __init__(
        self,
        chat_model: ChatModel,
        tools: Sequence[SearchTool],
        *,
        max_iterations: int = 15,
        system_prompt: str = RESEARCH_SYSTEM_PROMPT,
    ) -> None:
        if not tools:
            raise ValueError("At least one tool must be provided")
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        self._chat_model = chat_model
        self._tools = {tool.name: tool for tool in tools}
        self._max_iterations = max_iterations
        self._system_prompt = system_prompt

    @property
    def tool_names(self) -> list[str]:
        return list(self._tools)

    def research(self, query: str) -> str:
        """
        Run the tool-calling loop once for ``query`` and return the final answer.

        Tool and model failures propagate unchanged; a blank answer or running
        out of iterations raises ResearchError.
        """
        messages: list[Message] = [
            {"role": "system", "content": self._system_prompt},
            {"role": "user", "content": query},
        ]
        tool_specs = [tool.to_openai_tool() for tool in self._tools.values()]

        for iteration in range(1, self._max_iterations + 1):
            reply = self._chat_model.complete(messages, tools=tool_specs)
            if not reply.tool_calls:
                answer = (reply.content or "").strip()
                if not answer:
                    raise ResearchError("Research agent returned an empty answer")
                logger.info("Research finished after %d iteration(s)", iteration)
                return answer

            messages.append(reply.to_message())
            for call in reply.tool_calls:
                messages.append(
                    {"role": "tool", "tool_call_id": call.id, "content": self._observe(call)}
                )

        raise ResearchError(
            f"Research agent stopped after {self._max_iterations} iterations without a final answer"
        )

    def _observe(self, call: ToolCall) -> str:
        tool = self._tools.get(call.name)
        if tool is None:
            return f"{call.name} is not a valid tool, try another one. Available tools: {', '.join(self._tools)}"

        tool_input = call.arguments.get("query")
        if not isinstance(tool_input, str) or not tool_input.strip():
            return f"Invalid input for {call.name}: a non-empty 'query' string is required."

        logger.debug("Calling %s with %r", call.name, tool_input)
        return tool.run(tool_input)
