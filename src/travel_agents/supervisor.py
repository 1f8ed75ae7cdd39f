"""Final synthesis step that merges research and retrieved chunks into one answer."""

from __future__ import annotations

import logging
from typing import Sequence

from travel_tools import Document

from .llm import ChatModel
from .prompts import SUPERVISOR_PROMPT, PromptTemplate

logger = logging.getLogger(__name__)


class SupervisorAgent:
    """Renders the supervisor prompt and asks the model for the itinerary."""

    def __init__(self, chat_model: ChatModel, template: PromptTemplate = SUPERVISOR_PROMPT) -> None:
        self._chat_model = chat_model
        self._template = template

    def render_prompt(self, query: str, web_context: str, documents: Sequence[Document]) -> str:
        relevant_documents = "\n\n".join(document.content for document in documents)
        return self._template.format(
            web_context=web_context,
            relevant_documents=relevant_documents,
            query=query,
        )

    def respond(self, query: str, web_context: str, documents: Sequence[Document]) -> str:
        prompt = self.render_prompt(query, web_context, documents)
        logger.debug("Supervisor prompt has %d characters", len(prompt))
        reply = self._chat_model.complete([{"role": "user", "content": prompt}])
        return reply.content or ""
