"""Sequences research, retrieval and synthesis for one query."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from travel_tools import Document, DuckDuckGoSearchTool, WikipediaQueryTool

from .config import PipelineSettings
from .context import ContextBuilder, ContextProvider
from .llm import build_chat_model_from_env, build_embeddings_from_env
from .research import ResearchAgent, Researcher
from .supervisor import SupervisorAgent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TravelResponse:
    """Everything produced while answering one query."""

    query: str
    web_context: str
    documents: tuple[Document, ...]
    answer: str


class TravelPipeline:
    """Runs the three steps strictly one after another; nothing is kept between calls."""

    def __init__(
        self,
        researcher: Researcher,
        context_builder: ContextProvider,
        supervisor: SupervisorAgent,
    ) -> None:
        self._researcher = researcher
        self._context_builder = context_builder
        self._supervisor = supervisor

    def run(self, query: str) -> TravelResponse:
        logger.info("Answering query (%d characters)", len(query))
        web_context = self._researcher.research(query)
        documents = tuple(self._context_builder.get_relevant_documents(query))
        answer = self._supervisor.respond(query, web_context, documents)
        return TravelResponse(query=query, web_context=web_context, documents=documents, answer=answer)

    def get_response(self, query: str) -> str:
        return self.run(query).answer


def build_pipeline_from_env(settings: PipelineSettings | None = None) -> TravelPipeline:
    settings = settings or PipelineSettings.from_env()
    chat_model = build_chat_model_from_env(settings)
    tools = [
        DuckDuckGoSearchTool(),
        WikipediaQueryTool(timeout=settings.request_timeout),
    ]
    return TravelPipeline(
        researcher=ResearchAgent(chat_model, tools, max_iterations=settings.max_iterations),
        context_builder=ContextBuilder.from_settings(settings, build_embeddings_from_env(settings)),
        supervisor=SupervisorAgent(chat_model),
    )
