"""Travel itinerary agents: research, retrieval and synthesis."""

from .config import PipelineSettings
from .context import ContextBuilder, ContextProvider
from .handler import InvalidEventError, QuestionEvent, handle_event, lambda_handler
from .llm import (
    AzureOpenAIChatModel,
    ChatModel,
    ChatReply,
    OpenAIChatModel,
    ToolCall,
    build_chat_model_from_env,
    build_embeddings_from_env,
)
from .logging_config import configure_logging
from .pipeline import TravelPipeline, TravelResponse, build_pipeline_from_env
from .prompts import DEFAULT_QUERY, RESEARCH_SYSTEM_PROMPT, SUPERVISOR_PROMPT, PromptTemplate
from .research import ResearchAgent, ResearchError, Researcher
from .supervisor import SupervisorAgent

__all__ = [
    "PipelineSettings",
    "ChatModel",
    "ChatReply",
    "ToolCall",
    "OpenAIChatModel",
    "AzureOpenAIChatModel",
    "build_chat_model_from_env",
    "build_embeddings_from_env",
    "PromptTemplate",
    "RESEARCH_SYSTEM_PROMPT",
    "SUPERVISOR_PROMPT",
    "DEFAULT_QUERY",
    "Researcher",
    "ResearchAgent",
    "ResearchError",
    "ContextProvider",
    "ContextBuilder",
    "SupervisorAgent",
    "TravelPipeline",
    "TravelResponse",
    "build_pipeline_from_env",
    "QuestionEvent",
    "InvalidEventError",
    "handle_event",
    "lambda_handler",
    "configure_logging",
]
