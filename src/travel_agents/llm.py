"""Chat-model adapters with multi-provider support."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence

from openai import AzureOpenAI, OpenAI

from travel_tools import OpenAIEmbeddings

from .config import PipelineSettings

Message = dict[str, Any]


@dataclass(frozen=True)
class ToolCall:
    id: str
    name: str
    arguments: dict[str, Any] = field(default_factory=dict)

    def to_message_entry(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": json.dumps(self.arguments, ensure_ascii=False)},
        }


@dataclass(frozen=True)
class ChatReply:
    """One assistant turn: free text, requested tool calls, or both."""

    content: str | None
    tool_calls: tuple[ToolCall, ...] = tuple()

    def to_message(self) -> Message:
        message: Message = {"role": "assistant", "content": self.content}
        if self.tool_calls:
            message["tool_calls"] = [call.to_message_entry() for call in self.tool_calls]
        return message


class ChatModel(Protocol):
    """Protocol for chat completion backends."""

    def complete(  # pragma: no cover - interface
        self,
        messages: Sequence[Message],
        *,
        tools: Sequence[dict[str, Any]] | None = None,
    ) -> ChatReply:
        ...


def _parse_arguments(raw: str | None) -> dict[str, Any]:
    try:
        parsed = json.loads(raw or "{}")
    except json.JSONDecodeError:
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _parse_reply(response: Any) -> ChatReply:
    message = response.choices[0].message
    tool_calls = tuple(
        ToolCall(id=call.id, name=call.function.name, arguments=_parse_arguments(call.function.arguments))
        for call in (getattr(message, "tool_calls", None) or [])
    )
    return ChatReply(content=message.content, tool_calls=tool_calls)


class OpenAIChatModel(ChatModel):
    """Chat model served by the OpenAI Chat Completions API."""

    def __init__(self, model: str | None = None, client: OpenAI | None = None) -> None:
        if client is None:
            api_key = os.getenv("OPENAI_API_KEY")
            if not api_key:
                raise EnvironmentError(
                    "OPENAI_API_KEY is not set. Add it to your environment or a .env file."
                )
            client = OpenAI(api_key=api_key)

        self._client = client
        self._model = model or os.getenv("OPENAI_MODEL", "gpt-3.5-turbo")

    @property
    def model(self) -> str:
        return self._model

    def complete(  # noqa: D401
        self,
        messages: Sequence[Message],
        *,
        tools: Sequence[dict[str, Any]] | None = None,
    ) -> ChatReply:
        kwargs: dict[str, Any] = {"model": self._model, "messages": list(messages)}
        if tools:
            kwargs["tools"] = list(tools)
        return _parse_reply(self._client.chat.completions.create(**kwargs))


class AzureOpenAIChatModel(ChatModel):
    """Chat model backed by Azure OpenAI (standard Azure OpenAI resource)."""

    def __init__(self, deployment: str | None = None, client: AzureOpenAI | None = None) -> None:
        deployment = deployment or os.getenv("AZURE_OPENAI_DEPLOYMENT")
        if client is None:
            client = _azure_client_from_env()
        if not deployment:
            raise EnvironmentError("Azure OpenAI configuration is incomplete")

        self._client = client
        self._deployment = deployment

    @property
    def model(self) -> str:
        return self._deployment

    def complete(  # noqa: D401
        self,
        messages: Sequence[Message],
        *,
        tools: Sequence[dict[str, Any]] | None = None,
    ) -> ChatReply:
        kwargs: dict[str, Any] = {"model": self._deployment, "messages": list(messages)}
        if tools:
            kwargs["tools"] = list(tools)
        return _parse_reply(self._client.chat.completions.create(**kwargs))


def _azure_client_from_env() -> AzureOpenAI:
    api_key = os.getenv("AZURE_OPENAI_API_KEY")
    endpoint = os.getenv("AZURE_OPENAI_ENDPOINT")
    api_version = os.getenv("AZURE_OPENAI_API_VERSION", "2024-05-01-preview")
    if not all([api_key, endpoint]):
        raise EnvironmentError("Azure OpenAI configuration is incomplete")
    return AzureOpenAI(api_key=api_key, azure_endpoint=endpoint, api_version=api_version)


def build_chat_model_from_env(settings: PipelineSettings) -> ChatModel:
    if settings.provider == "openai":
        return OpenAIChatModel(model=settings.model)
    if settings.provider == "azure_openai":
        return AzureOpenAIChatModel()

    raise ValueError("Unsupported LLM_PROVIDER. Expected one of: openai, azure_openai.")


def build_embeddings_from_env(settings: PipelineSettings) -> OpenAIEmbeddings:
    if settings.provider == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise EnvironmentError(
                "OPENAI_API_KEY is not set. Add it to your environment or a .env file."
            )
        return OpenAIEmbeddings(OpenAI(api_key=api_key), model=settings.embedding_model)
    if settings.provider == "azure_openai":
        deployment = os.getenv("AZURE_OPENAI_EMBEDDING_DEPLOYMENT") or settings.embedding_model
        return OpenAIEmbeddings(_azure_client_from_env(), model=deployment)

    raise ValueError("Unsupported LLM_PROVIDER. Expected one of: openai, azure_openai.")
