"""Pipeline settings resolved from defaults, a .env file and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"
DEFAULT_SOURCE_URL = "https://www.dicasdeviagem.com/austria/"


@dataclass(frozen=True)
class PipelineSettings:
    """Fixed parameters handed to each pipeline component at construction."""

    provider: str = "openai"
    model: str = DEFAULT_MODEL
    embedding_model: str = DEFAULT_EMBEDDING_MODEL
    source_url: str = DEFAULT_SOURCE_URL
    chunk_size: int = 1000
    chunk_overlap: int = 200
    top_k: int = 4
    max_iterations: int = 15
    request_timeout: float = 30.0

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if not 0 <= self.chunk_overlap < self.chunk_size:
            raise ValueError("chunk_overlap must be between 0 and chunk_size (exclusive)")
        if self.top_k <= 0:
            raise ValueError("top_k must be positive")
        if self.max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")

    @classmethod
    def from_env(cls) -> "PipelineSettings":
        load_dotenv()
        defaults = cls()
        return cls(
            provider=(os.getenv("LLM_PROVIDER") or defaults.provider).lower(),
            model=os.getenv("OPENAI_MODEL") or defaults.model,
            embedding_model=os.getenv("OPENAI_EMBEDDING_MODEL") or defaults.embedding_model,
            source_url=os.getenv("TRAVEL_SOURCE_URL") or defaults.source_url,
            chunk_size=_int_env("CHUNK_SIZE", defaults.chunk_size),
            chunk_overlap=_int_env("CHUNK_OVERLAP", defaults.chunk_overlap),
            top_k=_int_env("RETRIEVER_TOP_K", defaults.top_k),
            max_iterations=_int_env("AGENT_MAX_ITERATIONS", defaults.max_iterations),
            request_timeout=float(os.getenv("HTTP_TIMEOUT") or defaults.request_timeout),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
