"""Shared data structures for RAG tooling."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Document:
    """Lightweight representation of a chunk of text."""

    doc_id: str
    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    score: float | None = None

    @property
    def source(self) -> str | None:
        return self.metadata.get("source")
