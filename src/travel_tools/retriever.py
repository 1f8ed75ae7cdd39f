"""Retriever implementations for RAG pipelines."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Iterable

import numpy as np

from .embeddings import Embeddings
from .models import Document

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 4


class Retriever(ABC):
    """Abstract retriever contract."""

    @abstractmethod
    def retrieve(self, query: str, top_k: int | None = None) -> list[Document]:
        """Return the most relevant documents for a query."""


class InMemoryVectorStore:
    """Keeps (document, vector) pairs in memory and ranks them by cosine similarity."""

    def __init__(self, embeddings: Embeddings) -> None:
        self._embeddings = embeddings
        self._documents: list[Document] = []
        self._vectors: list[np.ndarray] = []

    @classmethod
    def from_documents(cls, documents: Iterable[Document], embeddings: Embeddings) -> "InMemoryVectorStore":
        store = cls(embeddings)
        store.add_documents(documents)
        return store

    def __len__(self) -> int:
        return len(self._documents)

    def add_documents(self, documents: Iterable[Document]) -> None:
        batch = list(documents)
        if not batch:
            return
        vectors = self._embeddings.embed_documents([document.content for document in batch])
        if len(vectors) != len(batch):
            raise ValueError(f"Embedding backend returned {len(vectors)} vectors for {len(batch)} documents")
        self._documents.extend(batch)
        self._vectors.extend(np.asarray(vector, dtype=float) for vector in vectors)

    def similarity_search_with_score(self, query: str, k: int = DEFAULT_TOP_K) -> list[tuple[Document, float]]:
        if not self._documents or k <= 0:
            return []

        query_vector = np.asarray(self._embeddings.embed_query(query), dtype=float)
        scores = _cosine_similarities(np.vstack(self._vectors), query_vector)
        # stable sort keeps insertion order between equal scores
        order = np.argsort(-scores, kind="stable")[:k]
        return [(self._documents[i], float(scores[i])) for i in order]

    def as_retriever(self, top_k: int = DEFAULT_TOP_K) -> "VectorStoreRetriever":
        return VectorStoreRetriever(self, top_k=top_k)


class VectorStoreRetriever(Retriever):
    """Retriever view over an InMemoryVectorStore."""

    def __init__(self, store: InMemoryVectorStore, top_k: int = DEFAULT_TOP_K) -> None:
        if top_k <= 0:
            raise ValueError("top_k must be positive")
        self._store = store
        self._top_k = top_k

    def retrieve(self, query: str, top_k: int | None = None) -> list[Document]:  # noqa: D401
        if top_k is None:
            top_k = self._top_k
        elif top_k <= 0:
            raise ValueError("top_k must be positive")
        matches = self._store.similarity_search_with_score(query, k=top_k)
        logger.debug("Retrieved %d of %d chunks", len(matches), len(self._store))
        return [replace(document, score=score) for document, score in matches]


def _cosine_similarities(matrix: np.ndarray, vector: np.ndarray) -> np.ndarray:
    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(vector)
    dots = matrix @ vector
    return np.divide(dots, norms, out=np.zeros_like(dots), where=norms != 0)
