"""Embedding backends mapping text to fixed-size vectors."""

from __future__ import annotations

import hashlib
import re
from abc import ABC, abstractmethod
from typing import Any, Sequence

import numpy as np

_TOKEN_PATTERN = re.compile(r"\w+", re.UNICODE)


class Embeddings(ABC):
    """Interface for embedding models. Chunks and queries share one vector space."""

    @abstractmethod
    def embed_documents(self, texts: Sequence[str]) -> list[list[float]]:
        """Embed a batch of document chunks."""

    @abstractmethod
    def embed_query(self, text: str) -> list[float]:
        """Embed a single query."""


class OpenAIEmbeddings(Embeddings):
    """Embeddings served by the OpenAI (or Azure OpenAI) embeddings endpoint."""

    def __init__(self, client: Any, model: str = "text-embedding-ada-002", batch_size: int = 512) -> None:
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self._client = client
        self._model = model
        self._batch_size = batch_size

    def embed_documents(self, texts: Sequence[str]) -> list[list[float]]:  # noqa: D401
        vectors: list[list[float]] = []
        for start in range(0, len(texts), self._batch_size):
            batch = [text.replace("\n", " ") for text in texts[start : start + self._batch_size]]
            response = self._client.embeddings.create(model=self._model, input=batch)
            vectors.extend(list(item.embedding) for item in response.data)
        return vectors

    def embed_query(self, text: str) -> list[float]:  # noqa: D401
        return self.embed_documents([text])[0]


class HashingEmbeddings(Embeddings):
    """Deterministic bag-of-words embedder useful for tests and offline runs.

    Each lower-cased word token is hashed into one of ``dimensions`` buckets;
    the vector holds the bucket counts.
    """

    def __init__(self, dimensions: int = 256) -> None:
        if dimensions <= 0:
            raise ValueError("dimensions must be positive")
        self._dimensions = dimensions

    def embed_documents(self, texts: Sequence[str]) -> list[list[float]]:  # noqa: D401
        return [self._embed(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:  # noqa: D401
        return self._embed(text)

    def _embed(self, text: str) -> list[float]:
        vector = np.zeros(self._dimensions, dtype=float)
        for token in _TOKEN_PATTERN.findall(text.lower()):
            digest = hashlib.md5(token.encode("utf-8")).hexdigest()
            vector[int(digest, 16) % self._dimensions] += 1.0
        return vector.tolist()
