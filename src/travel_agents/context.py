"""Builds a throwaway vector index over the source page for each query."""

from __future__ import annotations

import logging
from typing import Protocol

from travel_tools import (
    DEFAULT_TOP_K,
    Document,
    DocumentLoader,
    Embeddings,
    InMemoryVectorStore,
    RecursiveCharacterTextSplitter,
    TextSplitter,
    VectorStoreRetriever,
    WebPageLoader,
)

from .config import PipelineSettings

logger = logging.getLogger(__name__)


class ContextProvider(Protocol):
    def get_relevant_documents(self, query: str) -> list[Document]:  # pragma: no cover - interface
        ...


class ContextBuilder(ContextProvider):
    """Load, split, embed and index the source on every call, then query it."""

    def __init__(
        self,
        loader: DocumentLoader,
        splitter: TextSplitter,
        embeddings: Embeddings,
        *,
        top_k: int = DEFAULT_TOP_K,
    ) -> None:
        self._loader = loader
        self._splitter = splitter
        self._embeddings = embeddings
        self._top_k = top_k

    @classmethod
    def from_settings(cls, settings: PipelineSettings, embeddings: Embeddings) -> "ContextBuilder":
        return cls(
            loader=WebPageLoader(settings.source_url, timeout=settings.request_timeout),
            splitter=RecursiveCharacterTextSplitter(
                chunk_size=settings.chunk_size,
                chunk_overlap=settings.chunk_overlap,
            ),
            embeddings=embeddings,
            top_k=settings.top_k,
        )

    def build_retriever(self) -> VectorStoreRetriever:
        documents = self._loader.load()
        chunks = self._splitter.split_documents(documents)
        logger.info("Indexing %d chunks from %d document(s)", len(chunks), len(documents))
        store = InMemoryVectorStore.from_documents(chunks, self._embeddings)
        return store.as_retriever(top_k=self._top_k)

    def get_relevant_documents(self, query: str) -> list[Document]:
        documents = self.build_retriever().retrieve(query)
        logger.info("Retrieved %d relevant chunk(s)", len(documents))
        return documents
