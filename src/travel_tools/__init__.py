"""Convenience exports for RAG tooling."""

from .embeddings import Embeddings, HashingEmbeddings, OpenAIEmbeddings
from .loader import DocumentLoader, WebPageLoader
from .models import Document
from .retriever import DEFAULT_TOP_K, InMemoryVectorStore, Retriever, VectorStoreRetriever
from .search import DuckDuckGoSearchTool, SearchTool, WikipediaQueryTool
from .splitter import RecursiveCharacterTextSplitter, TextSplitter

__all__ = [
    "Document",
    "DocumentLoader",
    "WebPageLoader",
    "TextSplitter",
    "RecursiveCharacterTextSplitter",
    "Embeddings",
    "OpenAIEmbeddings",
    "HashingEmbeddings",
    "Retriever",
    "InMemoryVectorStore",
    "VectorStoreRetriever",
    "DEFAULT_TOP_K",
    "SearchTool",
    "DuckDuckGoSearchTool",
    "WikipediaQueryTool",
]
