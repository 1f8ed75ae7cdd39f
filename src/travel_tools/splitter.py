"""Text splitting helpers for turning pages into overlapping chunks."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from .models import Document

logger = logging.getLogger(__name__)

DEFAULT_SEPARATORS = ("\n\n", "\n", " ", "")


class TextSplitter(ABC):
    """Splits text into bounded chunks that overlap at their boundaries."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 200) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if chunk_overlap < 0:
            raise ValueError("chunk_overlap must not be negative")
        if chunk_overlap >= chunk_size:
            raise ValueError(
                f"chunk_overlap ({chunk_overlap}) must be smaller than chunk_size ({chunk_size})"
            )
        self._chunk_size = chunk_size
        self._chunk_overlap = chunk_overlap

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self._chunk_overlap

    @abstractmethod
    def split_text(self, text: str) -> list[str]:
        """Return the chunks of ``text`` in document order."""

    def split_documents(self, documents: Iterable[Document]) -> list[Document]:
        """Split every document, tagging chunks with where they came from."""
        chunks: list[Document] = []
        for document in documents:
            index = 0
            previous_length = 0
            for position, chunk in enumerate(self.split_text(document.content)):
                offset = index + previous_length - self._chunk_overlap
                index = document.content.find(chunk, max(0, offset))
                previous_length = len(chunk)

                metadata = dict(document.metadata)
                metadata["start_index"] = index
                metadata["chunk_index"] = position
                source = metadata.get("source", document.doc_id)
                chunks.append(Document(doc_id=f"{source}#{position}", content=chunk, metadata=metadata))
        return chunks

    def _join(self, pieces: Sequence[str], separator: str) -> str | None:
        text = separator.join(pieces).strip()
        return text or None

    def _merge_splits(self, splits: Iterable[str], separator: str) -> list[str]:
        """Greedily pack small pieces into chunks, carrying the tail forward."""
        separator_length = len(separator)
        chunks: list[str] = []
        current: list[str] = []
        total = 0

        for piece in splits:
            length = len(piece)
            if total + length + (separator_length if current else 0) > self._chunk_size:
                if total > self._chunk_size:
                    logger.warning(
                        "Created a chunk of size %d, which is longer than the specified %d",
                        total,
                        self._chunk_size,
                    )
                if current:
                    chunk = self._join(current, separator)
                    if chunk is not None:
                        chunks.append(chunk)
                    while total > self._chunk_overlap or (
                        total + length + (separator_length if current else 0) > self._chunk_size
                        and total > 0
                    ):
                        total -= len(current[0]) + (separator_length if len(current) > 1 else 0)
                        current.pop(0)
            current.append(piece)
            total += length + (separator_length if len(current) > 1 else 0)

        chunk = self._join(current, separator)
        if chunk is not None:
            chunks.append(chunk)
        return chunks


class RecursiveCharacterTextSplitter(TextSplitter):
    """Splits on the coarsest separator available, recursing into long pieces.

    Paragraph breaks are tried first, then line breaks, then spaces, and
    finally single characters, so chunks keep natural boundaries whenever the
    text allows it.
    """

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        separators: Sequence[str] | None = None,
        keep_separator: bool = True,
    ) -> None:
        super().__init__(chunk_size=chunk_size, chunk_overlap=chunk_overlap)
        self._separators = list(separators or DEFAULT_SEPARATORS)
        self._keep_separator = keep_separator

    def split_text(self, text: str) -> list[str]:  # noqa: D401
        return self._split_text(text, self._separators)

    def _split_text(self, text: str, separators: Sequence[str]) -> list[str]:
        final_chunks: list[str] = []
        separator = separators[-1]
        finer_separators: Sequence[str] = []
        for position, candidate in enumerate(separators):
            if candidate == "":
                separator = candidate
                break
            if candidate in text:
                separator = candidate
                finer_separators = separators[position + 1 :]
                break

        splits = self._split_with_separator(text, separator)
        merge_separator = "" if self._keep_separator else separator
        pending: list[str] = []
        for piece in splits:
            if len(piece) < self._chunk_size:
                pending.append(piece)
                continue
            if pending:
                final_chunks.extend(self._merge_splits(pending, merge_separator))
                pending = []
            if finer_separators:
                final_chunks.extend(self._split_text(piece, finer_separators))
            else:
                final_chunks.append(piece)

        if pending:
            final_chunks.extend(self._merge_splits(pending, merge_separator))
        return final_chunks

    def _split_with_separator(self, text: str, separator: str) -> list[str]:
        if not separator:
            return list(text)
        if self._keep_separator:
            parts = re.split(f"({re.escape(separator)})", text)
            # separators stay attached to the start of the piece that follows them
            splits = [parts[0]] + [parts[i] + parts[i + 1] for i in range(1, len(parts) - 1, 2)]
        else:
            splits = text.split(separator)
        return [piece for piece in splits if piece]
