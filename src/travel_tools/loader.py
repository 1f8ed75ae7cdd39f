"""Document loaders that turn remote pages into Documents."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import requests
from bs4 import BeautifulSoup

from .models import Document

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)
_NON_CONTENT_TAGS = ["script", "style", "noscript", "template"]


class DocumentLoader(ABC):
    """Interface for anything that produces Documents."""

    @abstractmethod
    def load(self) -> list[Document]:
        """Return the loaded documents."""


class WebPageLoader(DocumentLoader):
    """Fetches a single web page and keeps the text of one CSS selector.

    Network failures and empty pages produce no documents instead of raising,
    so a dead source degrades retrieval rather than the whole request.
    """

    def __init__(
        self,
        url: str,
        *,
        selector: str = "body",
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self._url = url
        self._selector = selector
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def url(self) -> str:
        return self._url

    def load(self) -> list[Document]:  # noqa: D401
        try:
            response = self._session.get(
                self._url,
                headers={"User-Agent": DEFAULT_USER_AGENT},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.warning("Could not fetch %s: %s", self._url, exc)
            return []

        text = self._extract_text(response.text)
        if not text.strip():
            logger.warning("No text found at %s (selector %r)", self._url, self._selector)
            return []

        logger.info("Loaded %d characters from %s", len(text), self._url)
        return [Document(doc_id=self._url, content=text, metadata={"source": self._url})]

    def _extract_text(self, html: str) -> str:
        soup = BeautifulSoup(html, "html.parser")
        for tag in soup(_NON_CONTENT_TAGS):
            tag.decompose()
        node = soup.select_one(self._selector)
        if node is None:
            return ""
        return node.get_text()
