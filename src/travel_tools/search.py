"""Search tools the research agent can call."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

import requests
from ddgs import DDGS
from ddgs.exceptions import DDGSException

logger = logging.getLogger(__name__)

WIKIPEDIA_USER_AGENT = "travel-itinerary-agent/0.1 (python-requests)"


class SearchTool(ABC):
    """A named tool taking a free-text query and returning free text."""

    name: str
    description: str

    @abstractmethod
    def run(self, query: str) -> str:
        """Execute the tool for ``query``."""

    def to_openai_tool(self) -> dict[str, Any]:
        """Function-calling schema for chat completion APIs."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": {
                        "query": {"type": "string", "description": "Free-text search query."},
                    },
                    "required": ["query"],
                },
            },
        }


class DuckDuckGoSearchTool(SearchTool):
    """Web search backed by the ``ddgs`` metasearch client."""

    name = "duckduckgo-search"
    description = (
        "A search engine. Useful for when you need to answer questions about current events, "
        "prices, schedules or anything happening on specific dates. Input should be a search query."
    )
    no_result_message = "No good DuckDuckGo Search Result was found"

    def __init__(self, max_results: int = 10, client_factory: Callable[[], Any] = DDGS) -> None:
        self._max_results = max_results
        self._client_factory = client_factory

    def run(self, query: str) -> str:  # noqa: D401
        logger.debug("DuckDuckGo search: %s", query)
        try:
            results = self._client_factory().text(query, max_results=self._max_results) or []
        except DDGSException as exc:
            # ddgs signals an empty result set with an exception, not an empty list
            if "no results found" not in str(exc).lower():
                raise
            return self.no_result_message
        formatted = [
            {
                "title": item.get("title", ""),
                "link": item.get("href") or item.get("url", ""),
                "snippet": item.get("body", ""),
            }
            for item in results
        ]
        if not formatted:
            return self.no_result_message
        return json.dumps(formatted, ensure_ascii=False)


class WikipediaQueryTool(SearchTool):
    """Encyclopedic lookup through the MediaWiki search and extracts APIs."""

    name = "wikipedia-api"
    description = (
        "A tool for interacting with and fetching data from the Wikipedia API. "
        "Useful for general facts about places, people, history and culture. Input should be a search query."
    )
    no_result_message = "No good Wikipedia Search Result was found"

    def __init__(
        self,
        top_k_results: int = 3,
        max_content_chars: int = 4000,
        language: str = "en",
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self._top_k_results = top_k_results
        self._max_content_chars = max_content_chars
        self._endpoint = f"https://{language}.wikipedia.org/w/api.php"
        self._timeout = timeout
        self._session = session or requests.Session()

    def run(self, query: str) -> str:  # noqa: D401
        logger.debug("Wikipedia lookup: %s", query)
        summaries = []
        for title in self._search_titles(query):
            extract = self._page_extract(title)
            if extract:
                summaries.append(f"Page: {title}\nSummary: {extract}")

        if not summaries:
            return self.no_result_message
        return "\n\n".join(summaries)[: self._max_content_chars]

    def _search_titles(self, query: str) -> list[str]:
        payload = self._get(
            {
                "action": "query",
                "list": "search",
                "srsearch": query,
                "srlimit": self._top_k_results,
                "format": "json",
                "formatversion": 2,
            }
        )
        return [hit["title"] for hit in payload.get("query", {}).get("search", [])]

    def _page_extract(self, title: str) -> str:
        payload = self._get(
            {
                "action": "query",
                "prop": "extracts",
                "exintro": 1,
                "explaintext": 1,
                "redirects": 1,
                "titles": title,
                "format": "json",
                "formatversion": 2,
            }
        )
        pages = payload.get("query", {}).get("pages", [])
        if not pages:
            return ""
        return (pages[0].get("extract") or "").strip()

    def _get(self, params: dict[str, Any]) -> dict[str, Any]:
        response = self._session.get(
            self._endpoint,
            params=params,
            headers={"User-Agent": WIKIPEDIA_USER_AGENT},
            timeout=self._timeout,
        )
        response.raise_for_status()
        return response.json()
