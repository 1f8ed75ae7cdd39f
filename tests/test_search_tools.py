import json

import pytest
import requests
from ddgs.exceptions import DDGSException, TimeoutException

from travel_tools import DuckDuckGoSearchTool, WikipediaQueryTool


class FakeDDGS:
    def __init__(self, results):
        self._results = results
        self.calls = []

    def text(self, query, max_results=None):
        self.calls.append((query, max_results))
        return self._results


def test_duckduckgo_tool_formats_results():
    client = FakeDDGS(
        [
            {"title": "Vienna events", "href": "https://example.com/events", "body": "Christmas markets open"},
            {"title": "Wiener Linien", "href": "https://example.com/tickets", "body": "Single ticket 2.40 EUR"},
        ]
    )
    tool = DuckDuckGoSearchTool(max_results=2, client_factory=lambda: client)

    output = json.loads(tool.run("Vienna November 2024 events"))

    assert client.calls == [("Vienna November 2024 events", 2)]
    assert output[0] == {
        "title": "Vienna events",
        "link": "https://example.com/events",
        "snippet": "Christmas markets open",
    }
    assert len(output) == 2


class RaisingDDGS:
    def __init__(self, error: Exception) -> None:
        self._error = error

    def text(self, query, max_results=None):
        raise self._error


def test_duckduckgo_tool_reports_empty_results():
    tool = DuckDuckGoSearchTool(client_factory=lambda: RaisingDDGS(DDGSException("No results found.")))

    assert tool.run("zzqx nonexistent") == DuckDuckGoSearchTool.no_result_message


def test_duckduckgo_tool_propagates_other_search_failures():
    tool = DuckDuckGoSearchTool(client_factory=lambda: RaisingDDGS(TimeoutException("timed out")))

    with pytest.raises(TimeoutException):
        tool.run("Vienna")


def test_search_tool_schema_requires_query():
    schema = DuckDuckGoSearchTool(client_factory=lambda: FakeDDGS([])).to_openai_tool()

    assert schema["type"] == "function"
    assert schema["function"]["name"] == "duckduckgo-search"
    assert schema["function"]["parameters"]["required"] == ["query"]


class FakeJSONResponse:
    def __init__(self, payload, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


class FakeWikipediaSession:
    def __init__(self, titles, extracts, status_code: int = 200) -> None:
        self._titles = titles
        self._extracts = extracts
        self._status_code = status_code
        self.params = []

    def get(self, url, params=None, **kwargs):
        self.params.append(params)
        if params.get("list") == "search":
            payload = {"query": {"search": [{"title": title} for title in self._titles]}}
        else:
            extract = self._extracts.get(params["titles"])
            payload = {"query": {"pages": [{"title": params["titles"], "extract": extract}]}}
        return FakeJSONResponse(payload, status_code=self._status_code)


def test_wikipedia_tool_renders_page_summaries():
    session = FakeWikipediaSession(
        titles=["Vienna", "Vienna State Opera"],
        extracts={"Vienna": "Vienna is the capital of Austria.", "Vienna State Opera": "An opera house."},
    )
    tool = WikipediaQueryTool(session=session)

    output = tool.run("Vienna")

    assert output == (
        "Page: Vienna\nSummary: Vienna is the capital of Austria.\n\n"
        "Page: Vienna State Opera\nSummary: An opera house."
    )
    assert session.params[0]["srlimit"] == 3


def test_wikipedia_tool_truncates_and_skips_empty_pages():
    session = FakeWikipediaSession(titles=["Vienna", "Stub"], extracts={"Vienna": "x" * 100, "Stub": None})
    tool = WikipediaQueryTool(max_content_chars=50, session=session)

    output = tool.run("Vienna")

    assert len(output) == 50
    assert output.startswith("Page: Vienna\nSummary: ")


def test_wikipedia_tool_reports_empty_results():
    tool = WikipediaQueryTool(session=FakeWikipediaSession(titles=[], extracts={}))

    assert tool.run("zzzz") == WikipediaQueryTool.no_result_message


def test_wikipedia_tool_propagates_http_errors():
    tool = WikipediaQueryTool(session=FakeWikipediaSession(titles=["Vienna"], extracts={}, status_code=503))

    with pytest.raises(requests.HTTPError):
        tool.run("Vienna")

