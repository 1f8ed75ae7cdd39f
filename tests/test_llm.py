from types import SimpleNamespace

import pytest

from travel_agents import (
    ChatReply,
    OpenAIChatModel,
    PipelineSettings,
    ToolCall,
    build_chat_model_from_env,
    build_embeddings_from_env,
)


def _completion(content=None, tool_calls=None):
    message = SimpleNamespace(content=content, tool_calls=tool_calls)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeCompletions:
    def __init__(self, response) -> None:
        self._response = response
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        return self._response


def _client(response):
    completions = FakeCompletions(response)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


def test_openai_chat_model_returns_text_reply():
    client, completions = _client(_completion(content="Olá"))
    model = OpenAIChatModel(model="gpt-3.5-turbo", client=client)

    reply = model.complete([{"role": "user", "content": "Oi"}])

    assert reply == ChatReply(content="Olá")
    assert completions.kwargs == {"model": "gpt-3.5-turbo", "messages": [{"role": "user", "content": "Oi"}]}


def test_openai_chat_model_parses_tool_calls_and_sends_tools():
    raw_calls = [
        SimpleNamespace(id="c1", function=SimpleNamespace(name="wikipedia-api", arguments='{"query": "Vienna"}')),
        SimpleNamespace(id="c2", function=SimpleNamespace(name="duckduckgo-search", arguments="not json")),
    ]
    client, completions = _client(_completion(tool_calls=raw_calls))
    tools = [{"type": "function", "function": {"name": "wikipedia-api"}}]

    reply = OpenAIChatModel(model="m", client=client).complete([], tools=tools)

    assert reply.tool_calls == (
        ToolCall(id="c1", name="wikipedia-api", arguments={"query": "Vienna"}),
        ToolCall(id="c2", name="duckduckgo-search", arguments={}),
    )
    assert completions.kwargs["tools"] == tools
    assert reply.to_message()["tool_calls"][0] == {
        "id": "c1",
        "type": "function",
        "function": {"name": "wikipedia-api", "arguments": '{"query": "Vienna"}'},
    }


def test_missing_api_key_raises_environment_error(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(EnvironmentError):
        OpenAIChatModel()
    with pytest.raises(EnvironmentError):
        build_embeddings_from_env(PipelineSettings())


def test_unknown_provider_is_rejected():
    settings = PipelineSettings(provider="claude")

    with pytest.raises(ValueError, match="LLM_PROVIDER"):
        build_chat_model_from_env(settings)
    with pytest.raises(ValueError, match="LLM_PROVIDER"):
        build_embeddings_from_env(settings)
