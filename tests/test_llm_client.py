import json
from types import SimpleNamespace

import httpx
import openai
import pytest

from config import MOCK_SCENARIO
from errors import ConfigurationError, MalformedPayload, UpstreamError
from llm_client import MockLLMClient, OpenAIClient
from modules.generator import parse_payload
from modules.validator import validate_model_payload


class FakeCompletions:
    def __init__(self, content="{}", error=None, finish_reason="stop"):
        self.content = content
        self.finish_reason = finish_reason
        self.error = error
        self.kwargs = None

    async def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason=self.finish_reason)])


def client_with(completions):
    client = OpenAIClient(api_key="sk-test")
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client


def test_empty_key_is_not_configured():
    assert not OpenAIClient(api_key="").is_configured
    assert OpenAIClient(api_key="sk-test").is_configured


@pytest.mark.asyncio
async def test_generate_without_key_never_builds_sdk_client():
    client = OpenAIClient(api_key="")
    with pytest.raises(ConfigurationError):
        await client.generate("system", "user")
    assert client._client is None


@pytest.mark.asyncio
async def test_generate_sends_single_non_streaming_request():
    completions = FakeCompletions(content='{"title": "x"}')
    result = await client_with(completions).generate("system", "user", model="gpt-test", temperature=0.8, max_tokens=2000)

    assert result == '{"title": "x"}'
    assert completions.kwargs == {
        "model": "gpt-test",
        "messages": [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "user"},
        ],
        "temperature": 0.8,
        "max_tokens": 2000,
    }


@pytest.mark.asyncio
async def test_generate_returns_empty_string_for_missing_content():
    assert await client_with(FakeCompletions(content=None)).generate("system", "user") == ""


@pytest.mark.asyncio
async def test_sdk_errors_become_upstream_errors():
    error = openai.APIConnectionError(request=httpx.Request("POST", "https://api.openai.com/v1/chat/completions"))
    with pytest.raises(UpstreamError) as exc_info:
        await client_with(FakeCompletions(error=error)).generate("system", "user")
    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_mock_client_returns_valid_fenced_payload():
    reply = await MockLLMClient().generate("system", "user")
    assert reply.startswith("```json")
    content = validate_model_payload(parse_payload(reply))
    assert content.title == MOCK_SCENARIO["title"]
    assert json.loads(reply.strip("`").removeprefix("json")) == MOCK_SCENARIO


@pytest.mark.asyncio
async def test_output_cut_at_token_ceiling_is_malformed():
    completions = FakeCompletions(content='{"title": "Disputa', finish_reason="length")
    with pytest.raises(MalformedPayload) as exc_info:
        await client_with(completions).generate("system", "user", max_tokens=2000)
    assert exc_info.value.field == "payload"
