from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from openai import RateLimitError
from tenacity import wait_none

from zen_gomoku.exceptions import LLMClientError
from zen_gomoku.llm.openai_client import DEFAULT_SYSTEM_PROMPT, OpenAIGomokuClient


def completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def rate_limit_error():
    request = httpx.Request("POST", "https://api.example.com/v1/chat/completions")
    return RateLimitError("rate limited", response=httpx.Response(429, request=request), body=None)


def make_client(**kwargs):
    api = MagicMock()
    api.chat.completions.create = AsyncMock(**kwargs)
    return OpenAIGomokuClient(model="test-model", client=api), api.chat.completions.create


@pytest.fixture
def no_retry_wait(monkeypatch):
    monkeypatch.setattr(OpenAIGomokuClient._make_api_call.retry, "wait", wait_none())


@pytest.mark.asyncio
async def test_complete_returns_content():
    client, create = make_client(return_value=completion('{"row": 1, "col": 2}'))
    messages = [{"role": "user", "content": "move?"}]

    assert await client.complete(messages) == '{"row": 1, "col": 2}'

    kwargs = create.await_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["messages"] == messages
    assert kwargs["temperature"] == 0.2
    assert kwargs["response_format"] == {"type": "json_object"}


@pytest.mark.asyncio
async def test_string_prompt_gets_system_message():
    client, create = make_client(return_value=completion("{}"))
    await client.complete("move?")

    messages = create.await_args.kwargs["messages"]
    assert messages[0] == {"role": "system", "content": DEFAULT_SYSTEM_PROMPT}
    assert messages[1] == {"role": "user", "content": "move?"}


@pytest.mark.asyncio
async def test_json_mode_can_be_disabled():
    api = MagicMock()
    api.chat.completions.create = AsyncMock(return_value=completion("{}"))
    client = OpenAIGomokuClient(client=api, json_mode=False)

    await client.complete("move?")
    assert "response_format" not in api.chat.completions.create.await_args.kwargs


@pytest.mark.asyncio
async def test_provider_error_is_wrapped():
    client, _ = make_client(side_effect=RuntimeError("connection reset"))

    with pytest.raises(LLMClientError, match="connection reset"):
        await client.complete("move?")


@pytest.mark.asyncio
async def test_empty_content_is_an_error():
    client, _ = make_client(return_value=completion(None))

    with pytest.raises(LLMClientError, match="empty response"):
        await client.complete("move?")


@pytest.mark.asyncio
async def test_rate_limit_is_retried(no_retry_wait):
    client, create = make_client(side_effect=[rate_limit_error(), completion("{}")])

    assert await client.complete("move?") == "{}"
    assert create.await_count == 2


@pytest.mark.asyncio
async def test_rate_limit_gives_up_after_three_attempts(no_retry_wait):
    client, create = make_client(side_effect=[rate_limit_error() for _ in range(3)])

    with pytest.raises(LLMClientError):
        await client.complete("move?")
    assert create.await_count == 3
