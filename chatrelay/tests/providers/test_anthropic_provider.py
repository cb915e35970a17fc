"""Anthropic adapter tests against an httpx.MockTransport."""

from __future__ import annotations

import anthropic
import pytest

from chatrelay.anthropic import AnthropicProvider
from chatrelay.anthropic.helpers import build_params
from chatrelay.base.errors import ErrorCode, ProviderError
from chatrelay.base.models import MessageCollection, RequestOptions
from chatrelay.base.provider_base import ResolvedRequest

MESSAGE = {
    "id": "msg_01",
    "type": "message",
    "role": "assistant",
    "model": "claude-3-5-sonnet-20241022",
    "content": [{"type": "text", "text": "Short answer."}],
    "stop_reason": "end_turn",
    "stop_sequence": None,
    "usage": {"input_tokens": 12, "output_tokens": 4},
}


def _provider(rec, **cfg):
    return AnthropicProvider({"api_key": "sk-ant", **cfg}, transport=rec.transport())


def test_system_message_is_lifted_out_of_turns(recorder):
    rec = recorder(MESSAGE)
    msgs = MessageCollection().system("Be terse.").user("Why is the sky blue?")
    resp = _provider(rec).send_message(msgs, {"max_tokens": 50})

    request = rec.requests[-1]
    assert request.url.path == "/v1/messages"
    assert request.headers["x-api-key"] == "sk-ant"
    assert request.headers["anthropic-version"] == "2023-06-01"
    body = rec.last_json
    assert body["system"] == "Be terse."
    assert body["messages"] == [{"role": "user", "content": "Why is the sky blue?"}]
    assert body["max_tokens"] == 50
    assert body["temperature"] == 0.7

    assert resp.content == "Short answer."
    assert resp.model == "claude-3-5-sonnet-20241022"
    assert resp.usage["input_tokens"] == 12
    assert resp.usage["output_tokens"] == 4
    assert resp.normalized_usage() == {"prompt_tokens": 12, "completion_tokens": 4, "total_tokens": 16}
    assert resp.raw["id"] == "msg_01"


def test_no_system_parameter_without_system_message(recorder):
    rec = recorder(MESSAGE)
    _provider(rec).send_message([{"role": "user", "content": "Hi"}])
    assert "system" not in rec.last_json


def test_build_params_keeps_first_system_and_maps_stop():
    msgs = (
        MessageCollection()
        .system("first")
        .user("a")
        .assistant("b")
        .system("second")
        .user("c")
    )
    request = ResolvedRequest(
        model="claude-3-haiku-20240307",
        temperature=0.2,
        max_tokens=10,
        options=RequestOptions(top_p=0.5, stop=["\n\n"]),
    )
    params = build_params(msgs, request)
    assert params["system"] == "first"
    assert [m["role"] for m in params["messages"]] == ["user", "assistant", "user"]
    assert params["top_p"] == 0.5
    assert params["stop_sequences"] == ["\n\n"]


def test_empty_content_blocks_give_empty_text(recorder):
    resp = _provider(recorder(dict(MESSAGE, content=[]))).send_message([{"role": "user", "content": "Hi"}])
    assert resp.content == ""


def test_auth_failure(recorder):
    body = {"type": "error", "error": {"type": "authentication_error", "message": "invalid x-api-key"}}
    with pytest.raises(ProviderError) as excinfo:
        _provider(recorder(body, status=401)).send_message([{"role": "user", "content": "Hi"}])
    err = excinfo.value
    assert err.code is ErrorCode.AUTH
    assert err.status == 401
    assert err.retryable is False
    assert err.message.startswith("Anthropic API Error:")
    assert isinstance(err.raw, anthropic.AuthenticationError)


def test_overloaded_is_retryable(recorder):
    body = {"type": "error", "error": {"type": "overloaded_error", "message": "Overloaded"}}
    with pytest.raises(ProviderError) as excinfo:
        _provider(recorder(body, status=503)).send_message([{"role": "user", "content": "Hi"}])
    assert excinfo.value.code is ErrorCode.UNAVAILABLE
    assert excinfo.value.retryable is True


def test_client_setup_failure_is_an_auth_error(monkeypatch):
    def refuse(**kwargs):
        raise anthropic.AnthropicError("Could not resolve authentication method")

    monkeypatch.setattr(anthropic, "Anthropic", refuse)
    provider = AnthropicProvider({"api_key": ""})
    assert provider.validate_config() is False

    with pytest.raises(ProviderError) as excinfo:
        provider.send_message([{"role": "user", "content": "Hi"}])
    assert excinfo.value.code is ErrorCode.AUTH
    assert excinfo.value.message.startswith("Anthropic API Error: could not create client:")
