"""Grok (xAI) adapter tests over plain httpx."""

from __future__ import annotations

import httpx
import pytest

from chatrelay.base.errors import ErrorCode, ProviderError
from chatrelay.grok import GrokProvider

COMPLETION = {
    "id": "grok-1",
    "object": "chat.completion",
    "model": "grok-4",
    "choices": [{"index": 0, "message": {"role": "assistant", "content": "xAI here"}, "finish_reason": "stop"}],
    "usage": {"prompt_tokens": 4, "completion_tokens": 2, "total_tokens": 6},
}


def test_grok_posts_openai_compatible_body(recorder):
    rec = recorder(COMPLETION)
    provider = GrokProvider({"api_key": "xai-key"}, transport=rec.transport())
    resp = provider.send_message([{"role": "user", "content": "Hi"}], {"model": "grok-4", "stop": ["x"]})

    request = rec.requests[-1]
    assert request.method == "POST"
    assert str(request.url) == "https://api.x.ai/v1/chat/completions"
    assert request.headers["authorization"] == "Bearer xai-key"
    body = rec.last_json
    assert body["model"] == "grok-4"
    assert body["max_tokens"] == 1000
    assert body["stop"] == ["x"]
    assert resp.content == "xAI here"
    assert resp.model == "grok-4"
    assert resp.raw == COMPLETION


def test_grok_passes_unknown_model_names_verbatim(recorder):
    rec = recorder(COMPLETION)
    GrokProvider({"api_key": "k", "model": "grok-99-experimental"}, transport=rec.transport()).send_message(
        [{"role": "user", "content": "Hi"}]
    )
    assert rec.last_json["model"] == "grok-99-experimental"


def test_grok_http_error(recorder):
    rec = recorder({"error": "rate limited"}, status=429)
    with pytest.raises(ProviderError) as excinfo:
        GrokProvider({"api_key": "k"}, transport=rec.transport()).send_message([{"role": "user", "content": "Hi"}])
    err = excinfo.value
    assert err.code is ErrorCode.RATE_LIMIT
    assert err.status == 429
    assert err.message.startswith("Grok API Error:")
    assert isinstance(err.__cause__, httpx.HTTPStatusError)


def test_grok_malformed_json(recorder):
    rec = recorder(reply=lambda request: httpx.Response(200, content=b"not json"))
    with pytest.raises(ProviderError) as excinfo:
        GrokProvider({"api_key": "k"}, transport=rec.transport()).send_message([{"role": "user", "content": "Hi"}])
    assert excinfo.value.message.startswith("Error processing Grok response:")
