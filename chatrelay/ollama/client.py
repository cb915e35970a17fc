"""Ollama provider adapter.

Talks to a local Ollama daemon over ``httpx`` (``POST /api/chat`` with
``stream: false``). No API key is needed, so ``validate_config`` is always
true and the factory skips the credential check.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx

from ..base.errors import ErrorCode
from ..base.http import build_httpx_client
from ..base.models import AIResponse, MessageCollection
from ..base.provider_base import BaseProvider, ResolvedRequest
from ..base.tokens import ollama_usage
from ..config.defaults import OLLAMA_DEFAULT_HOST, OLLAMA_DEFAULT_MAX_TOKENS, OLLAMA_DEFAULT_MODEL

__all__ = ["OllamaProvider", "build_payload"]


def build_payload(messages: MessageCollection, request: ResolvedRequest) -> Dict[str, Any]:
    """Return the ``/api/chat`` body; sampling parameters live under ``options``."""
    options: Dict[str, Any] = {
        "temperature": request.temperature,
        "num_predict": request.max_tokens,
    }
    extra = request.options.to_dict()
    if "top_p" in extra:
        options["top_p"] = extra["top_p"]
    if "stop" in extra:
        options["stop"] = extra["stop"]
    return {
        "model": request.model,
        "messages": [{"role": m.role, "content": m.content} for m in messages],
        "options": options,
        "stream": False,
    }


class OllamaProvider(BaseProvider):
    name = "ollama"
    vendor_label = "Ollama"
    api_error_label = "HTTP Error"
    requires_api_key = False
    default_model = OLLAMA_DEFAULT_MODEL
    default_api_url = OLLAMA_DEFAULT_HOST
    default_max_tokens = OLLAMA_DEFAULT_MAX_TOKENS
    vendor_errors = (httpx.HTTPError,)
    available_models = (
        "llama3",
        "llama3.1:8b-instruct",
        "mistral:7b-instruct",
        "qwen2.5:7b-instruct",
        "phi3:mini",
        "gemma:7b-instruct",
    )

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(config)
        self._client = build_httpx_client(
            base_url=self._api_url or OLLAMA_DEFAULT_HOST,
            timeout=self._timeout,
            transport=transport,
        )

    def _send(self, messages: MessageCollection, request: ResolvedRequest) -> AIResponse:
        resp = self._client.post("/api/chat", json=build_payload(messages, request))
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise self._processing_error("Invalid response from Ollama.", ErrorCode.SERVER_ERROR, request.model)
        message = data.get("message") or {}
        return AIResponse(
            content=message.get("content") or data.get("response") or "",
            model=data.get("model") or request.model,
            usage=ollama_usage(data),
            raw=data,
        )
