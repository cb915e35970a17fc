"""
Shared base for providers speaking the OpenAI chat-completions API via the
``openai`` SDK (OpenAI itself and Groq).

Subclasses set the class attributes of :class:`BaseProvider` plus
``default_headers`` and may override :meth:`OpenAIStyleProvider._token_param`.
The SDK client is built on the first call, then reused, with ``max_retries=0``;
a key the SDK rejects surfaces as an ``auth`` ``ProviderError`` from that call.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx
import openai

from ..http import sdk_http_client
from ..models import AIResponse, MessageCollection
from ..provider_base import BaseProvider, ResolvedRequest
from .style_helpers import build_chat_payload, parse_chat_completion


class OpenAIStyleProvider(BaseProvider):
    """Chat-completions adapter on top of ``openai.OpenAI``."""

    vendor_errors = (openai.APIError,)
    default_headers: Optional[Dict[str, str]] = None

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(config)
        self._transport = transport
        self._client: Optional[openai.OpenAI] = None

    def _make_client(self) -> openai.OpenAI:
        return openai.OpenAI(
            api_key=self._api_key,
            base_url=self._api_url,
            timeout=self._timeout,
            max_retries=0,
            default_headers=self.default_headers,
            http_client=sdk_http_client(self._timeout, self._transport),
        )

    def _get_client(self, model: str) -> openai.OpenAI:
        if self._client is None:
            try:
                self._client = self._make_client()
            except openai.OpenAIError as exc:
                raise self._client_setup_error(exc, model) from exc
        return self._client

    def _token_param(self, model: str) -> str:
        return "max_tokens"

    def _send(self, messages: MessageCollection, request: ResolvedRequest) -> AIResponse:
        payload = build_chat_payload(messages, request, token_param=self._token_param(request.model))
        resp = self._get_client(request.model).chat.completions.create(**payload)
        return parse_chat_completion(resp.model_dump(), request.model)


__all__ = ["OpenAIStyleProvider"]
