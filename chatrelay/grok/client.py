"""Grok (xAI) provider adapter over plain HTTP.

xAI exposes an OpenAI-compatible ``/chat/completions`` endpoint. The adapter
talks to it directly with ``httpx`` (bearer auth) and reuses the shared
chat-completions body/response mapping. Model names are sent exactly as
configured; unknown names are left for the API to reject.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from ..base.http import build_httpx_client
from ..base.models import AIResponse, MessageCollection
from ..base.openai_style_parts import build_chat_payload, parse_chat_completion
from ..base.provider_base import BaseProvider, ResolvedRequest
from ..config.defaults import GROK_DEFAULT_BASE_URL, GROK_DEFAULT_MODEL

__all__ = ["GrokProvider"]


class GrokProvider(BaseProvider):
    """xAI chat-completions adapter."""

    name = "grok"
    vendor_label = "Grok"
    default_model = GROK_DEFAULT_MODEL
    default_api_url = GROK_DEFAULT_BASE_URL
    vendor_errors = (httpx.HTTPError,)
    available_models = (
        "grok-2",
        "grok-2-latest",
        "grok-2-1212",
        "grok-2-vision",
        "grok-2-vision-latest",
        "grok-2-vision-1212",
        "grok-vision-beta",
        "grok-beta",
    )

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(config)
        self._client = build_httpx_client(
            base_url=(self._api_url or GROK_DEFAULT_BASE_URL).rstrip("/") + "/",
            timeout=self._timeout,
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            transport=transport,
        )

    def _send(self, messages: MessageCollection, request: ResolvedRequest) -> AIResponse:
        resp = self._client.post("chat/completions", json=build_chat_payload(messages, request))
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        return parse_chat_completion(data, request.model)
