"""Anthropic provider adapter (Messages API via the ``anthropic`` SDK).

Usage counters are passed through with Anthropic's native names
(``input_tokens`` / ``output_tokens``); ``AIResponse.normalized_usage``
offers the provider-independent view.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import anthropic
import httpx

from ..base.http import sdk_http_client
from ..base.models import AIResponse, MessageCollection
from ..base.provider_base import BaseProvider, ResolvedRequest
from ..config.defaults import ANTHROPIC_API_VERSION, ANTHROPIC_DEFAULT_BASE_URL, ANTHROPIC_DEFAULT_MODEL
from .helpers import build_params, to_ai_response

__all__ = ["AnthropicProvider"]


class AnthropicProvider(BaseProvider):
    """Anthropic Messages adapter."""

    name = "anthropic"
    vendor_label = "Anthropic"
    default_model = ANTHROPIC_DEFAULT_MODEL
    default_api_url = ANTHROPIC_DEFAULT_BASE_URL
    vendor_errors = (anthropic.APIError,)
    available_models = (
        "claude-3-5-sonnet-20241022",
        "claude-3-5-haiku-20241022",
        "claude-3-opus-20240229",
        "claude-3-haiku-20240307",
    )

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(config)
        self._transport = transport
        self._client: Optional[anthropic.Anthropic] = None

    def _make_client(self) -> anthropic.Anthropic:
        return anthropic.Anthropic(
            api_key=self._api_key,
            base_url=self._api_url,
            timeout=self._timeout,
            max_retries=0,
            default_headers={"anthropic-version": ANTHROPIC_API_VERSION},
            http_client=sdk_http_client(self._timeout, self._transport),
        )

    def _get_client(self, model: str) -> anthropic.Anthropic:
        if self._client is None:
            try:
                self._client = self._make_client()
            except anthropic.AnthropicError as exc:
                raise self._client_setup_error(exc, model) from exc
        return self._client

    def _send(self, messages: MessageCollection, request: ResolvedRequest) -> AIResponse:
        resp = self._get_client(request.model).messages.create(**build_params(messages, request))
        return to_ai_response(resp, request.model)
