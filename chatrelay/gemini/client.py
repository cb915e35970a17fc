"""Gemini provider adapter (``google-generativeai`` SDK).

Gemini is driven in text-completion style: the first system message becomes
``system_instruction`` and only user contents are sent, joined by blank
lines. Assistant turns are not replayed. An empty prompt is rejected before
any network call.

``genai.configure`` is process-global, so the adapter re-applies its own key
right before each call; two adapters with different keys therefore do not
interfere in single-threaded use.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from ..base.errors import ErrorCode
from ..base.models import AIResponse, MessageCollection
from ..base.provider_base import BaseProvider, ResolvedRequest
from ..base.tokens import gemini_usage
from ..base.utils.messages import extract_system_and_user
from ..config.defaults import GEMINI_DEFAULT_MODEL

__all__ = ["GeminiProvider", "build_generation_config"]


def build_generation_config(request: ResolvedRequest) -> Dict[str, Any]:
    config: Dict[str, Any] = {
        "temperature": request.temperature,
        "max_output_tokens": request.max_tokens,
    }
    opts = request.options.to_dict()
    if "top_p" in opts:
        config["top_p"] = opts["top_p"]
    if "stop" in opts:
        config["stop_sequences"] = opts["stop"]
    return config


def _response_text(resp: Any) -> str:
    # The SDK raises ValueError from .text when the candidate has no parts
    # (e.g. blocked by safety filters).
    try:
        return resp.text or ""
    except ValueError:
        return ""


class GeminiProvider(BaseProvider):
    """Gemini adapter.

    ``transport`` is accepted for signature parity with the other adapters
    and ignored: the SDK owns its gRPC/REST transport.
    """

    name = "gemini"
    vendor_label = "Gemini"
    default_model = GEMINI_DEFAULT_MODEL
    vendor_errors = (google_exceptions.GoogleAPIError,)
    available_models = (
        "gemini-2.0-flash",
        "gemini-2.0-flash-exp",
        "gemini-1.5-pro-latest",
        "gemini-1.5-flash-latest",
        "gemini-1.5-pro",
        "gemini-1.5-flash",
        "gemini-1.5-pro-002",
        "gemini-1.5-flash-002",
    )

    def __init__(self, config: Optional[Mapping[str, Any]] = None, *, transport: Any = None) -> None:
        super().__init__(config)
        self._configure()

    def _configure(self) -> None:
        kwargs: Dict[str, Any] = {"api_key": self._api_key}
        if self._api_url:
            kwargs["client_options"] = {"api_endpoint": self._api_url}
        genai.configure(**kwargs)

    def _send(self, messages: MessageCollection, request: ResolvedRequest) -> AIResponse:
        system_text, prompt = extract_system_and_user(messages)
        if not prompt:
            raise self._processing_error("No content to send to Gemini", ErrorCode.VALIDATION, request.model)
        self._configure()
        model = genai.GenerativeModel(
            model_name=request.model,
            generation_config=build_generation_config(request),
            system_instruction=system_text,
        )
        resp = model.generate_content(prompt, request_options={"timeout": self._timeout})
        to_dict = getattr(resp, "to_dict", None)
        return AIResponse(
            content=_response_text(resp),
            model=request.model,
            usage=gemini_usage(getattr(resp, "usage_metadata", None)),
            raw=to_dict() if callable(to_dict) else {},
        )
