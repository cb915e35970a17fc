"""
Helper utilities for OpenAI-compatible chat-completions providers.

Purpose:
- Translate a ``MessageCollection`` plus ``ResolvedRequest`` into the
  chat-completions JSON body shared by OpenAI, Groq and Grok.
- Map a decoded chat-completions response into ``AIResponse``.

No network I/O happens here; callers own the client.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from ..models import AIResponse, MessageCollection
from ..tokens import passthrough_usage

# Optional parameters forwarded verbatim when the caller sets them.
FORWARDED_OPTIONS = ("top_p", "n", "stop", "presence_penalty", "frequency_penalty")


def build_chat_payload(
    messages: MessageCollection,
    request: Any,
    *,
    token_param: str = "max_tokens",
) -> Dict[str, Any]:
    """Return the chat-completions request body.

    Parameters:
        messages: Full transcript; every role is forwarded in order.
        request: ``ResolvedRequest`` with the effective model, temperature,
            token limit and remaining options.
        token_param: Name of the token-limit field (``max_tokens`` or
            ``max_completion_tokens``).
    """
    payload: Dict[str, Any] = {
        "model": request.model,
        "messages": messages.to_list(),
        "temperature": request.temperature,
        token_param: request.max_tokens,
    }
    opts = request.options.to_dict()
    for key in FORWARDED_OPTIONS:
        if key in opts:
            payload[key] = opts[key]
    return payload


def parse_chat_completion(data: Mapping[str, Any], fallback_model: str) -> AIResponse:
    """Map a decoded chat-completions response into ``AIResponse``.

    Raises:
        ValueError: when the payload carries no choices.
    """
    choices = data.get("choices") or []
    if not choices:
        raise ValueError("response contained no choices")
    message = choices[0].get("message") or {}
    return AIResponse(
        content=message.get("content") or "",
        model=data.get("model") or fallback_model,
        usage=passthrough_usage(data.get("usage")),
        raw=dict(data),
    )


__all__ = ["FORWARDED_OPTIONS", "build_chat_payload", "parse_chat_completion"]
