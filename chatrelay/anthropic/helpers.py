"""Anthropic helpers module.

Side-effect-free utilities that translate a ``MessageCollection`` into
``messages.create`` parameters and map the SDK response back into
``AIResponse``.
"""

from __future__ import annotations

from typing import Any, Dict

from ..base.models import AIResponse, MessageCollection
from ..base.tokens import passthrough_usage
from ..base.utils.messages import split_system


def build_params(messages: MessageCollection, request: Any) -> Dict[str, Any]:
    """Build keyword arguments for ``client.messages.create``.

    The first system message becomes the top-level ``system`` parameter;
    later system messages are dropped. ``max_tokens`` is always present
    because the Messages API requires it.
    """
    system_text, turns = split_system(messages)
    params: Dict[str, Any] = {
        "model": request.model,
        "messages": [{"role": m.role, "content": m.content} for m in turns],
        "max_tokens": request.max_tokens,
        "temperature": request.temperature,
    }
    if system_text is not None:
        params["system"] = system_text
    opts = request.options.to_dict()
    if "top_p" in opts:
        params["top_p"] = opts["top_p"]
    if "stop" in opts:
        params["stop_sequences"] = opts["stop"]
    return params


def to_ai_response(resp: Any, fallback_model: str) -> AIResponse:
    """Map a ``Message`` SDK object into ``AIResponse`` (text of the first block)."""
    blocks = getattr(resp, "content", None) or []
    text = getattr(blocks[0], "text", None) if blocks else None
    return AIResponse(
        content=text or "",
        model=getattr(resp, "model", None) or fallback_model,
        usage=passthrough_usage(getattr(resp, "usage", None)),
        raw=resp.model_dump(),
    )


__all__ = ["build_params", "to_ai_response"]
