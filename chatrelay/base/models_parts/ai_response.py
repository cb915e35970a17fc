"""
Normalized response envelope returned by every adapter.

``usage`` is the vendor's token accounting passed through as reported
(Anthropic keeps ``input_tokens``/``output_tokens``); :meth:`AIResponse.normalized_usage`
offers a provider-independent view. ``raw`` holds the full vendor payload and
is excluded from serialization.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

_USAGE_ALIASES = {
    "prompt_tokens": ("prompt_tokens", "input_tokens"),
    "completion_tokens": ("completion_tokens", "output_tokens"),
    "total_tokens": ("total_tokens",),
}


@dataclass(frozen=True)
class AIResponse:
    """Provider-agnostic result of one chat call.

    Attributes:
        content: Assistant text (empty string when the vendor returned none).
        model: Model that served the request, when known.
        usage: Vendor-native token counters.
        raw: Full decoded vendor payload for diagnostics.
    """

    content: str
    model: Optional[str] = None
    usage: Dict[str, Any] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.content

    def normalized_usage(self) -> Dict[str, Optional[int]]:
        """Return ``prompt_tokens``/``completion_tokens``/``total_tokens``.

        Anthropic-style keys are mapped onto the OpenAI convention and the
        total is derived when only the two components are known. Unknown
        counters are ``None``.
        """
        out: Dict[str, Optional[int]] = {}
        for key, aliases in _USAGE_ALIASES.items():
            out[key] = next((self.usage[a] for a in aliases if self.usage.get(a) is not None), None)
        if out["total_tokens"] is None and out["prompt_tokens"] is not None and out["completion_tokens"] is not None:
            out["total_tokens"] = out["prompt_tokens"] + out["completion_tokens"]
        return out

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary excluding the raw payload."""
        return {"content": self.content, "model": self.model, "usage": dict(self.usage)}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


__all__ = ["AIResponse"]
