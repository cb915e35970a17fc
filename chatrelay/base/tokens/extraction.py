"""Token usage extraction helpers.

Converts vendor usage shapes into the ``usage`` mapping carried by
``AIResponse``. OpenAI-family and Anthropic usage is passed through with its
native keys; Gemini and Ollama counters are mapped onto
``prompt_tokens``/``completion_tokens``/``total_tokens``.

Missing counters default to ``0`` for the mapped vendors, matching what those
APIs report for empty completions.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


def _as_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def passthrough_usage(usage: Any) -> Dict[str, Any]:
    """Return vendor usage as a plain dict with ``None`` counters removed.

    Accepts a mapping, a pydantic model (``model_dump``) or ``None``.
    """
    if usage is None:
        return {}
    if hasattr(usage, "model_dump"):
        usage = usage.model_dump()
    if not isinstance(usage, Mapping):
        return {}
    return {k: v for k, v in usage.items() if v is not None}


def counts_usage(prompt: Any, completion: Any, total: Optional[Any] = None) -> Dict[str, int]:
    """Build the OpenAI-style usage mapping, deriving the total when absent."""
    p, c = _as_int(prompt), _as_int(completion)
    return {
        "prompt_tokens": p,
        "completion_tokens": c,
        "total_tokens": _as_int(total) if total is not None else p + c,
    }


def gemini_usage(metadata: Any) -> Dict[str, int]:
    """Map Gemini ``usage_metadata`` (attribute or camelCase dict form)."""
    if metadata is None:
        return counts_usage(0, 0, 0)
    if isinstance(metadata, Mapping):
        get = metadata.get
        return counts_usage(
            get("prompt_token_count", get("promptTokenCount")),
            get("candidates_token_count", get("candidatesTokenCount")),
            get("total_token_count", get("totalTokenCount")) or 0,
        )
    return counts_usage(
        getattr(metadata, "prompt_token_count", 0),
        getattr(metadata, "candidates_token_count", 0),
        getattr(metadata, "total_token_count", 0),
    )


def ollama_usage(data: Mapping[str, Any]) -> Dict[str, int]:
    """Map Ollama ``prompt_eval_count``/``eval_count`` with a derived total."""
    return counts_usage(data.get("prompt_eval_count"), data.get("eval_count"))


__all__ = ["passthrough_usage", "counts_usage", "gemini_usage", "ollama_usage"]
