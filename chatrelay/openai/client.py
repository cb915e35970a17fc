"""OpenAI provider adapter built on ``OpenAIStyleProvider``.

Models in the ``gpt-5`` family reject ``max_tokens`` and take
``max_completion_tokens`` instead; everything else is the shared
chat-completions mapping.
"""

from __future__ import annotations

from ..base.openai_style_parts import OpenAIStyleProvider
from ..config.defaults import OPENAI_DEFAULT_BASE_URL, OPENAI_DEFAULT_MODEL

__all__ = ["OpenAIProvider", "uses_completion_tokens"]


def uses_completion_tokens(model: str) -> bool:
    """Return True for models that take ``max_completion_tokens``."""
    return model.startswith("gpt-5")


class OpenAIProvider(OpenAIStyleProvider):
    """OpenAI chat-completions adapter."""

    name = "openai"
    vendor_label = "OpenAI"
    default_model = OPENAI_DEFAULT_MODEL
    default_api_url = OPENAI_DEFAULT_BASE_URL
    available_models = (
        "gpt-5",
        "gpt-5-mini",
        "gpt-4o",
        "gpt-4o-mini",
        "gpt-4-turbo",
        "gpt-4",
        "gpt-3.5-turbo",
    )

    def _token_param(self, model: str) -> str:
        return "max_completion_tokens" if uses_completion_tokens(model) else "max_tokens"
