"""Groq provider adapter.

Groq serves an OpenAI-compatible API, so the adapter reuses the ``openai``
SDK pointed at Groq's base URL and identifies itself with a ``User-Agent``
header. The token limit is always sent as ``max_tokens``.
"""

from __future__ import annotations

from ..base.openai_style_parts import OpenAIStyleProvider
from ..config.defaults import GROQ_DEFAULT_BASE_URL, GROQ_DEFAULT_MODEL, GROQ_USER_AGENT

__all__ = ["GroqProvider"]


class GroqProvider(OpenAIStyleProvider):
    name = "groq"
    vendor_label = "Groq"
    default_model = GROQ_DEFAULT_MODEL
    default_api_url = GROQ_DEFAULT_BASE_URL
    default_headers = {"User-Agent": GROQ_USER_AGENT}
    available_models = (
        "openai/gpt-oss-20b",
        "openai/gpt-oss-120b",
        "llama-3.1-70b-versatile",
        "llama-3.1-8b-instant",
        "mixtral-8x7b-32768",
        "gemma-7b-it",
    )
