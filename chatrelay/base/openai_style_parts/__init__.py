"""OpenAI-compatible provider building blocks."""

from .base import OpenAIStyleProvider
from .style_helpers import FORWARDED_OPTIONS, build_chat_payload, parse_chat_completion

__all__ = ["OpenAIStyleProvider", "FORWARDED_OPTIONS", "build_chat_payload", "parse_chat_completion"]
