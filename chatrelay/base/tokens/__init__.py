"""Token usage helpers."""

from .extraction import counts_usage, gemini_usage, ollama_usage, passthrough_usage

__all__ = ["counts_usage", "gemini_usage", "ollama_usage", "passthrough_usage"]
