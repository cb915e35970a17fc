"""Gemini provider package."""

from .client import GeminiProvider

__all__ = ["GeminiProvider"]
