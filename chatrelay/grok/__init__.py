"""Grok (xAI) provider package."""

from .client import GrokProvider

__all__ = ["GrokProvider"]
