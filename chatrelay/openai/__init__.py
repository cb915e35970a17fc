"""
OpenAI provider package.

Exports:
- OpenAIProvider: chat adapter for the OpenAI chat-completions API
"""

from .client import OpenAIProvider

__all__ = ["OpenAIProvider"]
