"""Orchestration layer: manager, conversation and CLI."""

from .conversation import Conversation
from .manager import ChatManager

__all__ = ["ChatManager", "Conversation"]
