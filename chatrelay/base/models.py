"""
Provider-agnostic domain models public surface.

Re-exports the one-class-per-file implementations under
``chatrelay.base.models_parts``.
"""

from .models_parts.message import Message, Role
from .models_parts.message_collection import MessageCollection, MessageLike
from .models_parts.request_options import RequestOptions
from .models_parts.ai_response import AIResponse

__all__ = [
    "Message",
    "Role",
    "MessageCollection",
    "MessageLike",
    "RequestOptions",
    "AIResponse",
]
