"""Model parts package; import from `chatrelay.base.models` instead."""

from .message import Message, Role
from .message_collection import MessageCollection, MessageLike
from .request_options import RequestOptions
from .ai_response import AIResponse

__all__ = ["Message", "Role", "MessageCollection", "MessageLike", "RequestOptions", "AIResponse"]
