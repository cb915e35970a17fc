"""chatrelay package

Configuration-driven adapter layer exposing one chat contract over several
LLM vendors (OpenAI, Anthropic, Grok/xAI, Gemini, Groq, Ollama).

Public API (re-exported):
    - Version: ``__version__``
    - Models: :class:`Message`, :class:`MessageCollection`,
      :class:`RequestOptions`, :class:`AIResponse`
    - Errors: :class:`ProviderError`, :class:`ErrorCode`,
      :class:`ConfigurationError` and its subclasses
    - Factory: :class:`ProviderFactory`, :func:`create`
    - Orchestration: :class:`ChatManager`, :class:`Conversation`

Example::

    from chatrelay import create, MessageCollection

    reply = create("ollama").send_message(MessageCollection().user("Hi"))
    print(reply.content)
"""

from .base.errors import (
    ConfigurationError,
    ErrorCode,
    MissingConfigurationError,
    MissingCredentialError,
    ProviderError,
    UnsupportedProviderError,
)
from .base.factory import ProviderFactory, create_provider
from .base.interfaces import AIProvider
from .base.models import AIResponse, Message, MessageCollection, RequestOptions
from .service.conversation import Conversation
from .service.manager import ChatManager

__version__ = "0.1.0"

create = create_provider

__all__ = [
    "__version__",
    "AIProvider",
    "AIResponse",
    "ChatManager",
    "ConfigurationError",
    "Conversation",
    "ErrorCode",
    "Message",
    "MessageCollection",
    "MissingConfigurationError",
    "MissingCredentialError",
    "ProviderError",
    "ProviderFactory",
    "RequestOptions",
    "UnsupportedProviderError",
    "create",
]
