"""Provider-agnostic building blocks: models, errors, contract and factory."""

from .errors import (
    ConfigurationError,
    ErrorCode,
    MissingConfigurationError,
    MissingCredentialError,
    ProviderError,
    UnsupportedProviderError,
)
from .factory import ProviderFactory, create_provider
from .interfaces import AIProvider
from .models import AIResponse, Message, MessageCollection, RequestOptions
from .provider_base import BaseProvider

__all__ = [
    "AIProvider",
    "AIResponse",
    "BaseProvider",
    "ConfigurationError",
    "ErrorCode",
    "Message",
    "MessageCollection",
    "MissingConfigurationError",
    "MissingCredentialError",
    "ProviderError",
    "ProviderFactory",
    "RequestOptions",
    "UnsupportedProviderError",
    "create_provider",
]
