"""
Configuration error hierarchy raised while resolving a provider.

These errors are raised eagerly by :class:`~chatrelay.base.factory.ProviderFactory`
before any adapter is constructed and never at call time.
"""
from __future__ import annotations

from typing import Iterable


class ConfigurationError(Exception):
    """Base class for provider resolution failures."""


class UnsupportedProviderError(ConfigurationError):
    """Raised when a provider name is not registered with the factory."""

    def __init__(self, provider: str, available: Iterable[str]) -> None:
        self.provider = provider
        self.available = tuple(available)
        super().__init__(
            f"Provider [{provider}] is not supported. "
            f"Available providers: {', '.join(self.available)}"
        )


class MissingConfigurationError(ConfigurationError):
    """Raised when no configuration block exists for a provider."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Configuration for provider [{provider}] not found.")


class MissingCredentialError(ConfigurationError):
    """Raised when a provider requiring an API key is configured without one."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(
            f"API key is required for provider [{provider}]. "
            "Please set it in your configuration or environment variables."
        )


__all__ = [
    "ConfigurationError",
    "UnsupportedProviderError",
    "MissingConfigurationError",
    "MissingCredentialError",
]
