"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `chatrelay.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .configuration_error import (
    ConfigurationError,
    MissingConfigurationError,
    MissingCredentialError,
    UnsupportedProviderError,
)
from .classification import RETRYABLE_CODES, classify_exception, code_for_status, extract_status

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "MissingConfigurationError",
    "MissingCredentialError",
    "UnsupportedProviderError",
    "RETRYABLE_CODES",
    "classify_exception",
    "code_for_status",
    "extract_status",
]
