"""Unified error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``chatrelay.base.errors_parts`` to keep a stable import path.

Three kinds of failure exist:

* configuration errors (:class:`ConfigurationError` and subclasses) raised
  while resolving a provider;
* provider errors (:class:`ProviderError`) wrapping any failure of a vendor
  call;
* validation errors (``pydantic.ValidationError``) raised when a value object
  such as ``Message`` or ``RequestOptions`` is built from invalid input.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.configuration_error import (
    ConfigurationError,
    MissingConfigurationError,
    MissingCredentialError,
    UnsupportedProviderError,
)
from .errors_parts.classification import RETRYABLE_CODES, classify_exception, code_for_status, extract_status

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
