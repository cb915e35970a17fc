"""
Failure categories attached to every ``ProviderError``.

Values are lowercase snake_case strings; they appear verbatim in log events
(``error_code``) and CLI error reports, so callers may branch on them.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Normalized failure category of a provider call."""

    # Rejected by the vendor because of the request or the credentials.
    AUTH = "auth"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNSUPPORTED = "unsupported"

    # Vendor or network trouble; the same request may succeed later.
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNAVAILABLE = "unavailable"

    SERVER_ERROR = "server_error"
    # Local failure while building the request or reading the response.
    INTERNAL = "internal"
    UNKNOWN = "unknown"

    @property
    def retryable(self) -> bool:
        return self in RETRYABLE_CODES


RETRYABLE_CODES = frozenset(
    {ErrorCode.RATE_LIMIT, ErrorCode.TIMEOUT, ErrorCode.TRANSIENT, ErrorCode.UNAVAILABLE}
)


__all__ = ["ErrorCode", "RETRYABLE_CODES"]
