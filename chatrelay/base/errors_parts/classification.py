"""
Map arbitrary exceptions onto :class:`ErrorCode`.

The openai and anthropic SDKs, google-api-core and raw ``httpx`` all expose
failures differently. Classification looks, in order, at exception types
with a fixed meaning, the HTTP status the exception carries, the exception
it was raised from, and finally its message text.
"""
from __future__ import annotations

from typing import Optional

import httpx

from .error_code import RETRYABLE_CODES, ErrorCode
from .provider_error import ProviderError

_STATUS_ATTRS = ("status_code", "status", "code")


def _as_status(value: object) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool) and 100 <= value <= 599:
        return int(value)
    return None


def extract_status(exc: BaseException) -> Optional[int]:
    """Return the HTTP status carried by ``exc``, or ``None``.

    openai/anthropic errors expose ``status_code``, google-api-core errors an
    integer ``code`` and ``httpx.HTTPStatusError`` a ``response``.
    """
    for attr in _STATUS_ATTRS:
        status = _as_status(getattr(exc, attr, None))
        if status is not None:
            return status
    return _as_status(getattr(getattr(exc, "response", None), "status_code", None))


def code_for_status(status: int) -> ErrorCode:
    """Return the category of an HTTP status (``unknown`` for unmapped 4xx and below)."""
    if status in (401, 403):
        return ErrorCode.AUTH
    if status == 429:
        return ErrorCode.RATE_LIMIT
    if status in (408, 504):
        return ErrorCode.TIMEOUT
    if status == 404:
        return ErrorCode.NOT_FOUND
    if status == 409:
        return ErrorCode.CONFLICT
    if status in (400, 422):
        return ErrorCode.VALIDATION
    if status == 502:
        return ErrorCode.TRANSIENT
    if status == 503:
        return ErrorCode.UNAVAILABLE
    if status >= 500:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


_MESSAGE_HINTS = (
    (ErrorCode.TIMEOUT, ("timeout", "timed out")),
    (ErrorCode.AUTH, ("auth", "api key", "unauthorized", "forbidden")),
    (ErrorCode.UNSUPPORTED, ("unsupported", "not supported")),
    (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
    (ErrorCode.CONFLICT, ("conflict", "already exists")),
    (ErrorCode.UNAVAILABLE, ("unavailable", "connection refused")),
    (ErrorCode.VALIDATION, ("validation", "invalid", "malformed")),
    (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
)


def _code_from_message(text: str) -> ErrorCode:
    msg = text.lower()
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    for code, needles in _MESSAGE_HINTS:
        if any(n in msg for n in needles):
            return code
    return ErrorCode.UNKNOWN


def classify_exception(exc: BaseException) -> ErrorCode:
    """Return the :class:`ErrorCode` for ``exc``.

    ``ProviderError`` keeps its code; timeouts (builtin or ``httpx``) are
    ``timeout``; a mapped HTTP status decides next; other ``httpx`` transport
    failures are ``unavailable``. SDKs re-raise transport failures from the
    original exception, so ``__cause__`` is consulted before falling back to
    message heuristics.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    status = extract_status(exc)
    if status is not None:
        code = code_for_status(status)
        if code is not ErrorCode.UNKNOWN:
            return code
    if isinstance(exc, httpx.TransportError):
        return ErrorCode.UNAVAILABLE
    cause = exc.__cause__
    if cause is not None and cause is not exc:
        code = classify_exception(cause)
        if code is not ErrorCode.UNKNOWN:
            return code
    return _code_from_message(str(exc))


__all__ = [
    "classify_exception",
    "code_for_status",
    "extract_status",
    "RETRYABLE_CODES",
]
