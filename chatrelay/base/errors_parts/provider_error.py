"""
The single exception type raised by a failed ``send_message``.

Adapters convert SDK and transport exceptions into ``ProviderError`` so
callers handle one type whatever the vendor.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """A provider call that did not produce a response.

    ``message`` follows ``"<Vendor> API Error: ..."`` for failures the vendor
    reported and ``"Error processing <Vendor> response: ..."`` otherwise.
    ``status`` is the HTTP status when one was seen. ``retryable`` is derived
    from ``code`` and is advisory only. ``raw`` is the wrapped exception,
    which is also the ``__cause__``.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    status: Optional[int] = None
    retryable: bool = False
    raw: Optional[BaseException] = None

    def __str__(self) -> str:
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
