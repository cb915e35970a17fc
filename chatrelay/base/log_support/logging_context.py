"""Correlation fields shared by the events of one provider call."""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class LogContext:
    """Fields merged into every event emitted for a single call.

    ``request_id`` ties ``chat.start`` to its ``chat.end`` / ``chat.error``;
    :meth:`for_call` generates one.
    """

    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_call(cls, provider: str, model: Optional[str]) -> "LogContext":
        return cls(provider=provider, model=model, request_id=uuid.uuid4().hex[:12])

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to one mapping; ``extra`` keys never shadow the named fields."""
        out: Dict[str, Any] = {k: v for k, v in self.extra.items() if v is not None}
        for key in ("provider", "model", "request_id"):
            value = getattr(self, key)
            if value is not None:
                out[key] = value
        return out


__all__ = ["LogContext"]
