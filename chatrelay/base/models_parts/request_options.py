"""
Validated generation parameters for a single call.

Every field is independently optional. Range checks run at construction via
pydantic field constraints, so an out-of-range value never reaches a vendor.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class RequestOptions(BaseModel):
    """Per-call overrides layered over an adapter's instance defaults.

    Attributes:
        model: Model identifier.
        temperature: Sampling temperature in ``[0.0, 2.0]``.
        max_tokens: Completion token limit (``>= 1``).
        stream: Accepted for compatibility; adapters never stream.
        top_p: Nucleus sampling in ``[0.0, 1.0]``.
        n: Number of choices (``>= 1``).
        stop: Stop sequences.
        presence_penalty: In ``[-2.0, 2.0]``.
        frequency_penalty: In ``[-2.0, 2.0]``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    model: Optional[str] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    max_tokens: Optional[int] = Field(default=None, ge=1)
    stream: Optional[bool] = None
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    n: Optional[int] = Field(default=None, ge=1)
    stop: Optional[List[str]] = None
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)

    @classmethod
    def with_model(cls, model: str) -> "RequestOptions":
        return cls(model=model)

    @classmethod
    def creative(cls) -> "RequestOptions":
        return cls(temperature=1.2)

    @classmethod
    def deterministic(cls) -> "RequestOptions":
        return cls(temperature=0.0)

    @classmethod
    def balanced(cls) -> "RequestOptions":
        return cls(temperature=0.7)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RequestOptions":
        """Build options from a mapping; keys that are not fields are ignored."""
        return cls.model_validate({k: v for k, v in data.items() if k in cls.model_fields})

    def merge(self, other: Optional["RequestOptions"]) -> "RequestOptions":
        """Return a new instance where every field ``other`` sets wins."""
        if other is None:
            return self
        return self.model_copy(update=other.to_dict())

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


__all__ = ["RequestOptions"]
