"""
Message value object used across providers.

Defines the immutable `Message` model and the `Role` literal. Construction
with any role outside ``system``/``user``/``assistant`` raises
``pydantic.ValidationError`` before any provider sees the message.
"""
from __future__ import annotations

from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict


# Message roles accepted by every provider.
Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    """A single conversation turn.

    Attributes:
        role: Author of the turn (``"system"``, ``"user"`` or ``"assistant"``).
        content: Plain text content.
        name: Optional participant name forwarded to vendors that accept it.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    name: Optional[str] = None

    def __init__(self, role: Role, content: str, name: Optional[str] = None, **data: Any) -> None:
        super().__init__(role=role, content=content, name=name, **data)

    @classmethod
    def user(cls, content: str, name: Optional[str] = None) -> "Message":
        return cls("user", content, name)

    @classmethod
    def assistant(cls, content: str, name: Optional[str] = None) -> "Message":
        return cls("assistant", content, name)

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls("system", content)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Message":
        """Build a message from a ``{"role", "content", "name"?}`` mapping."""
        return cls.model_validate(dict(data))

    def to_dict(self) -> Dict[str, str]:
        """Return the wire shape; ``name`` is included only when set."""
        out = {"role": self.role, "content": self.content}
        if self.name is not None:
            out["name"] = self.name
        return out


__all__ = ["Message", "Role"]
