"""
Ordered message transcript with fluent builders.

`MessageCollection` is the canonical shape every adapter receives. Items may
be supplied as `Message` instances or as role/content mappings; mappings are
converted on the way in so the collection only ever holds `Message` values.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Union, overload

from .message import Message

MessageLike = Union[Message, Mapping[str, Any]]


def _coerce(item: MessageLike) -> Message:
    if isinstance(item, Message):
        return item
    if isinstance(item, Mapping):
        return Message.from_dict(item)
    raise TypeError(f"Cannot build a Message from {type(item).__name__}")


class MessageCollection:
    """Mutable, ordered sequence of :class:`Message`.

    Insertion order is the conversation order. The fluent helpers (``add``,
    ``user``, ``assistant``, ``system``) return the collection itself.
    """

    def __init__(self, messages: Optional[Iterable[MessageLike]] = None) -> None:
        self._messages: List[Message] = [_coerce(m) for m in (messages or [])]

    @classmethod
    def from_list(cls, items: Iterable[MessageLike]) -> "MessageCollection":
        return cls(items)

    def add(self, message: MessageLike) -> "MessageCollection":
        self._messages.append(_coerce(message))
        return self

    def user(self, content: str, name: Optional[str] = None) -> "MessageCollection":
        return self.add(Message.user(content, name))

    def assistant(self, content: str, name: Optional[str] = None) -> "MessageCollection":
        return self.add(Message.assistant(content, name))

    def system(self, content: str) -> "MessageCollection":
        return self.add(Message.system(content))

    def all(self) -> List[Message]:
        """Return a shallow copy of the underlying list."""
        return list(self._messages)

    def is_empty(self) -> bool:
        return not self._messages

    def to_list(self) -> List[Dict[str, str]]:
        return [m.to_dict() for m in self._messages]

    def copy(self) -> "MessageCollection":
        return MessageCollection(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)

    @overload
    def __getitem__(self, index: int) -> Message: ...

    @overload
    def __getitem__(self, index: slice) -> List[Message]: ...

    def __getitem__(self, index):
        return self._messages[index]

    def __setitem__(self, index: int, value: MessageLike) -> None:
        self._messages[index] = _coerce(value)

    def __delitem__(self, index: int) -> None:
        del self._messages[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MessageCollection):
            return NotImplemented
        return self._messages == other._messages

    def __repr__(self) -> str:
        return f"MessageCollection({self._messages!r})"


__all__ = ["MessageCollection", "MessageLike"]
