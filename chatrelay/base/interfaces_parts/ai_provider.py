"""AIProvider Protocol (single-class module).

Defines the capability set every chat adapter must implement.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, Union, runtime_checkable

from ..models import AIResponse, MessageCollection, MessageLike, RequestOptions

MessagesInput = Union[MessageCollection, Iterable[MessageLike]]
OptionsInput = Union[RequestOptions, Mapping[str, Any], None]


@runtime_checkable
class AIProvider(Protocol):
    """Minimal interface for chat providers.

    Implementations accept either a ``MessageCollection`` or a plain sequence
    of role/content mappings, and ``RequestOptions``, a mapping or nothing.
    Vendor failures surface as ``ProviderError``; SDK exception types never
    leak upstream.
    """

    def send_message(self, messages: MessagesInput, options: OptionsInput = None) -> AIResponse:
        """Execute one chat call and return the normalized response."""
        ...

    def set_model(self, model: str) -> "AIProvider":
        ...

    def set_temperature(self, temperature: float) -> "AIProvider":
        ...

    def set_max_tokens(self, max_tokens: int) -> "AIProvider":
        ...

    def validate_config(self) -> bool:
        """Cheap local check that the adapter can be used (no network)."""
        ...


__all__ = ["AIProvider", "MessagesInput", "OptionsInput"]
