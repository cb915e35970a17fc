"""Stateful multi-turn conversation bound to one provider.

Every :meth:`Conversation.ask` resends the full accumulated transcript; no
truncation or windowing happens here. A ``Conversation`` is not safe for
concurrent mutation.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..base.interfaces import AIProvider
from ..base.models import AIResponse, MessageCollection, RequestOptions
from ..config import get_system_prompt


class Conversation:
    """Accumulating transcript plus the provider that answers it.

    Parameters
    ----------
    provider:
        Adapter used for every turn.
    config:
        Option bag snapshot (``model``, ``temperature``, ``max_tokens``,
        ``system_prompt``). ``system_prompt`` seeds the transcript; when
        absent the globally configured prompt is used.
    """

    def __init__(self, provider: AIProvider, config: Optional[Mapping[str, Any]] = None) -> None:
        self._provider = provider
        self._config: Dict[str, Any] = dict(config or {})
        self._options = RequestOptions.from_dict(self._config)
        self._messages = MessageCollection()
        prompt = self._config["system_prompt"] if "system_prompt" in self._config else get_system_prompt()
        if prompt:
            self._messages.system(prompt)

    def ask(self, message: str) -> AIResponse:
        """Append ``message``, send the whole transcript and record the reply."""
        self._messages.user(message)
        response = self._provider.send_message(self._messages.copy(), self._options)
        self._messages.assistant(response.content)
        return response

    def system(self, message: str) -> "Conversation":
        """Append a system message at the current position."""
        self._messages.system(message)
        return self

    def get_messages(self) -> List[Dict[str, str]]:
        return self._messages.to_list()

    def clear(self) -> "Conversation":
        """Drop every message, including the seeded system prompt."""
        self._messages = MessageCollection()
        return self

    def history(self) -> str:
        return "\n\n".join(f"{m.role}: {m.content}" for m in self._messages)

    @property
    def provider(self) -> AIProvider:
        return self._provider


__all__ = ["Conversation"]
