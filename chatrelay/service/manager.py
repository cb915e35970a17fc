"""Fluent orchestration facade over a selected provider.

``ChatManager`` holds at most one active adapter, created lazily from the
configured default provider, plus an option bag fed by the chained
``model`` / ``temperature`` / ``max_tokens`` / ``system_prompt`` calls.

Example
-------
>>> manager = ChatManager()
>>> manager.provider("anthropic").temperature(0.2).ask("Hello")  # doctest: +SKIP
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from ..base.factory import ProviderFactory, get_default_factory
from ..base.interfaces import AIProvider, MessagesInput, OptionsInput
from ..base.models import AIResponse, MessageCollection, RequestOptions
from ..config import get_default_provider, get_system_prompt
from .conversation import Conversation


class ChatManager:
    """Select a provider and talk to it.

    Parameters
    ----------
    factory:
        Factory used to build adapters; defaults to the process-wide one.
    """

    def __init__(self, factory: Optional[ProviderFactory] = None) -> None:
        self._factory = factory or get_default_factory()
        self._provider: Optional[AIProvider] = None
        self._config: Dict[str, Any] = {}

    # ------------------------------------------------------------- fluent setup

    def provider(self, name: str) -> "ChatManager":
        """Switch to a freshly built adapter for ``name``."""
        self._provider = self._factory.make(name)
        return self

    def model(self, model: str) -> "ChatManager":
        self._config["model"] = model
        self.get_provider().set_model(model)
        return self

    def temperature(self, temperature: float) -> "ChatManager":
        self._config["temperature"] = temperature
        self.get_provider().set_temperature(temperature)
        return self

    def max_tokens(self, max_tokens: int) -> "ChatManager":
        self._config["max_tokens"] = max_tokens
        self.get_provider().set_max_tokens(max_tokens)
        return self

    def system_prompt(self, prompt: str) -> "ChatManager":
        self._config["system_prompt"] = prompt
        return self

    # ------------------------------------------------------------------- calls

    def ask(self, question: str) -> AIResponse:
        """Send ``[system?, user(question)]`` to the active provider.

        The system prompt is the one set on this manager, else the globally
        configured prompt, else none.
        """
        messages = MessageCollection()
        prompt = self._config["system_prompt"] if "system_prompt" in self._config else get_system_prompt()
        if prompt:
            messages.system(prompt)
        messages.user(question)
        return self.get_provider().send_message(messages, self.get_request_options())

    def chat(self, messages: Union[str, MessagesInput]) -> AIResponse:
        """Forward ``messages`` as-is; a bare string becomes one user message."""
        if isinstance(messages, str):
            messages = MessageCollection().user(messages)
        return self.get_provider().send_message(messages, self.get_request_options())

    def send(self, messages: MessagesInput, options: OptionsInput = None) -> AIResponse:
        """Typed entry point: the option bag merged with ``options`` (per call wins).

        ``options`` may be ``RequestOptions`` or a plain mapping of the same fields.
        """
        if isinstance(options, Mapping):
            options = RequestOptions.from_dict(options)
        elif options is not None and not isinstance(options, RequestOptions):
            raise TypeError(f"options must be RequestOptions, a mapping or None, not {type(options).__name__}")
        return self.get_provider().send_message(messages, self.get_request_options().merge(options))

    def get_request_options(self) -> RequestOptions:
        return RequestOptions.from_dict(self._config)

    def start_conversation(self) -> Conversation:
        return Conversation(self.get_provider(), self._config)

    def available_providers(self) -> List[str]:
        return self._factory.get_available_providers()

    def get_provider(self) -> AIProvider:
        """Return the active adapter, building the default one on first use."""
        if self._provider is None:
            self._provider = self._factory.make(get_default_provider())
        return self._provider


__all__ = ["ChatManager"]
