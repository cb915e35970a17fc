"""Provider Factory utilities.

Purpose
-------
Resolve a provider name to a freshly constructed adapter. Built-in adapters
are imported lazily with ``importlib`` so that importing ``chatrelay`` does
not pull in every vendor SDK. Custom adapters registered with
:meth:`ProviderFactory.extend` are stored as classes.

Failure modes
-------------
All raised eagerly, before any network activity:

- unknown name -> :class:`UnsupportedProviderError` (lists valid names);
- no configuration -> :class:`MissingConfigurationError`;
- empty ``api_key`` on an adapter that needs one -> :class:`MissingCredentialError`;
- ``extend`` with a class lacking the provider methods -> ``TypeError``.

The factory performs no caching, retries or fallbacks.
"""

from __future__ import annotations

import inspect
from importlib import import_module
from typing import Any, Callable, Dict, List, Mapping, Optional, Type, Union

from ..config import get_provider_config
from .errors import (
    ConfigurationError,
    MissingConfigurationError,
    MissingCredentialError,
    UnsupportedProviderError,
)
from .interfaces import AIProvider

ConfigSource = Callable[[str], Optional[Mapping[str, Any]]]
_Spec = Union[Dict[str, str], type]

_CONTRACT_METHODS = ("send_message", "set_model", "set_temperature", "set_max_tokens", "validate_config")


def create_provider(name: str, config: Optional[Mapping[str, Any]] = None, **adapter_kwargs: Any) -> AIProvider:
    """Convenience wrapper around the process-wide default factory."""
    return get_default_factory().make(name, config, **adapter_kwargs)


class ProviderFactory:
    """Create provider adapters by name (``"openai"``, ``"ollama"``, ...).

    Parameters
    ----------
    config_source:
        Callable returning the configuration mapping for a provider name, or
        ``None`` when it has none. Defaults to
        :func:`chatrelay.config.get_provider_config`.
    """

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "chatrelay.openai.client", "class": "OpenAIProvider"},
        "anthropic": {"module": "chatrelay.anthropic.client", "class": "AnthropicProvider"},
        "grok": {"module": "chatrelay.grok.client", "class": "GrokProvider"},
        "gemini": {"module": "chatrelay.gemini.client", "class": "GeminiProvider"},
        "groq": {"module": "chatrelay.groq.client", "class": "GroqProvider"},
        "ollama": {"module": "chatrelay.ollama.client", "class": "OllamaProvider"},
    }

    def __init__(self, config_source: Optional[ConfigSource] = None) -> None:
        self._config_source: ConfigSource = config_source or get_provider_config
        self._registry: Dict[str, _Spec] = dict(self._PROVIDERS)

    @staticmethod
    def _key(name: str) -> str:
        return (name or "").lower().strip()

    def make(self, name: str, config: Optional[Mapping[str, Any]] = None, **adapter_kwargs: Any) -> AIProvider:
        """Return a new adapter for ``name``.

        Parameters
        ----------
        name:
            Registered provider name (case-insensitive).
        config:
            Explicit configuration; when ``None`` the config source is asked.
        **adapter_kwargs:
            Extra constructor keywords (for example ``transport`` in tests).

        Raises
        ------
        UnsupportedProviderError, MissingConfigurationError, MissingCredentialError
        """
        key = self._key(name)
        if key not in self._registry:
            raise UnsupportedProviderError(name, self.get_available_providers())
        resolved = config if config is not None else self._config_source(key)
        if resolved is None:
            raise MissingConfigurationError(key)
        klass = self._resolve_class(key)
        if getattr(klass, "requires_api_key", True) and not resolved.get("api_key"):
            raise MissingCredentialError(key)
        return klass(dict(resolved), **adapter_kwargs)

    def extend(self, name: str, provider_cls: type) -> "ProviderFactory":
        """Register a custom adapter class under ``name`` and return the factory.

        Raises
        ------
        TypeError
            If ``provider_cls`` is not a class implementing every provider method.
        """
        if not inspect.isclass(provider_cls):
            raise TypeError(f"Provider for [{name}] must be a class, got {type(provider_cls).__name__}")
        missing = [m for m in _CONTRACT_METHODS if not callable(getattr(provider_cls, m, None))]
        if missing:
            raise TypeError(
                f"Provider class {provider_cls.__name__} must implement AIProvider; missing: {', '.join(missing)}"
            )
        self._registry[self._key(name)] = provider_cls
        return self

    def get_available_providers(self) -> List[str]:
        """Return registered names, built-ins first, in registration order."""
        return list(self._registry)

    def supports(self, name: str) -> bool:
        return self._key(name) in self._registry

    def _resolve_class(self, key: str) -> Type[Any]:
        spec = self._registry[key]
        if inspect.isclass(spec):
            return spec
        module_path, class_name = spec["module"], spec["class"]
        try:
            mod = import_module(module_path)
        except ImportError as exc:
            raise ConfigurationError(
                f"Failed to import module '{module_path}' for provider [{key}]: {exc}"
            ) from exc
        return getattr(mod, class_name)


_DEFAULT_FACTORY: Optional[ProviderFactory] = None


def get_default_factory() -> ProviderFactory:
    """Return the lazily created process-wide factory."""
    global _DEFAULT_FACTORY
    if _DEFAULT_FACTORY is None:
        _DEFAULT_FACTORY = ProviderFactory()
    return _DEFAULT_FACTORY


__all__ = ["ProviderFactory", "create_provider", "get_default_factory", "ConfigSource"]
