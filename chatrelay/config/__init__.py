"""Unified configuration layer for chatrelay.

Sources are merged in a predictable order (later wins):

1. Built-in defaults per provider (``chatrelay.config.defaults``).
2. Optional config file named by ``CHATRELAY_CONFIG_FILE`` (JSON, else YAML).
3. Environment variables ``<PROVIDER>_API_KEY``, ``_API_URL``, ``_MODEL``,
   ``_TEMPERATURE``, ``_MAX_TOKENS`` and ``_TIMEOUT``.
4. In-code overrides passed to :func:`get_provider_config`.

Config File
-----------
```
default: anthropic
system_prompt: "Be terse."
providers:
  anthropic:
    api_key: sk-...
    model: claude-3-5-sonnet-20241022
  ollama:
    api_url: http://gpu-box:11434
logging:
  enabled: true
```

Public API
----------
* get_provider_config(provider, overrides=None) -> dict | None
* get_default_provider() -> str
* get_system_prompt() -> str | None
* get_logging_settings() / get_cache_settings() -> dict
* reset_config_cache()
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    ANTHROPIC_DEFAULT_MODEL,
    CONFIG_FILE_ENV,
    DEFAULT_CACHE_SETTINGS,
    DEFAULT_LOGGING_SETTINGS,
    DEFAULT_MAX_TOKENS,
    DEFAULT_PROVIDER,
    DEFAULT_PROVIDER_ENV,
    DEFAULT_SYSTEM_PROMPT,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
    GEMINI_DEFAULT_MODEL,
    GROK_DEFAULT_BASE_URL,
    GROK_DEFAULT_MODEL,
    GROQ_DEFAULT_BASE_URL,
    GROQ_DEFAULT_MODEL,
    OLLAMA_DEFAULT_HOST,
    OLLAMA_DEFAULT_MAX_TOKENS,
    OLLAMA_DEFAULT_MODEL,
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_MODEL,
    SYSTEM_PROMPT_ENV,
)


def _generation_defaults(**extra: Any) -> Dict[str, Any]:
    base = {"temperature": DEFAULT_TEMPERATURE, "max_tokens": DEFAULT_MAX_TOKENS, "timeout": DEFAULT_TIMEOUT}
    base.update(extra)
    return base


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": _generation_defaults(model=OPENAI_DEFAULT_MODEL, api_url=OPENAI_DEFAULT_BASE_URL),
    "anthropic": _generation_defaults(model=ANTHROPIC_DEFAULT_MODEL, api_url=ANTHROPIC_DEFAULT_BASE_URL),
    "grok": _generation_defaults(model=GROK_DEFAULT_MODEL, api_url=GROK_DEFAULT_BASE_URL),
    "gemini": _generation_defaults(model=GEMINI_DEFAULT_MODEL),
    "groq": _generation_defaults(model=GROQ_DEFAULT_MODEL, api_url=GROQ_DEFAULT_BASE_URL),
    "ollama": _generation_defaults(
        model=OLLAMA_DEFAULT_MODEL, api_url=OLLAMA_DEFAULT_HOST, max_tokens=OLLAMA_DEFAULT_MAX_TOKENS
    ),
}


ENV_FIELD_MAP = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "api_url": "API_URL",
    "model": "MODEL",
    "temperature": "TEMPERATURE",
    "max_tokens": "MAX_TOKENS",
    "timeout": "TIMEOUT",
}

_NUMERIC_FIELDS = {"temperature": float, "timeout": float, "max_tokens": int}

_FILE_CACHE: Optional[Dict[str, Any]] = None


def reset_config_cache() -> None:
    """Forget the parsed config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _parse_config_text(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return yaml.safe_load(text)


def _load_external_config() -> Dict[str, Any]:
    """Return the parsed config file, reading it at most once per cache reset.

    A missing path yields an empty mapping; a file that is neither JSON nor
    YAML raises ``yaml.YAMLError`` so broken configuration is not silently
    ignored.
    """
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    data: Any = {}
    if path and Path(path).is_file():
        data = _parse_config_text(Path(path).read_text(encoding="utf-8"))
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_prefix(provider: str) -> str:
    return provider.upper().replace("-", "_")


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = _env_prefix(provider)
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None:
            out[field] = val
    return out


def _coerce_numbers(provider: str, cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Coerce numeric fields that may arrive as strings from env or YAML.

    Raises:
        ConfigurationError: a numeric field holds text that is not a number.
    """
    from ..base.errors import ConfigurationError

    for field, kind in _NUMERIC_FIELDS.items():
        value = cfg.get(field)
        if not isinstance(value, str) or not value.strip():
            continue
        try:
            cfg[field] = kind(value)
        except ValueError:
            raise ConfigurationError(
                f"Invalid {field} for provider [{provider}]: {value!r} is not a number."
            ) from None
    return cfg


def get_provider_config(provider: str, overrides: Optional[Mapping[str, Any]] = None) -> Optional[Dict[str, Any]]:
    """Return the merged configuration for ``provider``.

    Merge order (later wins): defaults -> config file -> env vars -> overrides.
    Returns ``None`` when no layer knows the provider at all, which the
    factory reports as missing configuration.
    """
    name = (provider or "").lower().strip()
    found = name in DEFAULTS
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))

    providers_section = _load_external_config().get("providers") or {}
    file_cfg = providers_section.get(name) if isinstance(providers_section, dict) else None
    if isinstance(file_cfg, dict):
        found = True
        cfg |= file_cfg

    env_cfg = _env_overrides(name)
    if env_cfg:
        found = True
        cfg |= env_cfg

    if overrides:
        found = True
        cfg |= dict(overrides)

    return _coerce_numbers(name, cfg) if found else None


def get_default_provider() -> str:
    """Return ``CHATRELAY_PROVIDER``, else the file's ``default``, else ``openai``."""
    env = os.getenv(DEFAULT_PROVIDER_ENV)
    if env:
        return env.strip().lower()
    file_default = _load_external_config().get("default")
    if isinstance(file_default, str) and file_default.strip():
        return file_default.strip().lower()
    return DEFAULT_PROVIDER


def get_system_prompt() -> Optional[str]:
    """Return the globally configured system prompt.

    An explicitly empty value (env or file) disables the prompt and yields
    ``None``.
    """
    env = os.getenv(SYSTEM_PROMPT_ENV)
    if env is not None:
        return env or None
    file_cfg = _load_external_config()
    if "system_prompt" in file_cfg:
        return file_cfg["system_prompt"] or None
    return DEFAULT_SYSTEM_PROMPT


def _section(name: str, defaults: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(defaults)
    section = _load_external_config().get(name)
    if isinstance(section, dict):
        out |= section
    return out


def get_logging_settings() -> Dict[str, Any]:
    return _section("logging", DEFAULT_LOGGING_SETTINGS)


def get_cache_settings() -> Dict[str, Any]:
    return _section("cache", DEFAULT_CACHE_SETTINGS)


def get_model(provider: str) -> Optional[str]:
    """Return the configured model for ``provider`` (or ``None``)."""
    cfg = get_provider_config(provider)
    return cfg.get("model") if cfg else None


__all__ = [
    "DEFAULTS",
    "get_provider_config",
    "get_default_provider",
    "get_system_prompt",
    "get_logging_settings",
    "get_cache_settings",
    "get_model",
    "reset_config_cache",
]
