"""chatrelay.config.defaults
=========================

Central place for the small, stable default values used by the adapters, the
manager and the CLI. Everything here can be overridden by the config file,
environment variables or explicit overrides (see ``chatrelay.config``).

Only plain constants live here; this module imports nothing from the rest of
the package.
"""

from __future__ import annotations

# ---- Global settings ----

# Provider used by ChatManager when none is selected explicitly.
DEFAULT_PROVIDER = "openai"
# System prompt seeded into ask() calls and new conversations.
DEFAULT_SYSTEM_PROMPT = "You are a helpful AI assistant."

# Environment variables for the global settings.
CONFIG_FILE_ENV = "CHATRELAY_CONFIG_FILE"
DEFAULT_PROVIDER_ENV = "CHATRELAY_PROVIDER"
SYSTEM_PROMPT_ENV = "CHATRELAY_SYSTEM_PROMPT"

# ---- Shared generation defaults ----

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TIMEOUT = 30.0

# ---- Provider-specific defaults ----

OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"

ANTHROPIC_DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
# The SDK appends /v1/messages itself.
ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_API_VERSION = "2023-06-01"

GROK_DEFAULT_MODEL = "grok-2"
GROK_DEFAULT_BASE_URL = "https://api.x.ai/v1"

GEMINI_DEFAULT_MODEL = "gemini-2.0-flash"

GROQ_DEFAULT_MODEL = "openai/gpt-oss-20b"
GROQ_DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
GROQ_USER_AGENT = "chatrelay/0.1 (+groq)"

OLLAMA_DEFAULT_MODEL = "llama3"
OLLAMA_DEFAULT_HOST = "http://localhost:11434"
OLLAMA_DEFAULT_MAX_TOKENS = 1024

# ---- Logging / cache sections of the config file ----

DEFAULT_LOGGING_SETTINGS = {"enabled": True, "level": None, "file": None}
# Declared for config-file compatibility; nothing caches responses.
DEFAULT_CACHE_SETTINGS = {"enabled": False, "ttl": 3600}
