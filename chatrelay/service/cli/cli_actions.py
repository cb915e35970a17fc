"""CLI action handlers.

Handlers return process exit codes: ``0`` on success, ``1`` for
configuration or validation problems, ``2`` when the provider call fails.
Errors are written to stderr as one JSON object.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, TextIO

from pydantic import ValidationError

from ...base.errors import ConfigurationError, ProviderError
from ...base.factory import ProviderFactory
from ...base.logging import get_logger, log_event
from ...config import get_model
from ..manager import ChatManager

EXIT_OK = 0
EXIT_CONFIG = 1
EXIT_PROVIDER = 2

_logger = get_logger("chatrelay.cli")


def _report(stream: TextIO, kind: str, message: str, **extra: object) -> None:
    stream.write(json.dumps({"error": kind, "message": message, **extra}, ensure_ascii=False) + "\n")


def handle_providers(factory: ProviderFactory, out: Optional[TextIO] = None) -> int:
    """Print one ``name<TAB>model`` line per registered provider."""
    out = out or sys.stdout
    for name in factory.get_available_providers():
        out.write(f"{name}\t{get_model(name) or '-'}\n")
    return EXIT_OK


def handle_ask(
    args: argparse.Namespace,
    factory: ProviderFactory,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """Run one ``ask`` through :class:`ChatManager` and print the result."""
    out = out or sys.stdout
    err = err or sys.stderr
    manager = ChatManager(factory)
    try:
        if args.provider:
            manager.provider(args.provider)
        if args.model:
            manager.model(args.model)
        if args.temperature is not None:
            manager.temperature(args.temperature)
        if args.max_tokens is not None:
            manager.max_tokens(args.max_tokens)
        if args.system is not None:
            manager.system_prompt(args.system)
        response = manager.ask(args.prompt)
    except (ConfigurationError, ValidationError) as exc:
        _report(err, "configuration", str(exc))
        return EXIT_CONFIG
    except ProviderError as exc:
        log_event(_logger, "cli.error", provider=exc.provider, error_code=exc.code.value)
        _report(err, "provider", exc.message, code=exc.code.value, provider=exc.provider)
        return EXIT_PROVIDER
    out.write((response.to_json() if args.json else response.content) + "\n")
    return EXIT_OK


__all__ = ["handle_providers", "handle_ask", "EXIT_OK", "EXIT_CONFIG", "EXIT_PROVIDER"]
