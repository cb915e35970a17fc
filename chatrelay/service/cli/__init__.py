"""chatrelay command-line interface (package entrypoint).

Wires argument parsing to the handlers in ``cli_actions``; no provider logic
lives here.

Usage::

    python -m chatrelay.service.cli providers
    python -m chatrelay.service.cli ask --provider ollama "Why is the sky blue?"
"""

from __future__ import annotations

from typing import Optional

from ...base.factory import ProviderFactory, get_default_factory
from .cli_actions import handle_ask, handle_providers
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None, factory: Optional[ProviderFactory] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; ``None`` uses ``sys.argv[1:]``.
    factory: Optional[ProviderFactory]
        Factory to resolve providers with; defaults to the process-wide one.

    Returns
    -------
    int
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    factory = factory or get_default_factory()
    if args.cmd == "providers":
        return handle_providers(factory)
    return handle_ask(args, factory)


__all__ = ["main", "build_parser"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
