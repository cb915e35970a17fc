"""CLI parser construction for the chatrelay command.

Wires subparsers only; execution lives in ``cli_actions``.
"""

from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with ``providers`` and ``ask`` subcommands."""
    p = argparse.ArgumentParser(prog="chatrelay", description="Send a prompt to a configured AI chat provider")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("providers", help="List registered provider names and their configured models")

    p_ask = sub.add_parser("ask", help="Ask a single question and print the answer")
    p_ask.add_argument("prompt", help="Question to send")
    p_ask.add_argument("--provider", default=None, help="Provider name (default: configured default)")
    p_ask.add_argument("--model", default=None)
    p_ask.add_argument("--temperature", type=float, default=None)
    p_ask.add_argument("--max-tokens", dest="max_tokens", type=int, default=None)
    p_ask.add_argument("--system", default=None, help="System prompt for this call")
    p_ask.add_argument("--json", action="store_true", help="Print the response envelope as JSON")
    return p


__all__ = ["build_parser"]
