"""Message extraction helpers shared across providers.

Helpers here are side-effect free and operate on ``MessageCollection`` only.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from ..models import Message, MessageCollection


def split_system(messages: MessageCollection) -> Tuple[Optional[str], List[Message]]:
    """Return the first system message content and the remaining turns.

    Only the FIRST system message is honored; later system messages are
    dropped because vendors with a dedicated system field reject the
    ``system`` role inside the turn list. User/assistant order is kept.
    """
    system_text: Optional[str] = None
    turns: List[Message] = []
    for m in messages:
        if m.role == "system":
            if system_text is None:
                system_text = m.content
            continue
        turns.append(m)
    return system_text, turns


def extract_system_and_user(messages: MessageCollection) -> Tuple[Optional[str], str]:
    """Return ``(first_system_text, user_text)`` for text-completion style vendors.

    ``user_text`` is every user message content joined by a blank line and
    trimmed; assistant turns are discarded.
    """
    system_text, turns = split_system(messages)
    users = "\n\n".join(m.content for m in turns if m.role == "user")
    return system_text, users.strip()


__all__ = ["split_system", "extract_system_and_user"]
