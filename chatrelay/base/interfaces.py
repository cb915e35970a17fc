"""
Provider interface public surface.

Re-exports the protocol definitions under ``chatrelay.base.interfaces_parts``.
"""

from .interfaces_parts.ai_provider import AIProvider, MessagesInput, OptionsInput

__all__ = ["AIProvider", "MessagesInput", "OptionsInput"]
