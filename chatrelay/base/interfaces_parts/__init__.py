"""Interface parts package; import from `chatrelay.base.interfaces` instead."""

from .ai_provider import AIProvider, MessagesInput, OptionsInput

__all__ = ["AIProvider", "MessagesInput", "OptionsInput"]
