"""Provider-agnostic helpers."""

from .messages import extract_system_and_user, split_system

__all__ = ["extract_system_and_user", "split_system"]
