"""Structured logging utilities for the chatrelay package.

One shared ``chatrelay`` logger owns a single stderr handler with
:class:`JsonFormatter`; modules obtain child loggers through
:func:`get_logger` which propagate to it. Events are written with
:func:`log_event` as one JSON object per line, and
:func:`normalized_log_event` adds the canonical ``phase`` / ``error_code`` /
``tokens`` keys used by the adapters.

The level comes from ``CHATRELAY_LOG_LEVEL`` (default ``INFO``).
:func:`configure_logger` adjusts the level and attaches or removes a rotating
file handler at runtime.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

ROOT_LOGGER_NAME = "chatrelay"
LOG_LEVEL_ENV = "CHATRELAY_LOG_LEVEL"

_BASE_LOGGER_ATTR = "_chatrelay_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_chatrelay_console_handler"
_FILE_HANDLER_ATTR = "_chatrelay_file_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    """Parse a logging level name into its integer constant.

    Accepts DEBUG, INFO, WARN/WARNING, ERROR and CRITICAL case-insensitively;
    unknown values fall back to ``default``.
    """
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared ``chatrelay`` logger."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    desired_level = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != desired_level:
            logger.setLevel(desired_level)
        for handler in list(logger.handlers):
            if not getattr(handler, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream = getattr(handler, "stream", None)
            if stream is None or getattr(stream, "closed", False):
                # pytest capture can close the stream under us; rebuild it.
                logger.removeHandler(handler)
                logger.addHandler(_console_handler(json_mode, desired_level))
            else:
                handler.setLevel(desired_level)
                if stream is not sys.stderr:
                    handler.setStream(sys.stderr)
        return logger

    logger.setLevel(desired_level)
    logger.handlers[:] = [_console_handler(json_mode, desired_level)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def _console_handler(json_mode: bool, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def get_logger(name: str = ROOT_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a logger wired to the shared ``chatrelay`` handler.

    Names outside the ``chatrelay`` namespace are nested under it so every
    logger obtained here propagates to the single configured handler.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == ROOT_LOGGER_NAME:
        return base_logger
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared ``chatrelay`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired level as a number or a name (``"DEBUG"``). ``None`` keeps the
        current level.
    file_path: Optional[str]
        When given, a rotating file handler (10MB x 5 backups) writing to this
        path is attached, replacing a previously managed one that points
        elsewhere. When ``None``, any managed file handler is removed.
    json_mode: bool
        JSON formatter when ``True``; plain text otherwise.

    Returns
    -------
    logging.Logger
        The configured shared logger. Handlers attached by the caller are
        left untouched.
    """
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)

    if level is not None:
        resolved = _parse_level(level, default=logger.level) if isinstance(level, str) else level
        logger.setLevel(resolved)
        for handler in logger.handlers:
            if getattr(handler, _CONSOLE_HANDLER_ATTR, False) or getattr(handler, _FILE_HANDLER_ATTR, False):
                handler.setLevel(resolved)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for handler in managed:
            logger.removeHandler(handler)
            handler.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for handler in managed:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == abs_path:
            existing = handler
        else:
            logger.removeHandler(handler)
            handler.close()

    if existing is None:
        fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(fh, _FILE_HANDLER_ATTR, True)
        fh.setLevel(logger.level)
        fh.setFormatter(_formatter(json_mode))
        logger.addHandler(fh)
    else:
        existing.setFormatter(_formatter(json_mode))
        existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    keep_none: bool = False,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit one structured event as a JSON line.

    Keys whose value is ``None`` are dropped unless ``keep_none`` is set.
    ``ctx`` is merged shallowly before ``fields``.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = ("phase", "error_code", "tokens")


def _coerce_tokens(tokens: Any) -> Any:
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    error_code: str | None = None,
    tokens: Any = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit an event carrying the canonical ``phase``/``error_code``/``tokens`` keys.

    The canonical keys are always present (``null`` when unknown); extra
    fields never overwrite them and are dropped when ``None``.
    """
    base_fields: Dict[str, Any] = {
        "phase": phase,
        "error_code": error_code,
        "tokens": _coerce_tokens(tokens),
    }
    for k, v in extra_fields.items():
        if v is None or k in base_fields:
            continue
        base_fields[k] = v
    log_event(logger, event, ctx, keep_none=True, level=level, **base_fields)


__all__ = [
    "LogContext",
    "ROOT_LOGGER_NAME",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
]
