"""Structured logging utilities for errctx.

Rationale:
- One place to configure the shared ``errctx`` logger (JSON or plain).
- Level and format come from ``errctx.config`` (``ERRCTX_LOG_LEVEL``,
  ``ERRCTX_JSON_LOGS``) so library users opt in without code changes.
- Construction events are emitted at DEBUG; the default WARNING level keeps
  the library silent.
"""
from __future__ import annotations

import json
import logging
import sys
import threading
from typing import Any

from .config import get_settings
from .log_support import JsonFormatter

BASE_LOGGER_NAME = "errctx"

_BASE_LOGGER_ATTR = "_errctx_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_errctx_console_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_LOCK = threading.Lock()


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _ensure_base_logger() -> logging.Logger:
    """Initialize and return the shared ``errctx`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        return logger
    with _LOCK:
        if getattr(logger, _BASE_LOGGER_ATTR, False):
            return logger
        settings = get_settings()
        level = logging.getLevelName(settings.log_level)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(_make_formatter(settings.json_logs))
        setattr(handler, _CONSOLE_HANDLER_ATTR, True)
        logger.setLevel(level)
        logger.addHandler(handler)
        logger.propagate = False
        setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME) -> logging.Logger:
    """Return ``name`` as a child of the configured ``errctx`` logger.

    Names outside the ``errctx`` namespace are prefixed so every logger the
    package hands out propagates to the managed handler.
    """
    base_logger = _ensure_base_logger()
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(f"{BASE_LOGGER_NAME}."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(*, level: int | str | None = None, json_mode: bool | None = None) -> logging.Logger:
    """Reconfigure the shared ``errctx`` logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired level (numeric or name such as ``"DEBUG"``). ``None`` keeps the
        current level.
    json_mode: bool | None
        Switch the managed console handler between JSON and plain output.
        ``None`` keeps the current formatter.

    Returns
    -------
    logging.Logger
        The configured base logger.

    Notes
    -----
    Only the handler installed by this module is touched; handlers attached by
    the application are preserved.
    """
    logger = _ensure_base_logger()
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level {level!r}")
        level = resolved
    if level is not None:
        logger.setLevel(level)
    for handler in logger.handlers:
        if not getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            continue
        handler.setLevel(logger.level)
        if json_mode is not None:
            handler.setFormatter(_make_formatter(json_mode))
        # Rebind to the current stderr (it may have been swapped since setup).
        if getattr(handler.stream, "closed", False):
            handler.stream = sys.stderr
        else:
            handler.setStream(sys.stderr)
    return logger


def log_event(logger: logging.Logger, event: str, *, level: int = logging.DEBUG, **fields: Any) -> None:
    """Emit a structured log event.

    Fields whose value is ``None`` are dropped to keep payloads concise. The
    payload is only serialized when ``logger`` is enabled for ``level``.

    Parameters
    ----------
    logger: logging.Logger
        Logger instance (normally obtained from ``get_logger``).
    event: str
        Event name (e.g. ``context.reuse``).
    level: int
        Logging level, DEBUG by default.
    **fields: Any
        Arbitrary serializable key/value pairs.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=repr))


__all__ = ["BASE_LOGGER_NAME", "get_logger", "configure_logger", "log_event"]
