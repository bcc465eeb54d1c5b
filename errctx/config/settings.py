"""Typed, validated settings for the errctx package.

Purpose
-------
Merge built-in defaults with environment overrides into a single frozen
settings object consumed by the chain walker and the logging setup.

Merge order (later wins): defaults -> environment -> in-code overrides.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation.

Failure modes
-------------
- Environment values that cannot be parsed are dropped (see
  ``errctx.config.env``), so importing errctx never fails on a typo.
- ``load_settings`` raises ``pydantic.ValidationError`` when an in-code
  override is out of range (e.g. ``{"max_depth": 0}``) or names an unknown
  log level.
"""
from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .defaults import (
    ERRCTX_DEFAULT_FOLLOW_CONTEXT,
    ERRCTX_DEFAULT_JSON_LOGS,
    ERRCTX_DEFAULT_LOG_LEVEL,
    ERRCTX_DEFAULT_MAX_DEPTH,
)
from .env import env_overrides, parse_level


class ErrCtxSettings(BaseModel):
    """Runtime settings for errctx.

    Attributes
    ----------
    log_level:
        Level name for the shared ``errctx`` logger (``WARN`` is accepted as an
        alias of ``WARNING``).
    json_logs:
        Use the JSON formatter for the managed console handler.
    follow_implicit_context:
        Let the chain walker follow ``__context__`` when ``__cause__`` is
        absent and the context is not suppressed.
    max_depth:
        Optional cap on the number of links the walker descends; ``None``
        (the default) walks the whole chain.
    """

    model_config = ConfigDict(frozen=True)

    log_level: str = ERRCTX_DEFAULT_LOG_LEVEL
    json_logs: bool = ERRCTX_DEFAULT_JSON_LOGS
    follow_implicit_context: bool = ERRCTX_DEFAULT_FOLLOW_CONTEXT
    max_depth: Optional[int] = Field(default=ERRCTX_DEFAULT_MAX_DEPTH, ge=1)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = parse_level(value)
        if level is None:
            raise ValueError(f"unknown log level {value!r}")
        return level


_CACHE: Optional[ErrCtxSettings] = None
_LOCK = threading.Lock()


def load_settings(overrides: Optional[Dict[str, Any]] = None) -> ErrCtxSettings:
    """Build settings from defaults, the environment and ``overrides``."""
    data: Dict[str, Any] = dict(env_overrides())
    if overrides:
        data |= overrides
    return ErrCtxSettings(**data)


def get_settings() -> ErrCtxSettings:
    """Return the process-wide settings, loading them on first use."""
    global _CACHE
    if _CACHE is None:
        with _LOCK:
            if _CACHE is None:
                _CACHE = load_settings()
    return _CACHE


def reset_settings(settings: Optional[ErrCtxSettings] = None) -> None:
    """Drop (or replace) the cached settings; the next read reloads them."""
    global _CACHE
    with _LOCK:
        _CACHE = settings


__all__ = ["ErrCtxSettings", "load_settings", "get_settings", "reset_settings"]
