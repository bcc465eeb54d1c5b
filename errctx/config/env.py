"""errctx.config.env
=================

Environment variable names and tolerant parsing helpers for errctx settings.

Purpose
-------
- Provide a single source of truth for the environment variables the package
  reads.
- Offer small parsing utilities that never raise on malformed values; the
  settings model decides what is valid.

Failure Modes
-------------
- Helpers return ``None`` when a variable is unset, blank or unparseable so
  callers fall back to defaults; nothing here raises.
"""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

# Settings field -> environment variable
ENV_MAP: Dict[str, str] = {
    "log_level": "ERRCTX_LOG_LEVEL",
    "json_logs": "ERRCTX_JSON_LOGS",
    "follow_implicit_context": "ERRCTX_FOLLOW_CONTEXT",
    "max_depth": "ERRCTX_MAX_DEPTH",
}

LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


def read_env(name: str) -> Optional[str]:
    """Return the stripped value of ``name`` or ``None`` when unset/blank."""
    val = os.environ.get(name)
    if val is None:
        return None
    val = val.strip()
    return val or None


def parse_bool(val: Optional[str]) -> Optional[bool]:
    """Parse a boolean-ish environment string.

    Accepts ``1/0``, ``true/false``, ``yes/no`` and ``on/off``
    case-insensitively. Returns ``None`` for anything else, including ``None``.
    """
    if val is None:
        return None
    v = val.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return None


def parse_level(val: Optional[str]) -> Optional[str]:
    """Normalize a logging level name (case-insensitive, ``WARN`` alias).

    Returns ``None`` for unknown names, including ``None``.
    """
    if val is None:
        return None
    level = val.strip().upper()
    if level == "WARN":
        level = "WARNING"
    return level if level in LEVEL_NAMES else None


def parse_positive_int(val: Optional[str]) -> Optional[int]:
    """Parse a positive integer, returning ``None`` when ``val`` is not one."""
    if val is None:
        return None
    try:
        number = int(val.strip())
    except ValueError:
        return None
    return number if number >= 1 else None


_PARSERS = {
    "log_level": parse_level,
    "json_logs": parse_bool,
    "follow_implicit_context": parse_bool,
    "max_depth": parse_positive_int,
}


def env_overrides() -> Dict[str, Any]:
    """Collect parsed settings overrides from the process environment.

    Every value is parsed here and dropped when unparseable or out of range,
    so a typo in the environment falls back to the default instead of failing.
    """
    out: Dict[str, Any] = {}
    for field, name in ENV_MAP.items():
        parsed = _PARSERS[field](read_env(name))
        if parsed is not None:
            out[field] = parsed
    return out


__all__ = [
    "ENV_MAP",
    "LEVEL_NAMES",
    "read_env",
    "parse_bool",
    "parse_level",
    "parse_positive_int",
    "env_overrides",
]
