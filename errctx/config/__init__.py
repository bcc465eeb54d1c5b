"""Configuration layer for errctx.

Merges built-in defaults (``defaults``) with ``ERRCTX_*`` environment
variables (``env``) into a validated ``ErrCtxSettings`` model (``settings``).

Public API
----------
* get_settings() -> ErrCtxSettings
* load_settings(overrides: dict | None = None) -> ErrCtxSettings
* reset_settings(settings: ErrCtxSettings | None = None) -> None
"""
from __future__ import annotations

from .settings import ErrCtxSettings, get_settings, load_settings, reset_settings

__all__ = ["ErrCtxSettings", "get_settings", "load_settings", "reset_settings"]
