"""Auxiliary logging helpers (formatters) used by errctx.logging."""

from .json_formatter import JsonFormatter, ISO

__all__ = ["JsonFormatter", "ISO"]
