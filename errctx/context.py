"""Contextual errors (public API facade).

Purpose
-------
Expose the ``ContextualError`` entity, its constructors and the chain-aware
``is_``/``as_`` tests via the canonical ``errctx.context`` import path while
the implementations live under ``context_parts``.

Notes
-----
- ``is_`` and ``as_`` are supersets of ``errctx.chain.chain_is`` and
  ``errctx.chain.chain_as``: they peel contextual layers before delegating.
- Metadata is shared by reference between derived errors; see
  ``ContextualError`` for the threading caveat.
"""

from .context_parts.contextual_error import ContextualError
from .context_parts.construction import find_context, format_error, from_error, new, to_context
from .context_parts.matching import as_, is_

__all__ = [
    "ContextualError",
    "new",
    "from_error",
    "to_context",
    "format_error",
    "find_context",
    "is_",
    "as_",
]
