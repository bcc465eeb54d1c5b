"""Context parts package public surface.

Re-exports the contextual error entity, its constructors and the
chain-aware matching functions for optional direct imports. Prefer importing
from ``errctx.context`` (or the package root) for the stable surface.
"""

from .contextual_error import ContextualError
from .construction import find_context, format_error, from_error, new, to_context
from .matching import as_, is_

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
