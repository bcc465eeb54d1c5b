"""errctx package

Structured, queryable metadata for exceptions that stays interoperable with
Python's own chaining (``__cause__``) and grouping (``ExceptionGroup``).

Public API (re-exported):
    - Version: ``__version__``
    - Entity: :class:`ContextualError`
    - Construction: :func:`new`, :func:`from_error`, :func:`to_context`,
      :func:`format_error`
    - Matching: :func:`is_`, :func:`as_` with the :class:`Target` holder
    - Chain primitives: :class:`LeafError`, :class:`WrappedError`,
      :class:`JoinedError`, :class:`JoinedBaseError`, :func:`join`,
      :func:`walk`, :func:`chain_is`, :func:`chain_as`

Example::

    try:
        load(path)
    except OSError as exc:
        raise errctx.format_error("loading config: {}", exc).with_field("path", path)
"""

from .chain import (
    JoinedBaseError,
    JoinedError,
    LeafError,
    Target,
    WrappedError,
    chain_as,
    chain_is,
    join,
    unwrap,
    walk,
)
from .context import (
    ContextualError,
    as_,
    find_context,
    format_error,
    from_error,
    is_,
    new,
    to_context,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Entity
    "ContextualError",
    # Construction
    "new",
    "from_error",
    "to_context",
    "format_error",
    "find_context",
    # Matching
    "is_",
    "as_",
    "Target",
    # Chain primitives
    "LeafError",
    "WrappedError",
    "JoinedError",
    "JoinedBaseError",
    "join",
    "unwrap",
    "walk",
    "chain_is",
    "chain_as",
]
