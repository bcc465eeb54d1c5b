"""Contextual error entity.

Defines ``ContextualError``: an exception carrying an underlying cause plus a
key/value metadata bag. Kept isolated to satisfy one-class-per-file policy;
constructors live in ``construction`` and chain-aware matching in
``matching``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..chain_parts.walk import join as join_errors


class ContextualError(Exception):
    """An error annotated with structured metadata.

    Attributes:
        cause: The wrapped error. Also published as ``__cause__`` so standard
            chain walking and tracebacks descend into it.
        metadata: Mapping of field name to arbitrary value. Instances derived
            from one another (``format_error``, ``join``) hold the *same* dict,
            so a field written through one is visible through all of them.

    The metadata dict is not synchronized; callers sharing an instance across
    threads must serialize ``with_field`` calls themselves.
    """

    def __init__(self, cause: Optional[BaseException] = None, metadata: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(cause)
        self.cause = cause
        self.metadata: Dict[str, Any] = {} if metadata is None else metadata
        self.__cause__ = cause

    def __str__(self) -> str:
        return "" if self.cause is None else str(self.cause)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"ContextualError(cause={self.cause!r}, fields={sorted(self.metadata)!r})"

    def join(self, other: Optional[BaseException]) -> "ContextualError":
        """Return an error whose cause joins ``other`` with the current cause.

        ``other`` comes first in the resulting ``JoinedError`` (a
        ``JoinedBaseError`` when either side is not an ``Exception``). The
        receiver is left untouched; the returned error shares its metadata.
        """
        return ContextualError(join_errors(other, self.cause), self.metadata)

    def with_field(self, field: str, value: Any) -> "ContextualError":
        """Set ``field`` to ``value`` (last write wins) and return ``self``."""
        self.metadata[field] = value
        return self

    def value(self, field: str) -> Any:
        """Return the value stored under ``field``, or ``None`` when absent."""
        return self.metadata.get(field)

    def values(self) -> Dict[str, Any]:
        """Return the live metadata dict (not a copy); treat it as read-only."""
        return self.metadata


__all__ = ["ContextualError"]
