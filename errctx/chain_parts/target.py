"""Out-parameter for chain type assertions.

``Target`` names the kind of error an ``as_`` search looks for and receives
the matched value on success.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Target(Generic[T]):
    """Requested error kind plus the slot the match is written to.

    ``kind`` is a class, a tuple of classes or a ``runtime_checkable``
    protocol; anything ``isinstance`` accepts. ``value`` stays ``None`` until a
    search writes a match.
    """

    __slots__ = ("kind", "value")

    def __init__(self, kind: Any) -> None:
        if not isinstance(kind, (type, tuple)):
            raise TypeError(f"Target kind must be a type or tuple of types, got {kind!r}")
        self.kind = kind
        self.value: Optional[T] = None

    def accepts(self, err: Any) -> bool:
        """Whether ``err`` is an instance of the requested kind."""
        return isinstance(err, self.kind)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"Target(kind={self.kind!r}, value={self.value!r})"


__all__ = ["Target"]
