"""Multi-cause aggregate error.

``JoinedError`` is an ``ExceptionGroup`` whose string form lists each
member's message on its own line. Being a real exception group, it can be
raised and handled with ``except*``.
"""

from __future__ import annotations

from typing import Sequence


class JoinedError(ExceptionGroup):
    """Aggregate of several errors, kept in the order they were joined.

    Raises:
        ValueError: when ``errors`` is empty or a member is not an exception.
        TypeError: when a member is a ``BaseException`` but not an ``Exception``
            (``walk.join`` builds a ``JoinedBaseError`` for those).
    """

    def __new__(cls, errors: Sequence[Exception]) -> "JoinedError":
        return super().__new__(cls, "", list(errors))

    def __init__(self, errors: Sequence[Exception]) -> None:
        super().__init__("", list(errors))

    def __str__(self) -> str:
        return "\n".join(str(e) for e in self.exceptions)

    def derive(self, excs: Sequence[Exception]) -> "JoinedError":
        # keeps the type across split()/subgroup() and except*
        return JoinedError(excs)


__all__ = ["JoinedError"]
