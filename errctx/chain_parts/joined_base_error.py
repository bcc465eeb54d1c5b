"""Multi-cause aggregate for members that are not all ``Exception``s.

``JoinedBaseError`` is the ``BaseExceptionGroup`` counterpart of
``JoinedError``: it can hold ``KeyboardInterrupt``, ``SystemExit`` and other
``BaseException`` members, which an ``ExceptionGroup`` refuses.
"""

from __future__ import annotations

from typing import Sequence

from .joined_error import JoinedError


class JoinedBaseError(BaseExceptionGroup):
    """Aggregate of several errors, at least one of which is not an ``Exception``."""

    def __new__(cls, errors: Sequence[BaseException]) -> "JoinedBaseError":
        return super().__new__(cls, "", list(errors))

    def __init__(self, errors: Sequence[BaseException]) -> None:
        super().__init__("", list(errors))

    def __str__(self) -> str:
        return "\n".join(str(e) for e in self.exceptions)

    def derive(self, excs: Sequence[BaseException]) -> "JoinedBaseError | JoinedError":
        # narrows to JoinedError once only Exceptions remain, like BaseExceptionGroup
        if all(isinstance(e, Exception) for e in excs):
            return JoinedError(excs)
        return JoinedBaseError(excs)


__all__ = ["JoinedBaseError"]
