"""Leaf error type.

Defines ``LeafError``, the plain message-only error created by
``errctx.new``. Kept isolated to satisfy one-class-per-file policy.
"""

from __future__ import annotations


class LeafError(Exception):
    """An error carrying only a message.

    Matching is by identity: two ``LeafError("x")`` instances are distinct
    errors even though their messages are equal.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


__all__ = ["LeafError"]
