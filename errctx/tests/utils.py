"""Shared testing utilities for the errctx test suite.

Exports:
    - CustomError: message-carrying error for type-assertion tests.
    - AnotherCustomError: coded error for type-assertion tests.
    - nested_chain(depth): a ``__cause__`` chain of ``depth`` errors.
"""
from __future__ import annotations

from typing import List


class CustomError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class AnotherCustomError(Exception):
    def __init__(self, code: int) -> None:
        super().__init__(f"error with code {code}")
        self.code = code


def nested_chain(depth: int) -> List[Exception]:
    """Return ``depth`` errors where each one's ``__cause__`` is the next.

    The first element is the outermost error, the last one the root.
    """
    errors: List[Exception] = [RuntimeError(f"level {i}") for i in range(depth)]
    for outer, inner in zip(errors, errors[1:]):
        outer.__cause__ = inner
    return errors


__all__ = ["CustomError", "AnotherCustomError", "nested_chain"]
