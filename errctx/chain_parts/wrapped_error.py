"""Wrapped error type produced by single-substitution formatting.

``WrappedError`` renders a message around a cause and links that cause as
``__cause__`` so both errctx and Python's own traceback machinery follow it.
"""

from __future__ import annotations

from typing import Optional


class WrappedError(Exception):
    """An error whose message was rendered around ``cause``.

    Attributes:
        message: The rendered message.
        cause: The wrapped error (also published as ``__cause__``).
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    @classmethod
    def render(cls, template: str, cause: Optional[BaseException]) -> "WrappedError":
        """Render ``template`` around ``cause`` using ``str.format`` syntax.

        The cause may be referenced positionally (``{}``/``{0}``) or by name
        (``{err}``); conversions such as ``{!r}`` are honoured. The cause is
        linked even when the template has no substitution site.

        A template ``str.format`` cannot render (unknown fields, extra
        positional sites, stray braces, bad format specs) never raises: the
        raw template is kept and the cause's message appended to it.
        """
        try:
            message = template.format(cause, err=cause)
        except (KeyError, IndexError, ValueError, AttributeError, TypeError):
            message = f"{template} {cause}"
        return cls(message, cause)


__all__ = ["WrappedError"]
