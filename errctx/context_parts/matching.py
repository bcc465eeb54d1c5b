"""Chain-aware identity and type tests.

Both tests peel off contextual-error layers first (following each layer's
``cause``) and then hand the remaining value to the standard
``chain_is``/``chain_as`` walk.
"""
from __future__ import annotations

from typing import Any

from ..chain_parts.target import Target
from ..chain_parts.walk import chain_as, chain_is
from .contextual_error import ContextualError


def is_(err: Any, target: Any) -> bool:
    """Report whether ``err`` (through any contextual layers) matches ``target``.

    ``target`` is never unwrapped, so a contextual error only matches itself
    when it is reached by the standard walk below the contextual layers.
    ``is_(None, None)`` is ``True``.
    """
    seen: set[int] = set()
    while isinstance(err, ContextualError) and id(err) not in seen:
        seen.add(id(err))
        err = err.cause
    return chain_is(err, target)


def as_(err: Any, target: Target) -> bool:
    """Find an error of ``target.kind`` on ``err``'s chain.

    If ``target.kind`` is ``ContextualError`` itself, the test succeeds as soon
    as ``err`` is a contextual error: the instance is not inspected and
    ``target.value`` is left untouched. For any other kind the contextual
    layers are peeled off and ``chain_as`` writes the match to
    ``target.value``.

    Raises:
        TypeError: when ``target`` is not a ``Target`` and ``err`` is not
            ``None``.
    """
    seen: set[int] = set()
    while isinstance(err, ContextualError) and id(err) not in seen:
        if isinstance(target, Target) and target.kind is ContextualError:
            return True
        seen.add(id(err))
        err = err.cause
    return chain_as(err, target)


__all__ = ["is_", "as_"]
