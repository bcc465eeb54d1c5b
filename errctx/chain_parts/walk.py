"""Standard chain walking primitives.

Python links errors in two ways: explicit chaining through ``__cause__``
(``raise ... from ...``) and grouping through ``ExceptionGroup.exceptions``.
This module walks those links and provides the plain identity and type tests
over them; ``errctx.context`` layers its contextual-error aware variants on
top.

Walk order is depth-first pre-order: a node is visited before its cause, and
group members are visited in order. Each node is visited at most once, so
cyclic chains terminate. The walk is unbounded unless
``ErrCtxSettings.max_depth`` (or the ``max_depth`` argument) caps it.

Implicit ``__context__`` links are followed only when
``ErrCtxSettings.follow_implicit_context`` is enabled, a node has no
``__cause__`` and its context is not suppressed.
"""
from __future__ import annotations

from typing import Any, Iterator, List, Optional

from ..config import get_settings
from .joined_base_error import JoinedBaseError
from .joined_error import JoinedError
from .target import Target


def unwrap(err: Any, *, follow_context: Optional[bool] = None) -> List[BaseException]:
    """Return the errors directly wrapped by ``err``.

    Parameters
    ----------
    err: Any
        The error to unwrap; ``None`` and non-exception values have no
        children.
    follow_context: Optional[bool]
        Override ``follow_implicit_context`` from the settings.

    Returns
    -------
    List[BaseException]
        Group members for an exception group, otherwise ``[__cause__]`` (or
        ``[__context__]`` when following implicit context), or an empty list.
    """
    if isinstance(err, BaseExceptionGroup):
        return list(err.exceptions)
    cause = getattr(err, "__cause__", None)
    if cause is not None:
        return [cause]
    if follow_context is None:
        follow_context = get_settings().follow_implicit_context
    if follow_context and not getattr(err, "__suppress_context__", True):
        context = getattr(err, "__context__", None)
        if context is not None:
            return [context]
    return []


def walk(
    err: Any,
    *,
    max_depth: Optional[int] = None,
    follow_context: Optional[bool] = None,
) -> Iterator[Any]:
    """Yield ``err`` and every error reachable from it, depth first.

    ``None`` yields nothing. Nodes are de-duplicated by identity. ``max_depth``
    defaults to the configured cap; ``None`` there means no cap.
    """
    if err is None:
        return
    settings = get_settings()
    if max_depth is None:
        max_depth = settings.max_depth
    if follow_context is None:
        follow_context = settings.follow_implicit_context
    seen: set[int] = set()
    stack: list[tuple[Any, int]] = [(err, 0)]
    while stack:
        node, depth = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        if max_depth is not None and depth >= max_depth:
            continue
        children = unwrap(node, follow_context=follow_context)
        stack.extend((child, depth + 1) for child in reversed(children))


def chain_is(err: Any, target: Any) -> bool:
    """Report whether any error in ``err``'s chain matches ``target``.

    A node matches when it is ``target``, compares equal to it, or exposes an
    ``error_is(target)`` method that returns true. ``target`` itself is never
    unwrapped. Two ``None`` values match; ``None`` against anything else does
    not.
    """
    if err is None or target is None:
        return err is target
    for node in walk(err):
        if node is target or node == target:
            return True
        hook = getattr(node, "error_is", None)
        if callable(hook) and hook(target):
            return True
    return False


def chain_as(err: Any, target: Target) -> bool:
    """Find the first error in ``err``'s chain of ``target.kind``.

    On success the match is written to ``target.value`` and ``True`` is
    returned. A node exposing ``error_as(target)`` may claim the match
    itself (and is then responsible for filling ``target.value``).

    Raises
    ------
    TypeError
        When ``target`` is not a :class:`Target` (checked after the ``None``
        short-circuit, so ``chain_as(None, None)`` is simply ``False``).
    """
    if err is None:
        return False
    if not isinstance(target, Target):
        raise TypeError(f"target must be a Target, got {type(target).__name__}")
    for node in walk(err):
        if target.accepts(node):
            target.value = node
            return True
        hook = getattr(node, "error_as", None)
        if callable(hook) and hook(target):
            return True
    return False


def join(*errors: Optional[BaseException]) -> Optional[JoinedBaseError | JoinedError]:
    """Join ``errors`` into one aggregate, dropping ``None`` members.

    The result is a ``JoinedError`` when every member is an ``Exception`` and a
    ``JoinedBaseError`` otherwise (e.g. when joining a ``KeyboardInterrupt``).
    Returns ``None`` when no member is left.
    """
    members = [e for e in errors if e is not None]
    if not members:
        return None
    if all(isinstance(e, Exception) for e in members):
        return JoinedError(members)
    return JoinedBaseError(members)


__all__ = ["unwrap", "walk", "chain_is", "chain_as", "join"]
