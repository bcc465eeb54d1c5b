"""Constructors for contextual errors.

``new`` and ``from_error`` always start a fresh metadata bag. ``to_context``
and ``format_error`` look for a contextual error already on the chain and, if
one exists, keep its metadata dict (shared, never copied) so fields attached
deeper in the call stack stay visible on the outer error.
"""
from __future__ import annotations

from typing import Any, Optional

from ..chain_parts.leaf_error import LeafError
from ..chain_parts.walk import walk
from ..chain_parts.wrapped_error import WrappedError
from ..logging import get_logger, log_event
from .contextual_error import ContextualError

_logger = get_logger("errctx.context")


def find_context(err: Any) -> Optional[ContextualError]:
    """Return the first ``ContextualError`` on ``err``'s chain, if any."""
    for node in walk(err):
        if isinstance(node, ContextualError):
            return node
    return None


def new(message: str) -> ContextualError:
    """Create a contextual error around a fresh ``LeafError(message)``."""
    return ContextualError(LeafError(message), {})


def from_error(err: Optional[BaseException]) -> ContextualError:
    """Wrap ``err`` with an empty metadata bag, without inspecting its chain."""
    return ContextualError(err, {})


def to_context(err: Optional[BaseException]) -> ContextualError:
    """Return the contextual error already on ``err``'s chain, or wrap ``err``.

    The found instance is returned as is, so fields written to it are visible
    to every holder of that instance.
    """
    found = find_context(err)
    if found is not None:
        log_event(_logger, "context.found", field_names=list(found.metadata))
        return found
    log_event(_logger, "context.new", origin="to_context", cause_type=type(err).__name__)
    return ContextualError(err, {})


def format_error(template: str, err: Optional[BaseException]) -> ContextualError:
    """Render ``template`` around ``err`` and carry its metadata forward.

    ``template`` uses ``str.format`` syntax with one substitution site
    (``{}``, ``{0}`` or ``{err}``).

    When ``err``'s chain already holds a contextual error, the result reuses
    that error's metadata dict and is rendered around that error's own
    cause, so the new chain is ``result -> WrappedError -> found.cause``. Any
    links between ``err`` and the found error are not reachable from the
    result. Otherwise the result wraps ``err`` with a new, empty bag.

    Neither ``err`` nor the found error is modified.
    """
    found = find_context(err)
    if found is not None:
        log_event(_logger, "context.reuse", origin="format_error", field_names=list(found.metadata))
        return ContextualError(WrappedError.render(template, found.cause), found.metadata)
    log_event(_logger, "context.new", origin="format_error", cause_type=type(err).__name__)
    return ContextualError(WrappedError.render(template, err), {})


__all__ = ["find_context", "new", "from_error", "to_context", "format_error"]
