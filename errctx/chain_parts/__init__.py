"""Chain parts package public surface.

Re-exports the individual chain primitives for optional direct imports.
Prefer importing from ``errctx.chain`` for the stable surface.
"""

from .leaf_error import LeafError
from .wrapped_error import WrappedError
from .joined_error import JoinedError
from .joined_base_error import JoinedBaseError
from .target import Target
from .walk import chain_as, chain_is, join, unwrap, walk

__all__ = [
    "LeafError",
    "WrappedError",
    "JoinedError",
    "JoinedBaseError",
    "Target",
    "unwrap",
    "walk",
    "chain_is",
    "chain_as",
    "join",
]
