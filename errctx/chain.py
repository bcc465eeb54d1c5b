"""Standard error-chain primitives (public API facade).

Exposes the building blocks that contextual errors are layered on: the leaf,
wrapped and joined error types, the ``Target`` out-parameter, and the plain
chain walk with its identity (``chain_is``) and type (``chain_as``) tests.
Implementations live under ``chain_parts``.
"""

from .chain_parts.leaf_error import LeafError
from .chain_parts.wrapped_error import WrappedError
from .chain_parts.joined_error import JoinedError
from .chain_parts.joined_base_error import JoinedBaseError
from .chain_parts.target import Target
from .chain_parts.walk import chain_as, chain_is, join, unwrap, walk

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
