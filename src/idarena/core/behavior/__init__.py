"""Pluggable behaviors controlling how arenas mint identifiers."""

from idarena.core.behavior.protocol import ArenaBehavior
from idarena.core.behavior.strategies import (
    DefaultArenaBehavior,
    IndexOnlyBehavior,
    SharedIdSpace,
    next_arena_id,
)

__all__ = [
    "ArenaBehavior",
    "DefaultArenaBehavior",
    "IndexOnlyBehavior",
    "SharedIdSpace",
    "next_arena_id",
]
