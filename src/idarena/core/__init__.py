"""Core functionalities: identifiers and behavior protocols.

Architecture Note:
    core/ holds immutable identifiers and the behavior strategies that mint
    them. Behaviors keep only counters; arena state lives in storage/.
"""

from idarena.core.behavior import (
    ArenaBehavior,
    DefaultArenaBehavior,
    IndexOnlyBehavior,
    SharedIdSpace,
    next_arena_id,
)
from idarena.core.identity import Id, IndexId

__all__ = [
    # Identity
    "Id",
    "IndexId",
    # Behavior
    "ArenaBehavior",
    "DefaultArenaBehavior",
    "IndexOnlyBehavior",
    "SharedIdSpace",
    "next_arena_id",
]
