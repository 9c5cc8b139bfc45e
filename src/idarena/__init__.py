"""idarena: append-only arenas with typed, stable identifiers.

Usage:
    from dataclasses import dataclass, field
    from idarena import Arena, Id

    @dataclass
    class Node:
        name: str
        children: list[Id] = field(default_factory=list)

    nodes: Arena[Node] = Arena()
    leaf = nodes.alloc(Node("leaf"))
    root = nodes.alloc(Node("root", children=[leaf]))

    for child in nodes[root].children:
        print(nodes[child].name)
"""

__version__ = "0.1.0"

# Core primitives
from idarena.core import (
    ArenaBehavior,
    DefaultArenaBehavior,
    Id,
    IndexId,
    IndexOnlyBehavior,
    SharedIdSpace,
)

# Configuration
from idarena.config import ParallelSettings

# Storage
from idarena.storage import (
    Arena,
    ArenaBusyError,
    ArenaError,
    InvalidIdError,
    ParIter,
    Slot,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Id",
    "IndexId",
    "ArenaBehavior",
    "DefaultArenaBehavior",
    "IndexOnlyBehavior",
    "SharedIdSpace",
    # Storage
    "Arena",
    "Slot",
    "ParIter",
    "ArenaError",
    "InvalidIdError",
    "ArenaBusyError",
    # Config
    "ParallelSettings",
]
