"""Protocol for pluggable arena behaviors.

A behavior decides how raw indices become identifiers, so the arena's
storage logic stays agnostic of the identifier representation:
- Default: per-arena discriminator, dense indices
- Index-only: compact ids without a discriminator
- Shared id space: several arenas drawing from one counter

Usage:
    arena = Arena(behavior=IndexOnlyBehavior())
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ArenaBehavior(Protocol):
    """Strategy for minting and decoding arena identifiers.

    Implementations must hand out strictly increasing indices per arena (or
    per shared namespace) with no reuse. The arena calls next_index exactly
    once for every value it stores.
    """

    @property
    def dense(self) -> bool:
        """True if next_index always returns the arena's current length."""
        ...

    def new_arena_id(self) -> int:
        """Mint a discriminator for a newly constructed arena."""
        ...

    def next_index(self, length: int) -> int:
        """Return the raw index for the next value.

        Args:
            length: Number of values currently stored in the arena.
        """
        ...

    def new_id(self, arena_id: int, index: int) -> Any:
        """Build the identifier for index within the arena arena_id."""
        ...

    def index(self, ident: Any) -> int:
        """Extract the raw index from an identifier."""
        ...

    def arena_id(self, ident: Any) -> int | None:
        """Extract the discriminator, or None if this behavior carries none."""
        ...
