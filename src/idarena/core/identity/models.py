"""Identifier models.

Usage:
    node = Id(index=3, arena_id=1)
    compact = IndexId(index=3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


def _check_index(index: int) -> None:
    if index < 0:
        raise ValueError(f"Id index must be non-negative, got {index}")


@dataclass(frozen=True, eq=False)
class Id(Generic[T]):
    """Handle for a value of type T stored in an arena.

    The arena_id discriminator takes part in equality and hashing, so ids
    minted by two different arenas never compare equal, even when their
    indices coincide. Ordering follows the index (allocation order) and uses
    arena_id only to break ties.
    """

    index: int
    arena_id: int = 0

    def __post_init__(self) -> None:
        _check_index(self.index)

    def _key(self) -> tuple[int, int]:
        return (self.index, self.arena_id)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not Id:
            return NotImplemented
        return self.index == other.index and self.arena_id == other.arena_id

    def __hash__(self) -> int:
        return hash((self.arena_id, self.index))

    def __lt__(self, other: Any) -> bool:
        if type(other) is not Id:
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Any) -> bool:
        if type(other) is not Id:
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Any) -> bool:
        if type(other) is not Id:
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Any) -> bool:
        if type(other) is not Id:
            return NotImplemented
        return self._key() >= other._key()


@dataclass(frozen=True, order=True)
class IndexId(Generic[T]):
    """Compact handle carrying only an index.

    No cross-arena protection: an IndexId from one arena resolves in any
    other arena that has a value at the same index.
    """

    index: int

    def __post_init__(self) -> None:
        _check_index(self.index)
