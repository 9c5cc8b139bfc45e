"""Append-only arena with typed, stable identifiers.

Values live in a dense list owned by the arena; callers hold ids instead of
references. Ids stay valid for the lifetime of the arena since nothing is
ever removed.

Usage:
    nodes: Arena[Node] = Arena()
    leaf = nodes.alloc(Node("leaf"))
    nodes[leaf].name = "renamed"

    # Self-referential construction
    root = nodes.alloc_with_id(lambda me: Node("root", parent=me))

    for node_id, node in nodes:
        ...
"""

from __future__ import annotations

import copy as cp
import logging
from bisect import bisect_left
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from idarena.core.behavior import ArenaBehavior, DefaultArenaBehavior
from idarena.storage.errors import ArenaBusyError, ArenaError, InvalidIdError

if TYPE_CHECKING:
    from idarena.config import ParallelSettings
    from idarena.storage.parallel import ParIter

T = TypeVar("T")
D = TypeVar("D")

logger = logging.getLogger(__name__)


class Slot(Generic[T]):
    """Mutable view of one arena slot, yielded by iter_mut().

    Reading or assigning `value` goes straight to the arena's storage.
    """

    __slots__ = ("_arena", "_position", "id")

    def __init__(self, arena: Arena[T], position: int, ident: Any) -> None:
        self._arena = arena
        self._position = position
        self.id = ident

    @property
    def value(self) -> T:
        return self._arena._items[self._position]

    @value.setter
    def value(self, new_value: T) -> None:
        self._arena._items[self._position] = new_value

    def __repr__(self) -> str:
        return f"Slot(id={self.id!r}, value={self.value!r})"


class Arena(Generic[T]):
    """Append-only store of values of one type, addressed by ids.

    Structure:
        _items[position] = value
        _indices[position] = raw index (only when the behavior is not dense)

    With a dense behavior the raw index of an id is its list position. Sparse
    behaviors (e.g. SharedIdSpace) produce strictly increasing indices, so
    lookups bisect _indices instead.

    Args:
        behavior: Strategy for minting ids (default DefaultArenaBehavior).
    """

    def __init__(self, behavior: ArenaBehavior | None = None) -> None:
        self._behavior: ArenaBehavior = (
            behavior if behavior is not None else DefaultArenaBehavior()
        )
        self._arena_id = self._behavior.new_arena_id()
        self._items: list[T] = []
        self._indices: list[int] | None = None if self._behavior.dense else []
        self._capacity = 0
        self._holds: list[str] = []
        logger.debug("Created arena %d with %r", self._arena_id, self._behavior)

    @classmethod
    def with_capacity(cls, capacity: int, behavior: ArenaBehavior | None = None) -> Arena[T]:
        """Create an empty arena sized for `capacity` values.

        No ids are minted up front; the first allocation still gets index 0
        (or the shared namespace's next index).
        """
        arena: Arena[T] = cls(behavior=behavior)
        arena.reserve(capacity)
        return arena

    # Properties

    @property
    def arena_id(self) -> int:
        """Discriminator minted for this arena instance."""
        return self._arena_id

    @property
    def behavior(self) -> ArenaBehavior:
        return self._behavior

    @property
    def capacity(self) -> int:
        """Number of values the arena is sized for (never less than len)."""
        return max(self._capacity, len(self._items))

    def reserve(self, additional: int) -> None:
        """Size the arena for at least `additional` more values."""
        if additional < 0:
            raise ValueError(f"Capacity must be non-negative, got {additional}")
        wanted = len(self._items) + additional
        if wanted > self._capacity:
            self._capacity = wanted
            logger.debug("Arena %d reserved capacity %d", self._arena_id, wanted)

    # Allocation

    def alloc(self, value: T) -> Any:
        """Store `value` and return its new id."""
        self._check_not_held()
        index = self._behavior.next_index(len(self._items))
        self._push(index, value)
        return self._behavior.new_id(self._arena_id, index)

    def alloc_with_id(self, constructor: Callable[[Any], T]) -> Any:
        """Store the value built by `constructor(id)` at that same id.

        The id is minted and its slot reserved before the constructor runs,
        so the value can embed its own id. Allocating into this arena from
        inside the constructor raises ArenaBusyError. If the constructor
        raises, nothing is stored.

        Args:
            constructor: Called exactly once with the id the value will have.

        Returns:
            The id passed to the constructor.

        Raises:
            ArenaBusyError: If another constructor or a parallel traversal
                currently holds the arena.
        """
        self._check_not_held()
        index = self._behavior.next_index(len(self._items))
        ident = self._behavior.new_id(self._arena_id, index)
        with self._held(f"the constructor for {ident!r} is running"):
            value = constructor(ident)
        self._push(index, value)
        return ident

    def extend(self, values: Iterable[T]) -> list[Any]:
        """Allocate every value in order and return their ids."""
        return [self.alloc(value) for value in values]

    def _push(self, index: int, value: T) -> None:
        last = self._indices[-1] if self._indices else len(self._items) - 1
        if index <= last:
            raise ArenaError(
                f"{self._behavior!r} returned index {index}, "
                f"indices must increase past {last}"
            )
        if self._indices is None and index != len(self._items):
            self._indices = list(range(len(self._items)))
            logger.debug(
                "Arena %d switched to indexed lookup at index %d", self._arena_id, index
            )
        if self._indices is not None:
            self._indices.append(index)
        self._items.append(value)

    @contextmanager
    def _held(self, reason: str) -> Iterator[None]:
        self._holds.append(reason)
        try:
            yield
        finally:
            self._holds.remove(reason)

    def _check_not_held(self) -> None:
        if self._holds:
            raise ArenaBusyError(f"Cannot allocate into {self!r} while {self._holds[-1]}")

    # Lookup

    def _position(self, ident: Any) -> int | None:
        """Map an id to its list position, or None if it does not resolve."""
        try:
            index = self._behavior.index(ident)
            arena_id = self._behavior.arena_id(ident)
        except AttributeError:
            raise TypeError(f"{ident!r} is not an id for {self!r}") from None

        if arena_id is not None and arena_id != self._arena_id:
            return None
        if index < 0:
            return None
        if self._indices is None:
            return index if index < len(self._items) else None

        position = bisect_left(self._indices, index)
        if position < len(self._indices) and self._indices[position] == index:
            return position
        return None

    def _require(self, ident: Any) -> int:
        position = self._position(ident)
        if position is None:
            raise InvalidIdError(f"{ident!r} does not refer to a value in {self!r}")
        return position

    def _id_at(self, position: int) -> Any:
        index = position if self._indices is None else self._indices[position]
        return self._behavior.new_id(self._arena_id, index)

    def __getitem__(self, ident: Any) -> T:
        """Return the value stored at `ident`.

        Raises:
            InvalidIdError: If the id is out of range or from another arena.
        """
        return self._items[self._require(ident)]

    def __setitem__(self, ident: Any, value: T) -> None:
        """Replace the value stored at an existing id."""
        self._items[self._require(ident)] = value

    @overload
    def get(self, ident: Any) -> T | None: ...

    @overload
    def get(self, ident: Any, default: D) -> T | D: ...

    def get(self, ident: Any, default: Any = None) -> Any:
        """Return the value at `ident`, or `default` if the id does not resolve."""
        position = self._position(ident)
        if position is None:
            return default
        return self._items[position]

    def update(self, ident: Any, fn: Callable[[T], T]) -> T:
        """Replace the value at `ident` with fn(old value) and return the result."""
        position = self._require(ident)
        new_value = fn(self._items[position])
        self._items[position] = new_value
        return new_value

    def __contains__(self, ident: Any) -> bool:
        return self._position(ident) is not None

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    # Traversal

    def iter(self) -> Iterator[tuple[Any, T]]:
        """Yield (id, value) pairs in allocation order.

        Covers the values present when iteration starts; values allocated
        meanwhile are not visited.
        """
        for position in range(len(self._items)):
            yield self._id_at(position), self._items[position]

    def __iter__(self) -> Iterator[tuple[Any, T]]:
        return self.iter()

    def iter_mut(self) -> Iterator[tuple[Any, Slot[T]]]:
        """Yield (id, Slot) pairs in allocation order; assign Slot.value to mutate."""
        for position in range(len(self._items)):
            ident = self._id_at(position)
            yield ident, Slot(self, position, ident)

    def ids(self) -> Iterator[Any]:
        for position in range(len(self._items)):
            yield self._id_at(position)

    def values(self) -> Iterator[T]:
        return iter(self._items[:])

    def par_iter(self, settings: ParallelSettings | None = None) -> ParIter[T]:
        """Opt-in parallel traversal over (id, value) pairs. See ParIter."""
        # Late import to avoid circular dependency
        from idarena.storage.parallel import ParIter

        return ParIter(self, mutable=False, settings=settings)

    def par_iter_mut(self, settings: ParallelSettings | None = None) -> ParIter[T]:
        """Opt-in parallel traversal over (id, Slot) pairs."""
        from idarena.storage.parallel import ParIter

        return ParIter(self, mutable=True, settings=settings)

    # Equality and copying

    def __eq__(self, other: object) -> bool:
        """Arenas are equal when they hold positionally equal values.

        Discriminators and behaviors are not compared.
        """
        if not isinstance(other, Arena):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def _empty_clone(self) -> Arena[T]:
        clone: Arena[T] = type(self)(behavior=self._behavior)
        clone._indices = None if self._indices is None else list(self._indices)
        clone._capacity = self._capacity
        logger.debug("Cloned arena %d into arena %d", self._arena_id, clone._arena_id)
        return clone

    def __copy__(self) -> Arena[T]:
        clone = self._empty_clone()
        clone._items = list(self._items)
        return clone

    def __deepcopy__(self, memo: dict[int, Any]) -> Arena[T]:
        clone = self._empty_clone()
        memo[id(self)] = clone
        clone._items = cp.deepcopy(self._items, memo)
        return clone

    def clone(self) -> Arena[T]:
        """Deep copy into a new arena with a fresh discriminator.

        Ids minted by this arena do not resolve in the clone unless the
        behavior carries no discriminator.
        """
        return cp.deepcopy(self)

    def __repr__(self) -> str:
        return f"Arena(len={len(self._items)}, arena_id={self._arena_id})"
