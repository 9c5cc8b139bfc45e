"""Built-in arena behaviors.

Three strategies ship with the package:
- DefaultArenaBehavior: Id with a per-arena discriminator (default)
- IndexOnlyBehavior: IndexId without discriminator, smaller and unchecked
- SharedIdSpace: one counter shared by several arenas

Usage:
    nodes = Arena()                                  # DefaultArenaBehavior
    flat = Arena(behavior=IndexOnlyBehavior())

    space = SharedIdSpace()
    functions = Arena(behavior=space)
    blocks = Arena(behavior=space)                   # ids never collide
"""

from __future__ import annotations

import itertools
import threading

from idarena.core.identity import Id, IndexId


# Discriminators start at 1 so a hand-built Id(index) with the default
# arena_id=0 never matches a real arena.
_arena_counter = itertools.count(1)
_arena_counter_lock = threading.Lock()


def next_arena_id() -> int:
    """Mint a process-wide unique arena discriminator. Thread-safe."""
    with _arena_counter_lock:
        return next(_arena_counter)


def _expect(ident: object, id_type: type) -> None:
    if type(ident) is not id_type:
        raise TypeError(f"{ident!r} is not an {id_type.__name__}")


class DefaultArenaBehavior:
    """Dense indices, Id handles tagged with the owning arena's discriminator."""

    dense = True

    def new_arena_id(self) -> int:
        return next_arena_id()

    def next_index(self, length: int) -> int:
        return length

    def new_id(self, arena_id: int, index: int) -> Id:
        return Id(index=index, arena_id=arena_id)

    def index(self, ident: Id) -> int:
        _expect(ident, Id)
        return ident.index

    def arena_id(self, ident: Id) -> int | None:
        _expect(ident, Id)
        return ident.arena_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IndexOnlyBehavior(DefaultArenaBehavior):
    """Dense indices, IndexId handles without a discriminator.

    Trades cross-arena mix-up detection for smaller identifiers.
    """

    def new_id(self, arena_id: int, index: int) -> IndexId:  # type: ignore[override]
        return IndexId(index=index)

    def index(self, ident: IndexId) -> int:  # type: ignore[override]
        _expect(ident, IndexId)
        return ident.index

    def arena_id(self, ident: IndexId) -> int | None:  # type: ignore[override]
        _expect(ident, IndexId)
        return None


class SharedIdSpace(DefaultArenaBehavior):
    """Single id namespace shared across several arenas.

    Every arena constructed with the same SharedIdSpace instance draws its
    indices from one strictly increasing counter, so an index is issued at
    most once across the whole namespace. Arenas still mint their own
    discriminators, which keeps ids from sibling arenas unequal and
    unresolvable.

    Args:
        start: First index handed out (default 0).
    """

    dense = False

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._next = start
        self._start = start
        self._lock = threading.Lock()

    def next_index(self, length: int) -> int:
        with self._lock:
            index = self._next
            self._next += 1
        return index

    @property
    def issued(self) -> int:
        """Number of indices handed out so far."""
        with self._lock:
            return self._next - self._start

    def __repr__(self) -> str:
        return f"{type(self).__name__}(next={self._next})"
