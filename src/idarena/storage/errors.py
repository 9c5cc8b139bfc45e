"""Arena error types."""

from __future__ import annotations


class ArenaError(Exception):
    """Base class for arena errors."""

    pass


class InvalidIdError(ArenaError, LookupError):
    """Raised when an id does not resolve to a value stored in the arena.

    Covers indices past the end of the arena and ids minted by a different
    arena instance.
    """

    pass


class ArenaBusyError(ArenaError, RuntimeError):
    """Raised when allocating while a constructor or parallel traversal holds the arena."""

    pass
