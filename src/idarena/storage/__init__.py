"""Arena storage and traversal."""

from idarena.storage.arena import Arena, Slot
from idarena.storage.errors import ArenaBusyError, ArenaError, InvalidIdError
from idarena.storage.parallel import ParIter

__all__ = [
    "Arena",
    "Slot",
    "ParIter",
    "ArenaError",
    "InvalidIdError",
    "ArenaBusyError",
]
