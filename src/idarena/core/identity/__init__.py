"""Identity functionality: lightweight, typed arena handles."""

from idarena.core.identity.models import Id, IndexId

__all__ = [
    "Id",
    "IndexId",
]
