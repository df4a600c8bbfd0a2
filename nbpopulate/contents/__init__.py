"""Content providers for nbpopulate."""

from nbpopulate.contents.base import ContentsProvider
from nbpopulate.contents.errors import ContentsError, EntryNotFound
from nbpopulate.contents.local import LocalContents
from nbpopulate.contents.memory import MemoryContents
from nbpopulate.contents.models import Entry, EntryFormat, EntryType, default_format

__all__ = [
    "ContentsError",
    "ContentsProvider",
    "Entry",
    "EntryFormat",
    "EntryNotFound",
    "EntryType",
    "LocalContents",
    "MemoryContents",
    "default_format",
]
