"""Abstract content provider interface for nbpopulate."""

from abc import ABC, abstractmethod
from typing import Any

from nbpopulate.contents.errors import EntryNotFound
from nbpopulate.contents.models import Entry, EntryFormat, EntryType


class ContentsProvider(ABC):
    """Abstract base class for hierarchical content stores.

    Mirrors the contents API of a notebook host: entries are addressed by
    slash-delimited paths relative to the store root. Every operation may
    fail by raising ``ContentsError``; a missing entry raises
    ``EntryNotFound``.
    """

    @abstractmethod
    async def get(
        self,
        path: str,
        content: bool = False,
        format: EntryFormat | None = None,
    ) -> Entry:
        """Fetch the entry at ``path``.

        Args:
            path: Store path ("" for the root directory).
            content: Include the payload (children for directories).
            format: Decode file content as this format instead of guessing.
        """
        ...

    @abstractmethod
    async def new_untitled(self, path: str = "", type: EntryType = "directory") -> Entry:
        """Create an entry with a provider-assigned name inside directory ``path``."""
        ...

    @abstractmethod
    async def rename(self, old_path: str, new_path: str) -> Entry:
        """Move an entry. Fails when ``new_path`` is already taken."""
        ...

    @abstractmethod
    async def save(
        self,
        path: str,
        type: EntryType,
        format: EntryFormat | None,
        content: Any,
    ) -> Entry:
        """Create or replace the entry at ``path``. The parent must exist."""
        ...

    async def exists(self, path: str) -> bool:
        """Probe for an entry without fetching its content."""
        try:
            await self.get(path, content=False)
        except EntryNotFound:
            return False
        return True
