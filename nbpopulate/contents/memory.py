"""In-memory content provider."""

from __future__ import annotations

import copy
from typing import Any

from nbpopulate.contents.base import ContentsProvider
from nbpopulate.contents.errors import ContentsError, EntryNotFound
from nbpopulate.contents.models import EMPTY_NOTEBOOK, Entry, EntryFormat, EntryType, untitled_name
from nbpopulate.paths import base_name, join_path, parent_path


class MemoryContents(ContentsProvider):
    """Dict-backed store keyed by normalized path.

    The root directory always exists and is never stored. Content is deep
    copied on the way in and out so callers cannot mutate stored entries.
    Entries come back in the format they were saved with; a requested
    format is not enforced.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Entry] = {}

    # -- Public API ----------------------------------------------------------

    async def get(
        self,
        path: str,
        content: bool = False,
        format: EntryFormat | None = None,
    ) -> Entry:
        path = join_path(path)
        entry = self._lookup(path)
        if not content:
            return entry.model_copy(update={"format": None, "content": None})
        if entry.is_directory:
            children = [
                child.model_copy(update={"format": None, "content": None})
                for key, child in sorted(self._entries.items())
                if parent_path(key) == path
            ]
            return entry.model_copy(update={"format": "json", "content": children})
        return entry.model_copy(deep=True)

    async def new_untitled(self, path: str = "", type: EntryType = "directory") -> Entry:
        path = join_path(path)
        self._require_directory(path, "new_untitled")
        counter = 0
        while join_path(path, untitled_name(type, counter)) in self._entries:
            counter += 1
        name = untitled_name(type, counter)
        target = join_path(path, name)
        if type == "directory":
            entry = Entry(name=name, path=target, type="directory")
        elif type == "notebook":
            entry = Entry(
                name=name,
                path=target,
                type="notebook",
                format="json",
                content=copy.deepcopy(EMPTY_NOTEBOOK),
            )
        else:
            entry = Entry(name=name, path=target, type="file", format="text", content="")
        self._entries[target] = entry
        return entry.model_copy(update={"content": None, "format": None})

    async def rename(self, old_path: str, new_path: str) -> Entry:
        old_path, new_path = join_path(old_path), join_path(new_path)
        if old_path not in self._entries:
            raise EntryNotFound(old_path, "rename")
        if new_path in self._entries or not new_path:
            raise ContentsError(new_path, "rename", "target already exists")
        self._require_directory(parent_path(new_path), "rename")

        prefix = old_path + "/"
        moved: dict[str, Entry] = {}
        for key in list(self._entries):
            if key == old_path or key.startswith(prefix):
                suffix = key[len(old_path):]
                entry = self._entries.pop(key)
                new_key = new_path + suffix
                moved[new_key] = entry.model_copy(
                    update={"path": new_key, "name": base_name(new_key)}
                )
        self._entries.update(moved)
        return moved[new_path].model_copy(update={"content": None, "format": None})

    async def save(
        self,
        path: str,
        type: EntryType,
        format: EntryFormat | None,
        content: Any,
    ) -> Entry:
        path = join_path(path)
        if not path:
            raise ContentsError(path, "save", "cannot replace the root directory")
        self._require_directory(parent_path(path), "save")
        existing = self._entries.get(path)
        if existing is not None and existing.is_directory != (type == "directory"):
            raise ContentsError(path, "save", f"cannot replace {existing.type} with {type}")
        if type == "directory":
            entry = Entry(name=base_name(path), path=path, type="directory")
        else:
            entry = Entry(
                name=base_name(path),
                path=path,
                type=type,
                format=format,
                content=copy.deepcopy(content),
            )
        self._entries[path] = entry
        return entry.model_copy(update={"content": None, "format": None})

    def paths(self) -> list[str]:
        """All stored paths, sorted. Handy for assertions."""
        return sorted(self._entries)

    # -- Internals -----------------------------------------------------------

    def _lookup(self, path: str) -> Entry:
        if not path:
            return Entry(name="", path="", type="directory")
        entry = self._entries.get(path)
        if entry is None:
            raise EntryNotFound(path)
        return entry

    def _require_directory(self, path: str, operation: str) -> None:
        try:
            entry = self._lookup(path)
        except EntryNotFound:
            raise ContentsError(path, operation, "no such directory") from None
        if not entry.is_directory:
            raise ContentsError(path, operation, "not a directory")
