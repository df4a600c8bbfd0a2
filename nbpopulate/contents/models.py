"""Pydantic models for content store entries."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

EntryType = Literal["directory", "file", "notebook"]
EntryFormat = Literal["text", "json", "base64"]


class Entry(BaseModel):
    """A file, notebook, or directory node in a content store.

    ``content`` is ``None`` unless requested. For directories it holds the
    child entries (themselves without content), for notebooks the parsed
    document, for files a text or base64 string depending on ``format``.
    """

    name: str
    path: str
    type: EntryType
    format: EntryFormat | None = None
    content: Any = None
    mimetype: str | None = None

    @property
    def is_directory(self) -> bool:
        return self.type == "directory"

    def children(self) -> list[Entry]:
        """Child entries of a directory listing, empty for anything else."""
        if not self.is_directory or not self.content:
            return []
        return list(self.content)


def default_format(entry_type: EntryType) -> EntryFormat:
    """Format used to read an entry when the listing did not carry one."""
    return "json" if entry_type == "notebook" else "text"


_UNTITLED_NAMES: dict[str, tuple[str, str]] = {
    "directory": ("Untitled Folder", ""),
    "file": ("untitled", ".txt"),
    "notebook": ("Untitled", ".ipynb"),
}

EMPTY_NOTEBOOK = {"cells": [], "metadata": {}, "nbformat": 4, "nbformat_minor": 5}


def untitled_name(entry_type: EntryType, counter: int = 0) -> str:
    """Placeholder name: "Untitled Folder", "Untitled Folder 1", "untitled 2.txt", ..."""
    stem, suffix = _UNTITLED_NAMES[entry_type]
    if counter:
        stem = f"{stem} {counter}"
    return stem + suffix
