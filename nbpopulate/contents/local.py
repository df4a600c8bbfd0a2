"""Filesystem-backed content provider."""

from __future__ import annotations

import asyncio
import base64
import json
import logging
import mimetypes
import os
from pathlib import Path
from typing import Any

from nbpopulate.contents.base import ContentsProvider
from nbpopulate.contents.errors import ContentsError, EntryNotFound
from nbpopulate.contents.models import EMPTY_NOTEBOOK, Entry, EntryFormat, EntryType, untitled_name
from nbpopulate.paths import base_name, join_path, parent_path

logger = logging.getLogger(__name__)

NOTEBOOK_SUFFIX = ".ipynb"


class LocalContents(ContentsProvider):
    """Serves a directory on disk through the contents interface.

    ``.ipynb`` files are notebooks stored as JSON; everything else is a
    plain file, read as text when it decodes as UTF-8 and as base64
    otherwise. Plain files in a directory listing carry the format a content
    read will return. Hidden entries (leading dot) are left out of listings.

    The filesystem calls are blocking, so each operation runs in
    ``asyncio.to_thread()`` to keep the event loop free.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).resolve()

    # -- Public API ----------------------------------------------------------

    async def get(
        self,
        path: str,
        content: bool = False,
        format: EntryFormat | None = None,
    ) -> Entry:
        return await asyncio.to_thread(self._get, join_path(path), content, format)

    async def new_untitled(self, path: str = "", type: EntryType = "directory") -> Entry:
        return await asyncio.to_thread(self._new_untitled, join_path(path), type)

    async def rename(self, old_path: str, new_path: str) -> Entry:
        return await asyncio.to_thread(self._rename, join_path(old_path), join_path(new_path))

    async def save(
        self,
        path: str,
        type: EntryType,
        format: EntryFormat | None,
        content: Any,
    ) -> Entry:
        return await asyncio.to_thread(self._save, join_path(path), type, format, content)

    # -- Internals -----------------------------------------------------------

    def _resolve(self, path: str, operation: str) -> Path:
        """Map a store path onto the filesystem, refusing anything outside root."""
        target = (self.root / path).resolve() if path else self.root
        if not target.is_relative_to(self.root):
            raise ContentsError(path, operation, "path escapes the contents root")
        return target

    def _entry_type(self, fs_path: Path) -> EntryType:
        if fs_path.is_dir():
            return "directory"
        if fs_path.suffix == NOTEBOOK_SUFFIX:
            return "notebook"
        return "file"

    def _model(self, path: str, fs_path: Path) -> Entry:
        entry_type = self._entry_type(fs_path)
        mimetype = None
        if entry_type == "file":
            mimetype = mimetypes.guess_type(fs_path.name)[0]
        return Entry(name=base_name(path), path=path, type=entry_type, mimetype=mimetype)

    def _get(self, path: str, content: bool, format: EntryFormat | None) -> Entry:
        fs_path = self._resolve(path, "get")
        if not fs_path.exists():
            raise EntryNotFound(path)
        entry = self._model(path, fs_path)
        if not content:
            return entry
        try:
            if entry.is_directory:
                return self._read_directory(entry, fs_path)
            if entry.type == "notebook":
                return self._read_notebook(entry, fs_path, format)
            return self._read_file(entry, fs_path, format)
        except FileNotFoundError:
            raise EntryNotFound(path) from None
        except OSError as exc:
            raise ContentsError(path, "get", str(exc)) from exc

    def _read_directory(self, entry: Entry, fs_path: Path) -> Entry:
        children = []
        for child in sorted(fs_path.iterdir()):
            if child.name.startswith("."):
                continue
            model = self._model(join_path(entry.path, child.name), child)
            if model.type == "file":
                model = model.model_copy(update={"format": self._file_format(child)})
            children.append(model)
        return entry.model_copy(update={"format": "json", "content": children})

    def _file_format(self, fs_path: Path) -> EntryFormat | None:
        """Format a content read of this file will come back in, if it can be told."""
        try:
            fs_path.read_bytes().decode("utf-8")
        except UnicodeDecodeError:
            return "base64"
        except OSError:
            return None
        return "text"

    def _read_notebook(self, entry: Entry, fs_path: Path, format: EntryFormat | None) -> Entry:
        raw = fs_path.read_text(encoding="utf-8")
        if format == "text":
            return entry.model_copy(update={"format": "text", "content": raw})
        try:
            nb = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ContentsError(entry.path, "get", f"unreadable notebook: {exc}") from exc
        return entry.model_copy(update={"format": "json", "content": nb})

    def _read_file(self, entry: Entry, fs_path: Path, format: EntryFormat | None) -> Entry:
        data = fs_path.read_bytes()
        if format == "base64":
            return entry.model_copy(
                update={"format": "base64", "content": base64.b64encode(data).decode("ascii")}
            )
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            if format == "text":
                raise ContentsError(entry.path, "get", "not UTF-8 encoded") from exc
            return entry.model_copy(
                update={"format": "base64", "content": base64.b64encode(data).decode("ascii")}
            )
        if format == "json":
            try:
                return entry.model_copy(update={"format": "json", "content": json.loads(text)})
            except json.JSONDecodeError as exc:
                raise ContentsError(entry.path, "get", f"invalid JSON: {exc}") from exc
        return entry.model_copy(update={"format": "text", "content": text})

    def _new_untitled(self, path: str, type: EntryType) -> Entry:
        directory = self._resolve(path, "new_untitled")
        if not directory.is_dir():
            raise ContentsError(path, "new_untitled", "no such directory")
        counter = 0
        while (directory / untitled_name(type, counter)).exists():
            counter += 1
        name = untitled_name(type, counter)
        target = directory / name
        store_path = join_path(path, name)
        try:
            if type == "directory":
                target.mkdir()
            elif type == "notebook":
                target.write_text(json.dumps(EMPTY_NOTEBOOK, indent=1), encoding="utf-8")
            else:
                target.touch(exist_ok=False)
        except OSError as exc:
            raise ContentsError(store_path, "new_untitled", str(exc)) from exc
        logger.debug("created placeholder %s", store_path)
        return self._model(store_path, target)

    def _rename(self, old_path: str, new_path: str) -> Entry:
        source = self._resolve(old_path, "rename")
        target = self._resolve(new_path, "rename")
        if not old_path or not source.exists():
            raise EntryNotFound(old_path, "rename")
        if not new_path or target.exists():
            raise ContentsError(new_path, "rename", "target already exists")
        try:
            os.rename(source, target)
        except OSError as exc:
            raise ContentsError(new_path, "rename", str(exc)) from exc
        return self._model(new_path, target)

    def _save(self, path: str, type: EntryType, format: EntryFormat | None, content: Any) -> Entry:
        if not path:
            raise ContentsError(path, "save", "cannot replace the root directory")
        target = self._resolve(path, "save")
        if not self._resolve(parent_path(path), "save").is_dir():
            raise ContentsError(path, "save", "parent directory does not exist")
        try:
            if type == "directory":
                target.mkdir(exist_ok=True)
            elif type == "notebook" and format != "text":
                target.write_text(json.dumps(content, indent=1) + "\n", encoding="utf-8")
            elif format == "base64":
                target.write_bytes(base64.b64decode(content))
            elif format == "json":
                target.write_text(json.dumps(content, indent=1), encoding="utf-8")
            else:
                target.write_text(content, encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise ContentsError(path, "save", str(exc)) from exc
        return self._model(path, target)
