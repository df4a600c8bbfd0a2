"""Recursive copy of a source subtree into the workspace, keeping existing files."""

from __future__ import annotations

import logging

from nbpopulate.contents.base import ContentsProvider
from nbpopulate.contents.errors import ContentsError
from nbpopulate.contents.models import default_format
from nbpopulate.paths import join_path
from nbpopulate.sync.dirs import ensure_dir
from nbpopulate.sync.models import SyncError, SyncReport

logger = logging.getLogger(__name__)


class TreeCopier:
    """Mirrors one directory of a content store into another.

    Files already present at the destination are never touched, so user
    edits survive repeated runs. A source directory that cannot be read is
    logged and skipped without affecting its siblings; write failures
    propagate to the caller.
    """

    def __init__(self, contents: ContentsProvider, report: SyncReport | None = None) -> None:
        self.contents = contents
        self.report = report if report is not None else SyncReport()

    async def copy_directory(self, src_path: str, dst_path: str) -> None:
        await ensure_dir(self.contents, dst_path)

        try:
            listing = await self.contents.get(src_path, content=True)
        except ContentsError as exc:
            logger.error("Unable to read %s: %s", src_path, exc)
            self.report.errors.append(SyncError(path=src_path, phase="local", error=str(exc)))
            return
        if not listing.is_directory:
            return

        for item in listing.children():
            src_child = join_path(src_path, item.name)
            dst_child = join_path(dst_path, item.name)

            if item.is_directory:
                await self.copy_directory(src_child, dst_child)
                continue

            if await self.contents.exists(dst_child):
                logger.debug("Keeping existing %s", dst_child)
                self.report.skipped.append(dst_child)
                continue

            full = await self.contents.get(
                src_child,
                content=True,
                format=item.format or default_format(item.type),
            )
            # dst_path may have vanished since the walk entered it
            await ensure_dir(self.contents, dst_path)
            await self.contents.save(
                dst_child, type=full.type, format=full.format, content=full.content
            )
            logger.info("Copied %s -> %s", src_child, dst_child)
            self.report.written.append(dst_child)
