"""Download remote notebooks into the workspace, keeping existing files."""

from __future__ import annotations

import logging

import httpx

from nbpopulate.contents.base import ContentsProvider
from nbpopulate.paths import join_path, parent_path, strip_prefix
from nbpopulate.remote.errors import RemoteError
from nbpopulate.remote.github import GitHubContentsClient
from nbpopulate.sync.dirs import ensure_dir
from nbpopulate.sync.models import SyncError, SyncReport

logger = logging.getLogger(__name__)


class RemoteIngester:
    """Copies notebooks listed in a remote directory into a workspace folder.

    Download happens only for paths missing from the workspace. A failed
    listing ends the ingest quietly, a failed download skips that one file;
    write failures propagate to the caller.
    """

    def __init__(
        self,
        contents: ContentsProvider,
        client: GitHubContentsClient,
        report: SyncReport | None = None,
    ) -> None:
        self.contents = contents
        self.client = client
        self.report = report if report is not None else SyncReport()

    async def ingest_remote(self, repo_id: str, src_dir: str, dst_root: str) -> None:
        try:
            refs = await self.client.list_remote_files(repo_id, src_dir)
        except (RemoteError, httpx.HTTPError) as exc:
            logger.error("Listing notebooks failed: %s", exc)
            self.report.errors.append(SyncError(path=src_dir, phase="remote", error=str(exc)))
            return

        copied = 0
        for ref in refs:
            rel_path = strip_prefix(ref.path, src_dir)
            dst_path = join_path(dst_root, rel_path)

            if await self.contents.exists(dst_path):
                logger.debug("Keeping existing %s", dst_path)
                self.report.skipped.append(dst_path)
                continue

            try:
                notebook = await self.client.fetch_notebook(ref.download_url)
            except (RemoteError, httpx.HTTPError, ValueError) as exc:
                logger.warning("Skipping %s: %s", ref.path, exc)
                self.report.errors.append(SyncError(path=ref.path, phase="remote", error=str(exc)))
                continue

            await ensure_dir(self.contents, parent_path(dst_path))
            await self.contents.save(dst_path, type="notebook", format="json", content=notebook)
            logger.info("Downloaded %s -> %s", ref.path, dst_path)
            self.report.written.append(dst_path)
            copied += 1

        logger.info("%s notebooks copied to /%s (%d new)", repo_id, dst_root, copied)
