"""Two-phase populate run: bundled assets first, remote notebooks second."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Awaitable

from nbpopulate.config.models import PopulateConfig
from nbpopulate.contents.base import ContentsProvider
from nbpopulate.remote.github import GitHubContentsClient
from nbpopulate.sync.copier import TreeCopier
from nbpopulate.sync.ingest import RemoteIngester
from nbpopulate.sync.models import SyncError, SyncReport

logger = logging.getLogger(__name__)


class SyncOrchestrator:
    """Runs the local copy and the remote ingest once, in that order.

    The local phase sits inside a failure boundary so a broken asset tree
    never blocks the remote phase. The remote phase has its own per-item
    boundaries; anything that still escapes it ends the run.
    """

    def __init__(
        self,
        contents: ContentsProvider,
        config: PopulateConfig,
        client: GitHubContentsClient | None = None,
    ) -> None:
        self.contents = contents
        self.config = config
        self._client = client

    async def run(self, ready: Awaitable[object] | None = None) -> SyncReport:
        """Wait for ``ready`` (if given), then populate the workspace."""
        if ready is not None:
            await ready

        start = time.monotonic()
        report = SyncReport()
        workspace = self.config.workspace.root

        try:
            await TreeCopier(self.contents, report=report).copy_directory(
                self.config.local.assets_root, workspace
            )
            logger.info("Default notebooks are available in /%s", workspace)
        except Exception as exc:
            logger.error("Failed to copy built-in files: %s", exc)
            report.errors.append(
                SyncError(path=self.config.local.assets_root, phase="local", error=str(exc))
            )

        if self.config.remote.enabled:
            await self._ingest(report)

        report.duration = time.monotonic() - start
        return report

    async def _ingest(self, report: SyncReport) -> None:
        remote = self.config.remote
        client = self._client or self._build_client()
        try:
            await RemoteIngester(self.contents, client, report=report).ingest_remote(
                remote.repo, remote.directory, self.config.workspace.root
            )
        finally:
            if self._client is None:
                await client.aclose()

    def _build_client(self) -> GitHubContentsClient:
        remote = self.config.remote
        return GitHubContentsClient(
            api_url=remote.api_url,
            ref=remote.ref,
            extension=remote.extension,
            token=os.environ.get(remote.token_env) or None,
            timeout=remote.timeout,
        )
