"""GitHub contents API client built on httpx."""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from nbpopulate.remote.errors import NotebookFetchError, RemoteListingError
from nbpopulate.remote.models import RemoteContentItem, RemoteFileRef

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"

# Hosts that may receive the token on notebook downloads, besides the API host
TOKEN_HOSTS = frozenset({"api.github.com", "raw.githubusercontent.com"})


class GitHubContentsClient:
    """Lists notebooks in one repository directory and downloads them.

    Listing is non-recursive: only the files directly inside
    the requested directory are returned, sub-directories are ignored.

    Pass ``client`` to reuse an existing ``httpx.AsyncClient`` (its
    lifecycle then stays with the caller); otherwise one is created and
    closed by ``aclose()`` or the ``async with`` block.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        ref: str = "main",
        extension: str = ".ipynb",
        token: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.ref = ref
        self.extension = extension
        self._token = token
        self._headers = {"Accept": "application/vnd.github+json"}
        if token:
            self._headers["Authorization"] = f"Bearer {token}"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, follow_redirects=True)

    async def __aenter__(self) -> GitHubContentsClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def listing_url(self, repo_id: str, dir_path: str) -> str:
        return f"{self.api_url}/repos/{repo_id}/contents/{quote(dir_path.strip('/'))}"

    async def list_remote_files(self, repo_id: str, dir_path: str) -> list[RemoteFileRef]:
        """Return the files directly under ``dir_path`` that carry the target extension."""
        resp = await self._client.get(
            self.listing_url(repo_id, dir_path),
            params={"ref": self.ref},
            headers=self._headers,
        )
        if not resp.is_success:
            raise RemoteListingError(
                repo_id, dir_path, f"HTTP {resp.status_code}", status_code=resp.status_code
            )
        try:
            items = resp.json()
        except json.JSONDecodeError as exc:
            raise RemoteListingError(repo_id, dir_path, f"invalid JSON: {exc}") from exc
        if not isinstance(items, list):
            raise RemoteListingError(repo_id, dir_path, "expected a directory listing")

        refs: list[RemoteFileRef] = []
        for raw in items:
            try:
                item = RemoteContentItem.model_validate(raw)
            except ValidationError as exc:
                logger.warning("Ignoring malformed listing entry in %s: %s", dir_path, exc)
                continue
            if item.type != "file" or not item.name.endswith(self.extension):
                continue
            if not item.download_url:
                logger.warning("No download URL for %s, skipping", item.path)
                continue
            refs.append(RemoteFileRef(path=item.path, download_url=item.download_url))
        logger.debug("Listed %d %s files in %s/%s", len(refs), self.extension, repo_id, dir_path)
        return refs

    async def fetch_notebook(self, download_url: str) -> dict[str, Any]:
        """Download and parse one notebook.

        A body that is not valid JSON raises ``json.JSONDecodeError``.
        """
        resp = await self._client.get(download_url, headers=self._download_headers(download_url))
        if not resp.is_success:
            raise NotebookFetchError(
                download_url, f"HTTP {resp.status_code}", status_code=resp.status_code
            )
        document = json.loads(resp.text)
        if not isinstance(document, dict):
            raise NotebookFetchError(download_url, "body is not a JSON object")
        return document

    def _download_headers(self, download_url: str) -> dict[str, str]:
        """Raw downloads get the token only when they stay on a GitHub host."""
        host = httpx.URL(download_url).host
        if self._token and host in TOKEN_HOSTS | {httpx.URL(self.api_url).host}:
            return {"Authorization": f"Bearer {self._token}"}
        return {}
