"""Exceptions raised when talking to the repository hosting API."""

from __future__ import annotations


class RemoteError(Exception):
    """Base class for remote listing and download failures."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class RemoteListingError(RemoteError):
    """A directory listing could not be fetched or understood."""

    def __init__(
        self, repo_id: str, dir_path: str, reason: str, status_code: int | None = None
    ) -> None:
        self.repo_id = repo_id
        self.dir_path = dir_path
        super().__init__(f"Failed to list {dir_path} from {repo_id}: {reason}", status_code)


class NotebookFetchError(RemoteError):
    """A file download returned an error status or an unusable body."""

    def __init__(self, download_url: str, reason: str, status_code: int | None = None) -> None:
        self.download_url = download_url
        super().__init__(f"Failed to download notebook {download_url}: {reason}", status_code)
