"""Remote repository sources for nbpopulate."""

from nbpopulate.remote.errors import NotebookFetchError, RemoteError, RemoteListingError
from nbpopulate.remote.github import GitHubContentsClient
from nbpopulate.remote.models import RemoteContentItem, RemoteFileRef

__all__ = [
    "GitHubContentsClient",
    "NotebookFetchError",
    "RemoteContentItem",
    "RemoteError",
    "RemoteFileRef",
    "RemoteListingError",
]
