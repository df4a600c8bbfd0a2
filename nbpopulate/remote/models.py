"""Pydantic models for remote repository data."""

from pydantic import BaseModel, ConfigDict, Field


class RemoteContentItem(BaseModel):
    """One element of a GitHub contents API directory listing."""

    type: str = Field(description="'file', 'dir', 'symlink' or 'submodule'")
    name: str
    path: str
    download_url: str | None = None


class RemoteFileRef(BaseModel):
    """A remotely discoverable file; content is fetched only when needed."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Path within the repository (e.g. docs/1-intro.ipynb)")
    download_url: str
