import re
from typing import Literal

from pydantic import BaseModel, Field, field_validator

_REPO_ID = re.compile(r"^[\w.-]+/[\w.-]+$")


class LocalSourceConfig(BaseModel):
    assets_root: str = "files"


class WorkspaceConfig(BaseModel):
    root: str = "notebooks"
    contents_root: str = "."


class RemoteSourceConfig(BaseModel):
    enabled: bool = True
    repo: str = "arogozhnikov/einops"
    directory: str = "docs"
    ref: str = "main"
    extension: str = ".ipynb"
    api_url: str = "https://api.github.com"
    token_env: str = "GITHUB_TOKEN"
    timeout: float | None = None

    @field_validator("repo")
    @classmethod
    def _check_repo(cls, value: str) -> str:
        if not _REPO_ID.match(value):
            raise ValueError(f"repo must be 'owner/name', got {value!r}")
        return value


class PopulateConfig(BaseModel):
    local: LocalSourceConfig = Field(default_factory=LocalSourceConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    remote: RemoteSourceConfig = Field(default_factory=RemoteSourceConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
