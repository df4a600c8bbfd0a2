"""Test doubles and helpers shared across the nbpopulate tests."""

import httpx

from nbpopulate.contents.errors import ContentsError
from nbpopulate.contents.memory import MemoryContents
from nbpopulate.paths import join_path, parent_path
from nbpopulate.remote.github import GitHubContentsClient
from nbpopulate.sync.dirs import ensure_dir

REPO = "arogozhnikov/einops"
LISTING_URL = f"https://api.github.com/repos/{REPO}/contents/docs?ref=main"
RAW_BASE = f"https://raw.githubusercontent.com/{REPO}/main/docs"

SAMPLE_NOTEBOOK = {
    "cells": [
        {
            "cell_type": "markdown",
            "metadata": {},
            "source": ["# Einops tutorial"],
        },
        {
            "cell_type": "code",
            "execution_count": None,
            "metadata": {},
            "outputs": [],
            "source": ["from einops import rearrange"],
        },
    ],
    "metadata": {"kernelspec": {"name": "python3", "display_name": "Python 3"}},
    "nbformat": 4,
    "nbformat_minor": 5,
}


def listing_item(name: str, type: str = "file", directory: str = "docs") -> dict:
    """One entry of a GitHub contents API response."""
    path = f"{directory}/{name}"
    return {
        "type": type,
        "name": name,
        "path": path,
        "sha": "0" * 40,
        "size": 1024,
        "download_url": f"https://raw.githubusercontent.com/{REPO}/main/{path}"
        if type == "file"
        else None,
    }


class FakeGitHub:
    """Routes requests to canned responses through httpx.MockTransport."""

    def __init__(self) -> None:
        self.routes: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []

    def add(self, url: str, status: int = 200, **response_kwargs) -> None:
        self.routes[url] = {"status": status, **response_kwargs}

    def fail(self, url: str, exc: Exception) -> None:
        self.routes[url] = {"exc": exc}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        if "exc" in route:
            raise route["exc"]
        kwargs = dict(route)
        status = kwargs.pop("status")
        return httpx.Response(status, **kwargs)

    def client(self, **kwargs) -> GitHubContentsClient:
        http = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return GitHubContentsClient(client=http, **kwargs)

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]


class FlakyContents(MemoryContents):
    """MemoryContents that fails reads or writes for chosen paths."""

    def __init__(self, unreadable: set[str] | None = None, unwritable: set[str] | None = None):
        super().__init__()
        self.unreadable = unreadable or set()
        self.unwritable = unwritable or set()

    async def get(self, path, content=False, format=None):
        if content and join_path(path) in self.unreadable:
            raise ContentsError(path, "get", "permission denied")
        return await super().get(path, content=content, format=format)

    async def save(self, path, type, format, content):
        if join_path(path) in self.unwritable:
            raise ContentsError(path, "save", "disk full")
        return await super().save(path, type=type, format=format, content=content)


async def seed(contents, path: str, content) -> None:
    """Write a file (a notebook for .ipynb) and all of its parents."""
    await ensure_dir(contents, parent_path(path))
    if path.endswith(".ipynb"):
        await contents.save(path, type="notebook", format="json", content=content)
    else:
        await contents.save(path, type="file", format="text", content=content)


async def snapshot(contents) -> dict:
    """Every stored entry with its content, keyed by path."""
    return {
        path: (await contents.get(path, content=True)).model_dump()
        for path in contents.paths()
    }


