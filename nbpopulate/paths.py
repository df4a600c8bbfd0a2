"""Slash-delimited path helpers for content store paths."""

from __future__ import annotations


def split_path(path: str) -> list[str]:
    """Split a store path into segments, ignoring empty ones."""
    return [part for part in path.split("/") if part]


def join_path(*parts: str) -> str:
    """Join path fragments with '/', skipping empty fragments."""
    segments: list[str] = []
    for part in parts:
        segments.extend(split_path(part))
    return "/".join(segments)


def parent_path(path: str) -> str:
    """Parent of ``path``; "" for top-level entries and the root."""
    return "/".join(split_path(path)[:-1])


def base_name(path: str) -> str:
    parts = split_path(path)
    return parts[-1] if parts else ""


def strip_prefix(path: str, prefix: str) -> str:
    """Drop a leading ``prefix/`` from ``path``.

    Only a whole leading directory is removed: ``strip_prefix("docs/a", "docs")``
    gives ``"a"`` while ``strip_prefix("docsx/a", "docs")`` is unchanged.
    """
    prefix = join_path(prefix)
    if prefix and path.startswith(prefix + "/"):
        return path[len(prefix) + 1:]
    return path
