"""Exceptions raised by content providers."""

from __future__ import annotations


class ContentsError(Exception):
    """A content provider operation failed for one path."""

    def __init__(self, path: str, operation: str, message: str) -> None:
        self.path = path
        self.operation = operation
        super().__init__(f"{operation} {path!r} failed: {message}")


class EntryNotFound(ContentsError):
    """No entry exists at the requested path."""

    def __init__(self, path: str, operation: str = "get") -> None:
        super().__init__(path, operation, "no such file or directory")
