from typing import Literal

from pydantic import BaseModel


class SyncError(BaseModel):
    path: str
    phase: Literal["local", "remote"]
    error: str


class SyncReport(BaseModel):
    written: list[str] = []
    skipped: list[str] = []
    errors: list[SyncError] = []
    duration: float = 0.0
