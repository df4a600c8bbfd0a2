"""Merge-synchronization engine: never overwrites what the workspace already has."""

from nbpopulate.sync.copier import TreeCopier
from nbpopulate.sync.dirs import ensure_dir
from nbpopulate.sync.ingest import RemoteIngester
from nbpopulate.sync.models import SyncError, SyncReport
from nbpopulate.sync.orchestrator import SyncOrchestrator

__all__ = [
    "RemoteIngester",
    "SyncError",
    "SyncOrchestrator",
    "SyncReport",
    "TreeCopier",
    "ensure_dir",
]
