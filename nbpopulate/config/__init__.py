from .loader import load_config
from .models import (
    LocalSourceConfig,
    PopulateConfig,
    RemoteSourceConfig,
    WorkspaceConfig,
)

__all__ = [
    "LocalSourceConfig",
    "PopulateConfig",
    "RemoteSourceConfig",
    "WorkspaceConfig",
    "load_config",
]
