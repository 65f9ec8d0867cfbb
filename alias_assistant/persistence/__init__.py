"""Persistence layer – each store owns its file path, data format, and I/O."""

from .aliases import AliasRepository
from .sync_config import SyncConfig, SyncConfigStore

__all__ = [
    "AliasRepository",
    "SyncConfig",
    "SyncConfigStore",
]
