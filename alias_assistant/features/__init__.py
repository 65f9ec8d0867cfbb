"""Feature modules: Gist sync and shell integration."""

from .gist_client import RemoteSyncClient
from .shell_setup import ensure_sourcing_is_setup, rc_file_for_shell
from .sync import SyncOrchestrator

__all__ = [
    "RemoteSyncClient",
    "SyncOrchestrator",
    "ensure_sourcing_is_setup",
    "rc_file_for_shell",
]
