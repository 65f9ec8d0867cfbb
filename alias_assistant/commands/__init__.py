"""Command mixins for AliasAssistant."""

from .alias_cmds import AliasCommandsMixin
from .sync_cmds import SyncCommandsMixin
from .system_cmds import SystemCommandsMixin

__all__ = [
    "AliasCommandsMixin",
    "SyncCommandsMixin",
    "SystemCommandsMixin",
]
