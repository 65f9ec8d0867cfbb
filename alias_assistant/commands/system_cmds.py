"""Shell integration, clipboard and terminal commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..features import ensure_sourcing_is_setup

if TYPE_CHECKING:
    from ..persistence import AliasRepository
    from ..platform import AppPaths, Platform
    from ..preferences import Preferences


class SystemCommandsMixin:
    """Mixin providing commands that reach outside the alias file."""

    aliases: AliasRepository
    paths: AppPaths
    platform: Platform
    preferences: Preferences

    def ensure_sourcing_is_setup(self, shell: str | None = None) -> bool:
        """Source the alias file from the shell rc file. True if it changed."""
        if shell is None and self.preferences.shell.override:
            shell = self.preferences.shell.override
        return ensure_sourcing_is_setup(self.paths, shell)

    def copy_alias_name(self, alias_name: str) -> bool:
        """Copy *alias_name* to the clipboard if such an alias exists."""
        record = self.aliases.load().get(alias_name)
        if record is None:
            return False
        self.platform.copy_to_clipboard(record.name)
        return True

    def open_terminal(self, alias_name: str) -> None:
        """Copy the alias name (if known) and open a new terminal window."""
        self.copy_alias_name(alias_name)
        self.platform.open_terminal()
