"""The host-facing command surface.

``AliasAssistant`` wires the stores, the Gist client and the platform
capabilities together once and exposes every command as a method.  A host
(the CLI, a GUI, a test) builds one and calls into it; every failure is an
``AliasAssistantError`` for the host to present.
"""

from __future__ import annotations

import httpx

from .commands import AliasCommandsMixin, SyncCommandsMixin, SystemCommandsMixin
from .features import RemoteSyncClient, SyncOrchestrator
from .persistence import AliasRepository, SyncConfigStore
from .platform import AppPaths, Platform, detect_platform
from .preferences import Preferences, load_preferences


class AliasAssistant(AliasCommandsMixin, SyncCommandsMixin, SystemCommandsMixin):
    """Alias file, Gist sync and shell integration commands."""

    def __init__(
        self,
        paths: AppPaths | None = None,
        *,
        platform: Platform | None = None,
        preferences: Preferences | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.paths = paths or AppPaths.from_home()
        self.preferences = preferences or load_preferences(self.paths.preferences_file)
        self.platform = platform or detect_platform(
            terminal_app=self.preferences.terminal.app
        )

        self.aliases = AliasRepository(self.paths.alias_file)
        self.sync_config = SyncConfigStore(self.paths.sync_config_file)
        self.client = RemoteSyncClient(
            self.preferences.sync.api_url,
            description=self.preferences.sync.description,
            transport=transport,
        )
        self.sync = SyncOrchestrator(self.sync_config, self.client)
