"""Gist token, gist id and push/pull commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..features import SyncOrchestrator
    from ..persistence import AliasRepository, SyncConfigStore


class SyncCommandsMixin:
    """Mixin providing the Gist sync commands."""

    aliases: AliasRepository
    sync_config: SyncConfigStore
    sync: SyncOrchestrator

    def get_gist_token(self) -> str | None:
        return self.sync_config.get_token()

    def set_gist_token(self, token: str) -> None:
        self.sync_config.set_token(token)

    def get_gist_id(self) -> str | None:
        return self.sync_config.get_gist_id()

    def set_gist_id(self, gist_id: str) -> None:
        self.sync_config.set_gist_id(gist_id)

    async def sync_push(self, content: str | None = None) -> str:
        """Upload *content* (the current alias file by default)."""
        if content is None:
            content = self.aliases.export()
        return await self.sync.push(content)

    async def sync_pull(self) -> str:
        """Fetch the remote alias file without touching local storage."""
        return await self.sync.pull()

    async def sync_pull_and_merge(self) -> int:
        """Fetch the remote alias file and merge it into the local one.

        Returns the number of aliases after the merge.
        """
        content = await self.sync.pull()
        return len(self.aliases.import_merge(content))
