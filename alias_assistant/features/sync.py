"""Push/pull decisions for the Gist backup.

The sync config moves through three states:

  unconfigured  (no token)         push/pull refused
  token_set     (token, no gist)   push creates a gist and stores its id
  linked        (token and gist)   push updates, pull fetches

``pull`` only returns the remote text; merging it into the alias file is
the caller's job (see ``AliasRepository.import_merge``).
"""

from __future__ import annotations

from ..errors import AuthMissingError, ConfigMissingError
from ..log import logger
from ..persistence import SyncConfigStore
from .gist_client import RemoteSyncClient


class SyncOrchestrator:
    """Decides between create and update, and guards on configuration."""

    def __init__(self, config_store: SyncConfigStore, client: RemoteSyncClient) -> None:
        self.config_store = config_store
        self.client = client

    async def push(self, content: str) -> str:
        """Upload *content*. Returns a confirmation naming the gist id."""
        config = self.config_store.read()
        logger.debug("push from sync state %s", config.state)
        token = (config.token or "").strip()
        if not token:
            raise AuthMissingError("GitHub token not set")

        gist_id = (config.gist_id or "").strip()
        if gist_id:
            await self.client.update_document(token, gist_id, content)
            return f"Successfully synced to Gist: {gist_id}"

        gist_id = await self.client.create_document(token, content)
        self.config_store.set_gist_id(gist_id)
        logger.info("linked to gist %s", gist_id)
        return f"Successfully created and synced to Gist: {gist_id}"

    async def pull(self) -> str:
        """Return the remote alias file content verbatim."""
        config = self.config_store.read()
        token = (config.token or "").strip()
        if not token:
            raise ConfigMissingError("GitHub token not set")
        gist_id = (config.gist_id or "").strip()
        if not gist_id:
            raise ConfigMissingError("Gist ID not set")
        return await self.client.fetch_document(token, gist_id)
