"""GitHub Gist client for alias backups.

Every call is a whole-document operation against a single secret gist
holding one file, ``aliases.sh``.  There is no timeout, no retry and no
conditional request: the first failure is raised to the caller.

Usage:
    client = RemoteSyncClient()
    gist_id = await client.create_document(token, content)
    await client.update_document(token, gist_id, content)
    content = await client.fetch_document(token, gist_id)
"""

from __future__ import annotations

from typing import Any

import httpx

from ..constants import (
    ALIAS_FILENAME,
    GIST_ACCEPT,
    GIST_DESCRIPTION,
    GITHUB_API_URL,
    USER_AGENT,
)
from ..errors import RemoteError
from ..log import logger


class RemoteSyncClient:
    """Create, update and fetch the alias gist."""

    def __init__(
        self,
        api_url: str = GITHUB_API_URL,
        *,
        description: str = GIST_DESCRIPTION,
        filename: str = ALIAS_FILENAME,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.description = description
        self.filename = filename
        self._transport = transport

    # -- public API -----------------------------------------------------------

    async def create_document(self, token: str, content: str) -> str:
        """Create a secret gist holding *content*. Returns the new gist id."""
        payload = {
            "description": self.description,
            "public": False,
            "files": self._files(content),
        }
        data = await self._request("POST", "/gists", token, json=payload)
        gist_id = data.get("id")
        if not isinstance(gist_id, str) or not gist_id:
            raise RemoteError("Failed to parse response: missing gist id")
        logger.info("created gist %s", gist_id)
        return gist_id

    async def update_document(self, token: str, gist_id: str, content: str) -> None:
        """Overwrite the alias file of gist *gist_id* with *content*."""
        payload = {
            "description": self.description,
            "files": self._files(content),
        }
        await self._request("PATCH", f"/gists/{gist_id}", token, json=payload)

    async def fetch_document(self, token: str, gist_id: str) -> str:
        """Return the alias file content of gist *gist_id*."""
        data = await self._request("GET", f"/gists/{gist_id}", token)
        files = data.get("files")
        entry = files.get(self.filename) if isinstance(files, dict) else None
        content = entry.get("content") if isinstance(entry, dict) else None
        if not isinstance(content, str):
            raise RemoteError(
                f"Failed to parse response: gist has no {self.filename} file"
            )
        return content

    # -- helpers --------------------------------------------------------------

    def _files(self, content: str) -> dict[str, dict[str, str]]:
        return {self.filename: {"content": content}}

    def _headers(self, token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Accept": GIST_ACCEPT,
            "User-Agent": USER_AGENT,
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.api_url,
            timeout=None,
            transport=self._transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        token: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        async with self._client() as client:
            try:
                r = await client.request(
                    method, path, headers=self._headers(token), json=json
                )
            except httpx.RequestError as e:
                logger.debug("%s %s failed", method, path, exc_info=True)
                raise RemoteError(f"Failed to send request: {e}") from e

        if not r.is_success:
            logger.debug("%s %s -> HTTP %d", method, path, r.status_code)
            raise RemoteError(r.text, status_code=r.status_code)

        try:
            data = r.json()
        except ValueError as e:
            raise RemoteError(f"Failed to parse response: {e}") from e
        if not isinstance(data, dict):
            raise RemoteError("Failed to parse response: non-object json")
        return data
