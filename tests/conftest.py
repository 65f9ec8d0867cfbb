"""Shared test fixtures for the alias-assistant test suite."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from alias_assistant.persistence import AliasRepository, SyncConfigStore
from alias_assistant.platform import AppPaths
from alias_assistant.preferences import Preferences


@pytest.fixture
def paths(tmp_path: Path) -> AppPaths:
    """AppPaths rooted in a temporary home directory."""
    return AppPaths.from_home(tmp_path)


@pytest.fixture
def repo(paths: AppPaths) -> AliasRepository:
    return AliasRepository(paths.alias_file)


@pytest.fixture
def config_store(paths: AppPaths) -> SyncConfigStore:
    return SyncConfigStore(paths.sync_config_file)


@pytest.fixture
def preferences() -> Preferences:
    return Preferences()


# -- Fake collaborators -------------------------------------------------------


class FakePlatform:
    """Records clipboard and terminal calls instead of spawning processes."""

    name = "fake"

    def __init__(self) -> None:
        self.clipboard: list[str] = []
        self.terminals_opened = 0

    def copy_to_clipboard(self, text: str) -> None:
        self.clipboard.append(text)

    def open_terminal(self) -> None:
        self.terminals_opened += 1


@pytest.fixture
def fake_platform() -> FakePlatform:
    return FakePlatform()


class FakeGistApi:
    """In-memory stand-in for the GitHub Gist endpoints.

    Serve it to the client through ``httpx.MockTransport(api.handler)``.
    Set ``fail_with = (status, text)`` to make every request fail.
    """

    def __init__(self) -> None:
        self.gists: dict[str, dict[str, str]] = {}
        self.requests: list[httpx.Request] = []
        self.fail_with: tuple[int, str] | None = None
        self._next_id = 1

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]

    def bodies(self) -> list[dict]:
        return [json.loads(r.content) if r.content else {} for r in self.requests]

    def _gist_json(self, gist_id: str) -> dict:
        files = {
            name: {"filename": name, "content": content}
            for name, content in self.gists[gist_id].items()
        }
        return {"id": gist_id, "public": False, "files": files}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            status, text = self.fail_with
            return httpx.Response(status, text=text)

        path = request.url.path
        if request.method == "POST" and path == "/gists":
            body = json.loads(request.content)
            gist_id = f"gist{self._next_id:04d}"
            self._next_id += 1
            self.gists[gist_id] = {
                name: entry["content"] for name, entry in body["files"].items()
            }
            return httpx.Response(201, json=self._gist_json(gist_id))

        if path.startswith("/gists/"):
            gist_id = path.rsplit("/", 1)[-1]
            if gist_id not in self.gists:
                return httpx.Response(404, text='{"message": "Not Found"}')
            if request.method == "PATCH":
                body = json.loads(request.content)
                for name, entry in body["files"].items():
                    self.gists[gist_id][name] = entry["content"]
                return httpx.Response(200, json=self._gist_json(gist_id))
            if request.method == "GET":
                return httpx.Response(200, json=self._gist_json(gist_id))

        return httpx.Response(405, text="Method Not Allowed")


@pytest.fixture
def gist_api() -> FakeGistApi:
    return FakeGistApi()
