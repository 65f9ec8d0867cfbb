"""Gist sync configuration store."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ._base import JsonStore


@dataclass
class SyncConfig:
    """Token and remote gist id. Either may be unset."""

    token: str | None = None
    gist_id: str | None = None

    @property
    def has_token(self) -> bool:
        return bool(self.token and self.token.strip())

    @property
    def has_gist_id(self) -> bool:
        return bool(self.gist_id and self.gist_id.strip())

    @property
    def state(self) -> str:
        """``unconfigured``, ``token_set`` or ``linked``."""
        if not self.has_token:
            return "unconfigured"
        if not self.has_gist_id:
            return "token_set"
        return "linked"

    def to_dict(self) -> dict[str, str | None]:
        return {"token": self.token, "gist_id": self.gist_id}


class SyncConfigStore(JsonStore):
    """``gist_config.json``: ``{"token": str|null, "gist_id": str|null}``."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)

    def _default(self) -> dict:
        return {"token": None, "gist_id": None}

    def read(self) -> SyncConfig:
        raw = self.load_raw()
        return SyncConfig(
            token=_opt_str(raw.get("token")),
            gist_id=_opt_str(raw.get("gist_id")),
        )

    def write(self, config: SyncConfig) -> None:
        self.save_raw(config.to_dict())

    def get_token(self) -> str | None:
        return self.read().token

    def set_token(self, token: str) -> None:
        config = self.read()
        config.token = token
        self.write(config)

    def get_gist_id(self) -> str | None:
        return self.read().gist_id

    def set_gist_id(self, gist_id: str) -> None:
        config = self.read()
        config.gist_id = gist_id
        self.write(config)


def _opt_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
