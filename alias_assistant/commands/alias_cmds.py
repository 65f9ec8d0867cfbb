"""Alias list, add, delete, import and export."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import StorageError
from ..grammar import AliasRecord
from ..log import logger

if TYPE_CHECKING:
    from ..persistence import AliasRepository


class AliasCommandsMixin:
    """Mixin providing the alias CRUD commands."""

    aliases: AliasRepository

    def get_aliases(self) -> list[AliasRecord]:
        """All aliases in file order."""
        return self.aliases.load().to_list()

    def add_alias(self, name: str, command: str) -> None:
        self.aliases.add(name, command)
        logger.debug("added alias %s", name)

    def delete_alias(self, name: str) -> None:
        if not self.aliases.remove(name):
            logger.debug("delete of unknown alias %s", name)

    def export_aliases(self) -> str:
        """Raw alias file content."""
        return self.aliases.export()

    def import_aliases_from_content(self, content: str) -> None:
        self.aliases.import_merge(content)

    def import_aliases_from_file(self, path: Path) -> None:
        """Read an alias file from *path* and merge it in."""
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("failed to read import file %s", path, exc_info=True)
            raise StorageError(f"Failed to read {path}: {exc}") from exc
        self.import_aliases_from_content(content)
