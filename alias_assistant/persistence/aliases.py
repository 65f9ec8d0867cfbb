"""Alias file repository."""

from __future__ import annotations

from pathlib import Path

from ..errors import DuplicateAliasError, InvalidAliasError
from ..grammar import AliasCollection, AliasRecord, invalid_reason, parse, serialize
from ..log import logger
from ._base import TextFileStore


class AliasRepository(TextFileStore):
    """The user's alias file (``aliases.sh``).

    Every operation re-reads the whole file and every mutation rewrites
    it.  Nothing is cached and nothing is locked: two concurrent mutations
    can lose an update, so callers that share a repository must serialize
    their calls.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path)

    def load(self) -> AliasCollection:
        """Load aliases from disk. A missing file is an empty collection."""
        return parse(self.read_text())

    def save(self, collection: AliasCollection) -> None:
        """Persist *collection*, replacing the whole file."""
        self.write_text(serialize(collection))

    def add(self, name: str, command: str) -> AliasRecord:
        """Append a new alias.

        Raises ``InvalidAliasError`` for a name or command that would not
        read back as the same single line, and ``DuplicateAliasError`` for a
        taken name.  Neither writes the file.
        """
        reason = invalid_reason(name, command)
        if reason is not None:
            raise InvalidAliasError(name, reason)
        collection = self.load()
        record = AliasRecord(name=name, command=command)
        try:
            collection.append(record)
        except KeyError:
            raise DuplicateAliasError(name) from None
        self.save(collection)
        return record

    def remove(self, name: str) -> bool:
        """Remove *name* if present. The file is rewritten either way."""
        collection = self.load()
        removed = collection.remove(name)
        self.save(collection)
        return removed > 0

    def import_merge(self, content: str) -> AliasCollection:
        """Merge alias definitions from *content* into the file.

        Imported commands win on a name collision and keep the local
        position; new names are appended in the order they were imported.
        Returns the merged collection.
        """
        collection = self.load()
        incoming = parse(content)
        collection.merge(incoming)
        self.save(collection)
        logger.debug("merged %d imported alias(es)", len(incoming))
        return collection

    def export(self) -> str:
        """Return the file content verbatim (``""`` if it doesn't exist)."""
        return self.read_text()
