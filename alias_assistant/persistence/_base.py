"""Base file stores.

Each store owns one file.  Reads treat a missing file as the empty state;
any other I/O failure is raised as ``StorageError`` so the caller sees it.
"""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import StorageError
from ..log import logger


class TextFileStore:
    """Whole-file UTF-8 text store."""

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def read_text(self) -> str:
        """Return the file content, or ``""`` if the file does not exist."""
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ""
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("failed to read %s", self.path, exc_info=True)
            raise StorageError(f"Failed to read {self.path}: {exc}") from exc

    def write_text(self, content: str) -> None:
        """Overwrite the file with *content*, creating parents as needed."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as exc:
            logger.debug("failed to write %s", self.path, exc_info=True)
            raise StorageError(f"Failed to write {self.path}: {exc}") from exc


class JsonStore(TextFileStore):
    """JSON document store.

    Subclasses override ``_default()`` to provide the empty-state value.
    """

    def load_raw(self) -> dict:
        """Parse the JSON file, returning ``_default()`` if absent or empty."""
        text = self.read_text()
        if not text.strip():
            return self._default()
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.debug("corrupt JSON in %s", self.path, exc_info=True)
            raise StorageError(f"Failed to parse config {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Failed to parse config {self.path}: not an object")
        return data

    def save_raw(self, data: dict, *, sort_keys: bool = False) -> None:
        """Write *data* as pretty-printed JSON."""
        self.write_text(
            json.dumps(data, indent=2, ensure_ascii=False, sort_keys=sort_keys)
        )

    # -- override point -------------------------------------------------------

    def _default(self) -> dict:  # noqa: PLR6301
        """Return the empty-state value for this store."""
        return {}
