"""Alias file format.

One alias per line, ``alias <name>="<command>"``, below a fixed
managed-by header.  Parsing is lenient: anything that does not look like
an alias line is skipped.  Serializing does not escape double quotes in
the command, so a command containing ``"`` is written as-is.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import asdict, dataclass

from .constants import ALIAS_PREFIX, MANAGED_HEADER


@dataclass(frozen=True)
class AliasRecord:
    """A single shell alias."""

    name: str
    command: str

    def to_line(self) -> str:
        return f'{ALIAS_PREFIX}{self.name}="{self.command}"'

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class AliasCollection:
    """Ordered aliases with unique names.

    Order is insertion order.  ``append`` refuses a name that is already
    present; ``upsert`` replaces the command of an existing name in place
    or appends a new record at the end.
    """

    def __init__(self, records: Iterable[AliasRecord] = ()) -> None:
        self._records: list[AliasRecord] = []
        for record in records:
            self.upsert(record)

    def __iter__(self) -> Iterator[AliasRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, name: object) -> bool:
        return self.index_of(name) is not None  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AliasCollection):
            return self._records == other._records
        if isinstance(other, list):
            return self._records == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"AliasCollection({self._records!r})"

    @property
    def names(self) -> list[str]:
        return [r.name for r in self._records]

    def index_of(self, name: str) -> int | None:
        for i, record in enumerate(self._records):
            if record.name == name:
                return i
        return None

    def get(self, name: str) -> AliasRecord | None:
        idx = self.index_of(name)
        return None if idx is None else self._records[idx]

    def append(self, record: AliasRecord) -> None:
        """Add *record* at the end. Raises ``KeyError`` on a taken name."""
        if record.name in self:
            raise KeyError(record.name)
        self._records.append(record)

    def upsert(self, record: AliasRecord) -> bool:
        """Replace in place or append. Returns True if a record was replaced."""
        idx = self.index_of(record.name)
        if idx is None:
            self._records.append(record)
            return False
        self._records[idx] = record
        return True

    def remove(self, name: str) -> int:
        """Drop every record named *name*. Returns the number removed."""
        before = len(self._records)
        self._records = [r for r in self._records if r.name != name]
        return before - len(self._records)

    def merge(self, incoming: Iterable[AliasRecord]) -> None:
        """Apply *incoming* records in order; incoming commands win."""
        for record in incoming:
            self.upsert(record)

    def to_list(self) -> list[AliasRecord]:
        return list(self._records)


def _strip_quotes(value: str) -> str:
    """Drop one quote from each end, so a command ending in ``"`` keeps its own."""
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def invalid_reason(name: str, command: str) -> str | None:
    """Why *name*/*command* would not survive a write and re-parse, or None.

    A name must be non-empty with no ``=`` and no whitespace.  A command
    must fit on one line.  Double quotes are not checked.
    """
    if not name:
        return "name is empty"
    if "=" in name:
        return "name contains '='"
    if any(ch.isspace() for ch in name):
        return "name contains whitespace"
    if "".join(command.splitlines()) != command:
        return "command contains a line break"
    return None


def parse_line(line: str) -> AliasRecord | None:
    """Parse one line, returning None for anything that is not an alias."""
    line = line.strip()
    if not line.startswith(ALIAS_PREFIX):
        return None
    parts = line[len(ALIAS_PREFIX) :].split("=", 1)
    if len(parts) != 2:
        return None
    name, command = parts
    return AliasRecord(name=name, command=_strip_quotes(command))


def parse(text: str) -> AliasCollection:
    """Parse alias file *text*. Never raises.

    A name that appears more than once keeps its first position and takes
    the command of its last occurrence.
    """
    records = (parse_line(line) for line in text.splitlines())
    return AliasCollection(r for r in records if r is not None)


def serialize(collection: Iterable[AliasRecord]) -> str:
    """Render *collection* as a complete alias file."""
    lines = [MANAGED_HEADER]
    lines.extend(record.to_line() for record in collection)
    return "\n".join(lines) + "\n"
