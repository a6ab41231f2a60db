"""Citation-key lists stored in fields such as ``related``."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol


if TYPE_CHECKING:
    from .entry import BibEntry


class EntryLookup(Protocol):
    """Anything able to find a record by citation key."""

    def get_entry_by_key(self, key: str) -> BibEntry | None: ...


@dataclass(frozen=True, slots=True)
class ParsedEntryLink:
    """A citation key, optionally bound to the database able to resolve it."""

    key: str
    database: EntryLookup | None = None

    def linked_entry(self) -> BibEntry | None:
        if self.database is None:
            return None
        return self.database.get_entry_by_key(self.key)


def parse_entry_links(value: str | None, database: EntryLookup | None = None) -> list[ParsedEntryLink]:
    if not value:
        return []
    keys = (part.strip() for part in value.split(","))
    return [ParsedEntryLink(key, database) for key in keys if key]


def serialize_entry_links(links: Iterable[ParsedEntryLink]) -> str:
    return ",".join(link.key for link in links)


__all__ = ["EntryLookup", "ParsedEntryLink", "parse_entry_links", "serialize_entry_links"]
