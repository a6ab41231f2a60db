"""Conversion between pybtex entries and `BibEntry` records."""

from __future__ import annotations

from collections.abc import Mapping
import io

from pybtex.bibtex.utils import split_name_list
from pybtex.database import BibliographyData, Entry, Person
from pybtex.database.input import bibtex
from pybtex.exceptions import PybtexError

from ..entry import BibEntry, EntryEventSource, Month
from ..entry.fields import KEY_FIELD


PERSON_ROLES = ("author", "editor")


def parse_bibtex(payload: str) -> tuple[BibliographyData, dict[str, str]]:
    """Parse a BibTeX payload, returning the data and its ``@string`` macros."""
    parser = bibtex.Parser()
    try:
        parsed = parser.parse_stream(io.StringIO(payload))
    except (OSError, PybtexError) as exc:
        raise PybtexError(f"Failed to parse bibliography payload: {exc}") from exc
    return parsed, user_macros(parser)


def bibliography_data_from_string(payload: str, key: str) -> BibliographyData:
    """Parse a BibTeX payload and scope it to a specific reference key."""
    parsed, _ = parse_bibtex(payload)

    entries = list(parsed.entries.items())
    if not entries:
        raise PybtexError("Inline bibliography payload does not contain an entry.")
    if len(entries) > 1:
        raise PybtexError("Inline bibliography payload must contain a single entry.")

    _, entry = entries[0]
    return BibliographyData(entries={key: entry})


def user_macros(parser: bibtex.Parser) -> dict[str, str]:
    """Return ``@string`` definitions, without pybtex's predefined month names."""
    predefined = {month.short_name for month in Month}
    macros = getattr(parser, "macros", None) or {}
    return {
        str(name).lower(): str(value)
        for name, value in macros.items()
        if str(name).lower() not in predefined
    }


def entry_from_pybtex(key: str, entry: Entry) -> BibEntry:
    """Build a clean `BibEntry` from a parsed pybtex entry."""
    record = BibEntry(entry.type)
    record.set_cite_key(key)
    for name, value in _iter_fields(entry.fields):
        record.set_field(name, value, EntryEventSource.IMPORT)
    for role, persons in _iter_fields(entry.persons):
        names = [str(person) for person in persons if isinstance(person, Person)]
        if names:
            record.set_field(role, " and ".join(names), EntryEventSource.IMPORT)
    record.set_parsed_serialization(BibliographyData(entries={key: entry}).to_string("bibtex"))
    return record


def entry_to_pybtex(record: BibEntry) -> Entry:
    """Convert a record back to pybtex, splitting person lists on ``and``."""
    fields: dict[str, str] = {}
    persons: dict[str, list[Person]] = {}
    for name, value in sorted(record.field_map.items()):
        if name == KEY_FIELD:
            continue
        if name in PERSON_ROLES:
            persons[name] = [Person(part) for part in split_name_list(value)]
            continue
        fields[name] = value
    return Entry(record.type.name, fields=fields, persons=persons)


def _iter_fields(value: object) -> list[tuple[str, object]]:
    if isinstance(value, Mapping):
        return [(str(name), item) for name, item in value.items()]
    items = getattr(value, "items", None)
    if callable(items):
        return [(str(name), item) for name, item in items()]
    return []


__all__ = [
    "PERSON_ROLES",
    "bibliography_data_from_string",
    "entry_from_pybtex",
    "entry_to_pybtex",
    "parse_bibtex",
    "user_macros",
]
