"""The bibliographic record aggregate.

`BibEntry`
: Owns the field store (lowercase field name to non-empty string), the entry
  type, the user comments written before the entry, and the last parsed
  serialization. Every successful mutation flips the dirty flag, purges the
  derived caches for the touched field, and only then notifies observers.

Reads
: `get_field` returns the stored value only. `get_field_or_alias` and
  `get_field_or_alias_latex_free` add biblatex aliases and date composition.
  `get_resolved_field_or_alias` additionally follows the ``crossref`` field
  through a collection collaborator and expands ``@string`` references.

Thread model
: One writer at a time. Writes are serialized by a re-entrant lock and the
  store is mutated with atomic dict operations, so readers running
  concurrently see either the old or the new value of a field.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
import sys
from threading import RLock
from types import MappingProxyType
from typing import Protocol, runtime_checkable

from ..exceptions import require
from ..latex import latex_to_unicode, string_as_words, strip_trailing_whitespace
from .cache import DerivedValueCache
from .canonical import canonical_representation
from .dates import Date, Month
from .doi import normalize_doi
from .events import ChangeKind, EntryEvent, EntryEventSource, FieldChange
from .fields import (
    KEY_FIELD,
    TYPE_HEADERS,
    FieldName,
    InternalField,
    OrFields,
    StandardField,
    normalize_field,
)
from .files import LinkedFile, parse_files, serialize_files
from .identifiers import next_id
from .keywords import Keyword, KeywordList
from .links import EntryLookup, ParsedEntryLink, parse_entry_links, serialize_entry_links
from .observers import Observer, ObserverRegistry
from .resolution import resolve_field_or_alias
from .types import DEFAULT_TYPE, EntryType


_KEYWORDS = StandardField.KEYWORDS.value
_FILE = StandardField.FILE.value
_TYPE_HEADER = InternalField.TYPE_HEADER.value


@runtime_checkable
class CrossReferenceResolver(Protocol):
    """Collection-side services used when resolving fields across records."""

    def referenced_entry(self, entry: BibEntry) -> BibEntry | None: ...

    def expand(self, text: str) -> str: ...


@dataclass(slots=True)
class SharedEntryData:
    """Opaque token owned by an external synchronisation layer."""

    shared_id: int = -1
    version: int = 1


class BibEntry:
    """A mutable bibliographic record with change notification."""

    def __init__(self, entry_type: EntryType | str = DEFAULT_TYPE) -> None:
        require(entry_type, "entry type must not be None")
        self._id: str = next_id()
        self._type: EntryType = EntryType.parse(entry_type)
        self._fields: dict[str, str] = {}
        self._observers = ObserverRegistry()
        self._lock = RLock()
        self._cache = DerivedValueCache(lock=self._lock)
        self._parsed_serialization = ""
        self._user_comments = ""
        self._changed = False
        self.shared_data = SharedEntryData()

    # -- identity ---------------------------------------------------------

    @property
    def id(self) -> str:
        """Internal identifier, distinct from the citation key."""
        return self._id

    def set_id(self, new_id: str) -> None:
        require(new_id, "every entry must have an id")
        with self._lock:
            old_id = self._id
            self._id = new_id
            self._changed = True
        change = FieldChange(self, InternalField.INTERNAL_ID_FIELD.value, old_id, new_id)
        self._observers.publish(EntryEvent(ChangeKind.CHANGED, change))

    @property
    def type(self) -> EntryType:
        return self._type

    def set_type(
        self,
        new_type: EntryType | str,
        source: EntryEventSource = EntryEventSource.LOCAL,
    ) -> FieldChange | None:
        require(new_type, "entry type must not be None")
        parsed = EntryType.parse(new_type)
        with self._lock:
            old_type = self._type
            if parsed == old_type:
                return None
            self._type = parsed
            self._changed = True
            for header in TYPE_HEADERS:
                self._cache.invalidate(header)
        change = FieldChange(self, _TYPE_HEADER, old_type.name, parsed.name)
        self._observers.publish(EntryEvent(ChangeKind.TYPE_CHANGED, change, source))
        return change

    # -- field store ------------------------------------------------------

    @property
    def fields(self) -> frozenset[str]:
        return frozenset(self._snapshot())

    @property
    def field_map(self) -> Mapping[str, str]:
        """Read-only snapshot of the stored fields."""
        return MappingProxyType(self._snapshot())

    @property
    def field_values(self) -> list[str]:
        return list(self._snapshot().values())

    def _snapshot(self) -> dict[str, str]:
        with self._lock:
            return self._fields.copy()

    def get_field(self, field: FieldName) -> str | None:
        return self._fields.get(normalize_field(field))

    def has_field(self, field: FieldName) -> bool:
        return normalize_field(field) in self._fields

    def set_field(
        self,
        field: FieldName,
        value: str,
        source: EntryEventSource = EntryEventSource.LOCAL,
    ) -> FieldChange | None:
        """Store ``value``; an empty value clears the field, an equal one is a no-op."""
        name = normalize_field(field)
        require(value, "field value must not be None")
        if value == "":
            return self.clear_field(name, source)

        with self._lock:
            old_value = self._fields.get(name)
            if value == old_value:
                return None
            self._changed = True
            self._fields[name] = sys.intern(value)
            self._cache.invalidate(name)

        change = FieldChange(self, name, old_value, value)
        kind = ChangeKind.ADDED if old_value is None else ChangeKind.CHANGED
        self._observers.publish(EntryEvent(kind, change, source))
        return change

    def set_field_if_present(
        self,
        field: FieldName,
        value: str | None,
        source: EntryEventSource = EntryEventSource.LOCAL,
    ) -> FieldChange | None:
        if value is None:
            return None
        return self.set_field(field, value, source)

    def set_fields(self, fields: Mapping[FieldName, str]) -> None:
        """Apply several assignments; each one notifies on its own."""
        require(fields, "fields must not be None")
        for field, value in fields.items():
            self.set_field(field, value)

    def with_field(self, field: FieldName, value: str) -> BibEntry:
        self.set_field(field, value)
        return self

    def clear_field(
        self,
        field: FieldName,
        source: EntryEventSource = EntryEventSource.LOCAL,
    ) -> FieldChange | None:
        name = normalize_field(field)
        with self._lock:
            old_value = self._fields.get(name)
            if old_value is None:
                return None
            self._changed = True
            del self._fields[name]
            self._cache.invalidate(name)

        change = FieldChange(self, name, old_value, None)
        self._observers.publish(EntryEvent(ChangeKind.REMOVED, change, source))
        return change

    # -- citation key -----------------------------------------------------

    @property
    def cite_key(self) -> str | None:
        return self._fields.get(KEY_FIELD)

    def set_cite_key(self, cite_key: str) -> FieldChange | None:
        return self.set_field(KEY_FIELD, cite_key)

    def with_cite_key(self, cite_key: str) -> BibEntry:
        self.set_cite_key(cite_key)
        return self

    def clear_cite_key(self) -> FieldChange | None:
        return self.clear_field(KEY_FIELD)

    def has_cite_key(self) -> bool:
        return bool(self.cite_key)

    # -- resolution -------------------------------------------------------

    def get_field_or_alias(self, field: FieldName) -> str | None:
        """Return the field, its biblatex alias, or the matching date part."""
        return resolve_field_or_alias(normalize_field(field), self._fields.get)

    def get_field_or_alias_latex_free(self, field: FieldName) -> str | None:
        return resolve_field_or_alias(normalize_field(field), self.get_latex_free_field)

    def get_resolved_field_or_alias(
        self,
        field: FieldName | OrFields,
        database: CrossReferenceResolver | None = None,
    ) -> str | None:
        """Resolve ``field`` locally, then through the ``crossref`` target.

        When ``database`` is given the result also has its ``#string#``
        references expanded.
        """
        if isinstance(field, OrFields):
            return self.get_resolved_field_or_alias_or(field, database)

        name = normalize_field(field)
        if name in TYPE_HEADERS:
            return self._type.display_name
        if name == KEY_FIELD:
            return self.cite_key

        result = self.get_field_or_alias(name)
        if result is None and database is not None:
            referred = database.referenced_entry(self)
            if referred is not None:
                result = referred.get_field_or_alias(name)

        if result is None or database is None:
            return result
        return database.expand(result)

    def get_resolved_field_or_alias_or(
        self,
        fields: OrFields | Iterable[FieldName],
        database: CrossReferenceResolver | None = None,
    ) -> str | None:
        for field in fields:
            value = self.get_resolved_field_or_alias(field, database)
            if value is not None:
                return value
        return None

    def all_fields_present(
        self,
        fields: Iterable[OrFields | FieldName],
        database: CrossReferenceResolver | None = None,
    ) -> bool:
        return all(self.get_resolved_field_or_alias(field, database) is not None for field in fields)

    # -- derived values ---------------------------------------------------

    def get_latex_free_field(self, field: FieldName) -> str | None:
        """Return the field with LaTeX markup converted to Unicode (cached)."""
        name = normalize_field(field)
        if name in TYPE_HEADERS:
            entry_type = self._type
            return self._cache.latex_free(
                name, lambda: entry_type.display_name, lambda: self._type is entry_type
            )

        raw = self._fields.get(name)
        if raw is None:
            return None
        if name == KEY_FIELD:
            return self._cache.latex_free(name, lambda: raw, lambda: self._fields.get(name) is raw)
        return self._cache.latex_free(
            name,
            lambda: sys.intern(latex_to_unicode(raw)),
            lambda: self._fields.get(name) is raw,
        )

    def get_field_as_words(self, field: FieldName) -> frozenset[str]:
        name = normalize_field(field)
        raw = self._fields.get(name)
        if raw is None:
            return frozenset()
        return self._cache.words(
            name,
            lambda: frozenset(string_as_words(raw)),
            lambda: self._fields.get(name) is raw,
        )

    # -- convenience accessors --------------------------------------------

    @property
    def title(self) -> str | None:
        return self.get_field(StandardField.TITLE)

    @property
    def doi(self) -> str | None:
        return normalize_doi(self.get_field(StandardField.DOI))

    @property
    def publication_date(self) -> Date | None:
        return Date.parse(self.get_field_or_alias(StandardField.DATE))

    def get_month(self) -> Month | None:
        return Month.parse(self.get_field_or_alias(StandardField.MONTH))

    def set_month(self, month: Month) -> FieldChange | None:
        require(month, "month must not be None")
        return self.set_field(StandardField.MONTH, month.macro_format)

    def set_date(self, date: Date) -> None:
        """Write the year, month and day components present in ``date``."""
        require(date, "date must not be None")
        self.set_field(StandardField.YEAR, str(date.year))
        if date.month is not None:
            self.set_month(date.month)
        if date.day is not None:
            self.set_field(StandardField.DAY, str(date.day))

    def author_title_year(self, max_characters: int = 0) -> str:
        """Short description ``Author: "Title" (Year)``, truncated when asked."""
        author = self.get_field(StandardField.AUTHOR) or "N/A"
        title = self.get_field(StandardField.TITLE) or "N/A"
        year = self.get_field(StandardField.YEAR) or "N/A"
        text = f'{author}: "{title}" ({year})'
        if max_characters <= 0 or len(text) <= max_characters:
            return text
        return text[:max_characters] + "..."

    # -- serialization state ----------------------------------------------

    @property
    def parsed_serialization(self) -> str:
        return self._parsed_serialization

    def set_parsed_serialization(self, serialization: str) -> None:
        """Record the text read from disk; the entry is clean again."""
        self._parsed_serialization = serialization
        self._changed = False

    @property
    def user_comments(self) -> str:
        return self._user_comments

    @user_comments.setter
    def user_comments(self, comments: str) -> None:
        self._user_comments = strip_trailing_whitespace(comments or "")

    @property
    def changed(self) -> bool:
        return self._changed

    @changed.setter
    def changed(self, value: bool) -> None:
        self._changed = value

    def has_changed(self) -> bool:
        return self._changed

    def to_canonical(self) -> str:
        return canonical_representation(self)

    # -- keywords ---------------------------------------------------------

    def get_keywords(self, delimiter: str) -> KeywordList:
        return KeywordList.parse(self.get_field(_KEYWORDS), delimiter)

    def get_resolved_keywords(
        self, delimiter: str, database: CrossReferenceResolver | None = None
    ) -> KeywordList:
        return KeywordList.parse(self.get_resolved_field_or_alias(_KEYWORDS, database), delimiter)

    def put_keywords(
        self, keywords: KeywordList | Iterable[str | Keyword], delimiter: str
    ) -> FieldChange | None:
        """Replace the keyword field; an empty list clears it."""
        require(keywords, "keywords must not be None")
        require(delimiter, "keyword delimiter must not be None")
        if not isinstance(keywords, KeywordList):
            keywords = KeywordList(keywords)

        if not keywords:
            return self.clear_field(_KEYWORDS)
        return self.set_field(_KEYWORDS, keywords.as_string(delimiter))

    def add_keyword(self, keyword: str | Keyword, delimiter: str) -> FieldChange | None:
        """Add ``keyword`` unless it is already listed (case-insensitive)."""
        require(keyword, "keyword must not be None")
        if isinstance(keyword, str) and not keyword:
            return None
        keywords = self.get_keywords(delimiter)
        keywords.add(keyword)
        return self.put_keywords(keywords, delimiter)

    def add_keywords(self, keywords: Iterable[str | Keyword], delimiter: str) -> None:
        require(keywords, "keywords must not be None")
        for keyword in keywords:
            self.add_keyword(keyword, delimiter)

    def remove_keywords(
        self, keywords: Iterable[str | Keyword], delimiter: str
    ) -> FieldChange | None:
        current = self.get_keywords(delimiter)
        current.remove_all(keywords)
        return self.put_keywords(current, delimiter)

    def replace_keywords(
        self,
        to_replace: Iterable[str | Keyword],
        new_keyword: str | Keyword,
        delimiter: str,
    ) -> FieldChange | None:
        current = self.get_keywords(delimiter)
        current.replace_all(to_replace, new_keyword)
        return self.put_keywords(current, delimiter)

    # -- linked files -----------------------------------------------------

    def get_files(self) -> list[LinkedFile]:
        """Return a fresh list; editing it does not touch the entry."""
        return parse_files(self.get_field(_FILE))

    def set_files(self, files: Iterable[LinkedFile]) -> FieldChange | None:
        require(files, "files must not be None")
        new_value = serialize_files(files)
        if self.get_field(_FILE) == new_value:
            return None
        return self.set_field(_FILE, new_value)

    def add_file(self, linked_file: LinkedFile) -> FieldChange | None:
        require(linked_file, "linked file must not be None")
        files = self.get_files()
        files.append(linked_file)
        return self.set_files(files)

    # -- entry links ------------------------------------------------------

    def get_entry_links(
        self, field: FieldName, database: EntryLookup | None = None
    ) -> list[ParsedEntryLink]:
        return parse_entry_links(self.get_field(field), database)

    def set_entry_links(
        self, field: FieldName, links: Iterable[ParsedEntryLink]
    ) -> FieldChange | None:
        return self.set_field(field, serialize_entry_links(links))

    # -- observers --------------------------------------------------------

    def register_observer(self, observer: Observer) -> int:
        return self._observers.register(observer)

    def unregister_observer(self, observer: Observer | int) -> bool:
        return self._observers.unregister(observer)

    # -- copying and comparison -------------------------------------------

    def clone(self) -> BibEntry:
        """Copy type, fields and comments under a fresh id, without caches or observers."""
        copy = BibEntry(self._type)
        with self._lock:
            copy._fields = dict(self._fields)
        copy._user_comments = self._user_comments
        return copy

    def __copy__(self) -> BibEntry:
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BibEntry):
            return NotImplemented
        return (
            self._type == other._type
            and self._snapshot() == other._snapshot()
            and self._user_comments == other._user_comments
        )

    def __hash__(self) -> int:
        return hash((self._type, frozenset(self._snapshot().items())))

    def __str__(self) -> str:
        return canonical_representation(self)

    def __repr__(self) -> str:
        return f"BibEntry(id={self._id!r}, type={self._type.name!r}, key={self.cite_key!r})"


__all__ = ["BibEntry", "CrossReferenceResolver", "SharedEntryData"]
