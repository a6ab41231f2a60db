"""Bibliographic record model.

Architecture
: `BibEntry` is the aggregate. It keeps raw field values, delegates alias and
  date fallbacks to `resolution`, caches LaTeX-free text and word sets in
  `cache`, and publishes `EntryEvent`s through an `ObserverRegistry`.
: Value types live beside it: `EntryType`, `Date`/`Month`, `KeywordList`,
  `LinkedFile`, and `ParsedEntryLink`.

Usage Example

```pycon
>>> from bibsmith.core.entry import BibEntry, StandardEntryType
>>> entry = BibEntry(StandardEntryType.ARTICLE).with_cite_key("doe2023")
>>> _ = entry.set_field("year", "2023")
>>> _ = entry.set_field("month", "mar")
>>> entry.get_field_or_alias("date")
'2023-03'
```
"""

from __future__ import annotations

from .canonical import canonical_representation
from .dates import Date, Month
from .entry import BibEntry, CrossReferenceResolver, SharedEntryData
from .events import ChangeKind, EntryEvent, EntryEventSource, FieldChange
from .fields import (
    FIELD_ALIASES,
    KEY_FIELD,
    FieldName,
    InternalField,
    OrFields,
    StandardField,
    alias_for,
    normalize_field,
)
from .files import LinkedFile, parse_files, serialize_files
from .identifiers import next_id
from .keywords import Keyword, KeywordList
from .links import ParsedEntryLink, parse_entry_links, serialize_entry_links
from .observers import Observer, ObserverRegistry
from .types import DEFAULT_TYPE, EntryType, StandardEntryType


__all__ = [
    "DEFAULT_TYPE",
    "FIELD_ALIASES",
    "KEY_FIELD",
    "BibEntry",
    "ChangeKind",
    "CrossReferenceResolver",
    "Date",
    "EntryEvent",
    "EntryEventSource",
    "EntryType",
    "FieldChange",
    "FieldName",
    "InternalField",
    "Keyword",
    "KeywordList",
    "LinkedFile",
    "Month",
    "Observer",
    "ObserverRegistry",
    "OrFields",
    "ParsedEntryLink",
    "SharedEntryData",
    "StandardEntryType",
    "StandardField",
    "alias_for",
    "canonical_representation",
    "next_id",
    "normalize_field",
    "parse_entry_links",
    "parse_files",
    "serialize_entry_links",
    "serialize_files",
]
