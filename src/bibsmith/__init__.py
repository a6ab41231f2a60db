"""Primary public API for bibsmith."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from bibsmith.core.bibliography import BibliographyIssue, EntryCollection
from bibsmith.core.config import EntryPreferences, TimestampPreferences, load_preferences
from bibsmith.core.diagnostics import LoggingObserver
from bibsmith.core.entry import (
    BibEntry,
    ChangeKind,
    Date,
    EntryEvent,
    EntryEventSource,
    EntryType,
    Keyword,
    KeywordList,
    LinkedFile,
    Month,
    OrFields,
    ParsedEntryLink,
    StandardEntryType,
    StandardField,
)
from bibsmith.core.exceptions import BibEntryError, MissingValueError
from bibsmith.core.timestamps import TimestampUpdater, stamp_created


try:
    __version__ = _pkg_version("bibsmith")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "BibEntry",
    "BibEntryError",
    "BibliographyIssue",
    "ChangeKind",
    "Date",
    "EntryCollection",
    "EntryEvent",
    "EntryEventSource",
    "EntryPreferences",
    "EntryType",
    "Keyword",
    "KeywordList",
    "LinkedFile",
    "LoggingObserver",
    "MissingValueError",
    "Month",
    "OrFields",
    "ParsedEntryLink",
    "StandardEntryType",
    "StandardField",
    "TimestampPreferences",
    "TimestampUpdater",
    "__version__",
    "load_preferences",
    "stamp_created",
]
