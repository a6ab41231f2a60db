"""Collection collaborator for bibliographic records.

Architecture
: `EntryCollection` stores `BibEntry` records by citation key, records
  provenance and loading issues, and implements the cross-reference lookup
  and ``@string`` expansion used by `BibEntry.get_resolved_field_or_alias`.
: `parsing` converts between pybtex entries and records so BibTeX input and
  output stay delegated to pybtex.

Usage Example

```pycon
>>> from bibsmith.core.bibliography import EntryCollection
>>> collection = EntryCollection()
>>> collection.load_string(\"\"\"@book{parent, title = {Collected Papers}, year = {2020}}
... @inbook{child, crossref = {parent}, chapter = {3}}\"\"\")
>>> child = collection.get_entry_by_key("child")
>>> child.get_resolved_field_or_alias("title", collection)
'Collected Papers'
```
"""

from __future__ import annotations

from .collection import BibliographyIssue, EntryCollection
from .parsing import (
    bibliography_data_from_string,
    entry_from_pybtex,
    entry_to_pybtex,
    parse_bibtex,
)


__all__ = [
    "BibliographyIssue",
    "EntryCollection",
    "bibliography_data_from_string",
    "entry_from_pybtex",
    "entry_to_pybtex",
    "parse_bibtex",
]
