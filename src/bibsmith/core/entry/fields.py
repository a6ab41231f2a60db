"""Field identifiers, biblatex aliases, and alternative-field groups."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from ..exceptions import MissingValueError


class StandardField(Enum):
    """Well-known BibTeX and biblatex field names."""

    ABSTRACT = "abstract"
    ADDRESS = "address"
    ANNOTATION = "annotation"
    ANNOTE = "annote"
    ARCHIVEPREFIX = "archiveprefix"
    AUTHOR = "author"
    BOOKTITLE = "booktitle"
    CHAPTER = "chapter"
    COMMENT = "comment"
    CROSSREF = "crossref"
    DATE = "date"
    DAY = "day"
    DOI = "doi"
    EDITION = "edition"
    EDITOR = "editor"
    EPRINT = "eprint"
    EPRINTCLASS = "eprintclass"
    EPRINTTYPE = "eprinttype"
    FILE = "file"
    HOWPUBLISHED = "howpublished"
    INSTITUTION = "institution"
    ISBN = "isbn"
    ISSN = "issn"
    JOURNAL = "journal"
    JOURNALTITLE = "journaltitle"
    KEY = "key"
    KEYWORDS = "keywords"
    LOCATION = "location"
    MONTH = "month"
    NOTE = "note"
    NUMBER = "number"
    ORGANIZATION = "organization"
    PAGES = "pages"
    PDF = "pdf"
    PRIMARYCLASS = "primaryclass"
    PUBLISHER = "publisher"
    RELATED = "related"
    SCHOOL = "school"
    SERIES = "series"
    SORTKEY = "sortkey"
    TIMESTAMP = "timestamp"
    TITLE = "title"
    TYPE = "type"
    URL = "url"
    VOLUME = "volume"
    XDATA = "xdata"
    YEAR = "year"


class InternalField(Enum):
    """Names reserved for record bookkeeping rather than bibliographic data."""

    KEY_FIELD = "citationkey"
    TYPE_HEADER = "entrytype"
    OBSOLETE_TYPE_HEADER = "bibtextype"
    INTERNAL_ID_FIELD = "internal-id"


FieldName = str | StandardField | InternalField


def normalize_field(field: FieldName | None) -> str:
    """Return the lowercase storage key for a field identifier."""
    if field is None:
        raise MissingValueError("field name must not be None")
    if isinstance(field, (StandardField, InternalField)):
        return field.value
    name = str(field).strip().lower()
    if not name:
        raise MissingValueError("field name must not be empty")
    return name


KEY_FIELD = InternalField.KEY_FIELD.value
TYPE_HEADERS = frozenset({InternalField.TYPE_HEADER.value, InternalField.OBSOLETE_TYPE_HEADER.value})
DATE_COMPONENTS = frozenset(
    {StandardField.YEAR.value, StandardField.MONTH.value, StandardField.DAY.value}
)

_ALIAS_PAIRS: tuple[tuple[StandardField, StandardField], ...] = (
    (StandardField.ADDRESS, StandardField.LOCATION),
    (StandardField.ANNOTE, StandardField.ANNOTATION),
    (StandardField.ARCHIVEPREFIX, StandardField.EPRINTTYPE),
    (StandardField.JOURNAL, StandardField.JOURNALTITLE),
    (StandardField.KEY, StandardField.SORTKEY),
    (StandardField.PDF, StandardField.FILE),
    (StandardField.PRIMARYCLASS, StandardField.EPRINTCLASS),
    (StandardField.SCHOOL, StandardField.INSTITUTION),
)

# BibTeX <-> biblatex names, both directions.
FIELD_ALIASES: dict[str, str] = {}
for _old, _new in _ALIAS_PAIRS:
    FIELD_ALIASES[_old.value] = _new.value
    FIELD_ALIASES[_new.value] = _old.value
del _old, _new


def alias_for(field: FieldName) -> str | None:
    """Return the configured alias of ``field``, if any."""
    return FIELD_ALIASES.get(normalize_field(field))


class OrFields(tuple[str, ...]):
    """Ordered alternatives, the first resolvable one wins (``author/editor``)."""

    def __new__(cls, fields: Iterable[FieldName]) -> OrFields:
        names = tuple(normalize_field(field) for field in fields)
        if not names:
            raise ValueError("OrFields requires at least one field")
        return super().__new__(cls, names)

    @classmethod
    def of(cls, *fields: FieldName) -> OrFields:
        return cls(fields)

    @classmethod
    def parse(cls, text: str) -> OrFields:
        """Parse a slash-separated group such as ``"author/editor"``."""
        return cls(part for part in text.split("/") if part.strip())

    @property
    def display_name(self) -> str:
        return "/".join(self)

    def __repr__(self) -> str:
        return f"OrFields({self.display_name!r})"


__all__ = [
    "DATE_COMPONENTS",
    "FIELD_ALIASES",
    "KEY_FIELD",
    "TYPE_HEADERS",
    "FieldName",
    "InternalField",
    "OrFields",
    "StandardField",
    "alias_for",
    "normalize_field",
]
