"""Entry kinds: an open enumeration seeded with the BibTeX and biblatex types."""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import MissingValueError


_DISPLAY_NAMES: dict[str, str] = {
    "article": "Article",
    "book": "Book",
    "booklet": "Booklet",
    "collection": "Collection",
    "conference": "Conference",
    "inbook": "InBook",
    "incollection": "InCollection",
    "inproceedings": "InProceedings",
    "manual": "Manual",
    "mastersthesis": "MastersThesis",
    "misc": "Misc",
    "online": "Online",
    "phdthesis": "PhdThesis",
    "proceedings": "Proceedings",
    "report": "Report",
    "techreport": "TechReport",
    "thesis": "Thesis",
    "unpublished": "Unpublished",
}


@dataclass(frozen=True, slots=True)
class EntryType:
    """A record kind identified by its lowercase name."""

    name: str

    def __post_init__(self) -> None:
        if self.name is None:
            raise MissingValueError("entry type must not be None")
        normalized = self.name.strip().lower()
        if not normalized:
            raise ValueError("entry type name must not be empty")
        object.__setattr__(self, "name", normalized)

    @property
    def display_name(self) -> str:
        """Human-readable type name (``InProceedings``), capitalized when unknown."""
        known = _DISPLAY_NAMES.get(self.name)
        if known is not None:
            return known
        return self.name[:1].upper() + self.name[1:]

    @property
    def is_standard(self) -> bool:
        return self.name in _DISPLAY_NAMES

    @classmethod
    def parse(cls, name: str | EntryType) -> EntryType:
        if isinstance(name, EntryType):
            return name
        return cls(name)

    def __str__(self) -> str:
        return self.display_name


class StandardEntryType:
    """Namespace exposing the known entry kinds as constants."""

    ARTICLE = EntryType("article")
    BOOK = EntryType("book")
    BOOKLET = EntryType("booklet")
    COLLECTION = EntryType("collection")
    CONFERENCE = EntryType("conference")
    INBOOK = EntryType("inbook")
    INCOLLECTION = EntryType("incollection")
    INPROCEEDINGS = EntryType("inproceedings")
    MANUAL = EntryType("manual")
    MASTERSTHESIS = EntryType("mastersthesis")
    MISC = EntryType("misc")
    ONLINE = EntryType("online")
    PHDTHESIS = EntryType("phdthesis")
    PROCEEDINGS = EntryType("proceedings")
    REPORT = EntryType("report")
    TECHREPORT = EntryType("techreport")
    THESIS = EntryType("thesis")
    UNPUBLISHED = EntryType("unpublished")


DEFAULT_TYPE = StandardEntryType.MISC


__all__ = ["DEFAULT_TYPE", "EntryType", "StandardEntryType"]
