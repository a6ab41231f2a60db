"""Aggregation of `BibEntry` records loaded from BibTeX sources."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
import logging
from pathlib import Path
import re

from pybtex.database import BibliographyData
from pybtex.exceptions import PybtexError

from ..entry import BibEntry, StandardField
from ..exceptions import require
from .parsing import entry_from_pybtex, entry_to_pybtex, parse_bibtex


logger = logging.getLogger(__name__)

_STRING_REFERENCE_RE = re.compile(r"#([^#\s]+)#")
_MAX_EXPANSION_DEPTH = 32


@dataclass(slots=True)
class BibliographyIssue:
    """A problem encountered while loading bibliography entries."""

    message: str
    key: str | None = None
    source: Path | None = None


class EntryCollection:
    """Records keyed by citation key, with ``crossref`` and ``@string`` support.

    The collection is the collaborator `BibEntry.get_resolved_field_or_alias`
    expects: it finds the entry named by a ``crossref`` field and expands
    ``#name#`` string references.
    """

    def __init__(self) -> None:
        self._entries: dict[str, BibEntry] = {}
        self._strings: dict[str, str] = {}
        self._sources: dict[str, set[Path]] = {}
        self._issues: list[BibliographyIssue] = []
        self._file_entry_counts: dict[Path, int] = {}
        self._file_order: list[Path] = []

    @property
    def issues(self) -> Sequence[BibliographyIssue]:
        """Return the list of issues discovered while loading references."""
        return tuple(self._issues)

    @property
    def file_stats(self) -> Sequence[tuple[Path, int]]:
        """Return (file, entry_count) pairs in the order files were processed."""
        return tuple((path, self._file_entry_counts.get(path, 0)) for path in self._file_order)

    @property
    def strings(self) -> dict[str, str]:
        return dict(self._strings)

    def load_files(self, files: Iterable[Path | str]) -> None:
        """Load BibTeX entries from one or more files."""
        for file_path in files:
            self._load_file(Path(file_path))

    def _load_file(self, file_path: Path) -> None:
        file_path = file_path.resolve()
        self._file_order.append(file_path)

        try:
            payload = file_path.read_text(encoding="utf-8")
            data, macros = parse_bibtex(payload)
        except (OSError, UnicodeDecodeError, PybtexError) as exc:
            self._issues.append(
                BibliographyIssue(
                    message=f"Failed to parse '{file_path}': {exc}",
                    key=None,
                    source=file_path,
                )
            )
            self._file_entry_counts[file_path] = 0
            return

        entry_count = len(data.entries)
        self._file_entry_counts[file_path] = entry_count
        if entry_count == 0:
            self._issues.append(
                BibliographyIssue(
                    message="No references found in file.",
                    key=None,
                    source=file_path,
                )
            )

        self._strings.update(macros)
        self._merge_entries(data, file_path)

    def load_string(self, payload: str, *, source: Path | str | None = None) -> None:
        """Parse and merge an inline BibTeX payload."""
        data, macros = parse_bibtex(payload)
        self._strings.update(macros)
        self.load_data(data, source=source)

    def load_data(
        self,
        data: BibliographyData,
        *,
        source: Path | str | None = None,
    ) -> None:
        """Merge pre-parsed bibliography data into the collection."""
        source_path = self._resolve_source_path(source)
        entry_count = len(data.entries)
        self._file_entry_counts[source_path] = (
            self._file_entry_counts.get(source_path, 0) + entry_count
        )
        if source_path not in self._file_order:
            self._file_order.append(source_path)

        if entry_count == 0:
            self._issues.append(
                BibliographyIssue(
                    message="No references found in inline bibliography data.",
                    key=None,
                    source=source_path,
                )
            )
            return

        self._merge_entries(data, source_path)

    def _resolve_source_path(self, source: Path | str | None) -> Path:
        if source is None:
            return Path("inline-bibliography.bib")
        if isinstance(source, Path):
            return source
        return Path(source)

    def _merge_entries(self, data: BibliographyData, source: Path) -> None:
        for key, pybtex_entry in data.entries.items():
            entry = entry_from_pybtex(key, pybtex_entry)
            existing = self._entries.get(key)

            if existing is None:
                self._entries[key] = entry
                self._sources[key] = {source}
                continue

            if existing != entry:
                self._issues.append(
                    BibliographyIssue(
                        message=(
                            "Duplicate entry conflicts with an existing "
                            "reference; ignoring the newer definition."
                        ),
                        key=key,
                        source=source,
                    )
                )

            # Matching duplicates still originate from multiple sources.
            self._sources[key].add(source)

    def add_entry(self, entry: BibEntry) -> None:
        """Register ``entry`` under its citation key, replacing any previous one."""
        require(entry, "entry must not be None")
        key = entry.cite_key
        if not key:
            raise ValueError("entries added to a collection need a citation key")
        self._entries[key] = entry
        self._sources.setdefault(key, set())

    def remove_entry(self, key: str) -> BibEntry | None:
        self._sources.pop(key, None)
        return self._entries.pop(key, None)

    def add_string(self, name: str, value: str) -> None:
        """Define a ``@string`` macro usable as ``#name#`` in field values."""
        self._strings[name.lower()] = value

    def get_entry_by_key(self, key: str) -> BibEntry | None:
        return self._entries.get(key)

    def sources(self, key: str) -> frozenset[Path]:
        return frozenset(self._sources.get(key, ()))

    def referenced_entry(self, entry: BibEntry) -> BibEntry | None:
        """Return the entry named by the ``crossref`` field of ``entry``."""
        crossref = entry.get_field(StandardField.CROSSREF)
        if not crossref:
            return None
        referenced = self._entries.get(crossref.strip())
        if referenced is None:
            logger.debug("Cross-reference %r of %r is not in the collection", crossref, entry)
        return referenced

    def expand(self, text: str) -> str:
        """Replace ``#name#`` references with their ``@string`` values."""
        return self._expand(text, frozenset(), 0)

    def _expand(self, text: str, seen: frozenset[str], depth: int) -> str:
        if "#" not in text or depth >= _MAX_EXPANSION_DEPTH:
            return text

        def _replace(match: re.Match[str]) -> str:
            name = match.group(1).lower()
            value = self._strings.get(name)
            if value is None or name in seen:
                return match.group(0)
            return self._expand(value, seen | {name}, depth + 1)

        return _STRING_REFERENCE_RE.sub(_replace, text)

    def to_bibliography_data(self, *, keys: Iterable[str] | None = None) -> BibliographyData:
        """Return a BibliographyData object scoped to the selected keys."""
        if keys is None:
            selected = list(self._entries)
        else:
            wanted = set(keys)
            selected = [key for key in self._entries if key in wanted]
        return BibliographyData(
            entries={key: entry_to_pybtex(self._entries[key]) for key in selected}
        )

    def write_bibtex(self, target: Path | str, *, keys: Iterable[str] | None = None) -> None:
        """Persist the bibliography to a BibTeX file, skipping identical rewrites."""
        path = Path(target)
        payload = self.to_bibliography_data(keys=keys).to_string("bibtex").rstrip() + "\n"
        try:
            existing = path.read_text(encoding="utf-8")
        except OSError:
            existing = None
        if existing == payload:
            return
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(payload, encoding="utf-8")

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[BibEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["BibliographyIssue", "EntryCollection"]
