"""Commands inspecting a single entry of a BibTeX file."""

from __future__ import annotations

from pathlib import Path

import typer

from bibsmith.core.bibliography import EntryCollection
from bibsmith.core.entry import BibEntry, OrFields
from bibsmith.core.latex import latex_to_unicode

from .._options import (
    BibFileArgument,
    CiteKeyArgument,
    CrossrefOption,
    FieldArgument,
    FieldsTableOption,
    LatexFreeOption,
    SeparatorOption,
)
from ..state import emit_error, emit_warning, get_cli_state


def load_collection(bib_file: Path) -> EntryCollection:
    """Load ``bib_file`` and surface loading issues as warnings."""
    collection = EntryCollection()
    collection.load_files([bib_file])
    for issue in collection.issues:
        prefix = f"{issue.key}: " if issue.key else ""
        emit_warning(f"{prefix}{issue.message}")
    return collection


def _require_entry(collection: EntryCollection, key: str) -> BibEntry:
    entry = collection.get_entry_by_key(key)
    if entry is None:
        emit_error(f"No entry with citation key '{key}'.")
        raise typer.Exit(code=1)
    return entry


def show(bib_file: BibFileArgument, key: CiteKeyArgument, fields: FieldsTableOption = False) -> None:
    """Print an entry in canonical BibTeX form, or its fields as a table."""
    collection = load_collection(bib_file)
    entry = _require_entry(collection, key)

    if not fields:
        typer.echo(entry.to_canonical())
        return

    from rich import box
    from rich.table import Table

    table = Table(
        title=f"{key} ({entry.type.display_name})",
        box=box.SQUARE,
        header_style="bold cyan",
    )
    table.add_column("Field", style="green", no_wrap=True)
    table.add_column("Value")
    for name, value in sorted(entry.field_map.items()):
        table.add_row(name, value)
    get_cli_state().console.print(table)


def resolve(
    bib_file: BibFileArgument,
    key: CiteKeyArgument,
    field: FieldArgument,
    latex_free: LatexFreeOption = False,
    crossref: CrossrefOption = True,
) -> None:
    """Print the effective value of a field, following aliases and cross-references."""
    collection = load_collection(bib_file)
    entry = _require_entry(collection, key)
    alternatives = OrFields.parse(field)

    if latex_free and not crossref:
        value = next(
            (
                resolved
                for resolved in map(entry.get_field_or_alias_latex_free, alternatives)
                if resolved is not None
            ),
            None,
        )
    else:
        value = entry.get_resolved_field_or_alias(alternatives, collection if crossref else None)
        if value is not None and latex_free:
            value = latex_to_unicode(value)

    if value is None:
        emit_error(f"Field '{alternatives.display_name}' is not set for '{key}'.")
        raise typer.Exit(code=1)
    typer.echo(value)


def keywords(
    bib_file: BibFileArgument,
    key: CiteKeyArgument,
    separator: SeparatorOption = None,
) -> None:
    """List the keywords of an entry, one per line."""
    delimiter = separator or get_cli_state().preferences.keyword_separator
    collection = load_collection(bib_file)
    entry = _require_entry(collection, key)
    for keyword in entry.get_keywords(delimiter):
        typer.echo(str(keyword))


__all__ = ["keywords", "load_collection", "resolve", "show"]
