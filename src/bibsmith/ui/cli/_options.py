"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUTS_PANEL = "Input Handling"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"

BibFileArgument = Annotated[
    Path,
    typer.Argument(
        metavar="BIBFILE",
        help="BibTeX file holding the entry and any entry it cross-references.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]

CiteKeyArgument = Annotated[
    str,
    typer.Argument(metavar="KEY", help="Citation key of the entry to inspect."),
]

FieldArgument = Annotated[
    str,
    typer.Argument(metavar="FIELD", help="Field to resolve, or several joined by '/'."),
]

LatexFreeOption = Annotated[
    bool,
    typer.Option(
        "--latex-free",
        help="Convert LaTeX markup in the value to plain Unicode text.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

CrossrefOption = Annotated[
    bool,
    typer.Option(
        "--crossref/--no-crossref",
        help="Fall back to the entry named by the 'crossref' field.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

FieldsTableOption = Annotated[
    bool,
    typer.Option(
        "--fields",
        help="Print a table of stored fields instead of the canonical BibTeX form.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]

SeparatorOption = Annotated[
    str | None,
    typer.Option(
        "--separator",
        help="Keyword separator; defaults to the configured keyword_separator.",
        rich_help_panel=INPUTS_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="TOML file with a [bibsmith] preferences table.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUTS_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity; repeat for debug output.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks on errors.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]
