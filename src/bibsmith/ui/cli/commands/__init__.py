"""CLI command implementations exposed via `bibsmith.ui.cli`.

Each command is a plain function registered on the Typer application in
``bibsmith.ui.cli.app``; they are re-exported here so they can be imported
using dotted paths (e.g. ``bibsmith.ui.cli.commands.resolve``).
"""

from __future__ import annotations

from .entries import keywords, load_collection, resolve, show


__all__ = ["keywords", "load_collection", "resolve", "show"]
