"""Typer application wiring for the bibsmith CLI."""

from __future__ import annotations

from typing import Annotated

import typer

from bibsmith.core.config import load_preferences
from bibsmith.ui.cli.commands import keywords, resolve, show
from bibsmith.version import get_version

from ._options import DIAGNOSTICS_PANEL, ConfigOption, DebugOption, VerbosityOption
from .state import debug_enabled, emit_error, set_cli_state


def _print_version(value: bool) -> None:
    if value:
        typer.echo(get_version())
        raise typer.Exit()


app = typer.Typer(
    help="Inspect bibliographic records stored in BibTeX files.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


@app.callback()
def configure(
    ctx: typer.Context,
    verbose: VerbosityOption = 0,
    debug: DebugOption = False,
    config: ConfigOption = None,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show the installed bibsmith version and exit.",
            callback=_print_version,
            is_eager=True,
            rich_help_panel=DIAGNOSTICS_PANEL,
        ),
    ] = False,
) -> None:
    """Apply diagnostics flags and load preferences before running a command."""
    state = set_cli_state(ctx=ctx, verbosity=verbose, debug=debug)
    if config is None:
        return
    try:
        state.preferences = load_preferences(config)
    except (OSError, ValueError) as exc:
        if debug_enabled():
            raise
        emit_error(f"Invalid configuration file '{config}'.", exception=exc)
        raise typer.Exit(code=1) from exc


app.command()(show)
app.command()(resolve)
app.command()(keywords)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - catch-all for console scripts
        from .state import get_cli_state

        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
