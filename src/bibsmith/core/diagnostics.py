"""Observers forwarding record changes to the standard logging module."""

from __future__ import annotations

import logging

from .entry import ChangeKind, EntryEvent, EntryEventSource


logger = logging.getLogger(__name__)

_MAX_VALUE_LENGTH = 60


def _shorten(value: str | None) -> str:
    if value is None:
        return "<absent>"
    if len(value) <= _MAX_VALUE_LENGTH:
        return repr(value)
    return repr(value[: _MAX_VALUE_LENGTH - 3] + "...")


def format_change_message(event: EntryEvent) -> str:
    """Return a one-line summary of ``event``."""
    entry = event.entry
    label = entry.cite_key or entry.id
    change = event.change
    if event.kind is ChangeKind.ADDED:
        detail = f"added {change.field} = {_shorten(change.new_value)}"
    elif event.kind is ChangeKind.REMOVED:
        detail = f"removed {change.field} (was {_shorten(change.old_value)})"
    elif event.kind is ChangeKind.TYPE_CHANGED:
        detail = f"type {change.old_value} -> {change.new_value}"
    else:
        detail = (
            f"changed {change.field}: {_shorten(change.old_value)} -> {_shorten(change.new_value)}"
        )
    suffix = "" if event.source is EntryEventSource.LOCAL else f" [{event.source.value}]"
    return f"{label}: {detail}{suffix}"


class LoggingObserver:
    """Observer that logs local edits at INFO and every other change at DEBUG."""

    def __init__(self, *, logger_obj: logging.Logger | None = None) -> None:
        self._logger = logger_obj or logger

    def __call__(self, event: EntryEvent) -> None:
        level = logging.INFO if event.source is EntryEventSource.LOCAL else logging.DEBUG
        if self._logger.isEnabledFor(level):
            self._logger.log(level, format_change_message(event))


__all__ = ["LoggingObserver", "format_change_message"]
