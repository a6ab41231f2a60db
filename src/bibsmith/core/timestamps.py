"""Creation and modification timestamps driven by record change events."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
import logging

from .config import TimestampPreferences
from .entry import BibEntry, EntryEvent, EntryEventSource, FieldChange, InternalField


logger = logging.getLogger(__name__)


def stamp_created(
    entry: BibEntry,
    preferences: TimestampPreferences,
    *,
    clock: Callable[[], datetime] | None = None,
) -> FieldChange | None:
    """Write the creation timestamp when enabled and not already present."""
    if not preferences.include_created_timestamp:
        return None
    if entry.has_field(preferences.timestamp_field) and not preferences.overwrite_timestamp:
        return None
    now = preferences.now(clock=clock() if clock else None)
    return entry.set_field(
        preferences.timestamp_field, now, EntryEventSource.CLEANUP_TIMESTAMP
    )


class TimestampUpdater:
    """Observer refreshing the timestamp field after local edits."""

    def __init__(
        self,
        preferences: TimestampPreferences,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._preferences = preferences
        self._clock = clock
        self._ignored_fields = frozenset(
            {preferences.timestamp_field, InternalField.INTERNAL_ID_FIELD.value}
        )

    def __call__(self, event: EntryEvent) -> None:
        if not self._preferences.include_modified_timestamp:
            return
        if event.source is not EntryEventSource.LOCAL:
            return
        if event.field in self._ignored_fields:
            return
        now = self._preferences.now(clock=self._clock() if self._clock else None)
        logger.debug("Updating %s of %r to %s", self._preferences.timestamp_field, event.entry, now)
        event.entry.set_field(
            self._preferences.timestamp_field, now, EntryEventSource.CLEANUP_TIMESTAMP
        )


__all__ = ["TimestampUpdater", "stamp_created"]
