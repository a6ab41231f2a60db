"""Change descriptors published when a record is mutated."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from .entry import BibEntry


class EntryEventSource(Enum):
    """Origin of a mutation, so observers can tell local edits from merges."""

    LOCAL = "local"
    IMPORT = "import"
    SHARED = "shared"
    UNDO = "undo"
    SAVE_ACTION = "save_action"
    CLEANUP_TIMESTAMP = "cleanup_timestamp"


class ChangeKind(Enum):
    ADDED = "added"
    CHANGED = "changed"
    REMOVED = "removed"
    TYPE_CHANGED = "type_changed"


@dataclass(frozen=True, slots=True)
class FieldChange:
    """A single field transition; ``None`` values mean absent."""

    entry: BibEntry
    field: str
    old_value: str | None
    new_value: str | None

    @property
    def is_addition(self) -> bool:
        return self.old_value is None and self.new_value is not None

    @property
    def is_removal(self) -> bool:
        return self.new_value is None


@dataclass(frozen=True, slots=True)
class EntryEvent:
    """Notification delivered to the observers of one record."""

    kind: ChangeKind
    change: FieldChange
    source: EntryEventSource = EntryEventSource.LOCAL

    @property
    def entry(self) -> BibEntry:
        return self.change.entry

    @property
    def field(self) -> str:
        return self.change.field


__all__ = ["ChangeKind", "EntryEvent", "EntryEventSource", "FieldChange"]
