"""Configuration models for record handling.

TimestampPreferences

`use_timestamps` (`bool`)
: Write a creation timestamp when a record is created.

`use_modified_timestamp` (`bool`)
: Refresh the timestamp field whenever a record is edited locally.

`timestamp_field` (`str`)
: Name of the field receiving the timestamp. Defaults to ``timestamp``.

`timestamp_format` (`str`)
: ``strftime`` pattern used to render the current time.

`overwrite_timestamp` (`bool`)
: Replace an existing creation timestamp instead of keeping it.

EntryPreferences

`keyword_separator` (`str`)
: Single character separating keywords inside the ``keywords`` field.

`timestamps` (`TimestampPreferences`)
: Nested timestamp configuration.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

try:  # Python >=3.11
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.10
    import tomli as tomllib
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .entry.fields import normalize_field


class TimestampPreferences(BaseModel):
    """When and how records are stamped with creation or edit times."""

    model_config = ConfigDict(extra="forbid")

    use_timestamps: bool = False
    use_modified_timestamp: bool = False
    timestamp_field: str = "timestamp"
    timestamp_format: str = "%Y-%m-%d"
    overwrite_timestamp: bool = False

    @field_validator("timestamp_field")
    @classmethod
    def _normalise_field(cls, value: str) -> str:
        return normalize_field(value)

    @property
    def include_created_timestamp(self) -> bool:
        return self.use_timestamps

    @property
    def include_modified_timestamp(self) -> bool:
        return self.use_modified_timestamp

    @property
    def include_timestamps(self) -> bool:
        return self.use_timestamps and self.use_modified_timestamp

    def now(self, *, clock: datetime | None = None) -> str:
        """Render ``clock`` (default: the current local time) with the configured format."""
        return (clock or datetime.now()).strftime(self.timestamp_format)


class EntryPreferences(BaseModel):
    """Settings shared by the CLI and programmatic callers."""

    model_config = ConfigDict(extra="forbid")

    keyword_separator: str = Field(default=",", min_length=1, max_length=1)
    timestamps: TimestampPreferences = Field(default_factory=TimestampPreferences)


def load_preferences(path: Path | str | None = None) -> EntryPreferences:
    """Load preferences from a TOML file, reading its ``[bibsmith]`` table when present."""
    if path is None:
        return EntryPreferences()
    with Path(path).open("rb") as handle:
        payload: dict[str, Any] = tomllib.load(handle)
    section = payload.get("bibsmith", payload)
    return EntryPreferences.model_validate(section)


__all__ = ["EntryPreferences", "TimestampPreferences", "load_preferences"]
