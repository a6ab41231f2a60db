"""Deterministic BibTeX rendering of a record, used for ``str(entry)``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .fields import KEY_FIELD


if TYPE_CHECKING:
    from .entry import BibEntry


def _field_line(name: str, value: str) -> str:
    normalized = value.replace("\r\n", "\n")
    return f"  {name} = {{{normalized}}}"


def canonical_representation(entry: BibEntry) -> str:
    """Render ``entry`` with fields sorted by name and nothing escaped.

    The citation key goes into the header rather than the field list, and the
    shared-storage token is written as a trailing ``_shared`` pseudo-field.
    """
    values = {name.lower(): value for name, value in entry.field_map.items() if name != KEY_FIELD}
    lines = [_field_line(name, values[name]) for name in sorted(values)]
    shared = entry.shared_data
    lines.append(f"  _shared = {{sharedId: {shared.shared_id}, version: {shared.version}}}")

    prefix = f"{entry.user_comments}\n" if entry.user_comments else ""
    header = f"@{entry.type.name}{{{entry.cite_key or ''},"
    return prefix + header + "\n" + ",\n".join(lines) + "\n}"


__all__ = ["canonical_representation"]
