"""Linked-file descriptors stored in the ``file`` field.

The field holds ``description:link:type`` records separated by ``;``. A
backslash escapes ``:``, ``;`` and itself; any other backslash is literal so
Windows paths survive unescaped input.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


_RECORD_SEPARATOR = ";"
_PART_SEPARATOR = ":"
_ESCAPE = "\\"
_ESCAPABLE = frozenset({_RECORD_SEPARATOR, _PART_SEPARATOR, _ESCAPE})


@dataclass(frozen=True, slots=True)
class LinkedFile:
    """A file attached to a record: free description, path or URL, and type."""

    description: str = ""
    link: str = ""
    file_type: str = ""

    @property
    def is_online(self) -> bool:
        lowered = self.link.lower()
        return lowered.startswith(("http://", "https://", "ftp://", "www."))


def _escape(value: str) -> str:
    return "".join(_ESCAPE + char if char in _ESCAPABLE else char for char in value)


def serialize_files(files: Iterable[LinkedFile]) -> str:
    """Return the field representation of ``files``."""
    records = []
    for linked in files:
        parts = (linked.description, linked.link, linked.file_type)
        records.append(_PART_SEPARATOR.join(_escape(part) for part in parts))
    return _RECORD_SEPARATOR.join(records)


def _to_linked_file(parts: list[str]) -> LinkedFile | None:
    while len(parts) < 3:
        parts.append("")
    description, link, file_type = parts[0], parts[1], _PART_SEPARATOR.join(parts[2:])
    if not description and not link and file_type:
        return LinkedFile(link=file_type)
    if description and not link and not file_type:
        return LinkedFile(link=description)
    if not description and not link and not file_type:
        return None
    return LinkedFile(description, link, file_type)


def parse_files(value: str | None) -> list[LinkedFile]:
    """Parse the field representation into a fresh list."""
    files: list[LinkedFile] = []
    if not value:
        return files

    parts: list[str] = []
    current: list[str] = []
    index = 0
    while index < len(value):
        char = value[index]
        following = value[index + 1] if index + 1 < len(value) else ""
        if char == _ESCAPE and following in _ESCAPABLE:
            current.append(following)
            index += 2
            continue
        if char == _PART_SEPARATOR and len(current) == 1 and current[0].isalpha() and following in {
            "\\",
            "/",
        }:
            # Windows drive letter such as ``C:\``
            current.append(char)
        elif char == _PART_SEPARATOR:
            parts.append("".join(current))
            current = []
        elif char == _RECORD_SEPARATOR:
            parts.append("".join(current))
            current = []
            linked = _to_linked_file(parts)
            if linked is not None:
                files.append(linked)
            parts = []
        else:
            current.append(char)
        index += 1

    parts.append("".join(current))
    linked = _to_linked_file(parts)
    if linked is not None:
        files.append(linked)
    return files


__all__ = ["LinkedFile", "parse_files", "serialize_files"]
