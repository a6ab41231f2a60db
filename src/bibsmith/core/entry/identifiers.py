"""Process-wide generator for internal record identifiers."""

from __future__ import annotations

from itertools import count
from threading import Lock


_COUNTER = count()
_LOCK = Lock()


def next_id() -> str:
    """Return a fresh identifier, unique within this process."""
    with _LOCK:
        return f"id{next(_COUNTER)}"


__all__ = ["next_id"]
