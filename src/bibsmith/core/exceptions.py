"""Custom exception hierarchy for bibliographic records."""

from __future__ import annotations


class BibEntryError(RuntimeError):
    """Base exception for bibliographic record failures."""


class MissingValueError(BibEntryError, TypeError):
    """Raised when a required argument is ``None``."""


def require(value: object, message: str) -> None:
    """Raise :class:`MissingValueError` when ``value`` is ``None``."""
    if value is None:
        raise MissingValueError(message)


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = ["BibEntryError", "MissingValueError", "exception_messages", "require"]
