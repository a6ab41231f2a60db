"""Keyword tokens and the ordered, duplicate-free keyword list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..exceptions import MissingValueError


DEFAULT_HIERARCHICAL_DELIMITER = ">"


class Keyword:
    """A keyword, optionally hierarchical (``Computing > Databases``).

    Equality and hashing ignore case; the original spelling is kept for
    display.
    """

    __slots__ = ("_path",)

    def __init__(self, text: str, *, hierarchical_delimiter: str = DEFAULT_HIERARCHICAL_DELIMITER):
        if text is None:
            raise MissingValueError("keyword must not be None")
        parts = [part.strip() for part in text.split(hierarchical_delimiter)]
        self._path: tuple[str, ...] = tuple(part for part in parts if part)

    @classmethod
    def of(cls, keyword: str | Keyword) -> Keyword:
        if isinstance(keyword, Keyword):
            return keyword
        return cls(keyword)

    @property
    def path(self) -> tuple[str, ...]:
        return self._path

    @property
    def is_hierarchical(self) -> bool:
        return len(self._path) > 1

    def _identity(self) -> tuple[str, ...]:
        return tuple(part.casefold() for part in self._path)

    def __bool__(self) -> bool:
        return bool(self._path)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            other = Keyword(other)
        if not isinstance(other, Keyword):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __str__(self) -> str:
        return f" {DEFAULT_HIERARCHICAL_DELIMITER} ".join(self._path)

    def __repr__(self) -> str:
        return f"Keyword({str(self)!r})"


class KeywordList:
    """Ordered keywords parsed from and serialized to one delimited string."""

    def __init__(self, keywords: Iterable[str | Keyword] = ()) -> None:
        self._keywords: list[Keyword] = []
        for keyword in keywords:
            self.add(keyword)

    @classmethod
    def parse(cls, text: str | None, delimiter: str) -> KeywordList:
        """Split ``text`` on ``delimiter``, trimming and dropping empty tokens."""
        if delimiter is None:
            raise MissingValueError("keyword delimiter must not be None")
        if not text:
            return cls()
        return cls(Keyword(part) for part in text.split(delimiter) if part.strip())

    def as_string(self, delimiter: str) -> str:
        return f"{delimiter} ".join(str(keyword) for keyword in self._keywords)

    def add(self, keyword: str | Keyword) -> bool:
        """Append ``keyword`` unless an equal one is already listed."""
        candidate = Keyword.of(keyword)
        if not candidate or candidate in self._keywords:
            return False
        self._keywords.append(candidate)
        return True

    def remove(self, keyword: str | Keyword) -> bool:
        candidate = Keyword.of(keyword)
        if candidate in self._keywords:
            self._keywords.remove(candidate)
            return True
        return False

    def remove_all(self, keywords: Iterable[str | Keyword]) -> bool:
        removed = False
        for keyword in list(keywords):
            removed = self.remove(keyword) or removed
        return removed

    def replace_all(self, to_replace: Iterable[str | Keyword], new_keyword: str | Keyword) -> None:
        """Drop every keyword in ``to_replace`` and put ``new_keyword`` in the first vacated slot.

        Nothing is added when no keyword matched, or when ``new_keyword`` is
        already listed.
        """
        if new_keyword is None:
            raise MissingValueError("replacement keyword must not be None")
        targets = [Keyword.of(keyword) for keyword in to_replace]
        position = next(
            (index for index, keyword in enumerate(self._keywords) if keyword in targets),
            None,
        )
        if position is None:
            return
        self.remove_all(targets)
        candidate = Keyword.of(new_keyword)
        if candidate and candidate not in self._keywords:
            self._keywords.insert(position, candidate)

    def __contains__(self, keyword: object) -> bool:
        if isinstance(keyword, str):
            keyword = Keyword(keyword)
        return keyword in self._keywords

    def __iter__(self) -> Iterator[Keyword]:
        return iter(self._keywords)

    def __len__(self) -> int:
        return len(self._keywords)

    def __bool__(self) -> bool:
        return bool(self._keywords)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeywordList):
            return NotImplemented
        return self._keywords == other._keywords

    def __repr__(self) -> str:
        return f"KeywordList({[str(keyword) for keyword in self._keywords]!r})"


__all__ = ["Keyword", "KeywordList"]
