"""Lazily computed per-field values derived from the raw field text."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any, ContextManager, TypeVar


_T = TypeVar("_T")


def _always_current() -> bool:
    return True


@dataclass(slots=True)
class DerivedValueCache:
    """Latex-free text and word sets, keyed by field name.

    Both maps are filled on first access and purged by :meth:`invalidate`
    whenever the source field is written. A computed value is stored only if
    ``is_current`` still holds once ``lock`` is taken, so a write landing
    while the value was being computed leaves the slot empty.
    """

    lock: Any = None
    _latex_free: dict[str, str] = field(default_factory=dict)
    _words: dict[str, frozenset[str]] = field(default_factory=dict)

    def latex_free(
        self,
        name: str,
        compute: Callable[[], str],
        is_current: Callable[[], bool] = _always_current,
    ) -> str:
        return self._lookup(self._latex_free, name, compute, is_current)

    def words(
        self,
        name: str,
        compute: Callable[[], frozenset[str]],
        is_current: Callable[[], bool] = _always_current,
    ) -> frozenset[str]:
        return self._lookup(self._words, name, compute, is_current)

    def _guard(self) -> ContextManager[Any]:
        return self.lock if self.lock is not None else nullcontext()

    def _lookup(
        self,
        store: dict[str, _T],
        name: str,
        compute: Callable[[], _T],
        is_current: Callable[[], bool],
    ) -> _T:
        cached = store.get(name)
        if cached is not None:
            return cached
        value = compute()
        with self._guard():
            if is_current():
                store[name] = value
        return value

    def invalidate(self, name: str) -> None:
        self._latex_free.pop(name, None)
        self._words.pop(name, None)

    def clear(self) -> None:
        self._latex_free.clear()
        self._words.clear()

    def is_cached(self, name: str) -> bool:
        return name in self._latex_free or name in self._words


__all__ = ["DerivedValueCache"]
