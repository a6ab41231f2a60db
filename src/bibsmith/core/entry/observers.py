"""Per-record listener registry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from itertools import count
import logging
from threading import Lock

from ..exceptions import MissingValueError
from .events import EntryEvent


logger = logging.getLogger(__name__)

Observer = Callable[[EntryEvent], object]

_TOKENS = count(1)


@dataclass(slots=True)
class ObserverRegistry:
    """Thread-safe mapping from subscription token to observer callback.

    Observers run synchronously on the publishing thread, in registration
    order. Exceptions raised by an observer propagate to the mutating caller.
    """

    _observers: dict[int, Observer] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock)

    def register(self, observer: Observer) -> int:
        """Subscribe ``observer`` and return its token."""
        if observer is None:
            raise MissingValueError("observer must not be None")
        if not callable(observer):
            raise TypeError(f"observer must be callable, got {type(observer).__name__}")
        token = next(_TOKENS)
        with self._lock:
            self._observers[token] = observer
        return token

    def unregister(self, observer: Observer | int) -> bool:
        """Remove an observer by token or identity; unknown observers are ignored."""
        with self._lock:
            if isinstance(observer, int) and observer in self._observers:
                del self._observers[observer]
                return True
            for token, candidate in self._observers.items():
                if candidate is observer or candidate == observer:
                    del self._observers[token]
                    return True
        logger.debug("Problem unregistering observer %r: it was never registered", observer)
        return False

    def publish(self, event: EntryEvent) -> None:
        with self._lock:
            observers = list(self._observers.values())
        for observer in observers:
            observer(event)

    def clear(self) -> None:
        with self._lock:
            self._observers.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)


__all__ = ["Observer", "ObserverRegistry"]
