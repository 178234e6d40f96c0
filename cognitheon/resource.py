"""A shared, lock-protected value handed between parts of the application."""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


class Resource(Generic[T]):
    """Holds a value that several owners share; access goes through a lock.

    Passing the same Resource object around shares the value, as a clone would.
    """

    __slots__ = ("_value", "_lock")

    def __init__(self, value: T) -> None:
        self._value = value
        self._lock = threading.RLock()

    def read_resource(self, f: Callable[[T], R]) -> R:
        """Call f with the value while holding the lock and return its result."""
        with self._lock:
            return f(self._value)

    def with_resource(self, f: Callable[[T], R]) -> R:
        """Call f with the value for modification and return its result."""
        with self._lock:
            return f(self._value)

    def __repr__(self) -> str:
        with self._lock:
            return f"Resource({self._value!r})"