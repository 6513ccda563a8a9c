"""A value that is cheap to read and updated under a writer lock."""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class CopyLock(Generic[T]):
    """Holds a value meant for many readers and few writers, such as configuration.

    Readers never wait; writers are serialised and replace the value as a whole.
    """

    def __init__(self, default: T) -> None:
        self._value = default
        self._write_lock = threading.Lock()

    def share(self) -> T:
        """The current value."""
        return self._value

    def update(self, function: Callable[[T], T]) -> None:
        """Replace the value with ``function(current)``."""
        with self._write_lock:
            self._value = function(self._value)

    def set(self, value: T) -> None:
        """Replace the value with ``value``."""
        with self._write_lock:
            self._value = value

    def __repr__(self) -> str:
        return f"CopyLock({self._value!r})"