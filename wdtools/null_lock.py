"""An asynchronous lock around a value that may be absent."""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
Out = TypeVar("Out")

_EMPTY: Any = object()


class NullLockError(Exception):
    """The lock holds no value."""


class NullLock(Generic[T]):
    """A lock whose content can be set and cleared at any time."""

    def __init__(self) -> None:
        self._value: Any = _EMPTY
        self._lock = asyncio.Lock()

    async def init(self, value: T) -> None:
        """Set the held value."""
        async with self._lock:
            self._value = value

    async def reset(self) -> None:
        """Clear the held value."""
        async with self._lock:
            self._value = _EMPTY

    async def get(self) -> Optional[T]:
        """The held value, or None when empty."""
        async with self._lock:
            return None if self._value is _EMPTY else self._value

    async def get_unwrap(self, default: T) -> T:
        """The held value, or ``default`` when empty."""
        async with self._lock:
            return default if self._value is _EMPTY else self._value

    async def map(self, func: Callable[[T], Out]) -> Optional[Out]:
        """``func(value)``, or None when empty."""
        async with self._lock:
            if self._value is _EMPTY:
                return None
            return func(self._value)

    async def map_mut(self, func: Callable[[T], Any]) -> Any:
        """Call ``func(value)`` with the lock held, awaiting its result if needed.

        Raises NullLockError when the lock holds nothing.
        """
        async with self._lock:
            if self._value is _EMPTY:
                raise NullLockError("NullLock need init")
            result = func(self._value)
            if inspect.isawaitable(result):
                result = await result
            return result