"""A value shared process-wide, reachable from threads and coroutines alike."""

from __future__ import annotations

from typing import Awaitable, Callable, Generic, TypeVar

from wdtools.async_mutex import AsyncMutex

T = TypeVar("T")
Out = TypeVar("Out")


class Shared(Generic[T]):
    """Wraps a mutable object behind an :class:`AsyncMutex`.

    Handlers receive the object itself and change it in place.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._mutex = AsyncMutex(value)

    def lock_ref_mut(self, handle: Callable[[T], Out]) -> Out:
        """Call ``handle`` with the object, blocking the thread for the lock."""
        with self._mutex.synchronize() as guard:
            return handle(guard.value)

    def peek(self, handle: Callable[[T], Out]) -> Out:
        """Call ``handle`` with the object without taking the lock."""
        return handle(self._value)

    async def async_ref(self, handle: Callable[[T], Out]) -> Out:
        """Call ``handle`` with the object, waiting asynchronously for the lock."""
        async with await self._mutex.lock() as guard:
            return handle(guard.value)

    async def async_ref_handle(self, handle: Callable[[T], Awaitable[Out]]) -> Out:
        """Await ``handle(object)`` while holding the lock."""
        async with await self._mutex.lock() as guard:
            return await handle(guard.value)