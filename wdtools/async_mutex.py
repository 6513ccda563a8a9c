"""A mutex usable from coroutines and from plain threads."""

from __future__ import annotations

import asyncio
import threading
from types import TracebackType
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class AsyncMutex(Generic[T]):
    """Guards a value; ``await lock()`` in coroutines, ``synchronize()`` in threads."""

    def __init__(self, data: T) -> None:
        self._data = data
        self._flag = threading.Lock()

    def locked(self) -> bool:
        return self._flag.locked()

    async def lock(self) -> "AsyncMutexGuard[T]":
        """Acquire the mutex, yielding to the event loop until it is free."""
        while not self._flag.acquire(blocking=False):
            await asyncio.sleep(0)
        return AsyncMutexGuard(self)

    def synchronize(self) -> "AsyncMutexGuard[T]":
        """Acquire the mutex, blocking the calling thread until it is free."""
        self._flag.acquire()
        return AsyncMutexGuard(self)


class AsyncMutexGuard(Generic[T]):
    """Access to the guarded value while the mutex is held; created by the mutex."""

    def __init__(self, mutex: AsyncMutex[T]) -> None:
        self._mutex = mutex
        self._held = True

    def _check(self) -> None:
        if not self._held:
            raise RuntimeError("mutex guard has been released")

    @property
    def value(self) -> T:
        self._check()
        return self._mutex._data

    @value.setter
    def value(self, new: T) -> None:
        self._check()
        self._mutex._data = new

    def release(self) -> None:
        """Give the mutex back; later calls do nothing."""
        if self._held:
            self._held = False
            self._mutex._flag.release()

    def __enter__(self) -> "AsyncMutexGuard[T]":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()

    async def __aenter__(self) -> "AsyncMutexGuard[T]":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()