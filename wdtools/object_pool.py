"""A pool of reusable objects created on demand by a factory."""

from __future__ import annotations

import asyncio
import inspect
import threading
from collections import deque
from types import TracebackType
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar, Union

T = TypeVar("T")
Out = TypeVar("Out")

_ATTEMPTS = 100


class ObjPoolError(Exception):
    """An object could not be obtained from the pool."""


def _backoff(attempt: int) -> float:
    if attempt > 9:
        return 1.0
    if attempt > 3:
        return 0.1
    return 0.01


class PooledObject(Generic[T]):
    """An object borrowed from an :class:`ObjPool`; released back when done."""

    def __init__(self, pool: "ObjPool[T]", value: T) -> None:
        self._pool = pool
        self._value = value
        self._held = True

    @property
    def value(self) -> T:
        if not self._held:
            raise RuntimeError("pooled object has been released")
        return self._value

    def release(self) -> None:
        """Hand the object back to its pool; later calls do nothing."""
        if self._held:
            self._held = False
            self._pool._try_push(self._value)

    def __enter__(self) -> "PooledObject[T]":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.release()


class ObjPool(Generic[T]):
    """Keeps up to ``idle`` spare objects and never has more than ``max_size`` out.

    ``factory()`` makes a new object; it may return an awaitable, and None means
    it could not make one.
    """

    def __init__(
        self,
        max_size: int,
        idle: int,
        factory: Callable[[], Union[Optional[T], Awaitable[Optional[T]]]],
    ) -> None:
        self.max_size = max_size
        self.idle = idle
        self.multi_try_new = False
        self._factory = factory
        self._have = 0
        self._pool: deque[T] = deque()
        self._lock = threading.Lock()

    @property
    def have(self) -> int:
        """Number of objects made by the pool and still alive."""
        return self._have

    @property
    def available(self) -> int:
        """Number of spare objects waiting to be reused."""
        with self._lock:
            return len(self._pool)

    def __repr__(self) -> str:
        with self._lock:
            spare = list(self._pool)
        return f"max:{self.max_size} idle:{self.idle} have:{self._have} pool:{spare!r}"

    def is_full(self) -> bool:
        return self._have >= self.max_size

    def _try_pop(self) -> Optional[tuple[T]]:
        with self._lock:
            if self._pool:
                return (self._pool.popleft(),)
            return None

    async def _try_new(self) -> Optional[tuple[T]]:
        if self._have >= self.max_size:
            return None
        made = self._factory()
        if inspect.isawaitable(made):
            made = await made
        if made is None:
            return None
        self._have += 1
        return (made,)

    def _try_push(self, value: T) -> None:
        with self._lock:
            if len(self._pool) < self.idle:
                self._pool.append(value)
            else:
                self._have -= 1

    async def defer(
        self, handle: Callable[[PooledObject[T]], Union[Out, Awaitable[Out]]]
    ) -> Out:
        """Borrow an object, call ``handle`` with it and return what it gives.

        The object goes back to the pool once ``handle`` has finished. Raises
        ObjPoolError when no object can be had.
        """
        for attempt in range(_ATTEMPTS):
            got = self._try_pop() or await self._try_new()
            if got is None:
                if self.multi_try_new and not self.is_full():
                    raise ObjPoolError("ObjPool: new object failed")
                await asyncio.sleep(_backoff(attempt))
                continue
            with PooledObject(self, got[0]) as obj:
                result = handle(obj)
                if inspect.isawaitable(result):
                    result = await result
                return result
        raise ObjPoolError("ObjPool: System busy")