"""A shared context carrying values, a stop flag and a count of running sub-tasks."""

from __future__ import annotations

import asyncio
import enum
import threading
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping, Optional, TypeVar

from wdtools.bytes_key import as_bytes

Out = TypeVar("Out")

_POLL_INTERVAL = 0.002
_MISSING: Any = object()


class CtxFutResult(enum.Enum):
    """Outcome of waiting on a context."""

    OVER = "Over"
    TIMEOUT = "Timeout"

    def __str__(self) -> str:
        return self.value


class Ctx:
    """Context shared between cooperating tasks.

    Values are stored under byte keys (anything :func:`wdtools.bytes_key.as_bytes`
    accepts). The context also tracks a stop flag and the number of sub-tasks
    started through it.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._map: dict[bytes, Any] = {}
        self._status = 0
        self._subtask = 0

    def insert(self, key: Any, value: Any) -> Any:
        """Store ``value`` under ``key``; return the value it replaced, or None."""
        k = as_bytes(key)
        with self._lock:
            previous = self._map.get(k)
            self._map[k] = value
            return previous

    def remove(self, key: Any, kind: type) -> Any:
        """Remove and return the value under ``key`` if it is an instance of ``kind``.

        When the key is missing or holds another type, nothing is removed and
        None is returned.
        """
        k = as_bytes(key)
        with self._lock:
            value = self._map.get(k, _MISSING)
            if value is _MISSING or not isinstance(value, kind):
                return None
            return self._map.pop(k)

    def ref_handle(
        self, key: Any, kind: type, handle: Callable[[Any], Out]
    ) -> Out:
        """Call ``handle`` with the value under ``key`` if it is a ``kind``, else None."""
        k = as_bytes(key)
        with self._lock:
            value = self._map.get(k, _MISSING)
            if value is _MISSING or not isinstance(value, kind):
                return handle(None)
            return handle(value)

    def ref_inner(self, handle: Callable[[Mapping[bytes, Any]], Out]) -> Out:
        """Call ``handle`` with a read-only view of the stored values."""
        with self._lock:
            return handle(MappingProxyType(self._map))

    def ref_inner_mut(self, handle: Callable[[dict[bytes, Any]], Out]) -> Out:
        """Call ``handle`` with the stored values for modification."""
        with self._lock:
            return handle(self._map)

    def add_sub_task(self, count: int) -> None:
        with self._lock:
            self._subtask += count

    def done_sub_task(self) -> None:
        with self._lock:
            self._subtask -= 1

    def stop(self) -> None:
        """Signal every task watching this context to stop."""
        with self._lock:
            self._status += 1

    def is_stop(self) -> bool:
        return self._status > 0

    async def wait_stop_status(self) -> CtxFutResult:
        """Return once the context has been stopped."""
        while self._status <= 0:
            await asyncio.sleep(_POLL_INTERVAL)
        return CtxFutResult.OVER

    async def wait_all_subtask_over(self) -> CtxFutResult:
        """Return once no sub-task is running; the context is then stopped."""
        while self._subtask > 0:
            await asyncio.sleep(_POLL_INTERVAL)
        self.stop()
        return CtxFutResult.OVER

    async def exec_future(
        self, awaitable: Awaitable[Out], timeout: Optional[float] = None
    ) -> Out:
        """Await ``awaitable`` as a counted sub-task.

        With ``timeout`` (seconds) the work is cancelled when it runs longer and
        TimeoutError is raised.
        """
        self.add_sub_task(1)
        try:
            if timeout is None:
                return await awaitable
            try:
                return await asyncio.wait_for(awaitable, timeout)
            except asyncio.TimeoutError as err:
                raise TimeoutError(f"sub-task exceeded {timeout}s") from err
        finally:
            self.done_sub_task()

    async def call_timeout(
        self,
        func: Callable[["Ctx"], Awaitable[Out]],
        timeout: Optional[float] = None,
    ) -> Out:
        """Run ``func(self)`` as a counted sub-task with an optional timeout."""
        return await self.exec_future(func(self), timeout)

    async def call(self, func: Callable[["Ctx"], Awaitable[Out]]) -> Out:
        """Run ``func(self)`` as a counted sub-task."""
        return await self.call_timeout(func, None)