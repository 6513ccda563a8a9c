"""A counter that coroutines can wait on until it drops to zero."""

from __future__ import annotations

import asyncio
import threading
from typing import Any, Awaitable, Callable

_POLL_INTERVAL = 0.001


class WaitGroup:
    """Counts outstanding work; :meth:`wait` finishes once the count is at or below zero."""

    def __init__(self, count: int = 0) -> None:
        self._count = count
        self._lock = threading.Lock()
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def count(self) -> int:
        """The current number of outstanding units of work."""
        return self._count

    def add(self, count: int) -> None:
        """Add ``count`` (which may be negative) to the counter."""
        with self._lock:
            self._count += count

    def done(self) -> None:
        """Mark one unit of work as finished."""
        self.add(-1)

    def defer(
        self, function: Callable[..., Awaitable[Any]], *args: Any
    ) -> asyncio.Task[None]:
        """Count one unit of work and run ``function(*args)`` as a task.

        The unit is marked done when the awaitable finishes, whether it returns or
        raises. The task is returned so its outcome can be inspected.
        """
        self.add(1)

        async def run() -> None:
            try:
                await function(*args)
            finally:
                self.done()

        task = asyncio.get_running_loop().create_task(run())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def wait(self) -> None:
        """Return once the counter has dropped to zero or below."""
        while self._count > 0:
            await asyncio.sleep(_POLL_INTERVAL)