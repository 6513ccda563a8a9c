"""Run coroutines with a cap on how many are in flight at once."""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, Generator, Optional

_POLL_INTERVAL = 0.01


class ParallelPool:
    """Starts coroutines as tasks while fewer than ``parallel`` of them are running.

    Awaiting the pool itself waits until every started task has finished.
    """

    def __init__(self, parallel: int) -> None:
        self._parallel_max = parallel
        self._workers = 0
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def parallel_max(self) -> int:
        return self._parallel_max

    @property
    def workers(self) -> int:
        """Number of tasks started by the pool that have not finished yet."""
        return self._workers

    async def _run(self, coro: Coroutine[Any, Any, Any]) -> None:
        try:
            await coro
        finally:
            self._workers -= 1

    def try_launch(
        self, coro: Coroutine[Any, Any, Any]
    ) -> Optional[Coroutine[Any, Any, Any]]:
        """Start ``coro`` as a task if there is room.

        Returns None when it was started, or ``coro`` itself, untouched, when the
        pool is full.
        """
        if self._workers >= self._parallel_max:
            return coro
        self._workers += 1
        try:
            task = asyncio.get_running_loop().create_task(self._run(coro))
        except BaseException:
            self._workers -= 1
            raise
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return None

    async def launch(self, coro: Coroutine[Any, Any, Any]) -> None:
        """Start ``coro`` as a task, waiting for room in the pool first."""
        pending: Optional[Coroutine[Any, Any, Any]] = coro
        while True:
            pending = self.try_launch(pending)
            if pending is None:
                return
            await asyncio.sleep(_POLL_INTERVAL)

    async def wait_over(self) -> None:
        """Return once no task started by the pool is running."""
        while self._workers != 0:
            await asyncio.sleep(_POLL_INTERVAL)

    def __await__(self) -> Generator[Any, None, None]:
        return self.wait_over().__await__()