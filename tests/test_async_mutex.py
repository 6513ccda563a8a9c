import asyncio
import threading
import time

import pytest

from wdtools.async_mutex import AsyncMutex


@pytest.mark.asyncio
async def test_mutex_counts_under_contention():
    mutex = AsyncMutex(0)

    async def worker():
        for _ in range(20):
            guard = await mutex.lock()
            guard.value += 1
            await asyncio.sleep(0.001)
            guard.release()

    await asyncio.wait_for(asyncio.gather(*(worker() for _ in range(10))), 20)
    guard = await mutex.lock()
    assert guard.value == 200
    guard.release()


def test_synchronize_across_threads():
    mutex = AsyncMutex(0)

    def worker():
        for _ in range(100):
            with mutex.synchronize() as guard:
                current = guard.value
                time.sleep(0)
                guard.value = current + 1

    threads = [threading.Thread(target=worker) for _ in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    with mutex.synchronize() as guard:
        assert guard.value == 1000


@pytest.mark.asyncio
async def test_lock_waits_for_release():
    mutex = AsyncMutex("data")
    guard = await mutex.lock()
    assert mutex.locked()
    task = asyncio.create_task(mutex.lock())
    await asyncio.sleep(0.01)
    assert not task.done()
    guard.release()
    second = await asyncio.wait_for(task, 1)
    assert second.value == "data"
    second.release()
    assert not mutex.locked()


@pytest.mark.asyncio
async def test_async_context_manager_releases():
    mutex = AsyncMutex([1])
    async with await mutex.lock() as guard:
        guard.value.append(2)
        assert mutex.locked()
    assert not mutex.locked()
    with mutex.synchronize() as guard:
        assert guard.value == [1, 2]


def test_value_after_release_raises():
    mutex = AsyncMutex(5)
    guard = mutex.synchronize()
    guard.release()
    guard.release()
    assert not mutex.locked()
    with pytest.raises(RuntimeError):
        _ = guard.value
    with pytest.raises(RuntimeError):
        guard.value = 6