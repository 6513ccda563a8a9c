import asyncio

import pytest

from wdtools.wait_group import WaitGroup


@pytest.mark.asyncio
async def test_wait_group_with_initial_count():
    wg = WaitGroup(10)
    finished = []

    async def worker(i):
        await asyncio.sleep(0.02)
        finished.append(i)
        wg.done()

    tasks = [asyncio.create_task(worker(i)) for i in range(10)]
    await asyncio.wait_for(wg.wait(), 5)
    assert sorted(finished) == list(range(10))
    assert wg.count == 0
    await asyncio.gather(*tasks)


@pytest.mark.asyncio
async def test_wait_group_defer():
    wg = WaitGroup()
    finished = []

    async def worker(i):
        await asyncio.sleep(0.02)
        finished.append(i)

    for i in range(10):
        wg.defer(worker, i)
    assert wg.count == 10
    await asyncio.wait_for(wg.wait(), 5)
    assert sorted(finished) == list(range(10))
    assert wg.count == 0


@pytest.mark.asyncio
async def test_defer_without_args():
    wg = WaitGroup()
    seen = []

    async def worker():
        seen.append("ran")

    wg.defer(worker)
    assert wg.count == 1
    await asyncio.wait_for(wg.wait(), 5)
    assert wg.count == 0
    assert seen == ["ran"]


def test_add_and_done_adjust_count():
    wg = WaitGroup()
    wg.add(3)
    wg.done()
    assert wg.count == 2
    wg.add(-5)
    assert wg.count == -3


@pytest.mark.asyncio
async def test_wait_returns_at_once_when_not_positive():
    wg = WaitGroup(-1)
    await asyncio.wait_for(wg.wait(), 1)
    assert wg.count == -1


@pytest.mark.asyncio
async def test_wait_blocks_until_done():
    wg = WaitGroup(1)
    waiter = asyncio.create_task(wg.wait())
    await asyncio.sleep(0.02)
    assert not waiter.done()
    wg.done()
    await asyncio.wait_for(waiter, 1)
    assert waiter.done()


@pytest.mark.asyncio
async def test_failing_deferred_work_still_counts_as_done():
    wg = WaitGroup()

    async def broken():
        raise ValueError("boom")

    task = wg.defer(broken)
    await asyncio.wait_for(wg.wait(), 5)
    assert wg.count == 0
    assert isinstance(task.exception(), ValueError)