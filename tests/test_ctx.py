import asyncio

import pytest

from wdtools.ctx import Ctx, CtxFutResult


@pytest.mark.asyncio
async def test_context_remove_from_other_task():
    ctx = Ctx()
    ctx.insert("hello", True)
    seen = []

    async def take():
        seen.append(ctx.remove("hello", bool))

    await asyncio.create_task(take())
    assert seen == [True]
    assert ctx.remove("hello", bool) is None


def test_insert_returns_previous():
    ctx = Ctx()
    assert ctx.insert("k", 1) is None
    assert ctx.insert("k", 2) == 1


def test_remove_wrong_kind_keeps_value():
    ctx = Ctx()
    ctx.insert("k", "text")
    assert ctx.remove("k", int) is None
    assert ctx.remove("k", str) == "text"


def test_ref_handle():
    ctx = Ctx()
    ctx.insert("name", "value")
    assert ctx.ref_handle("name", str, lambda v: v) == "value"
    assert ctx.ref_handle("name", int, lambda v: v) is None
    assert ctx.ref_handle("missing", str, lambda v: v) is None


def test_ref_inner_and_mut():
    ctx = Ctx()
    ctx.insert("a", 1)
    assert ctx.ref_inner(lambda m: dict(m)) == {b"a": 1}
    with pytest.raises(TypeError):
        ctx.ref_inner(lambda m: m.__setitem__(b"b", 2))
    ctx.ref_inner_mut(lambda m: m.__setitem__(b"b", 2))
    assert ctx.ref_handle("b", int, lambda v: v) == 2


def test_stop_flag():
    ctx = Ctx()
    assert ctx.is_stop() is False
    ctx.stop()
    assert ctx.is_stop() is True


@pytest.mark.asyncio
async def test_status():
    ctx = Ctx()
    waiter = asyncio.create_task(ctx.wait_stop_status())
    await asyncio.sleep(0.02)
    assert not waiter.done()
    ctx.stop()
    assert await asyncio.wait_for(waiter, 1) == CtxFutResult.OVER


@pytest.mark.asyncio
async def test_call():
    ctx = Ctx()
    finished = []

    def job(delay, tag):
        async def run(_ctx):
            await asyncio.sleep(delay)
            finished.append(tag)
            return tag

        return run

    tasks = [
        asyncio.create_task(ctx.call(job(0.01, 1))),
        asyncio.create_task(ctx.call(job(0.03, 2))),
        asyncio.create_task(ctx.call(job(0.05, 3))),
    ]
    await asyncio.sleep(0.005)
    result = await asyncio.wait_for(ctx.wait_all_subtask_over(), 2)
    assert result == CtxFutResult.OVER
    assert sorted(finished) == [1, 2, 3]
    assert ctx.is_stop()
    assert [t.result() for t in tasks] == [1, 2, 3]


@pytest.mark.asyncio
async def test_call_timeout_raises_and_releases():
    ctx = Ctx()

    async def slow(_ctx):
        await asyncio.sleep(1)

    with pytest.raises(TimeoutError):
        await ctx.call_timeout(slow, 0.01)
    assert await asyncio.wait_for(ctx.wait_all_subtask_over(), 0.5) == CtxFutResult.OVER


@pytest.mark.asyncio
async def test_exec_future_returns_value():
    ctx = Ctx()

    async def value():
        return 42

    assert await ctx.exec_future(value(), None) == 42


@pytest.mark.asyncio
async def test_result_text():
    ctx = Ctx()
    ctx.stop()
    result = await asyncio.wait_for(ctx.wait_stop_status(), 1)
    assert str(result) == "Over"