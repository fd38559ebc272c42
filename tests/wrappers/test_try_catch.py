import asyncio
import logging

import pytest

from trycatch import Failure, Success, try_catch


async def _resolve[T](value: T) -> T:
    await asyncio.sleep(0)
    return value


async def _reject(error: BaseException) -> None:
    await asyncio.sleep(0)
    raise error


class _Awaitable:
    def __init__(self, value: object) -> None:
        self.value = value

    def __await__(self):
        yield from asyncio.sleep(0).__await__()
        return self.value


@pytest.mark.asyncio
async def test_resolved_coroutine_gives_success() -> None:
    res = await try_catch(_resolve("ok"))
    assert res == Success("ok")
    assert (res.data, res.error, res.success) == ("ok", None, True)


@pytest.mark.asyncio
async def test_rejected_coroutine_gives_failure() -> None:
    err = RuntimeError("net down")
    res = await try_catch(_reject(err))
    assert isinstance(res, Failure)
    assert res.error is err
    assert (res.data, res.success) == (None, False)


@pytest.mark.asyncio
async def test_accepts_task_and_future() -> None:
    task = asyncio.create_task(_resolve(7))
    assert (await try_catch(task)).data == 7

    future: asyncio.Future[int] = asyncio.get_running_loop().create_future()
    err = ConnectionError("reset")
    future.set_exception(err)
    res = await try_catch(future)
    assert isinstance(res, Failure)
    assert res.error is err


@pytest.mark.asyncio
async def test_accepts_custom_awaitable() -> None:
    res = await try_catch(_Awaitable({"id": 1}))
    assert res == Success({"id": 1})


@pytest.mark.asyncio
async def test_none_resolution_is_success() -> None:
    res = await try_catch(_resolve(None))
    assert isinstance(res, Success)
    assert res.data is None


@pytest.mark.asyncio
async def test_cancellation_propagates() -> None:
    started = asyncio.Event()

    async def forever() -> None:
        started.set()
        await asyncio.Event().wait()

    outer = asyncio.create_task(try_catch(forever()))
    await started.wait()
    outer.cancel()
    with pytest.raises(asyncio.CancelledError):
        await outer


@pytest.mark.asyncio
async def test_cancelled_inner_task_propagates() -> None:
    inner = asyncio.create_task(asyncio.sleep(10))
    await asyncio.sleep(0)
    inner.cancel()
    with pytest.raises(asyncio.CancelledError):
        await try_catch(inner)


@pytest.mark.asyncio
async def test_wrappers_run_concurrently() -> None:
    results = await asyncio.gather(
        try_catch(_resolve(1)),
        try_catch(_reject(ValueError("x"))),
        try_catch(_resolve(3)),
    )
    assert [r.success for r in results] == [True, False, True]


@pytest.mark.asyncio
async def test_user_defined_base_exception_is_captured() -> None:
    class Abort(BaseException):
        pass

    err = Abort()
    res = await try_catch(_reject(err))
    assert isinstance(res, Failure)
    assert res.error is err


@pytest.mark.asyncio
async def test_failure_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    err = RuntimeError("net down")
    with caplog.at_level(logging.DEBUG, logger="trycatch"):
        await try_catch(_reject(err))
    records = [r for r in caplog.records if r.name == "trycatch.wrappers"]
    assert len(records) == 1
    assert records[0].levelno == logging.DEBUG
    assert records[0].exc_info is not None and records[0].exc_info[1] is err
