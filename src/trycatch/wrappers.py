"""
Adapters that turn fallible computations into ``Result`` values.

``try_catch`` awaits an awaitable that is already in flight and
``try_catch_sync`` calls a zero-argument callable. Neither one raises for a
failure of the wrapped computation: a raised exception is returned as a
``Failure`` holding the very object that was raised.

Cancellation and interpreter exit signals (``asyncio.CancelledError``,
``KeyboardInterrupt``, ``SystemExit``, ``GeneratorExit``) are not failures of
the computation and propagate unchanged. Any other raised value, including a
user-defined ``BaseException`` subclass, is captured.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

from .result import Failure, Result, Success

logger = logging.getLogger(__name__)

_PROPAGATED: tuple[type[BaseException], ...] = (
    asyncio.CancelledError,
    GeneratorExit,
    KeyboardInterrupt,
    SystemExit,
)


async def try_catch[T](pending: Awaitable[T]) -> Result[T, BaseException]:
    """Awaits ``pending`` once and returns its outcome as a ``Result``.

    ``pending`` is the computation itself (a coroutine object, task, future or
    anything with ``__await__``), not a factory for one:

        result = await try_catch(client.get("/users/1"))
        match result:
            case Success(response):
                ...
            case Failure(error):
                ...
    """
    try:
        value = await pending
    except BaseException as error:
        if isinstance(error, _PROPAGATED):
            raise
        logger.debug("Awaitable %r failed", pending, exc_info=error)
        return Failure(error)
    return Success(value)


def try_catch_sync[T](thunk: Callable[[], T]) -> Result[T, BaseException]:
    """Calls ``thunk`` once and returns its outcome as a ``Result``."""
    try:
        value = thunk()
    except BaseException as error:
        if isinstance(error, _PROPAGATED):
            raise
        logger.debug("Callable %r failed", thunk, exc_info=error)
        return Failure(error)
    return Success(value)


__all__ = ["try_catch", "try_catch_sync"]
