"""Timer-backed pending values

Futures that settle after a delay. Building blocks for routines run by
`async_exec`, and handy fixtures when testing them."""

from __future__ import annotations

import asyncio
import typing


def _loop_or_running(loop: asyncio.AbstractEventLoop | None) -> asyncio.AbstractEventLoop:
    return loop if loop is not None else asyncio.get_running_loop()


def later[T](
    seconds: float,
    value: T,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Future[T]:
    """Future resolving to `value` after `seconds`."""
    if seconds < 0.0:
        raise ValueError("seconds must be >= 0")
    loop = _loop_or_running(loop)
    future: asyncio.Future[T] = loop.create_future()

    def fire() -> None:
        if not future.done():
            future.set_result(value)

    loop.call_later(seconds, fire)
    return future


def fail_later(
    seconds: float,
    error: BaseException,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Future[typing.Any]:
    """Future failing with `error` after `seconds`."""
    if seconds < 0.0:
        raise ValueError("seconds must be >= 0")
    loop = _loop_or_running(loop)
    future: asyncio.Future[typing.Any] = loop.create_future()

    def fire() -> None:
        if not future.done():
            future.set_exception(error)

    loop.call_later(seconds, fire)
    return future


__all__ = ("fail_later", "later")
