"""
LazyCoroResultWriter
====================

Deferred coroutine producing a `WriterResult`: a kungfu `Result` plus the
log written while it ran. Nothing executes until the writer is awaited
or called.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Coroutine
from typing import assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from .log import Log
from .result import WriterResult

type _Thunk[T, E, W] = Callable[[], Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]]


class LazyCoroResultWriter[T, E, W]:
    __slots__ = ("_value",)

    def __init__(self, value: _Thunk[T, E, W], /) -> None:
        self._value = value

    def map[U](self, f: Callable[[T], U], /) -> LazyCoroResultWriter[U, E, W]:
        """Transform the success value; the log is kept as is."""

        async def wrapper() -> WriterResult[U, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result.map(f), wr.log)

        return LazyCoroResultWriter(wrapper)

    def with_log(self, *entries: W) -> LazyCoroResultWriter[T, E, W]:
        """Append entries after the computation's own log."""

        async def wrapper() -> WriterResult[T, E, Log[W]]:
            wr = await self()
            return WriterResult(wr.result, wr.log.combine(Log.of(*entries)))

        return LazyCoroResultWriter(wrapper)

    def unwrap(self) -> Coroutine[typing.Any, typing.Any, T]:
        """Value or raise. The log is dropped."""

        async def inner() -> T:
            wr = await self()
            return wr.result.unwrap()

        return inner()

    def to_lazy_coro_result(self) -> LazyCoroResult[tuple[T, Log[W]], E]:
        """Plain kungfu `LazyCoroResult` carrying `(value, log)` on success."""

        async def wrapper() -> Result[tuple[T, Log[W]], E]:
            wr = await self()
            match wr.result:
                case Ok(value):
                    return Ok((value, wr.log))
                case Error(err):
                    return Error(err)
                case _ as unreachable:
                    assert_never(unreachable)

        return LazyCoroResult(wrapper)

    def __call__(self) -> Coroutine[typing.Any, typing.Any, WriterResult[T, E, Log[W]]]:
        return self._value()

    def __await__(self) -> typing.Generator[typing.Any, None, WriterResult[T, E, Log[W]]]:
        return self().__await__()


__all__ = ("LazyCoroResultWriter",)
