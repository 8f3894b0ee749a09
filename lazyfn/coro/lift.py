"""
Lifted trampoline runs.

`async_exec` hands back a raw future that raises on failure. These wrap a
run into the kungfu types instead:

- `async_exec_result` -> `LazyCoroResult[T, Exception]`
- `async_exec_w`      -> `LazyCoroResultWriter[T, Exception, RunEvent]`,
  whose log is the run's state transitions.

Both are lazy: the routine is only started when the result is awaited,
and every await starts a fresh run.
"""

from __future__ import annotations

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import RoutineFactory
from ..writer import LazyCoroResultWriter, Log, WriterResult
from .trampoline import RunEvent, async_exec


def async_exec_result[T](factory: RoutineFactory[T]) -> LazyCoroResult[T, Exception]:
    """Run the routine, settling to `Ok(value)` or `Error(exception)`."""

    async def run() -> Result[T, Exception]:
        try:
            return Ok(await async_exec(factory))
        except Exception as exc:
            return Error(exc)

    return LazyCoroResult(run)


def async_exec_w[T](factory: RoutineFactory[T]) -> LazyCoroResultWriter[T, Exception, RunEvent]:
    """Like `async_exec_result`, also logging every `RunEvent` of the run."""

    async def run() -> WriterResult[T, Exception, Log[RunEvent]]:
        log = Log[RunEvent]()
        try:
            value = await async_exec(factory, on_event=log.append)
        except Exception as exc:
            return WriterResult(Error(exc), log)
        return WriterResult(Ok(value), log)

    return LazyCoroResultWriter(run)


__all__ = ("async_exec_result", "async_exec_w")
