"""
Coroutine trampoline
====================

Drives a generator-based routine to completion and exposes the whole run
as one `asyncio.Future`.

The routine yields the values it wants to wait on:

    def routine():
        user = yield fetch_user(42)      # awaitable: run suspends
        try:
            avatar = yield fetch_avatar(user)
        except LookupError:
            avatar = None                # failure re-raised at the yield
        return user, avatar

    result = await async_exec(routine)

Awaitables are waited on one at a time. A success is sent back in at the
yield, a failure is thrown in at the same yield so the routine can catch
it. Any other yielded value is sent straight back without suspending.

States of a run: CREATED -> RUNNING <-> SUSPENDED -> DONE | FAILED.
"""

from __future__ import annotations

import asyncio
import enum
import inspect
import typing
from collections.abc import Callable, Generator
from dataclasses import dataclass

from .._errors import RoutineError
from .._types import Routine, RoutineFactory


class RunState(enum.StrEnum):
    CREATED = "created"
    RUNNING = "running"
    SUSPENDED = "suspended"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RunEvent:
    """
    One state transition of a run.

    `step` counts resumes (0 before the first one). `detail` holds the
    pending value for SUSPENDED, the final value for DONE and the
    exception for FAILED.
    """

    state: RunState
    step: int
    detail: typing.Any = None


type EventHook = Callable[[RunEvent], None]


def is_pending(value: typing.Any) -> bool:
    """Value can be waited on: a future, task, coroutine or other awaitable."""
    return asyncio.isfuture(value) or inspect.isawaitable(value)


class _Run[T]:
    """
    State of one `async_exec` invocation.

    Owns the routine cursor and the outer future. At most one pending
    value is in flight; the cursor is only resumed from its done-callback.
    An exception from the event hook fails the run like a routine failure.
    """

    __slots__ = ("_cursor", "_result", "_loop", "_on_event", "_step")

    def __init__(
        self,
        cursor: Routine[T],
        result: asyncio.Future[T],
        loop: asyncio.AbstractEventLoop,
        on_event: EventHook | None,
    ) -> None:
        self._cursor = cursor
        self._result = result
        self._loop = loop
        self._on_event = on_event
        self._step = 0

    def _emit(self, state: RunState, detail: typing.Any = None) -> bool:
        """Report a transition. False when the hook raised and the run was aborted."""
        if self._on_event is None:
            return True
        try:
            self._on_event(RunEvent(state, self._step, detail))
        except Exception as exc:
            self._abort(exc)
            return False
        return True

    def _abort(self, exc: Exception) -> None:
        self._cursor.close()
        if not self._result.done():
            self._result.set_exception(exc)

    def start(self) -> None:
        if self._emit(RunState.CREATED):
            self._resume(None, None)

    def _resume(self, value: typing.Any, error: BaseException | None) -> None:
        # Non-pending yields are answered in this loop, pending ones end it.
        while True:
            self._step += 1
            if not self._emit(RunState.RUNNING):
                return
            try:
                if error is not None:
                    yielded = self._cursor.throw(error)
                else:
                    yielded = self._cursor.send(value)
            except StopIteration as stop:
                self._done(stop.value)
                return
            except (Exception, asyncio.CancelledError) as exc:
                self._fail(exc)
                return

            if not is_pending(yielded):
                value, error = yielded, None
                continue

            try:
                pending = asyncio.ensure_future(yielded, loop=self._loop)
            except (TypeError, ValueError) as exc:
                # unusable awaitable or one bound to another loop: report it at the yield
                value, error = None, exc
                continue

            if not self._emit(RunState.SUSPENDED, pending):
                return
            pending.add_done_callback(self._settled)
            return

    def _settled(self, pending: asyncio.Future[typing.Any]) -> None:
        if self._result.done():
            # outer future was cancelled from outside, stop driving the routine
            self._cursor.close()
            return
        if pending.cancelled():
            self._resume(None, asyncio.CancelledError())
            return
        exc = pending.exception()
        if exc is not None:
            self._resume(None, exc)
        else:
            self._resume(pending.result(), None)

    def _done(self, value: T) -> None:
        if self._emit(RunState.DONE, value) and not self._result.done():
            self._result.set_result(value)

    def _fail(self, exc: BaseException) -> None:
        if not self._emit(RunState.FAILED, exc) or self._result.done():
            return
        if isinstance(exc, asyncio.CancelledError):
            self._result.cancel()
        else:
            self._result.set_exception(exc)


def async_exec[T](
    factory: RoutineFactory[T],
    *,
    on_event: EventHook | None = None,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Future[T]:
    """
    Run a routine built by `factory` and return a future of its result.

    The first step runs synchronously, before this function returns.
    Later steps run from the event loop as pending values settle.

    The future fails with the exception the routine lets escape: one
    raised between yields, or a pending failure the routine did not catch.
    A factory that raises, or returns something other than a generator,
    fails the future too.

    `on_event` receives every state transition as a `RunEvent`. If it
    raises, the routine is closed and the future fails with that
    exception. Without `loop`, a running event loop is required.
    """
    loop = loop if loop is not None else asyncio.get_running_loop()
    result: asyncio.Future[T] = loop.create_future()

    try:
        cursor = factory()
    except Exception as exc:
        result.set_exception(exc)
        return result
    if not isinstance(cursor, Generator):
        result.set_exception(RoutineError(cursor))
        return result

    _Run(cursor, result, loop, on_event).start()
    return result


__all__ = ("EventHook", "RunEvent", "RunState", "async_exec", "is_pending")
