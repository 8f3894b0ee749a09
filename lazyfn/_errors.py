from __future__ import annotations

import typing


class NotIterableError(TypeError):
    """Value exposes neither iteration nor indexed access with a length."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"{value!r} is not iterable")


class RoutineError(TypeError):
    """Routine factory did not produce a resumable cursor."""

    routine: typing.Any

    def __init__(self, routine: typing.Any) -> None:
        self.routine = routine
        super().__init__(f"{routine!r} is not a resumable routine")


__all__ = ("NotIterableError", "RoutineError")
