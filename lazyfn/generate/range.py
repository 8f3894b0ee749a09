"""
Range generators
================

Eager (`arange`) and lazy (`irange`) ranges of increasing integers,
optionally passed through a step function `fn(value, ordinal)`.

Bounds are chosen by argument count, like the builtin `range`:
    arange(5)        # 0, 1, 2, 3, 4
    arange(2, 5)     # 2, 3, 4
    arange(5, fn=lambda v, i: v * v)
"""

from __future__ import annotations

import typing
from collections.abc import Iterator
from dataclasses import dataclass

from .._types import StepFn


@dataclass(frozen=True, slots=True)
class RangeSpec[R]:
    """
    Range configuration.

    Produces `start, start + 1, ...` while `< end`. An `end <= start`
    describes an empty range, never an error.
    """

    start: int
    end: int
    fn: StepFn[R] | None = None

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            bound = getattr(self, name)
            if isinstance(bound, bool) or not isinstance(bound, int):
                raise TypeError(f"RangeSpec.{name} must be int, got {bound!r}")
        if self.fn is not None and not callable(self.fn):
            raise TypeError(f"RangeSpec.fn must be callable, got {self.fn!r}")

    @classmethod
    def upto(cls, end: int, fn: StepFn[R] | None = None) -> RangeSpec[R]:
        """Range from 0 to `end`."""
        return cls(start=0, end=end, fn=fn)

    @classmethod
    def between(cls, start: int, end: int, fn: StepFn[R] | None = None) -> RangeSpec[R]:
        """Range from `start` to `end`."""
        return cls(start=start, end=end, fn=fn)

    @classmethod
    def of(cls, *bounds: int, fn: StepFn[R] | None = None) -> RangeSpec[R]:
        """Build from positional bounds: `(end)` or `(start, end)`."""
        match bounds:
            case (end,):
                return cls.upto(end, fn)
            case (start, end):
                return cls.between(start, end, fn)
            case _:
                raise TypeError(f"expected 1 or 2 bounds, got {len(bounds)}")

    def __len__(self) -> int:
        return max(0, self.end - self.start)

    def __iter__(self) -> Iterator[R]:
        fn = self.fn
        for ordinal, value in enumerate(range(self.start, self.end)):
            yield value if fn is None else fn(value, ordinal)


@typing.overload
def arange(end: int, /) -> list[int]: ...
@typing.overload
def arange(start: int, end: int, /) -> list[int]: ...
@typing.overload
def arange[R](end: int, /, *, fn: StepFn[R]) -> list[R]: ...
@typing.overload
def arange[R](start: int, end: int, /, *, fn: StepFn[R]) -> list[R]: ...
def arange(*bounds: int, fn: StepFn[typing.Any] | None = None) -> list[typing.Any]:
    """Eager range: a list of length `max(0, end - start)`."""
    return list(RangeSpec.of(*bounds, fn=fn))


@typing.overload
def irange(end: int, /) -> Iterator[int]: ...
@typing.overload
def irange(start: int, end: int, /) -> Iterator[int]: ...
@typing.overload
def irange[R](end: int, /, *, fn: StepFn[R]) -> Iterator[R]: ...
@typing.overload
def irange[R](start: int, end: int, /, *, fn: StepFn[R]) -> Iterator[R]: ...
def irange(*bounds: int, fn: StepFn[typing.Any] | None = None) -> Iterator[typing.Any]:
    """
    Lazy range. Same values as `arange`, produced on demand.

    Bounds are validated immediately, values only when pulled.
    """
    return iter(RangeSpec.of(*bounds, fn=fn))


__all__ = ("RangeSpec", "arange", "irange")
