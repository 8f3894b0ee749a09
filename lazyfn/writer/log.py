"""
Log
===

Ordered record of what a run did, kept as a value.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Nothing, Option, Some


class Log[A](list[A]):
    """
    Ordered log of entries.

    A list that also merges like a monoid. `combine` and `tell` build new
    logs. The trampoline's event hook fills one in place through `append`.
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        return Log[T](items)

    def combine(self, other: Log[A], /) -> Log[A]:
        """`self` then `other`. Neither input is modified."""
        return Log([*self, *other])

    def tell(self, item: A, /) -> Log[A]:
        return Log([*self, item])

    def select(self, predicate: Callable[[A], bool], /) -> Log[A]:
        """Entries passing `predicate`, in log order."""
        return Log(entry for entry in self if predicate(entry))

    def field(self, name: str, /) -> list[typing.Any]:
        """One attribute of every entry, e.g. `log.field("state")` for run events."""
        return [getattr(entry, name) for entry in self]

    def latest(self) -> Option[A]:
        """Most recent entry, or `Nothing()` for an empty log."""
        if not self:
            return Nothing()
        return Some(self[-1])

    def __repr__(self) -> str:
        return f"Log({list.__repr__(self)})"


__all__ = ("Log",)
