"""Map combinators

Lazy mapping over any sequence-like value, plus its eager `for_each` form."""

from __future__ import annotations

import typing
from collections.abc import Iterator

from .._types import MapFn, Source
from ..adapter import iterator


def imap[T, R](seq: Source[T], fn: MapFn[T, R]) -> Iterator[R]:
    """
    Lazily yield `fn(element, ordinal, seq)` for every element, in order.

    The source is adapted immediately, so a non-iterable fails at the call;
    `fn` only runs as values are pulled.
    """
    cursor = iterator(seq)

    def run() -> Iterator[R]:
        for ordinal, x in enumerate(cursor):
            yield fn(x, ordinal, seq)

    return run()


def for_each[T](seq: Source[T], fn: MapFn[T, typing.Any]) -> None:
    """Call `fn(element, ordinal, seq)` for every element, discarding results."""
    for _ in imap(seq, fn):
        pass


__all__ = ("for_each", "imap")
