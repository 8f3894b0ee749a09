"""Concat combinators"""

from __future__ import annotations

from collections.abc import Iterator

from .._types import Source
from ..adapter import iterator


def concat[T](*seqs: Source[T]) -> Iterator[T]:
    """
    Chain sequences lazily.

    Each input is exhausted fully, in argument order, before the next
    one is touched.
    """
    cursors = [iterator(s) for s in seqs]

    def run() -> Iterator[T]:
        for cursor in cursors:
            yield from cursor

    return run()


__all__ = ("concat",)
