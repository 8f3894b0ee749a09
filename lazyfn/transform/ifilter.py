"""Filter combinators"""

from __future__ import annotations

from collections.abc import Iterator

from .._types import IndexedPredicate, Source
from ..adapter import iterator


def ifilter[T](seq: Source[T], predicate: IndexedPredicate[T]) -> Iterator[T]:
    """
    Lazily keep elements for which `predicate(element, ordinal)` holds.

    The ordinal counts positions in the source, not in the output:
        list(ifilter("abcd", lambda x, i: i % 2))  # ["b", "d"]
    """
    cursor = iterator(seq)

    def run() -> Iterator[T]:
        for ordinal, x in enumerate(cursor):
            if predicate(x, ordinal):
                yield x

    return run()


__all__ = ("ifilter",)
