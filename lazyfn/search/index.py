"""
Index search
============

Locate an item, choosing a comparison mode in priority order:

1. Caller-supplied `equals(candidate, item)`.
2. NaN item: match any NaN candidate (NaN never equals itself).
3. Default `is`/`==` equality, using the native `index` of real sequences.
"""

from __future__ import annotations

import typing
from collections.abc import Sequence

from kungfu import Nothing, Option, Some

from .._helpers import is_nan
from .._types import Equals, Predicate, Source
from ..adapter import iterator

# str.index / bytes.index search substrings, not elements
_SUBSTRING_SEQUENCES = (str, bytes, bytearray)


def _find[T](seq: Source[T], matches: Predicate[T]) -> Option[int]:
    for i, x in enumerate(iterator(seq)):
        if matches(x):
            return Some(i)
    return Nothing()


def index_of[T](
    seq: Source[T],
    item: T,
    equals: Equals[T] | None = None,
) -> Option[int]:
    """
    Position of the first match as `Some(index)`, or `Nothing()`.

    Example:
        index_of([1, 2, 3], 2)                 # Some(1)
        index_of([1, float("nan")], math.nan)  # Some(1)
        index_of([1, 2, 3], 9)                 # Nothing()
    """
    if equals is not None:
        return _find(seq, lambda x: equals(x, item))

    if is_nan(item):
        return _find(seq, is_nan)

    if isinstance(seq, Sequence) and not isinstance(seq, _SUBSTRING_SEQUENCES):
        try:
            return Some(typing.cast(Sequence[T], seq).index(item))
        except ValueError:
            return Nothing()

    return _find(seq, lambda x: x is item or x == item)


__all__ = ("index_of",)
