"""
Element extraction
==================

`first` and `last` return `kungfu.Option`, so a present `None` (`Some(None)`)
is told apart from an empty sequence (`Nothing()`).
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Sequence

from kungfu import Nothing, Option, Some

from .._errors import NotIterableError
from .._types import Source
from ..adapter import is_array_like, is_iterable


def _is_indexable(value: typing.Any) -> bool:
    return isinstance(value, Sequence) or is_array_like(value)


def first[T](seq: Source[T]) -> Option[T]:
    """
    First element, pulling at most one value.

    Iterables are read through their iterator; array-likes through index 0.
    """
    if is_iterable(seq):
        for x in typing.cast(Iterable[T], seq):
            return Some(x)
        return Nothing()
    if is_array_like(seq):
        items = typing.cast(Sequence[T], seq)
        if len(items) == 0:
            return Nothing()
        return Some(items[0])
    raise NotIterableError(seq)


def last[T](seq: Source[T]) -> Option[T]:
    """
    Last element.

    Indexable sequences are read at `len - 1` directly. Any other iterable
    is exhausted to find its final value.
    """
    if _is_indexable(seq):
        items = typing.cast(Sequence[T], seq)
        if len(items) == 0:
            return Nothing()
        return Some(items[len(items) - 1])
    if is_iterable(seq):
        found: Option[T] = Nothing()
        for x in typing.cast(Iterable[T], seq):
            found = Some(x)
        return found
    raise NotIterableError(seq)


__all__ = ("first", "last")
