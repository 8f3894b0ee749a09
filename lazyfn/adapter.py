"""
Sequence adapter.

Turns any sequence-like value into an iterator. Capabilities are tested in a
fixed order:

1. Native iteration (`__iter__`): the value's own iterator is returned.
   Iterators are returned unchanged, so nothing is wrapped or copied.
2. Array-like (`__len__` + integer `__getitem__`): a generator walks the
   indices `0..len-1`, reading one element per step.

Anything else raises `NotIterableError`.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from ._errors import NotIterableError
from ._types import ArrayLike


def is_iterable(value: typing.Any) -> bool:
    """Value supports the native iteration protocol."""
    return isinstance(value, Iterable)


def is_array_like(value: typing.Any) -> bool:
    """Value has a length and indexed access but no native iteration."""
    return not is_iterable(value) and isinstance(value, ArrayLike)


def _walk_indices[T](value: ArrayLike[T]) -> Iterator[T]:
    index = 0
    # length is re-read every step, the backing object may change while walked
    while index < len(value):
        yield value[index]
        index += 1


def iterator[T](value: Iterable[T] | ArrayLike[T]) -> Iterator[T]:
    """
    Ensure a value can be iterated.

    Example:
        iterator([1, 2])            # list iterator
        iterator(some_generator)    # the generator itself
        iterator(ArrayLikeThing())  # index walker
        iterator(42)                # NotIterableError
    """
    if is_iterable(value):
        return iter(typing.cast(Iterable[T], value))
    if isinstance(value, ArrayLike):
        return _walk_indices(value)
    raise NotIterableError(value)


__all__ = ("is_array_like", "is_iterable", "iterator")
