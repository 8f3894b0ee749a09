"""
Core type definitions for lazyfn.

Aliases and protocols shared across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Generator, Iterable

# ============================================================================
# Protocols
# ============================================================================


@typing.runtime_checkable
class ArrayLike[T](typing.Protocol):
    """Integer-indexed elements plus a length, without native iteration."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int, /) -> T: ...


# ============================================================================
# Type aliases
# ============================================================================

# Source = anything the adapter can turn into a cursor
type Source[T] = Iterable[T] | ArrayLike[T]

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# IndexedPredicate = predicate also receiving the ordinal of the element
type IndexedPredicate[T] = Callable[[T, int], bool]

# Selector = function that extracts a grouping key
type Selector[T, K] = Callable[[T], K]

# MapFn = (element, ordinal, source) -> value
type MapFn[T, R] = Callable[[T, int, typing.Any], R]

# StepFn = (value, ordinal) -> produced value, used by ranges
type StepFn[R] = Callable[[int, int], R]

# Equals = (candidate, item) -> bool
type Equals[T] = Callable[[T, T], bool]

# Routine = suspendable computation yielding pending values
type Routine[T] = Generator[Awaitable[typing.Any] | typing.Any, typing.Any, T]

# RoutineFactory = zero-argument constructor for a fresh routine
type RoutineFactory[T] = Callable[[], Routine[T]]

__all__ = (
    # Protocols
    "ArrayLike",
    # Type aliases
    "Equals",
    "IndexedPredicate",
    "MapFn",
    "Predicate",
    "Routine",
    "RoutineFactory",
    "Selector",
    "Source",
    "StepFn",
)
