"""
lazyfn - lazy sequence combinators and a generator-driven async trampoline.

Architecture:
- adapter: turns iterables and array-likes into iterators
- generate / transform: lazy producers and transforms built on the adapter
- search: consumers (quantifiers, first/last, index_of, partition, set equality)
- coro: `async_exec` runs a routine that yields pending values as one future,
  with kungfu-lifted (`async_exec_result`) and logged (`async_exec_w`) variants
"""

# Core types
from ._types import ArrayLike, Equals, IndexedPredicate, MapFn, Predicate, Selector, StepFn

# Sequence adapter
from .adapter import is_array_like, is_iterable, iterator

# Generators
from .generate import RangeSpec, arange, irange

# Transforms
from .transform import ancestors, concat, for_each, ifilter, imap, izip

# Search & aggregation
from .search import all_of, any_of, first, index_of, last, partition, sets_are_equal

# Writer log
from . import writer
from .writer import LazyCoroResultWriter, Log, WriterResult

# Coroutine trampoline
from .coro import (
    EventHook,
    RunEvent,
    RunState,
    async_exec,
    async_exec_result,
    async_exec_w,
    fail_later,
    is_pending,
    later,
)

# Errors
from ._errors import NotIterableError, RoutineError

__all__ = (
    # Types
    "ArrayLike",
    "Equals",
    "IndexedPredicate",
    "MapFn",
    "Predicate",
    "Selector",
    "StepFn",
    # Adapter
    "is_array_like",
    "is_iterable",
    "iterator",
    # Generators
    "RangeSpec",
    "arange",
    "irange",
    # Transforms
    "ancestors",
    "concat",
    "for_each",
    "ifilter",
    "imap",
    "izip",
    # Search & aggregation
    "all_of",
    "any_of",
    "first",
    "index_of",
    "last",
    "partition",
    "sets_are_equal",
    # Writer
    "writer",
    "LazyCoroResultWriter",
    "Log",
    "WriterResult",
    # Trampoline
    "EventHook",
    "RunEvent",
    "RunState",
    "async_exec",
    "async_exec_result",
    "async_exec_w",
    "fail_later",
    "is_pending",
    "later",
    # Errors
    "NotIterableError",
    "RoutineError",
)
