"""Quantifiers

Short-circuiting `all`/`any` over any sequence-like value."""

from __future__ import annotations

from .._helpers import truthy
from .._types import Predicate, Source
from ..adapter import iterator


def all_of[T](seq: Source[T], predicate: Predicate[T] = truthy) -> bool:
    """False on the first element failing `predicate`, True otherwise (also when empty)."""
    for x in iterator(seq):
        if not predicate(x):
            return False
    return True


def any_of[T](seq: Source[T], predicate: Predicate[T] = truthy) -> bool:
    """True on the first element passing `predicate`, False otherwise (also when empty)."""
    for x in iterator(seq):
        if predicate(x):
            return True
    return False


__all__ = ("all_of", "any_of")
