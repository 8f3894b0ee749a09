"""Partition

Stable grouping of elements by key."""

from __future__ import annotations

from .._types import Selector, Source
from ..adapter import iterator


def partition[T, K](seq: Source[T], key_fn: Selector[T, K]) -> dict[K, list[T]]:
    """
    Group elements into buckets keyed by `key_fn(element)`.

    Single forward pass. Keys keep first-occurrence order and each bucket
    keeps source order, so no bucket is ever empty:
        partition([1, 2, 3, 4], lambda x: x % 2)  # {1: [1, 3], 0: [2, 4]}

    Keys must be hashable; an unhashable key raises `TypeError`. Keys are
    matched like dict keys (identity, then `==`), so two distinct NaN
    objects land in separate groups.
    """
    groups: dict[K, list[T]] = {}
    for x in iterator(seq):
        key = key_fn(x)
        if key in groups:
            groups[key].append(x)
        else:
            groups[key] = [x]
    return groups


__all__ = ("partition",)
