"""
Zip combinators
===============

Lockstep iteration over several sequences.
"""

from __future__ import annotations

import typing
from collections.abc import Iterator

from .._types import Source
from ..adapter import iterator


def izip(*seqs: Source[typing.Any]) -> Iterator[tuple[typing.Any, ...]]:
    """
    Advance every input once per round and yield the round as a tuple.

    Stops the moment any input is exhausted. Values already pulled from
    the other inputs during that last round are dropped:
        list(izip([1, 2, 3], [4, 5]))  # [(1, 4), (2, 5)]
    """
    cursors = [iterator(s) for s in seqs]

    def run() -> Iterator[tuple[typing.Any, ...]]:
        if not cursors:
            return
        while True:
            row: list[typing.Any] = []
            for cursor in cursors:
                try:
                    row.append(next(cursor))
                except StopIteration:
                    return
            yield tuple(row)

    return run()


__all__ = ("izip",)
