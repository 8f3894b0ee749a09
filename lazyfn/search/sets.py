from __future__ import annotations

import typing
from collections.abc import Collection


def _contained(a: Collection[typing.Any], b: Collection[typing.Any]) -> bool:
    for item in a:
        if item not in b:
            return False
    return True


def sets_are_equal(a: Collection[typing.Any], b: Collection[typing.Any]) -> bool:
    """
    Same members regardless of order. Same object is trivially equal.

    Membership is checked both ways, so collections with repeated members
    still compare symmetrically:
        sets_are_equal([1, 1, 2], [1, 2, 3])  # False, 3 is missing on the left
    """
    if a is b:
        return True
    if len(a) != len(b):
        return False
    return _contained(a, b) and _contained(b, a)


__all__ = ("sets_are_equal",)
