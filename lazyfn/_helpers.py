"""Internal helpers for lazyfn.

Small functions used across several modules. Not part of the public API."""

from __future__ import annotations

import decimal
import math
import typing


def truthy(x: typing.Any) -> bool:
    """Default predicate: the value cast to bool."""
    return bool(x)


def is_nan(x: typing.Any) -> bool:
    """
    Test for a not-a-number value.

    NaN never compares equal to itself, so `==` cannot find it.
    Covers float, complex and Decimal NaNs; any other type is never NaN.
    """
    match x:
        case bool():
            return False
        case float():
            return math.isnan(x)
        case complex():
            return math.isnan(x.real) or math.isnan(x.imag)
        case decimal.Decimal():
            return x.is_nan()
        case _:
            return False


__all__ = ("is_nan", "truthy")
