"""Type hierarchy walking"""

from __future__ import annotations

import typing
from collections.abc import Iterator


def ancestors(obj: typing.Any) -> Iterator[type]:
    """
    Climb the type hierarchy of `obj`, nearest first.

    Starts with `type(obj)` and follows its method resolution order,
    ending with `object`.
    """
    yield from type(obj).__mro__


__all__ = ("ancestors",)
