import pytest


class ArrayLikeThing:
    """Indexed access and a length, no __iter__."""

    # disables the legacy __getitem__ iteration fallback
    __iter__ = None

    def __init__(self, *items):
        self._items = list(items)
        self.reads = 0

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        self.reads += 1
        return self._items[index]


@pytest.fixture
def array_like():
    """Factory for array-like objects: array_like(1, 2, 3)"""
    return ArrayLikeThing
