import pytest

from lazyfn import RangeSpec, arange, irange


class TestArange:
    """Eager ranges"""

    def test_end_only(self):
        assert arange(5) == [0, 1, 2, 3, 4]

    def test_start_and_end(self):
        assert arange(2, 5) == [2, 3, 4]

    def test_empty(self):
        """end <= start is empty, never an error"""
        assert arange(2, 2) == []
        assert arange(5, 1) == []
        assert arange(-3) == []

    def test_step_fn(self):
        assert arange(0, 5, fn=lambda v, i: v * v) == [0, 1, 4, 9, 16]

    def test_step_fn_receives_ordinal(self):
        """Ordinal counts from 0 regardless of start"""
        assert arange(10, 13, fn=lambda v, i: (v, i)) == [(10, 0), (11, 1), (12, 2)]

    def test_length(self):
        assert len(arange(3, 10)) == 7

    def test_bad_arity(self):
        with pytest.raises(TypeError):
            arange()
        with pytest.raises(TypeError):
            arange(1, 2, 3)


class TestIrange:
    """Lazy ranges"""

    def test_matches_eager(self):
        """Same values as arange, one at a time"""
        lazy = irange(3, 8, fn=lambda v, i: v + i)
        eager = arange(3, 8, fn=lambda v, i: v + i)
        pulled = []
        for expected in eager:
            value = next(lazy)
            pulled.append(value)
            assert value == expected
        assert pulled == eager
        with pytest.raises(StopIteration):
            next(lazy)

    def test_lazy(self):
        """Step function only runs when values are pulled"""
        calls = []
        lazy = irange(100, fn=lambda v, i: calls.append(v) or v)
        assert calls == []
        next(lazy)
        next(lazy)
        assert calls == [0, 1]

    def test_empty(self):
        assert list(irange(4, 4)) == []

    def test_bounds_validated_at_call(self):
        with pytest.raises(TypeError):
            irange(1.5)


class TestRangeSpec:
    """Range configuration"""

    def test_constructors(self):
        assert RangeSpec.upto(3) == RangeSpec(start=0, end=3)
        assert RangeSpec.between(1, 3) == RangeSpec(start=1, end=3)
        assert RangeSpec.of(1, 3) == RangeSpec.between(1, 3)

    def test_reusable(self):
        """A RangeSpec is restartable, unlike the irange iterator"""
        bounds = RangeSpec.between(1, 4)
        assert list(bounds) == [1, 2, 3]
        assert list(bounds) == [1, 2, 3]
        assert len(bounds) == 3

    def test_rejects_non_int(self):
        with pytest.raises(TypeError):
            RangeSpec(start=0, end="3")
        with pytest.raises(TypeError):
            RangeSpec(start=True, end=3)

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            RangeSpec(start=0, end=3, fn=5)
