import math
from decimal import Decimal

import pytest
from kungfu import Nothing, Some

from lazyfn import (
    NotIterableError,
    all_of,
    any_of,
    first,
    index_of,
    last,
    partition,
    sets_are_equal,
)


def unwrap_some(option):
    assert isinstance(option, Some), f"expected Some, got {option!r}"
    return option.unwrap()


class TestQuantifiers:
    """all_of / any_of"""

    def test_vacuous(self):
        assert all_of([], lambda x: False) is True
        assert any_of([], lambda x: True) is False

    def test_default_predicate_is_truthiness(self):
        assert all_of([1, "a", [0]]) is True
        assert all_of([1, 0, 2]) is False
        assert any_of([0, "", None]) is False
        assert any_of([0, "", 3]) is True

    def test_short_circuit(self):
        seen = []

        def check(x):
            seen.append(x)
            return x < 2

        assert all_of([1, 2, 3, 4], check) is False
        assert seen == [1, 2]

        seen.clear()
        assert any_of([1, 2, 3, 4], lambda x: seen.append(x) or x == 2) is True
        assert seen == [1, 2]

    def test_array_like(self, array_like):
        assert all_of(array_like(1, 2), lambda x: x > 0)
        assert not any_of(array_like(1, 2), lambda x: x > 5)

    def test_predicate_failure_propagates(self):
        with pytest.raises(ZeroDivisionError):
            all_of([0], lambda x: 1 / x)


class TestFirst:
    """First element extraction"""

    def test_list(self):
        assert unwrap_some(first([3, 4])) == 3

    def test_empty(self):
        assert isinstance(first([]), Nothing)

    def test_falsy_element_is_present(self):
        assert unwrap_some(first([None, 1])) is None
        assert unwrap_some(first([0])) == 0

    def test_does_not_consume_rest(self):
        gen = iter([1, 2, 3])
        assert unwrap_some(first(gen)) == 1
        assert list(gen) == [2, 3]

    def test_array_like(self, array_like):
        assert unwrap_some(first(array_like("x", "y"))) == "x"
        assert isinstance(first(array_like()), Nothing)

    def test_not_iterable(self):
        with pytest.raises(NotIterableError):
            first(7)


class TestLast:
    """Last element extraction"""

    def test_indexed_access(self, array_like):
        thing = array_like(1, 2, 3)
        assert unwrap_some(last(thing)) == 3
        # read directly, not walked
        assert thing.reads == 1

    def test_list(self):
        assert unwrap_some(last([1, 2, 3])) == 3

    def test_generator_is_exhausted(self):
        gen = (x for x in range(4))
        assert unwrap_some(last(gen)) == 3
        assert list(gen) == []

    def test_empty(self):
        assert isinstance(last([]), Nothing)
        assert isinstance(last(iter(())), Nothing)

    def test_none_element_is_present(self):
        assert unwrap_some(last([1, None])) is None

    def test_dict_uses_iteration(self):
        """Mappings have a length but are not indexed by position"""
        assert unwrap_some(last({"a": 1, "b": 2})) == "b"

    def test_not_iterable(self):
        with pytest.raises(NotIterableError):
            last(object())


class TestIndexOf:
    """Item search"""

    def test_found(self):
        assert unwrap_some(index_of([1, 2, 3], 2)) == 1

    def test_not_found(self):
        assert isinstance(index_of([1, 2, 3], 9), Nothing)

    def test_nan(self):
        assert unwrap_some(index_of([1, math.nan, 3], float("nan"))) == 1
        assert unwrap_some(index_of([1, Decimal("NaN")], math.nan)) == 1
        assert isinstance(index_of([1, 2], math.nan), Nothing)

    def test_custom_equals(self):
        words = ["Apple", "banana", "Cherry"]
        found = index_of(words, "cherry", lambda a, b: a.lower() == b.lower())
        assert unwrap_some(found) == 2

    def test_custom_equals_takes_priority(self):
        """equals wins even for NaN items"""
        assert unwrap_some(index_of([5, 6], math.nan, lambda a, b: a == 6)) == 1

    def test_generator(self):
        assert unwrap_some(index_of((x * 2 for x in range(5)), 6)) == 3
        assert isinstance(index_of(iter([]), 1), Nothing)

    def test_array_like(self, array_like):
        assert unwrap_some(index_of(array_like("a", "b"), "b")) == 1

    def test_string_is_searched_by_element(self):
        assert unwrap_some(index_of("abc", "c")) == 2
        assert isinstance(index_of("abc", "bc"), Nothing)

    def test_equals_failure_propagates(self):
        def equals(a, b):
            raise RuntimeError("no comparison")

        with pytest.raises(RuntimeError):
            index_of([1], 1, equals)


class TestPartition:
    """Stable grouping"""

    def test_groups_in_first_occurrence_order(self):
        groups = partition([1, 2, 3, 4], lambda x: x % 2)
        assert list(groups.items()) == [(1, [1, 3]), (0, [2, 4])]

    def test_empty(self):
        assert partition([], lambda x: x) == {}

    def test_no_empty_groups(self):
        groups = partition("mississippi", lambda c: c)
        assert all(groups.values())
        assert list(groups) == ["m", "i", "s", "p"]
        assert groups["s"] == ["s", "s", "s", "s"]

    def test_unhashable_key(self):
        with pytest.raises(TypeError):
            partition([1, 2], lambda x: [x % 2])

    def test_key_failure_propagates(self):
        with pytest.raises(KeyError):
            partition([{}], lambda d: d["missing"])


class TestSetsAreEqual:
    """Order-independent set equality"""

    def test_same_reference(self):
        s = {1, 2}
        assert sets_are_equal(s, s)

    def test_equal(self):
        assert sets_are_equal({1, 2, 3}, {3, 2, 1})
        assert sets_are_equal(frozenset("ab"), {"b", "a"})

    def test_different_size(self):
        assert not sets_are_equal({1, 2}, {1})

    def test_same_size_different_members(self):
        assert not sets_are_equal({1, 2}, {1, 3})

    @pytest.mark.parametrize(
        "a, b",
        [
            ({1, 2}, {2, 1}),
            ({1}, {2}),
            (set(), set()),
            ({1, 2}, {1}),
            ([1, 1, 2], [1, 2, 3]),
            ([1, 2, 2], (2, 1, 1)),
            ("aab", "abc"),
        ],
    )
    def test_symmetric(self, a, b):
        assert sets_are_equal(a, b) == sets_are_equal(b, a)
        assert sets_are_equal(a, a)

    def test_repeated_members_need_both_directions(self):
        """Every member of either side must appear in the other"""
        assert not sets_are_equal([1, 1, 2], [1, 2, 3])
        assert not sets_are_equal([1, 2, 3], [1, 1, 2])
