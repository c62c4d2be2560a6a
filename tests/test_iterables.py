"""Tests for the iterables helpers."""

import pytest

from corextensions.iterables import (
    all_of_type,
    any_of_type,
    count,
    count_where,
    first_where_not_none,
    first_where_type,
    has_duplicates,
    has_same_elements_as,
    is_single,
    largest_where,
    product_where,
    sets_equal,
    smallest_where,
    sum_where,
    where_not_none,
)


class TestPredicates:
    def test_is_single(self):
        assert is_single([1])
        assert not is_single([])
        assert not is_single([1, 2])
        assert is_single(x for x in [1])
        assert is_single({"k": 1})

    def test_has_duplicates(self):
        assert has_duplicates([5, 10, 12, 8, 5])
        assert not has_duplicates([1, 2, 3])

    def test_has_duplicates_unhashable(self):
        assert has_duplicates([[1], [2], [1]])
        assert not has_duplicates([[1], [2]])

    def test_has_same_elements_as(self):
        assert has_same_elements_as([1, 2, 2, 3], [3, 1, 2])
        assert not has_same_elements_as([1, 2], [1, 3])

    def test_sets_equal(self):
        assert sets_equal({1, 3, 5, -2}, {-2, 5, 1, 3})
        assert not sets_equal({1}, {1, 2})

    def test_types(self):
        values = [1, "a", 2.0]
        assert any_of_type(values, str)
        assert not all_of_type(values, int)
        assert all_of_type([1, 2], int)
        assert first_where_type(values, float) == 2.0

    def test_first_where_type_default(self):
        assert first_where_type([1, 2], str, default=None) is None
        with pytest.raises(RuntimeError, match="No element"):
            first_where_type([1, 2], str)


class TestCounting:
    def test_count(self):
        numbers = [5, 10, 12, 8, 5]
        assert count(numbers, -2) == 0
        assert count(numbers, 5) == 2
        assert count(numbers, 8) == 1

    def test_count_where(self):
        assert count_where({1, 3, 5, -2}, lambda v: abs(v) > 2) == 2


class TestNoneFilters:
    def test_first_where_not_none(self):
        lookup = {"a": None, "b": 2}
        assert first_where_not_none(["a", "b", "c"], lookup.get) == "b"

    def test_first_where_not_none_raises(self):
        with pytest.raises(RuntimeError):
            first_where_not_none([1, 2], lambda x: None)

    def test_where_not_none_is_lazy(self):
        result = where_not_none([1, 2, 3], lambda x: x if x != 2 else None)
        assert list(result) == [1, 3]


class TestReductions:
    def test_smallest_where(self):
        assert smallest_where([-2, 15, -10, 4], abs) == -2

    def test_largest_where(self):
        assert largest_where([-2, 15, -10, 4], abs) == 15
        assert largest_where({1, 3, 5, -2}, lambda v: v) == 5

    def test_ties(self):
        assert smallest_where([2, -2], abs) == -2
        assert largest_where([2, -2], abs) == 2

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="empty"):
            smallest_where([], abs)

    def test_sum_and_product_where(self):
        assert sum_where([1, 5, 8], lambda x: x) == 14
        assert product_where([1, 5, 8], lambda x: x) == 40
        assert sum_where([], lambda x: x) == 0
        assert product_where([], lambda x: x) == 1
        assert sum_where([0.5, 0.25], lambda x: x) == 0.75
