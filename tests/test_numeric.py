"""Tests for the numeric reductions."""

import pytest

from corextensions.numeric import at_lowest_factors, maximum, minimum, product, total


class TestReductions:
    def test_total_and_product(self):
        assert total([1, 5, 8]) == 14
        assert product([1, 5, 8]) == 40

    def test_minimum(self):
        assert minimum([3, -1, 2]) == -1

    def test_maximum_is_a_true_maximum(self):
        # The reduction this replaces returned the minimum here.
        assert maximum([3, -1, 2]) == 3
        assert maximum([3, -1, 2]) != minimum([3, -1, 2])

    @pytest.mark.parametrize("fn", [total, product, minimum, maximum])
    def test_empty_raises(self, fn):
        with pytest.raises(ValueError, match="empty"):
            fn([])


class TestAtLowestFactors:
    def test_ints(self):
        assert list(at_lowest_factors([2, 112, 20])) == [1, 56, 10]

    def test_big_ints(self):
        big = 111111111111111111111111111111112
        assert list(at_lowest_factors([2, big, 20])) == [1, big // 2, 10]

    def test_single(self):
        assert list(at_lowest_factors([6])) == [1]

    def test_zero_raises(self):
        with pytest.raises(RuntimeError, match="zero"):
            at_lowest_factors([4, 0, 2])
