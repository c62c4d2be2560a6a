"""End-to-end checks through the public ``corextensions`` namespace.

Each test exercises one documented property of the package as a caller
would, importing only from the top-level package.
"""

import math
import sys

import pytest

import corextensions as cx


class TestDocumentedExamples:
    def test_find_single_swapped_from(self):
        assert cx.find_single_swapped_from([1, 2, 3], [1, 2, 4]) == 2

    def test_find_single_missing_from(self):
        assert cx.find_single_missing_from([1, 2, 4], [1, 2, 3, 4]) == 2

    def test_contains_in_order(self):
        assert cx.contains_in_order([1, 2, 3, 4, 2], [2, 3, 4])
        assert not cx.contains_in_order([1, 2, 3, 4, 2], [1, 3, 4])

    def test_permute(self):
        sentence = ["I", "would", "have", "known", "not", "that"]
        cx.permute(sentence, [2, 3, 4])
        assert sentence == ["I", "would", "not", "have", "known", "that"]

    def test_spread_and_combine(self):
        assert cx.spread_and_combine([[1, 2], [3], [4, 5, 6]]) == [
            [1, 3, 4],
            [1, 3, 5],
            [1, 3, 6],
            [2, 3, 4],
            [2, 3, 5],
            [2, 3, 6],
        ]


class TestDocumentedErrors:
    def test_permute_duplicates(self):
        with pytest.raises(ValueError):
            cx.permute([1, 2, 3], [1, 1])

    def test_spread_and_combine_at_index_out_of_range(self):
        with pytest.raises(IndexError):
            cx.spread_and_combine_at_index([[1, 2], [3]], 2)

    def test_find_single_swapped_from_identical(self):
        with pytest.raises(RuntimeError):
            cx.find_single_swapped_from([1, 2, 3], [1, 2, 3])


class TestBijections:
    def test_with_order_inverse(self):
        seq = ["a", "b", "c", "d", "e"]
        for order in cx.all_permutations(range(5)):
            assert cx.with_order(cx.with_order(seq, order), cx.inverse_order(order)) == seq

    def test_spread_and_combine_round_trips(self):
        rows = [["x", "y", "z"], [1, 2], ["p", "q", "r", "s"]]
        view = cx.SpreadAndCombine(rows)
        for i in range(len(view)):
            assert cx.spread_and_combine_to_index(rows, cx.spread_and_combine_at_index(rows, i)) == i
        for choice in cx.spread_and_combine(rows):
            assert cx.spread_and_combine_at_index(rows, cx.spread_and_combine_to_index(rows, choice)) == choice

    def test_permutation_rank_round_trip(self):
        seq = list("abcde")
        for k in range(0, 120, 7):
            assert cx.permutation_to_index(seq, cx.permutation_at_index(seq, k)) == k


class TestLargeIndexSpaces:
    def test_permutation_view_beyond_ssize_t(self):
        view = cx.all_permutations(list(range(25)))
        assert view.total == math.factorial(25)
        assert view[view.total - 1] == list(range(24, -1, -1))
        assert view.index(list(range(24, -1, -1))) == view.total - 1

    def test_spread_view_beyond_ssize_t(self):
        view = cx.SpreadAndCombine([[0, 1]] * 80)
        assert view.total == 2**80
        assert view[2**79] == [1] + [0] * 79

    def test_len_overflows_where_total_does_not(self):
        perms = cx.all_permutations(list(range(21)))
        grid = cx.SpreadAndCombine([[0, 1]] * 80)
        for view in (perms, grid):
            assert view.total > sys.maxsize
            with pytest.raises(OverflowError):
                len(view)

    def test_len_matches_total_at_the_boundary(self):
        view = cx.all_permutations(list(range(20)))
        assert view.total <= sys.maxsize
        assert len(view) == view.total
