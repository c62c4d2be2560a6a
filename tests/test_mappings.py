"""Tests for the mapping helpers."""

import pytest

from corextensions.mappings import (
    expand,
    first_entry_where,
    first_key_where,
    first_value_where,
    reverse,
    single_entry_where,
    single_key_where,
    single_value_where,
)

NUMBERS = {"first": 1, "second": 2, "third": 3, "fourth": 4}


class TestFirstLookups:
    def test_first_key_where(self):
        assert first_key_where(NUMBERS, lambda k, v: v % 2 == 0) == "second"

    def test_first_value_where(self):
        assert first_value_where(NUMBERS, lambda k, v: k.startswith("t")) == 3

    def test_first_entry_where(self):
        assert first_entry_where(NUMBERS, lambda k, v: v > 2) == ("third", 3)

    def test_default(self):
        assert first_key_where(NUMBERS, lambda k, v: v > 9, default="none") == "none"

    def test_no_match_raises(self):
        with pytest.raises(RuntimeError, match="No entry"):
            first_value_where(NUMBERS, lambda k, v: v > 9)


class TestSingleLookups:
    def test_single_entry_where(self):
        assert single_entry_where(NUMBERS, lambda k, v: len(k) + v > 9) == ("fourth", 4)

    def test_single_key_and_value(self):
        assert single_key_where(NUMBERS, lambda k, v: v == 2) == "second"
        assert single_value_where(NUMBERS, lambda k, v: k == "third") == 3

    def test_too_many_raises(self):
        with pytest.raises(RuntimeError, match="Too many"):
            single_key_where(NUMBERS, lambda k, v: v > 1)

    def test_too_many_raises_even_with_default(self):
        with pytest.raises(RuntimeError, match="Too many"):
            single_value_where(NUMBERS, lambda k, v: v > 1, default=0)

    def test_none_uses_default(self):
        assert single_key_where(NUMBERS, lambda k, v: v > 9, default=None) is None
        assert single_value_where(NUMBERS, lambda k, v: v > 9, default=-1) == -1

    def test_none_without_default_raises(self):
        with pytest.raises(RuntimeError, match="No entry"):
            single_entry_where(NUMBERS, lambda k, v: v > 9)


class TestReshaping:
    def test_reverse(self):
        assert reverse(NUMBERS) == {1: "first", 2: "second", 3: "third", 4: "fourth"}

    def test_reverse_last_key_wins(self):
        assert reverse({"a": 1, "b": 1}) == {1: "b"}

    def test_expand(self):
        result = expand({"a": 1, "b": 2}, lambda k, v: {k: v, k * 2: v * 2})
        assert result == {"a": 1, "aa": 2, "b": 2, "bb": 4}
