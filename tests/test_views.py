"""Tests for the lazy sequence views."""

import pytest

from corextensions.views import (
    MappedSequence,
    ZippedContent,
    map_with_index,
    zip_two_lists,
)


class TestMapWithIndex:
    def test_values(self):
        mapped = map_with_index([5, 10, 12, 8, 5], lambda x, i: x * i)
        assert list(mapped) == [0, 10, 24, 24, 20]

    def test_random_access(self):
        mapped = map_with_index("abc", lambda x, i: f"{i}{x}")
        assert mapped[1] == "1b"
        assert mapped[-1] == "2c"
        assert len(mapped) == 3

    def test_slice(self):
        mapped = map_with_index([1, 2, 3, 4], lambda x, i: x + i)
        assert mapped[1:3] == [3, 5]

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            map_with_index([1], lambda x, i: x)[1]

    def test_lazy_and_live(self):
        calls = []
        source = [1, 2]
        mapped = MappedSequence(source, lambda x, i: calls.append(i) or x)
        assert calls == []
        source.append(3)
        assert list(mapped) == [1, 2, 3]
        assert calls == [0, 1, 2]

    def test_restartable(self):
        mapped = map_with_index([1, 2], lambda x, i: -x)
        assert list(mapped) == list(mapped) == [-1, -2]


class TestZipTwoLists:
    def test_pairs(self):
        zipped = zip_two_lists([0, 1, 2], ["zero", "one", "two"])
        assert zipped[2].first == 2
        assert zipped[1].second == "one"
        assert list(zipped) == [
            ZippedContent(0, "zero"),
            ZippedContent(1, "one"),
            ZippedContent(2, "two"),
        ]

    def test_str(self):
        assert str(ZippedContent(1, "one")) == "(1, one)"

    def test_unequal_lengths_raise(self):
        with pytest.raises(ValueError, match="isn't the same"):
            zip_two_lists([1, 2], [1])

    def test_length_rechecked(self):
        first, second = [1, 2], [3, 4]
        zipped = zip_two_lists(first, second)
        first.append(5)
        with pytest.raises(ValueError, match="isn't the same"):
            len(zipped)

    def test_frozen(self):
        pair = ZippedContent(1, 2)
        with pytest.raises(AttributeError):
            pair.first = 3
