"""Tests for the array-like input compatibility layer."""

import numpy as np
import pandas as pd
import pytest

from corextensions import contains_in_order, spread_and_combine, with_order
from corextensions._compat import _as_index_array, _ensure_sequence, _has_duplicate_indices


class TestEnsureSequence:
    """Tests for the _ensure_sequence converter."""

    def test_list_passthrough(self):
        values = [1, 2, 3]
        assert _ensure_sequence(values) is values  # exact same object, no copy

    def test_numpy_converted(self):
        result = _ensure_sequence(np.array([1, 2, 3]))
        assert result == [1, 2, 3]
        assert isinstance(result, list)

    def test_pandas_series_converted(self):
        result = _ensure_sequence(pd.Series(["a", "b"]))
        assert result == ["a", "b"]

    def test_pandas_index_converted(self):
        assert _ensure_sequence(pd.Index([3, 4])) == [3, 4]

    def test_rejects_invalid_type(self):
        with pytest.raises(TypeError, match="must be a sequence"):
            _ensure_sequence({1, 2, 3})

    def test_error_includes_name(self):
        with pytest.raises(TypeError, match="'rows'"):
            _ensure_sequence(42, name="rows")


class TestEnsureSequencePolars:
    def test_polars_series_converted(self):
        pl = pytest.importorskip("polars")
        assert _ensure_sequence(pl.Series("x", [1, 2])) == [1, 2]


class TestAsIndexArray:
    def test_list(self):
        arr = _as_index_array([2, 0, 1])
        assert arr.dtype == np.intp
        np.testing.assert_array_equal(arr, [2, 0, 1])

    def test_empty(self):
        assert _as_index_array([]).size == 0

    def test_generator(self):
        np.testing.assert_array_equal(_as_index_array(i for i in range(3)), [0, 1, 2])

    def test_rejects_floats(self):
        with pytest.raises(TypeError, match="integers"):
            _as_index_array(np.array([0.5]))

    def test_rejects_bools(self):
        with pytest.raises(TypeError, match="integers"):
            _as_index_array([True, False])

    def test_rejects_2d(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            _as_index_array([[0, 1], [1, 0]])

    def test_range_check(self):
        with pytest.raises(IndexError, match=r"idx\[1\] = 5"):
            _as_index_array([0, 5], name="idx", length=3)

    @pytest.mark.parametrize("huge", [2**70, -(2**70)])
    def test_beyond_intp_is_a_range_error(self, huge):
        with pytest.raises(IndexError, match=r"idx\[1\] = "):
            _as_index_array([0, huge], name="idx", length=3)
        with pytest.raises(IndexError, match="any sequence"):
            _as_index_array([0, huge], name="idx")

    def test_duplicates(self):
        assert _has_duplicate_indices(np.array([0, 1, 0]))
        assert not _has_duplicate_indices(np.array([0, 1, 2]))


class TestPublicApiAcceptsArrays:
    def test_with_order_on_series(self):
        series = pd.Series(["a", "b", "c"])
        assert with_order(series, np.array([2, 1, 0])) == ["c", "b", "a"]

    def test_contains_in_order_on_array(self):
        assert contains_in_order(np.array([1, 2, 3, 4]), [2, 3])

    def test_spread_and_combine_on_series_rows(self):
        rows = [pd.Series([1, 2]), pd.Series([3])]
        assert spread_and_combine(rows) == [[1, 3], [2, 3]]
