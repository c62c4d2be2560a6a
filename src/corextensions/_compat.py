"""Input compatibility layer for array-like sequences.

The public API is written against :class:`collections.abc.Sequence`.
This module adds transparent support for the array containers callers
commonly hold instead: NumPy arrays, pandas ``Series`` / ``Index`` and
(optionally) Polars ``Series`` are converted to plain lists at the
boundary so that internal code — which relies on Python ``==`` between
single elements — remains unchanged.

Index arguments (``indices``, ``new_order``, ``change_array``) go the
other way: they are normalised to a 1-D ``numpy.intp`` array so that
duplicate and range checks run vectorised before any mutation happens.

Polars is **not** a required dependency.  If it is not installed, the
converter simply never recognises Polars objects.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from ._typing import IndexLike

# Runtime detection — avoids a hard dependency on Polars.
try:
    import polars as pl

    _HAS_POLARS = True
except ImportError:
    _HAS_POLARS = False


def _ensure_sequence(obj: Any, *, name: str = "input") -> Sequence:
    """Return *obj* as an indexable :class:`~collections.abc.Sequence`.

    Accepted types:
        * any ``Sequence`` (``list``, ``tuple``, ``str``, ``range``, …)
          — returned as-is, no copy.
        * ``numpy.ndarray`` — converted via ``.tolist()``.
        * ``pandas.Series`` / ``pandas.Index`` — converted via
          ``.tolist()``.
        * ``polars.Series`` — converted via ``.to_list()``.

    Args:
        obj: The object to normalise.
        name: Label used in error messages (e.g. ``"seq"``).

    Returns:
        A ``Sequence``.

    Raises:
        TypeError: If *obj* is not a recognised sequence type.
    """
    if isinstance(obj, Sequence):
        return obj
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, (pd.Series, pd.Index)):
        return obj.tolist()
    if _HAS_POLARS and isinstance(obj, pl.Series):
        return obj.to_list()

    raise TypeError(
        f"'{name}' must be a sequence, NumPy array or pandas Series"
        + (" or Polars Series" if _HAS_POLARS else "")
        + f", got {type(obj).__name__}."
    )


_INTP_INFO = np.iinfo(np.intp)


def _check_intp_range(values: list, *, name: str, length: int | None) -> None:
    # Python ints past intp would turn the array into object dtype.
    for k, v in enumerate(values):
        if isinstance(v, int) and not isinstance(v, bool):
            if not _INTP_INFO.min <= v <= _INTP_INFO.max:
                bound = "any sequence" if length is None else f"a sequence of length {length}"
                raise IndexError(f"{name}[{k}] = {v} is not a valid index for {bound}.")


def _as_index_array(
    indices: IndexLike,
    *,
    name: str = "indices",
    length: int | None = None,
) -> np.ndarray:
    """Normalise *indices* to a 1-D ``numpy.intp`` array.

    Args:
        indices: Any iterable of integers, or an integer NumPy array.
        name: Label used in error messages.
        length: When given, every entry must lie in ``[0, length)``.

    Returns:
        Integer array of shape ``(len(indices),)``.

    Raises:
        TypeError: If the entries are not integers.
        ValueError: If *indices* is not one-dimensional.
        IndexError: If an entry falls outside ``[0, length)``, or is a
            Python int too large for ``numpy.intp`` whatever *length* is.
    """
    if not isinstance(indices, np.ndarray):
        indices = list(indices) if isinstance(indices, Iterable) else indices
        if isinstance(indices, list):
            _check_intp_range(indices, name=name, length=length)
    arr = np.asarray(indices)
    if arr.size == 0:
        return np.empty(0, dtype=np.intp)
    if arr.ndim != 1:
        raise ValueError(f"'{name}' must be one-dimensional, got shape {arr.shape}.")
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        raise TypeError(f"'{name}' must contain integers, got dtype {arr.dtype}.")
    arr = arr.astype(np.intp, copy=False)

    if length is not None:
        bad = np.flatnonzero((arr < 0) | (arr >= length))
        if bad.size:
            k = int(bad[0])
            raise IndexError(
                f"{name}[{k}] = {int(arr[k])} is not a valid index for a "
                f"sequence of length {length}."
            )
    return arr


def _has_duplicate_indices(arr: np.ndarray) -> bool:
    """Return ``True`` if the integer array *arr* repeats any value."""
    return np.unique(arr).size != arr.size
