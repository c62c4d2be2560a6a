"""Cartesian "spread and combine" over rows, and its mixed-radix index.

Given N non-empty rows of candidates, a *choice tuple* picks exactly
one element from each row, keeping row order positionally.  There are
``∏ Lᵢ`` of them (``Lᵢ = len(rows[i])``), enumerated in odometer order:
row 0 varies slowest, the last row fastest.

Mixed-radix encoding
--------------------
Odometer order makes the flat index of a tuple a mixed-radix number
whose i-th digit ``dᵢ`` is the position picked in row i, most
significant first::

    index = (…((d₀·L₁ + d₁)·L₂ + d₂)…)·L_{N−1} + d_{N−1}

Decoding peels digits off with a shrinking stride ``∏_{j>i} Lⱼ``.
Both directions are O(N) big-int arithmetic and never materialise the
product, so ``spread_and_combine_at_index`` works for index spaces far
larger than memory.

Example for rows ``[[1, 2], [3], [4, 5, 6]]`` (radices 2, 1, 3)::

    index 4 → stride 3: digit 1, rem 1 → stride 3: digit 0, rem 1
            → stride 1: digit 1
    choice  = [2, 3, 5]
"""

from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from ._compat import _ensure_sequence
from .equality import resolve_equality

if TYPE_CHECKING:
    from ._typing import Equality

logger = logging.getLogger(__name__)


def _validated_rows(rows: Sequence[Sequence[Any]]) -> list[Sequence[Any]]:
    """Normalise *rows* and reject an empty row list or any empty row."""
    rows = _ensure_sequence(rows, name="rows")
    if len(rows) == 0:
        raise ValueError("'rows' must contain at least one row.")
    checked = []
    for i, row in enumerate(rows):
        row = _ensure_sequence(row, name=f"rows[{i}]")
        if len(row) == 0:
            raise ValueError(f"rows[{i}] is empty; every row needs at least one element.")
        checked.append(row)
    return checked


class SpreadAndCombine(Sequence):
    """Lazy, index-addressable view of every choice tuple over *rows*.

    ``view.total`` is ``∏ len(row)``; ``view[i]`` decodes the i-th tuple
    directly and ``view.index(choice)`` encodes one back.  Iteration
    restarts from the first tuple on every ``iter()``.  The view holds
    references to the rows, so mutating a row while iterating is not
    supported.

    ``len(view)`` equals :attr:`total` only while the product fits in
    ``sys.maxsize``; past that ``len()``, ``reversed()`` and ``list()``
    raise ``OverflowError`` (an 80 x 2 grid already does).
    """

    def __init__(self, rows: Sequence[Sequence[Any]]) -> None:
        self._rows = _validated_rows(rows)
        self._radices = [len(row) for row in self._rows]
        self._total = math.prod(self._radices)

    @property
    def total(self) -> int:
        """Number of choice tuples; unlike ``len()``, not capped at ``sys.maxsize``."""
        return self._total

    @property
    def radices(self) -> tuple[int, ...]:
        """Row lengths, most significant first."""
        return tuple(self._radices)

    def __len__(self) -> int:
        return self._total

    def __getitem__(self, index: int) -> list[Any]:
        if isinstance(index, slice):
            raise TypeError("SpreadAndCombine does not support slicing.")
        index = int(index)
        if index < 0:
            index += self._total
        if not 0 <= index < self._total:
            raise IndexError(f"choice index out of range [0, {self._total}).")

        choice = []
        stride = self._total
        for row, radix in zip(self._rows, self._radices, strict=True):
            stride //= radix
            digit, index = divmod(index, stride)
            choice.append(row[digit])
        return choice

    def __iter__(self) -> Iterator[list[Any]]:
        for choice in itertools.product(*self._rows):
            yield list(choice)

    def index(
        self,
        choice: Sequence[Any],
        start: int = 0,
        stop: int | None = None,
        *,
        equality: str | Equality | None = None,
    ) -> int:
        """Return the flat index of *choice*.

        Each value is looked up in its own row; with repeated values the
        first equal element of the row wins.

        Raises:
            ValueError: If ``len(choice) != len(rows)``.
            RuntimeError: If a value is not found in its row.
        """
        eq = resolve_equality(equality)
        choice = _ensure_sequence(choice, name="choice")
        if len(choice) != len(self._rows):
            raise ValueError(
                f"'choice' has {len(choice)} values but there are "
                f"{len(self._rows)} rows."
            )

        flat = 0
        for i, (row, value) in enumerate(zip(self._rows, choice, strict=True)):
            digit = next((j for j, item in enumerate(row) if eq(item, value)), None)
            if digit is None:
                raise RuntimeError(f"The value {value!r} at index {i} isn't found in row {i}.")
            flat = flat * len(row) + digit

        if flat < start or (stop is not None and flat >= stop):
            raise ValueError(f"{choice!r} is not in range.")
        return flat

    def __contains__(self, choice: object) -> bool:
        try:
            self.index(choice)
        except (TypeError, ValueError, RuntimeError):
            return False
        return True

    def __repr__(self) -> str:
        return f"SpreadAndCombine({self._rows!r})"


def spread_and_combine(rows: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Return every way of picking one element from each row, in odometer order.

    Example::

        >>> spread_and_combine([[1, 2], [3], [4, 5, 6]])
        [[1, 3, 4], [1, 3, 5], [1, 3, 6], [2, 3, 4], [2, 3, 5], [2, 3, 6]]

    Raises:
        ValueError: If *rows* is empty or any row is empty.
    """
    view = SpreadAndCombine(rows)
    logger.debug("Spreading %d rows into %d combinations.", len(view.radices), view.total)
    return list(view)


def spread_and_combine_at_index(rows: Sequence[Sequence[Any]], index: int) -> list[Any]:
    """Return ``spread_and_combine(rows)[index]`` without building the product.

    Raises:
        ValueError: If *rows* is empty or any row is empty.
        IndexError: If *index* is outside ``[0, ∏ len(row))``.
    """
    view = SpreadAndCombine(rows)
    if not 0 <= index < view.total:
        raise IndexError(f"'index' = {index} is outside [0, {view.total}).")
    return view[index]


def spread_and_combine_to_index(
    rows: Sequence[Sequence[Any]],
    choice: Sequence[Any],
    *,
    equality: str | Equality | None = None,
) -> int:
    """Return the flat index of *choice* within ``spread_and_combine(rows)``.

    Raises:
        ValueError: If *rows* is empty, a row is empty, or *choice* has
            the wrong length.
        RuntimeError: If a chosen value is absent from its row.
    """
    return SpreadAndCombine(rows).index(choice, equality=equality)


def spread_and_combine_indices(rows: Sequence[Sequence[Any]]) -> np.ndarray:
    """Return the per-row digit of every choice tuple, in odometer order.

    Row ``i`` of the result holds the positions picked from each row
    for flat index ``i``.

    Returns:
        Integer array of shape ``(∏ len(row), len(rows))``.
    """
    view = SpreadAndCombine(rows)
    digits = np.unravel_index(np.arange(view.total, dtype=np.intp), view.radices)
    return np.column_stack(digits).astype(np.intp, copy=False)


def all_choices(seq: Sequence[Any]) -> list[list[Any]]:
    """Return every subset of *seq*, grouped by increasing size.

    Example::

        >>> all_choices([1, 2])
        [[], [1], [2], [1, 2]]
    """
    seq = _ensure_sequence(seq, name="seq")
    return [
        list(choice)
        for size in range(len(seq) + 1)
        for choice in itertools.combinations(seq, size)
    ]
