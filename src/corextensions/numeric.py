"""Reductions over collections of numbers.

``maximum`` is a true maximum.  The helper it descends from reduced
with ``min`` for both ``min`` and ``max``; that defect is not carried
over (see ``tests/test_numeric.py``).
"""

from __future__ import annotations

import math
import operator
from collections.abc import Iterable, Iterator
from functools import reduce
from numbers import Number


def _reduce(numbers: Iterable[Number], fn, name: str) -> Number:
    it = iter(numbers)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError(f"{name}() of an empty iterable.") from None
    return reduce(fn, it, first)


def total(numbers: Iterable[Number]) -> Number:
    """Sum of *numbers*; raises ``ValueError`` when empty."""
    return _reduce(numbers, operator.add, "total")


def product(numbers: Iterable[Number]) -> Number:
    """Product of *numbers*; raises ``ValueError`` when empty."""
    return _reduce(numbers, operator.mul, "product")


def minimum(numbers: Iterable[Number]) -> Number:
    """Smallest of *numbers*; raises ``ValueError`` when empty."""
    return _reduce(numbers, min, "minimum")


def maximum(numbers: Iterable[Number]) -> Number:
    """Largest of *numbers*; raises ``ValueError`` when empty."""
    return _reduce(numbers, max, "maximum")


def at_lowest_factors(numbers: Iterable[int]) -> Iterator[int]:
    """Divide every number by the gcd of them all.

    Python integers are unbounded, so this covers arbitrarily large
    values.

    Example::

        >>> list(at_lowest_factors([2, 112, 20]))
        [1, 56, 10]

    Raises:
        RuntimeError: If any number is zero.
        ValueError: If *numbers* is empty.
    """
    values = list(numbers)

    def _gcd(a: int, b: int) -> int:
        if a == 0 or b == 0:
            raise RuntimeError("None of the numbers can be zero.")
        return math.gcd(a, b)

    divisor = _reduce(values, _gcd, "at_lowest_factors")
    if divisor == 0:
        raise RuntimeError("None of the numbers can be zero.")
    return (value // divisor for value in values)
