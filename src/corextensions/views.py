"""Lazy, index-addressable views over existing sequences.

A view keeps a back-reference to its source(s) and a transform, and
computes each element on demand: ``view[i]`` is O(1) and every
``iter()`` restarts from the beginning.  Views never copy or own their
source, so edits to the source show through, but editing it while
iterating a view is not supported.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ._compat import _ensure_sequence

A = TypeVar("A")
B = TypeVar("B")


class MappedSequence(Sequence):
    """``fn(source[i], i)`` for every index of *source*, computed lazily."""

    def __init__(self, source: Sequence[Any], fn: Callable[[Any, int], Any]) -> None:
        self._source = source
        self._fn = fn

    def __len__(self) -> int:
        return len(self._source)

    def __getitem__(self, i: int) -> Any:
        if isinstance(i, slice):
            return [self[k] for k in range(*i.indices(len(self)))]
        n = len(self._source)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError("MappedSequence index out of range.")
        return self._fn(self._source[i], i)

    def __iter__(self) -> Iterator[Any]:
        for i, element in enumerate(self._source):
            yield self._fn(element, i)

    def __repr__(self) -> str:
        return f"MappedSequence({list(self)!r})"


def map_with_index(seq: Sequence[Any], fn: Callable[[Any, int], Any]) -> MappedSequence:
    """Lazily map *fn* over *seq*, passing each element and its index.

    Example::

        >>> list(map_with_index([5, 10, 12, 8, 5], lambda x, i: x * i))
        [0, 10, 24, 24, 20]
    """
    return MappedSequence(_ensure_sequence(seq, name="seq"), fn)


@dataclass(frozen=True)
class ZippedContent(Generic[A, B]):
    """One pair from :func:`zip_two_lists`."""

    first: A
    second: B

    def __str__(self) -> str:
        return f"({self.first}, {self.second})"


class ZippedSequence(Sequence):
    """Pairs ``ZippedContent(first[i], second[i])``, computed lazily.

    The two sources must keep the same length; that is re-checked each
    time the length is taken.
    """

    def __init__(self, first: Sequence[Any], second: Sequence[Any]) -> None:
        self._first = first
        self._second = second

    def __len__(self) -> int:
        n = len(self._first)
        if n != len(self._second):
            raise ValueError("The length of the two lists isn't the same.")
        return n

    def __getitem__(self, i: int) -> ZippedContent:
        if isinstance(i, slice):
            return [self[k] for k in range(*i.indices(len(self)))]
        n = len(self)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError("ZippedSequence index out of range.")
        return ZippedContent(self._first[i], self._second[i])

    def __iter__(self) -> Iterator[ZippedContent]:
        for i in range(len(self)):
            yield ZippedContent(self._first[i], self._second[i])

    def __repr__(self) -> str:
        return "(" + ", ".join(str(pair) for pair in self) + ")"


def zip_two_lists(first: Sequence[A], second: Sequence[B]) -> ZippedSequence:
    """Lazily pair up two equal-length sequences.

    Example::

        >>> zipped = zip_two_lists([0, 1, 2], ['zero', 'one', 'two'])
        >>> zipped[1].second
        'one'

    Raises:
        ValueError: If the lengths differ.
    """
    first = _ensure_sequence(first, name="first")
    second = _ensure_sequence(second, name="second")
    if len(first) != len(second):
        raise ValueError("The length of the two lists isn't the same.")
    return ZippedSequence(first, second)
