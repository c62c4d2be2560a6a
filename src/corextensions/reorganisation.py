"""Local reorganisation of a sequence: ranges, partitions, insertions.

All functions that mutate do so in place and return ``None``; their
arguments are validated before the first write.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence, Sequence
from typing import TYPE_CHECKING, Any

from ._compat import _as_index_array, _ensure_sequence

if TYPE_CHECKING:
    from ._typing import IndexLike


def replace_elements_by_reorganisation(
    seq: MutableSequence[Any],
    start: int,
    end: int,
    change_array: IndexLike,
) -> None:
    """Replace ``seq[start:end]`` with elements picked from that same range.

    Each entry ``c`` of *change_array* contributes the element that sat
    at ``start + c`` *before* the call.  The replacement has
    ``len(change_array)`` elements, so *seq* may grow or shrink.

    Example::

        >>> fruits = ['apple', 'banana', 'carrot', 'mango', 'pineapple']
        >>> replace_elements_by_reorganisation(fruits, 1, 3, [1, 0])
        >>> fruits
        ['apple', 'carrot', 'banana', 'mango', 'pineapple']
        >>> replace_elements_by_reorganisation(fruits, 1, 4, [2, 2])
        >>> fruits
        ['apple', 'mango', 'mango', 'pineapple']

    Args:
        seq: The list to edit.
        start: First replaced index (inclusive).
        end: End of the replaced range (exclusive).
        change_array: Offsets into the range, each in
            ``[0, end - start)``; repeats are allowed.

    Raises:
        IndexError: If ``0 <= start <= end <= len(seq)`` does not hold,
            or an offset falls outside the range.
    """
    n = len(seq)
    if not 0 <= start <= end <= n:
        raise IndexError(
            f"Invalid range [{start}, {end}) for a sequence of length {n}."
        )
    offsets = _as_index_array(change_array, name="change_array", length=end - start)
    replacement = [seq[start + c] for c in offsets.tolist()]
    seq[start:end] = replacement


def partition_in_order(
    seq: Sequence[Any],
    predicate: Callable[[Any, Any, int, list[Any]], bool],
) -> list[list[Any]]:
    """Split *seq* into runs of adjacent elements that belong together.

    ``predicate(previous, current, i, partition)`` is called for every
    adjacent pair, where ``i`` is the index of *previous* and
    *partition* is the run built so far.  A falsy result starts a new
    run at *current*.

    Example::

        >>> partition_in_order(
        ...     [1, 2, 3, 5, 6, 10, 12, 13],
        ...     lambda prev, cur, i, part: prev + 1 == cur,
        ... )
        [[1, 2, 3], [5, 6], [10], [12, 13]]

    Returns:
        Non-empty, freshly allocated runs whose concatenation is *seq*;
        ``[]`` for an empty *seq*.
    """
    seq = _ensure_sequence(seq, name="seq")
    if len(seq) == 0:
        return []

    partitions: list[list[Any]] = []
    current = [seq[0]]
    for i in range(len(seq) - 1):
        if predicate(seq[i], seq[i + 1], i, current):
            current.append(seq[i + 1])
        else:
            partitions.append(current)
            current = [seq[i + 1]]
    partitions.append(current)
    return partitions


def add_within(seq: MutableSequence[Any], addition: Any) -> None:
    """Insert *addition* between every two adjacent elements, in place.

    Example::

        >>> numbers = [1, 2, 3]
        >>> add_within(numbers, 5)
        >>> numbers
        [1, 5, 2, 5, 3]
    """
    # Fixed before the loop; seq grows as we insert.
    n = len(seq)
    for i in range(n - 1):
        seq.insert(2 * i + 1, addition)


def update_all(seq: MutableSequence[Any], fn: Callable[[Any], Any]) -> None:
    """Replace every element ``x`` of *seq* with ``fn(x)``, in place."""
    for i in range(len(seq)):
        seq[i] = fn(seq[i])
