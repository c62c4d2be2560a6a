"""Comparison of near-equal ordered sequences.

Two families of algorithms live here:

Single-difference detection
---------------------------
:func:`find_single_missing_from`, :func:`find_single_extra_from` and
:func:`find_single_swapped_from` take two sequences that are assumed to
agree everywhere but at exactly one position, and return that
position.  All three walk both inputs once with independent cursors,
so they accept any iterables (generators included) and discover the
lengths as they go.

The assumption is checked, never trusted:

* a length relation that doesn't hold raises ``ValueError``;
* a second divergence raises ``RuntimeError``;
* no divergence at all (identical inputs) raises ``RuntimeError``
  rather than returning a fake ``0``.

Ordered containment
-------------------
:func:`contains_in_order` decides whether ``subset`` occurs in ``seq``
as one adjacent, in-order run.  It is a single pass over ``seq`` with a
cursor into ``subset``; on a mismatch the cursor falls back along a
precomputed prefix table (Knuth–Morris–Pratt) instead of to zero, so
runs that overlap a partial match (``[1, 1, 2]`` inside
``[1, 1, 1, 2]``) are still found.

An empty ``subset`` matches only an empty ``seq``.  This departs from
the usual "empty matches everything" convention and is kept as-is.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any

from ._compat import _ensure_sequence
from .equality import resolve_equality

if TYPE_CHECKING:
    from ._typing import Equality

_END = object()


# ------------------------------------------------------------------ #
# Single-difference detection
# ------------------------------------------------------------------ #


def _find_single_difference(
    shorter: Iterator[Any],
    longer: Iterator[Any],
    shorter_label: str,
    longer_label: str,
    eq: Equality,
) -> int:
    """Return the index in *longer* of the one element *shorter* lacks.

    The *longer* cursor always advances; the *shorter* cursor advances
    only when the two current elements match.  Every time it doesn't,
    the current index of *longer* is the skipped element.
    """
    index: int | None = None
    expected = next(shorter, _END)

    for i, value in enumerate(longer):
        if expected is not _END and eq(expected, value):
            expected = next(shorter, _END)
            continue
        if index is not None:
            if expected is _END:
                # shorter ran out and longer still has two extras.
                raise ValueError(
                    f"The length of {longer_label} iterable is not one more "
                    f"than the length of {shorter_label} iterable."
                )
            raise RuntimeError("The two iterables have more than one different element.")
        index = i

    if expected is not _END:
        raise ValueError(
            f"The length of {longer_label} iterable is not one more "
            f"than the length of {shorter_label} iterable."
        )
    if index is None:
        raise RuntimeError("The two iterables have the same elements.")
    return index


def find_single_missing_from(
    seq: Iterable[Any],
    other: Iterable[Any],
    *,
    equality: str | Equality | None = None,
) -> int:
    """Find the index of the single element of *other* missing from *seq*.

    *other* must be exactly one element longer than *seq*, and the two
    must agree in order once the missing element is skipped.

    Example::

        >>> find_single_missing_from([1, 2, 4], [1, 2, 3, 4])
        2

    Args:
        seq: The iterable with one element missing.
        other: The complete iterable.
        equality: Element equality (see :mod:`corextensions.equality`).

    Returns:
        The index, in *other*, of the element absent from *seq*.

    Raises:
        ValueError: If ``len(other) != len(seq) + 1``.
        RuntimeError: If the inputs differ at more than one place, or
            not at all.
    """
    eq = resolve_equality(equality)
    return _find_single_difference(iter(seq), iter(other), "this", "the provided", eq)


def find_single_extra_from(
    seq: Iterable[Any],
    other: Iterable[Any],
    *,
    equality: str | Equality | None = None,
) -> int:
    """Find the index of the single element of *seq* that *other* lacks.

    The mirror image of :func:`find_single_missing_from`: *seq* must be
    exactly one element longer than *other*.

    Example::

        >>> find_single_extra_from([1, 2, 3, 4], [1, 2, 4])
        2

    Raises:
        ValueError: If ``len(seq) != len(other) + 1``.
        RuntimeError: If the inputs differ at more than one place, or
            not at all.
    """
    eq = resolve_equality(equality)
    return _find_single_difference(iter(other), iter(seq), "the provided", "this", eq)


def find_single_swapped_from(
    seq: Iterable[Any],
    other: Iterable[Any],
    *,
    equality: str | Equality | None = None,
) -> int:
    """Find the one index at which two equal-length iterables differ.

    Example::

        >>> find_single_swapped_from([1, 2, 3], [1, 2, 4])
        2

    Raises:
        ValueError: If the two iterables differ in length.
        RuntimeError: If they differ at more than one index, or are
            identical.
    """
    eq = resolve_equality(equality)
    it_a, it_b = iter(seq), iter(other)
    index: int | None = None
    i = 0
    while True:
        a = next(it_a, _END)
        b = next(it_b, _END)
        if (a is _END) != (b is _END):
            raise ValueError("The length of the two iterables isn't equal.")
        if a is _END:
            break
        if not eq(a, b):
            if index is not None:
                raise RuntimeError(
                    "There's more than one different element in the two iterables."
                )
            index = i
        i += 1

    if index is None:
        raise RuntimeError("The two iterables have the same elements.")
    return index


# ------------------------------------------------------------------ #
# Prefix / suffix / ordered containment
# ------------------------------------------------------------------ #


def starts_with(
    seq: Iterable[Any],
    prefix: Iterable[Any],
    *,
    equality: str | Equality | None = None,
) -> bool:
    """Return ``True`` if *seq* begins with the elements of *prefix*.

    Works on plain iterables; stops at the first disagreement.

    Example::

        >>> starts_with([1, 2, 1, 1, 3], [1, 2, 1])
        True
        >>> starts_with([1, 2], [1, 2, 3])
        False
    """
    eq = resolve_equality(equality)
    it = iter(seq)
    for expected in prefix:
        value = next(it, _END)
        if value is _END or not eq(value, expected):
            return False
    return True


def ends_with(
    seq: Sequence[Any],
    suffix: Sequence[Any],
    *,
    equality: str | Equality | None = None,
) -> bool:
    """Return ``True`` if *seq* finishes with the elements of *suffix*.

    Example::

        >>> ends_with([1, 2, 1, 1, 3], [1, 1, 3])
        True
    """
    eq = resolve_equality(equality)
    seq = _ensure_sequence(seq, name="seq")
    suffix = _ensure_sequence(suffix, name="suffix")
    offset = len(seq) - len(suffix)
    if offset < 0:
        return False
    return all(eq(seq[offset + i], value) for i, value in enumerate(suffix))


def _prefix_table(pattern: Sequence[Any], eq: Equality) -> list[int]:
    """Longest proper prefix of ``pattern[:k+1]`` that is also its suffix."""
    table = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k and not eq(pattern[i], pattern[k]):
            k = table[k - 1]
        if eq(pattern[i], pattern[k]):
            k += 1
        table[i] = k
    return table


def contains_in_order(
    seq: Iterable[Any],
    subset: Iterable[Any],
    *,
    equality: str | Equality | None = None,
) -> bool:
    """Return ``True`` if *subset* appears in *seq* as one in-order run.

    Example::

        >>> contains_in_order([1, 2, 3, 4, 2], [2, 3, 4])
        True
        >>> contains_in_order([1, 2, 3, 4, 2], [1, 3, 4])
        False

    An empty *subset* only matches an empty *seq*.

    Args:
        seq: The host iterable; consumed at most once.
        subset: The run to look for.
        equality: Element equality (see :mod:`corextensions.equality`).
    """
    eq = resolve_equality(equality)
    pattern = list(subset)
    if not pattern:
        return next(iter(seq), _END) is _END

    table = _prefix_table(pattern, eq)
    j = 0
    for value in seq:
        while j and not eq(value, pattern[j]):
            j = table[j - 1]
        if eq(value, pattern[j]):
            j += 1
            if j == len(pattern):
                return True
    return False


def has_same_length_as(a: Iterable[Any], b: Iterable[Any]) -> bool:
    """Return ``True`` if *a* and *b* hold the same number of elements.

    Uses ``len()`` when both sides support it, otherwise steps both
    iterators together and stops as soon as one runs out.
    """
    if hasattr(a, "__len__") and hasattr(b, "__len__"):
        return len(a) == len(b)
    it_a, it_b = iter(a), iter(b)
    while True:
        x = next(it_a, _END)
        y = next(it_b, _END)
        if x is _END or y is _END:
            return x is y
