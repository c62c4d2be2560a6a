"""Permutations of ordered sequences: applying, enumerating, ranking.

Applying
--------
:func:`permute` moves elements round a single cycle of positions in
place; :func:`with_order` builds a reordered copy from a full index
bijection; :func:`swap` is the two-element special case.  Index
arguments are validated in full before the receiver is touched, so
a failed call never leaves it half permuted.

Enumerating
-----------
:func:`all_permutations` returns a :class:`Permutations` view rather
than a materialised list: ``view.total`` is ``n!`` and each traversal
re-enters :func:`itertools.permutations`, so it is lazy, finite and
restartable.  The enumeration order is lexicographic by *position*
(the identity ordering first), which is exactly the order of the
Lehmer-code ranks below.

Ranking (Lehmer code)
---------------------
Every ordering of ``n`` positions has a unique rank ``k ∈ [0, n!)``:
its place in the lexicographic enumeration.  The factoradic
representation decomposes that rank into digits ``d₁, d₂, …, dₙ``
where the i-th digit is expressed in base ``(n−i)!``::

    k = d₁·(n−1)! + d₂·(n−2)! + ··· + dₙ·0!

Each digit ``dᵢ ∈ [0, n−i]`` selects the ``dᵢ``-th remaining element
from a shrinking pool.  This bijection gives O(n²) random access into
the enumeration (``view[k]``) and the inverse lookup (``view.index``)
without storing any of the ``n!`` orderings.

Example for n=3, k=4::

    k=4 → digits [2, 0, 0] in factoradic
    pool=[0,1,2] → pop(2)=2, pool=[0,1] → pop(0)=0, pool=[1] → pop(0)=1
    result = [2, 0, 1]

Mutating a source sequence while a view over it is being iterated is
not supported.
"""

from __future__ import annotations

import itertools
import logging
import math
import warnings
from collections.abc import Callable, Iterable, Iterator, MutableSequence, Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from ._compat import _as_index_array, _ensure_sequence, _has_duplicate_indices
from .equality import resolve_equality

if TYPE_CHECKING:
    from ._typing import Equality, IndexLike

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------ #
# Lehmer code (factorial number system)
# ------------------------------------------------------------------ #


def _unrank_permutation(k: int, n: int) -> list[int]:
    """Convert rank *k* to the *k*-th lexicographic permutation of ``[0..n-1]``.

    Args:
        k: Rank in ``[0, n!)``.
        n: Length of the permutation.

    Returns:
        List of *n* integers representing the permutation.
    """
    available = list(range(n))
    result: list[int] = []
    for i in range(n, 0, -1):
        f = math.factorial(i - 1)
        idx, k = divmod(k, f)
        result.append(available.pop(idx))
    return result


def _rank_permutation(order: Sequence[int]) -> int:
    """Inverse of :func:`_unrank_permutation` for a permutation of ``[0..n-1]``."""
    n = len(order)
    available = list(range(n))
    rank = 0
    for i, j in enumerate(order):
        digit = available.index(j)
        available.pop(digit)
        rank += digit * math.factorial(n - 1 - i)
    return rank


def _match_positions(
    seq: Sequence[Any],
    permutation: Sequence[Any],
    eq: Equality,
) -> list[int]:
    """Map each element of *permutation* to a distinct position of *seq*.

    Equal elements are consumed left to right, so repeated values map
    onto their occurrences in order.

    Raises:
        ValueError: If *permutation* is not an ordering of *seq*.
    """
    if len(permutation) != len(seq):
        raise ValueError(
            f"'permutation' has length {len(permutation)}, expected {len(seq)}."
        )
    unused = list(range(len(seq)))
    order: list[int] = []
    for i, value in enumerate(permutation):
        for slot, j in enumerate(unused):
            if eq(seq[j], value):
                order.append(unused.pop(slot))
                break
        else:
            raise ValueError(
                f"permutation[{i}] = {value!r} has no remaining match in the sequence."
            )
    return order


# ------------------------------------------------------------------ #
# Applying orderings
# ------------------------------------------------------------------ #


def permute(seq: MutableSequence[Any], indices: IndexLike) -> None:
    """Rotate the elements at *indices* one step round a cycle, in place.

    ``seq[indices[k + 1]]`` receives the old ``seq[indices[k]]`` and
    ``seq[indices[0]]`` receives the old ``seq[indices[-1]]``.
    Positions not listed in *indices* are untouched.

    Example::

        >>> sentence = ['I', 'would', 'have', 'known', 'not', 'that']
        >>> permute(sentence, [2, 3, 4])
        >>> sentence
        ['I', 'would', 'not', 'have', 'known', 'that']

    Args:
        seq: The mutable sequence to permute.
        indices: Pairwise-distinct, in-range positions.  Zero or one
            index is a no-op.

    Raises:
        ValueError: If *indices* contains duplicates.
        IndexError: If any index is out of range for *seq*.
    """
    arr = _as_index_array(indices, name="indices")
    if arr.size <= 1:
        return
    if _has_duplicate_indices(arr):
        raise ValueError("'indices' contains duplicates.")
    idx = _as_index_array(arr, name="indices", length=len(seq)).tolist()

    last = seq[idx[-1]]
    for k in range(len(idx) - 2, -1, -1):
        seq[idx[k + 1]] = seq[idx[k]]
    seq[idx[0]] = last


def with_order(seq: Sequence[Any], new_order: IndexLike) -> list[Any]:
    """Return a copy of *seq* with ``result[i] = seq[new_order[i]]``.

    Example::

        >>> with_order(['I', 'went', 'there', 'yesterday'], [3, 0, 1, 2])
        ['yesterday', 'I', 'went', 'there']

    Args:
        seq: The source sequence.
        new_order: Every index ``0 .. len(seq) - 1`` exactly once.

    Returns:
        A new list.

    Raises:
        ValueError: If *new_order* has duplicates or the wrong length.
        IndexError: If an entry is not a valid index for *seq*.
    """
    seq = _ensure_sequence(seq, name="seq")
    arr = _as_index_array(new_order, name="new_order")
    if _has_duplicate_indices(arr):
        raise ValueError("'new_order' contains duplicates.")
    if arr.size != len(seq):
        raise ValueError(
            f"'new_order' has {arr.size} indices but the sequence has "
            f"{len(seq)} elements; every index must appear exactly once."
        )
    idx = _as_index_array(arr, name="new_order", length=len(seq)).tolist()
    return [seq[j] for j in idx]


def inverse_order(new_order: IndexLike) -> list[int]:
    """Return the ordering that undoes *new_order* under :func:`with_order`.

    ``with_order(with_order(s, p), inverse_order(p)) == list(s)`` for
    every bijection ``p`` on ``range(len(s))``.

    Raises:
        ValueError: If *new_order* is not a bijection on
            ``range(len(new_order))``.
    """
    arr = _as_index_array(new_order, name="new_order")
    n = arr.size
    if _has_duplicate_indices(arr) or (n and (arr.min() < 0 or arr.max() >= n)):
        raise ValueError(f"'new_order' is not a permutation of range({n}).")
    inverse = np.empty(n, dtype=np.intp)
    inverse[arr] = np.arange(n, dtype=np.intp)
    return inverse.tolist()


def swap(seq: MutableSequence[Any], i: int, j: int) -> None:
    """Exchange ``seq[i]`` and ``seq[j]`` in place.

    Raises:
        IndexError: If either index is out of range.
    """
    n = len(seq)
    for name, k in (("i", i), ("j", j)):
        if not 0 <= k < n:
            raise IndexError(
                f"'{name}' = {k} is not a valid index for a sequence of length {n}."
            )
    if i == j:
        return
    seq[i], seq[j] = seq[j], seq[i]


# ------------------------------------------------------------------ #
# Enumeration
# ------------------------------------------------------------------ #


class Permutations(Sequence):
    """Lazy, index-addressable view of every ordering of a sequence.

    Holds a reference to *source*; nothing is materialised up front.
    Each ``iter()`` starts a fresh lexicographic traversal and yields
    new lists.  ``view[k]`` and ``view.index(p)`` use the Lehmer code,
    so random access costs O(n²) regardless of ``n!``.

    ``len(view)`` is ``n!`` only while that fits in ``sys.maxsize``
    (up to 20 elements on 64-bit builds).  Beyond that ``len()``,
    ``reversed()`` and ``list()`` raise ``OverflowError``; use
    :attr:`total` for the exact count, and indexing or a ``for`` loop to
    reach elements.
    """

    def __init__(self, source: Sequence[Any]) -> None:
        self._source = _ensure_sequence(source, name="source")

    @property
    def total(self) -> int:
        """Number of orderings, ``n!``; unlike ``len()``, not capped at ``sys.maxsize``."""
        return math.factorial(len(self._source))

    def __len__(self) -> int:
        return self.total

    def __getitem__(self, k: int) -> list[Any]:
        if isinstance(k, slice):
            raise TypeError("Permutations does not support slicing.")
        k = int(k)
        total = self.total
        if k < 0:
            k += total
        if not 0 <= k < total:
            raise IndexError(f"permutation index out of range [0, {total}).")
        return [self._source[j] for j in _unrank_permutation(k, len(self._source))]

    def __iter__(self) -> Iterator[list[Any]]:
        for ordering in itertools.permutations(self._source):
            yield list(ordering)

    def __contains__(self, value: object) -> bool:
        try:
            self.index(value)
        except (TypeError, ValueError):
            return False
        return True

    def index(
        self,
        value: Sequence[Any],
        start: int = 0,
        stop: int | None = None,
        *,
        equality: str | Equality | None = None,
    ) -> int:
        """Return the lexicographic rank of the ordering *value*."""
        eq = resolve_equality(equality)
        order = _match_positions(self._source, _ensure_sequence(value, name="value"), eq)
        rank = _rank_permutation(order)
        if rank < start or (stop is not None and rank >= stop):
            raise ValueError(f"{value!r} is not in range.")
        return rank

    def __repr__(self) -> str:
        return f"Permutations({self._source!r})"


def all_permutations(seq: Sequence[Any]) -> Permutations:
    """Return every ordering of *seq* as a lazy :class:`Permutations` view.

    Example::

        >>> list(all_permutations([1, 2, 3]))
        [[1, 2, 3], [1, 3, 2], [2, 1, 3], [2, 3, 1], [3, 1, 2], [3, 2, 1]]
    """
    view = Permutations(seq)
    logger.debug("Permutation view over %d elements (%d orderings).", len(seq), view.total)
    return view


class OtherPermutations(Iterable):
    """Restartable iterable of every ordering of *source* but its own.

    Each ``iter()`` starts a fresh pass over :class:`Permutations` and
    skips orderings element-wise equal to *source* under *eq*.
    """

    def __init__(self, source: Sequence[Any], eq: Equality) -> None:
        self._view = Permutations(source)
        self._eq = eq

    def __iter__(self) -> Iterator[list[Any]]:
        source = self._view._source
        eq = self._eq
        for ordering in self._view:
            if not all(eq(a, b) for a, b in zip(ordering, source, strict=True)):
                yield ordering

    def __repr__(self) -> str:
        return f"OtherPermutations({self._view._source!r})"


def other_permutations(
    seq: Sequence[Any],
    *,
    equality: str | Equality | None = None,
) -> OtherPermutations:
    """Every ordering of *seq* except *seq* itself, as a restartable iterable.

    Any ordering element-wise equal to *seq* is skipped, so when *seq*
    repeats a value more than one ordering is filtered out.  Nothing is
    computed until the result is iterated, and iterating it again
    starts over.

    Example::

        >>> list(other_permutations([1, 2, 3]))[:2]
        [[1, 3, 2], [2, 1, 3]]
    """
    eq = resolve_equality(equality)
    return OtherPermutations(_ensure_sequence(seq, name="seq"), eq)


def permutation_at_index(seq: Sequence[Any], k: int) -> list[Any]:
    """Return the ordering of *seq* with lexicographic rank *k*.

    Raises:
        IndexError: If *k* is outside ``[0, len(seq)!)``.
    """
    total = math.factorial(len(seq))
    if not 0 <= k < total:
        raise IndexError(f"'k' = {k} is outside [0, {total}).")
    return Permutations(seq)[k]


def permutation_to_index(
    seq: Sequence[Any],
    permutation: Sequence[Any],
    *,
    equality: str | Equality | None = None,
) -> int:
    """Return the lexicographic rank of *permutation* among orderings of *seq*.

    Raises:
        ValueError: If *permutation* is not an ordering of *seq*.
    """
    return Permutations(seq).index(permutation, equality=equality)


def sample_permutations(
    seq: Sequence[Any],
    n_samples: int,
    *,
    random_state: int,
    exclude_identity: bool = True,
    max_exhaustive: int = 10,
) -> list[list[Any]]:
    """Draw distinct orderings of *seq* without replacement.

    The result depends only on the arguments: *random_state* is a
    required integer seed, so equal calls return equal lists.

    For ``len(seq) <= max_exhaustive``, ranks are drawn without
    replacement from ``[0, n!)`` and decoded with the Lehmer code, so no
    collisions are possible and nothing of size ``n!`` is built.  For
    longer sequences all candidates are shuffled in a single
    ``numpy.random.Generator.permuted`` call and deduplicated by hash
    only when the birthday bound ``B(B−1)/(2·n!)`` is not negligible.

    Distinctness is over positions: when *seq* repeats a value, two
    samples may compare equal element-wise.

    Args:
        seq: The sequence to reorder.
        n_samples: Number of orderings requested.
        random_state: Integer seed for the generator.
        exclude_identity: If ``True``, *seq*'s own ordering is never
            drawn.
        max_exhaustive: Largest length for which Lehmer-code sampling
            is used.

    Returns:
        A list of ``min(n_samples, available)`` new lists, where
        ``available`` is ``n!``, less one when *exclude_identity*.

    Raises:
        ValueError: If *n_samples* is negative.
        TypeError: If *random_state* is not an integer.
        RuntimeError: If the batch path cannot complete the sample.

    Warns:
        UserWarning: If fewer than *n_samples* distinct orderings
            exist; all of them are returned instead.
    """
    if n_samples < 0:
        raise ValueError(f"'n_samples' must be non-negative, got {n_samples}.")
    if isinstance(random_state, bool) or not isinstance(random_state, (int, np.integer)):
        raise TypeError(
            f"'random_state' must be an integer seed, got {type(random_state).__name__}."
        )
    seq = _ensure_sequence(seq, name="seq")
    n = len(seq)
    rng = np.random.default_rng(int(random_state))

    total = math.factorial(n)
    pool_start = 1 if exclude_identity else 0
    available = total - pool_start
    if n_samples > available:
        warnings.warn(
            f"Only {available} distinct orderings are available for a "
            f"sequence of length {n} (exclude_identity={exclude_identity}), "
            f"but {n_samples} were requested.  Capping at {available}.",
            UserWarning,
            stacklevel=2,
        )
        n_samples = available
    if n_samples == 0:
        return []

    if n <= max_exhaustive:
        # Identity = rank 0, so excluding it means sampling from [1, total).
        ranks = rng.choice(available, size=n_samples, replace=False) + pool_start
        logger.debug("Lehmer-code sampling of %d ranks from %d.", n_samples, total)
        rows = [_unrank_permutation(int(k), n) for k in ranks]
        return [[seq[j] for j in row] for row in rows]

    collision_prob = n_samples * (n_samples - 1) / (2 * total)
    need_dedup = collision_prob >= 1e-9
    logger.debug(
        "Batch shuffling %d orderings of %d elements (dedup=%s).",
        n_samples,
        n,
        need_dedup,
    )

    batch = np.tile(np.arange(n, dtype=np.intp), (n_samples, 1))
    rng.permuted(batch, axis=1, out=batch)

    identity = tuple(range(n))
    seen: set[tuple[int, ...]] = set()
    if exclude_identity:
        seen.add(identity)

    rows: list[list[int]] = []
    for row in batch:
        key = tuple(row.tolist())
        if need_dedup or exclude_identity:
            if key in seen:
                continue
            seen.add(key)
        rows.append(list(key))

    # Fill gaps left by identity hits or collisions.
    max_attempts = n_samples * 20 + 1000
    attempts = 0
    while len(rows) < n_samples and attempts < max_attempts:
        key = tuple(rng.permutation(n).tolist())
        if key not in seen:
            seen.add(key)
            rows.append(list(key))
        attempts += 1
    if len(rows) < n_samples:
        raise RuntimeError(
            f"Drew only {len(rows)} of {n_samples} distinct orderings after "
            f"{max_attempts} attempts; raise 'max_exhaustive' to {n} to "
            f"sample exhaustively."
        )

    return [[seq[j] for j in row] for row in rows]


# ------------------------------------------------------------------ #
# Distances and index queries
# ------------------------------------------------------------------ #


def first_difference_to(
    seq: Sequence[Any],
    permutation: Sequence[Any],
    *,
    equality: str | Equality | None = None,
) -> int:
    """Return the first index at which *seq* and *permutation* differ.

    *permutation* is assumed, not checked, to be a reordering of *seq*.

    Example::

        >>> first_difference_to([1, 2, 3, 4], [1, 3, 2, 4])
        1

    Raises:
        ValueError: If the two lengths differ.
        RuntimeError: If no index differs.
    """
    eq = resolve_equality(equality)
    seq = _ensure_sequence(seq, name="seq")
    permutation = _ensure_sequence(permutation, name="permutation")
    if len(seq) != len(permutation):
        raise ValueError("The two sequences don't have the same length.")
    for i, (a, b) in enumerate(zip(seq, permutation, strict=True)):
        if not eq(a, b):
            return i
    raise RuntimeError(
        "The two sequences are the same or aren't permutations of each other."
    )


def distance_to(
    seq: Sequence[Any],
    permutation: Sequence[Any],
    *,
    equality: str | Equality | None = None,
) -> int:
    """Count the positions at which *seq* and *permutation* differ.

    Example::

        >>> distance_to([1, 2, 3, 4], [1, 3, 2, 4])
        2

    Raises:
        ValueError: If the two lengths differ.
    """
    eq = resolve_equality(equality)
    seq = _ensure_sequence(seq, name="seq")
    permutation = _ensure_sequence(permutation, name="permutation")
    if len(seq) != len(permutation):
        raise ValueError("The two sequences don't have the same length.")
    return sum(1 for a, b in zip(seq, permutation, strict=True) if not eq(a, b))


def all_indices_of(
    seq: Sequence[Any],
    value: Any,
    *,
    equality: str | Equality | None = None,
) -> list[int]:
    """Return, ascending, every index whose element equals *value*.

    Example::

        >>> all_indices_of([1, 1, 2, 3, 1, 5], 1)
        [0, 1, 4]
    """
    eq = resolve_equality(equality)
    return [i for i, element in enumerate(seq) if eq(element, value)]


def all_indices_where(seq: Sequence[Any], predicate: Callable[[Any], bool]) -> list[int]:
    """Return, ascending, every index whose element satisfies *predicate*."""
    return [i for i, element in enumerate(seq) if predicate(element)]
