"""Small predicates, counters and reductions over any iterable."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from functools import reduce
from typing import TYPE_CHECKING, Any

from .equality import resolve_equality

if TYPE_CHECKING:
    from ._typing import Equality

_MISSING = object()


def is_single(iterable: Iterable[Any]) -> bool:
    """Return ``True`` if *iterable* yields exactly one element."""
    if hasattr(iterable, "__len__"):
        return len(iterable) == 1
    it = iter(iterable)
    return next(it, _MISSING) is not _MISSING and next(it, _MISSING) is _MISSING


def count(
    iterable: Iterable[Any],
    value: Any,
    *,
    equality: str | Equality | None = None,
) -> int:
    """Count the elements equal to *value*."""
    eq = resolve_equality(equality)
    return sum(1 for element in iterable if eq(value, element))


def count_where(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> int:
    """Count the elements satisfying *predicate*."""
    return sum(1 for element in iterable if predicate(element))


def has_duplicates(seq: Iterable[Any]) -> bool:
    """Return ``True`` if any value occurs more than once.

    Hashable elements go through a ``set``; otherwise falls back to
    pairwise ``==``.
    """
    items = list(seq)
    try:
        return len(set(items)) != len(items)
    except TypeError:
        # unhashable elements
        return any(items[i] == items[j] for i in range(len(items)) for j in range(i))


def has_same_elements_as(a: Iterable[Any], b: Iterable[Any]) -> bool:
    """Return ``True`` if *a* and *b* hold the same set of values, in any order."""
    return set(a) == set(b)


def sets_equal(a: set[Any], b: set[Any]) -> bool:
    """Return ``True`` if the two sets have the same members."""
    return len(a) == len(b) and all(item in b for item in a)


def first_where_not_none(iterable: Iterable[Any], fn: Callable[[Any], Any]) -> Any:
    """Return the first element for which ``fn(element)`` is not ``None``.

    Raises:
        RuntimeError: If there is no such element.
    """
    for element in iterable:
        if fn(element) is not None:
            return element
    raise RuntimeError("No element!")


def where_not_none(iterable: Iterable[Any], fn: Callable[[Any], Any]) -> Iterator[Any]:
    """Lazily yield the elements for which ``fn(element)`` is not ``None``."""
    return (element for element in iterable if fn(element) is not None)


def any_of_type(iterable: Iterable[Any], cls: type | tuple[type, ...]) -> bool:
    return any(isinstance(element, cls) for element in iterable)


def all_of_type(iterable: Iterable[Any], cls: type | tuple[type, ...]) -> bool:
    return all(isinstance(element, cls) for element in iterable)


def first_where_type(
    iterable: Iterable[Any],
    cls: type | tuple[type, ...],
    default: Any = _MISSING,
) -> Any:
    """Return the first element that is an instance of *cls*.

    Raises:
        RuntimeError: If none is, and no *default* was given.
    """
    for element in iterable:
        if isinstance(element, cls):
            return element
    if default is not _MISSING:
        return default
    raise RuntimeError("No element!")


def _reduce_nonempty(iterable: Iterable[Any], fn: Callable[[Any, Any], Any], name: str) -> Any:
    it = iter(iterable)
    first = next(it, _MISSING)
    if first is _MISSING:
        raise ValueError(f"{name}() of an empty iterable.")
    return reduce(fn, it, first)


def smallest_where(iterable: Iterable[Any], key: Callable[[Any], Any]) -> Any:
    """Return the element with the smallest ``key(element)``.

    On ties the later element wins.

    Example::

        >>> smallest_where([-2, 15, -10, 4], abs)
        -2

    Raises:
        ValueError: If *iterable* is empty.
    """
    return _reduce_nonempty(
        iterable, lambda a, b: a if key(a) < key(b) else b, "smallest_where"
    )


def largest_where(iterable: Iterable[Any], key: Callable[[Any], Any]) -> Any:
    """Return the element with the largest ``key(element)``.

    On ties the earlier element wins.

    Raises:
        ValueError: If *iterable* is empty.
    """
    return _reduce_nonempty(
        iterable, lambda a, b: b if key(a) < key(b) else a, "largest_where"
    )


def sum_where(iterable: Iterable[Any], fn: Callable[[Any], Any]) -> Any:
    """Sum ``fn(element)`` over *iterable*; ``0`` when empty."""
    return reduce(lambda total, element: total + fn(element), iterable, 0)


def product_where(iterable: Iterable[Any], fn: Callable[[Any], Any]) -> Any:
    """Multiply ``fn(element)`` over *iterable*; ``1`` when empty."""
    return reduce(lambda total, element: total * fn(element), iterable, 1)

