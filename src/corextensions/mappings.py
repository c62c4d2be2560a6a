"""First/single lookups and reshaping for mappings.

Lookups take a predicate ``fn(key, value)``.  When nothing matches they
return *default* if one was given, otherwise raise ``RuntimeError``;
the ``single_*`` variants also raise when more than one entry matches.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

_MISSING = object()


def _no_match(default: Any) -> Any:
    if default is _MISSING:
        raise RuntimeError("No entry satisfies the function.")
    return default


def _single_match(mapping: Mapping[Any, Any], fn: Callable[[Any, Any], bool]) -> Any:
    match = _MISSING
    for entry in mapping.items():
        if fn(*entry):
            if match is not _MISSING:
                raise RuntimeError("Too many matches.")
            match = entry
    return match


def first_entry_where(
    mapping: Mapping[Any, Any],
    fn: Callable[[Any, Any], bool],
    default: Any = _MISSING,
) -> tuple[Any, Any]:
    """Return the first ``(key, value)`` pair satisfying *fn*."""
    for key, value in mapping.items():
        if fn(key, value):
            return key, value
    return _no_match(default)


def first_key_where(
    mapping: Mapping[Any, Any],
    fn: Callable[[Any, Any], bool],
    default: Any = _MISSING,
) -> Any:
    """Return the key of the first entry satisfying *fn*."""
    for key, value in mapping.items():
        if fn(key, value):
            return key
    return _no_match(default)


def first_value_where(
    mapping: Mapping[Any, Any],
    fn: Callable[[Any, Any], bool],
    default: Any = _MISSING,
) -> Any:
    """Return the value of the first entry satisfying *fn*."""
    for key, value in mapping.items():
        if fn(key, value):
            return value
    return _no_match(default)


def single_entry_where(
    mapping: Mapping[Any, Any],
    fn: Callable[[Any, Any], bool],
    default: Any = _MISSING,
) -> tuple[Any, Any]:
    """Return the only ``(key, value)`` pair satisfying *fn*.

    Example::

        >>> m = {'first': 1, 'second': 2, 'third': 3, 'fourth': 4}
        >>> single_entry_where(m, lambda k, v: len(k) + v > 9)
        ('fourth', 4)

    Raises:
        RuntimeError: If several entries match, or none does and no
            *default* was given.
    """
    match = _single_match(mapping, fn)
    if match is _MISSING:
        return _no_match(default)
    return match


def single_key_where(
    mapping: Mapping[Any, Any],
    fn: Callable[[Any, Any], bool],
    default: Any = _MISSING,
) -> Any:
    """Return the key of the only entry satisfying *fn*."""
    match = _single_match(mapping, fn)
    if match is _MISSING:
        return _no_match(default)
    return match[0]


def single_value_where(
    mapping: Mapping[Any, Any],
    fn: Callable[[Any, Any], bool],
    default: Any = _MISSING,
) -> Any:
    """Return the value of the only entry satisfying *fn*."""
    match = _single_match(mapping, fn)
    if match is _MISSING:
        return _no_match(default)
    return match[1]


def reverse(mapping: Mapping[Any, Any]) -> dict[Any, Any]:
    """Swap keys and values; on repeated values the last key wins.

    Example::

        >>> reverse({'one': 1, 'two': 2})
        {1: 'one', 2: 'two'}
    """
    return {value: key for key, value in mapping.items()}


def expand(
    mapping: Mapping[Any, Any],
    fn: Callable[[Any, Any], Mapping[Any, Any]],
) -> dict[Any, Any]:
    """Merge ``fn(key, value)`` over every entry into a new dict."""
    expanded: dict[Any, Any] = {}
    for key, value in mapping.items():
        expanded.update(fn(key, value))
    return expanded
