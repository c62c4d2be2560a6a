"""Element equality — the one capability every comparison builds on.

Functions across the package accept an ``equality=`` keyword.  It may
be:

* ``None`` — use the package default from
  :func:`corextensions.get_equality` (``"value"`` unless overridden).
* ``"value"`` — compare with ``==``.
* ``"identity"`` — compare with ``is``.
* any callable ``(a, b) -> bool``.

:func:`resolve_equality` turns those spellings into a predicate once,
at the top of each public function, so inner loops call a plain
function.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ._config import get_equality

if TYPE_CHECKING:
    from ._typing import Equality


def value_equality(a: Any, b: Any) -> bool:
    """Compare two elements with ``==``."""
    return bool(a == b)


_NAMED_EQUALITIES: dict[str, Equality] = {
    "value": value_equality,
    "identity": operator.is_,
}


def resolve_equality(equality: str | Equality | None = None) -> Equality:
    """Return a binary equality predicate for *equality*.

    Args:
        equality: ``None``, ``"value"``, ``"identity"`` or a callable.

    Returns:
        A callable ``(a, b) -> bool``.

    Raises:
        ValueError: If *equality* is an unknown name.
        TypeError: If *equality* is neither a name nor callable.
    """
    if equality is None:
        return _NAMED_EQUALITIES[get_equality()]
    if isinstance(equality, str):
        try:
            return _NAMED_EQUALITIES[equality.strip().lower()]
        except KeyError:
            raise ValueError(
                f"Unknown equality '{equality}'. "
                f"Choose from: {sorted(_NAMED_EQUALITIES)}"
            ) from None
    if callable(equality):
        return equality
    raise TypeError(
        f"'equality' must be a name or a callable, got {type(equality).__name__}."
    )


def shallow_equals(
    a: Iterable[Any],
    b: Iterable[Any],
    *,
    equality: str | Equality | None = None,
) -> bool:
    """Return ``True`` if *a* and *b* have equal elements in the same order.

    Nested containers are compared with the chosen equality only, so
    under ``"identity"`` two equal-but-distinct inner lists differ.

    Example::

        >>> shallow_equals([0, 1, 2], (0, 1, 2))
        True
        >>> shallow_equals([0, 1, 2], [0, 1])
        False
    """
    eq = resolve_equality(equality)
    sentinel = object()
    it_a, it_b = iter(a), iter(b)
    while True:
        x = next(it_a, sentinel)
        y = next(it_b, sentinel)
        if x is sentinel or y is sentinel:
            return x is y
        if not eq(x, y):
            return False
