"""Package-wide default for how elements are compared.

Functions that accept ``equality=None`` ask :func:`get_equality` which
predicate name to use.  Two names exist: ``"value"`` matches elements
with ``==`` and ``"identity"`` matches them with ``is``.  An explicit
``equality=`` argument at the call site is never affected by anything
in this module.

The default can be chosen in two places.  :func:`set_equality` pins it
for the running process and beats everything else; ``"auto"`` removes
the pin.  Without a pin the ``COREXTENSIONS_EQUALITY`` environment
variable is read on every lookup, so changing it takes effect
immediately.  Anything else, including an unrecognised variable,
leaves elements compared by value.

Examples:
    Run a script with identity matching::

        COREXTENSIONS_EQUALITY=identity python script.py

    Pin it from code, then hand control back to the environment::

        import corextensions
        corextensions.set_equality("identity")
        ...
        corextensions.set_equality("auto")
"""

from __future__ import annotations

import os

_ENV_VAR = "COREXTENSIONS_EQUALITY"
_EQUALITY_NAMES = ("value", "identity")
_DEFAULT_EQUALITY = "value"

# None means no pin: fall through to the environment.
_equality_override: str | None = None


def _normalise(name: str) -> str:
    return name.strip().lower()


def get_equality() -> str:
    """Return ``"value"`` or ``"identity"``, whichever applies right now."""
    if _equality_override in _EQUALITY_NAMES:
        return _equality_override

    from_env = _normalise(os.environ.get(_ENV_VAR, ""))
    return from_env if from_env in _EQUALITY_NAMES else _DEFAULT_EQUALITY


def set_equality(name: str) -> None:
    """Pin the default equality, or release the pin with ``"auto"``.

    Args:
        name: ``"value"``, ``"identity"`` or ``"auto"``; surrounding
            whitespace and letter case are ignored.

    Raises:
        ValueError: If *name* is none of those.
    """
    global _equality_override
    choice = _normalise(name)
    if choice == "auto":
        _equality_override = None
    elif choice in _EQUALITY_NAMES:
        _equality_override = choice
    else:
        raise ValueError(
            f"Unknown equality '{name}'; expected one of "
            f"{', '.join(_EQUALITY_NAMES)} or 'auto'."
        )
