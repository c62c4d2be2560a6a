"""Shared type aliases for the corextensions package."""

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

# Index inputs accepted by the public API.
IndexLike = Sequence[int] | np.ndarray

# Binary element-equality predicate.
Equality = Callable[[Any, Any], bool]
