from __future__ import annotations

import numpy as np

from engine.impact.numeric import Vector, as_array


def count_greater(x: float, values: Vector) -> int:
    """Number of values strictly greater than ``x``."""
    return int(np.count_nonzero(as_array(values) > x))


def count_less(x: float, values: Vector) -> int:
    """Number of values strictly less than ``x``."""
    return int(np.count_nonzero(as_array(values) < x))
