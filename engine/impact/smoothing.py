"""
Moving-average smoothing for impact detection, with a joint variant that smooths two adjacent windows together so points near the split borrow neighbours from the other side.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from engine.impact.exceptions import InvalidInput
from engine.impact.numeric import Vector, as_array, mean


def _radius(radius: Optional[int]) -> int:
    from config import settings

    if radius is None:
        radius = settings.smoother
    if radius < 0:
        raise InvalidInput(f"smoothing radius must be non-negative, got {radius}")
    return int(radius)


def smooth(series: Vector, radius: Optional[int] = None) -> np.ndarray:
    """Symmetric moving average truncated at both ends of the series.

    Each output point is the mean of the inputs in ``[i - radius, i + radius]``;
    boundary points average over fewer neighbours rather than padding.
    """
    r = _radius(radius)
    arr = as_array(series)
    n = len(arr)
    if n == 0:
        raise InvalidInput("cannot smooth an empty series")

    smoothed = np.empty(n, dtype=float)
    with np.errstate(over="ignore", invalid="ignore"):
        for index in range(n):
            leftmost = max(0, index - r)
            rightmost = min(n, index + r + 1)
            smoothed[index] = mean(arr[leftmost:rightmost])
    if not np.all(np.isfinite(smoothed)):
        raise InvalidInput("smoothed series is not finite; values are missing or too large to average")
    return smoothed


def smooth_series(
    series1: Vector,
    series2: Vector,
    radius: Optional[int] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Smooth two adjacent windows as one series, then split at the original boundary."""
    x1 = as_array(series1)
    x2 = as_array(series2)
    n1 = len(x1)

    smoothed = smooth(np.concatenate([x1, x2]), radius=radius)
    return smoothed[:n1], smoothed[n1:]
