"""
Random walks driven by resampled steps, and the batch of walk endpoints the detector ranks the observed value against.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from engine.impact.exceptions import InvalidInput
from engine.impact.numeric import Vector, as_array
from engine.impact.sampler import EmpiricalSampler, get_sampler

# upper bound on the step matrix held in memory at once
_MAX_BATCH_CELLS = 1_000_000


def walk(
    start: float,
    n: int,
    steps: Vector,
    sampler: Optional[EmpiricalSampler] = None,
) -> np.ndarray:
    sampler = sampler or get_sampler()
    arr = as_array(steps)
    if arr.size == 0:
        raise InvalidInput("cannot walk without at least one step")

    simulated = np.empty(max(n, 0), dtype=float)
    value = float(start)
    for i in range(len(simulated)):
        value += sampler.sample(arr)
        simulated[i] = value
    return simulated


def simulate_endpoints(
    start: float,
    n: int,
    steps: Vector,
    iterations: int,
    sampler: Optional[EmpiricalSampler] = None,
) -> np.ndarray:
    """Final values of ``iterations`` independent walks of length ``n``.

    All draws for the batch are taken up front; row ``i`` of the step matrix
    is exactly the sequence of steps walk ``i`` would have sampled.
    """
    sampler = sampler or get_sampler()
    arr = as_array(steps)
    if arr.size == 0:
        raise InvalidInput("cannot walk without at least one step")
    if iterations <= 0:
        raise InvalidInput(f"iterations must be positive, got {iterations}")
    if n <= 0:
        return np.full(iterations, float(start))

    endpoints = np.empty(iterations, dtype=float)
    rows = max(1, _MAX_BATCH_CELLS // n)
    for lo in range(0, iterations, rows):
        hi = min(iterations, lo + rows)
        draws = sampler.draw(arr, (hi - lo) * n).reshape(hi - lo, n)
        paths = float(start) + np.cumsum(draws, axis=1)
        endpoints[lo:hi] = paths[:, -1]
    return endpoints
