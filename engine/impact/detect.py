"""
Monte Carlo impact detection between two adjacent windows of a time series.

The "before" window is smoothed and its successive differences become an
empirical step distribution. Random walks resampled from those steps start at
the last smoothed "before" value and run for as many points as the candidate
window holds. The observed (smoothed) end of the candidate window is then
ranked against the simulated endpoints: if few walks end below it the
candidate is lower than a continuation would be, if few end above it the
candidate is higher.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np

from engine.enums import Operator
from engine.impact.exceptions import InvalidInput
from engine.impact.numeric import Vector, as_array, diff
from engine.impact.rank import count_greater, count_less
from engine.impact.sampler import EmpiricalSampler, get_sampler
from engine.impact.smoothing import smooth
from engine.impact.random_walk import simulate_endpoints

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImpactResult:
    probability: float
    operator: Operator
    p_lower: float
    p_upper: float
    iterations: int
    start_value: float
    real_value: float
    simulated_mean: float

    def __iter__(self) -> Iterator[Union[float, Operator]]:
        return iter((self.probability, self.operator))

    def significant(self, alpha: float | None = None) -> bool:
        from config import settings

        if alpha is None:
            alpha = settings.significance_alpha
        return self.operator.is_change and self.probability < alpha


@dataclass(frozen=True)
class _Prepared:
    start: float
    n: int
    steps: np.ndarray
    real: float
    iterations: int


def _prepare(series1: Vector, series2: Vector, iterations: Optional[int]) -> _Prepared:
    from config import settings

    if iterations is None:
        iterations = settings.default_iterations
    if iterations <= 0:
        raise InvalidInput(f"iterations must be positive, got {iterations}")

    x1 = as_array(series1)
    x2 = as_array(series2)
    if len(x1) < 2:
        raise InvalidInput(
            f"the before window needs at least 2 points to yield a step distribution, got {len(x1)}"
        )
    if len(x2) < 1:
        raise InvalidInput("the candidate window is empty")
    if not (np.all(np.isfinite(x1)) and np.all(np.isfinite(x2))):
        raise InvalidInput("series values must be finite")

    x1_smooth = smooth(x1, radius=settings.smoother)
    x2_smooth = smooth(x2, radius=settings.smoother)
    with np.errstate(over="ignore"):
        steps = diff(x1_smooth)
    if not np.all(np.isfinite(steps)):
        raise InvalidInput("step distribution is not finite; series values are too large")

    return _Prepared(
        start=float(x1_smooth[-1]),
        n=len(x2),
        steps=steps,
        real=float(x2_smooth[-1]),
        iterations=int(iterations),
    )


def _verdict(prepared: _Prepared, endpoints: np.ndarray) -> ImpactResult:
    niter = prepared.iterations
    real = prepared.real

    # fraction of walks ending below / above the observed value
    p_lower = count_less(real, endpoints) / niter
    p_upper = count_greater(real, endpoints) / niter

    p = 1.0
    op = Operator.equals
    if p_lower < p_upper:
        p, op = p_lower, Operator.less_than
    elif p_upper < p_lower:
        p, op = p_upper, Operator.greater_than

    result = ImpactResult(
        probability=p,
        operator=op,
        p_lower=p_lower,
        p_upper=p_upper,
        iterations=niter,
        start_value=prepared.start,
        real_value=real,
        simulated_mean=float(np.mean(endpoints)),
    )
    log.debug(
        "impact n_steps=%d n2=%d iterations=%d real=%.6g p_lower=%.4f p_upper=%.4f -> %s %.4f",
        len(prepared.steps), prepared.n, niter, real, p_lower, p_upper, op.value, p,
    )
    return result


def detect_impact(
    series1: Vector,
    series2: Vector,
    iterations: Optional[int] = None,
    sampler: Optional[EmpiricalSampler] = None,
) -> ImpactResult:
    """Compare the end of ``series2`` against walks continuing ``series1``.

    Returns an :class:`ImpactResult` that unpacks as ``(probability, operator)``.
    The smaller one-sided tail wins; equal tails report ``(1.0, Operator.equals)``
    whatever the tied value was.

    Raises:
        InvalidInput: ``series1`` has fewer than 2 points, ``series2`` is
            empty, a value is not finite, or ``iterations`` is not positive.
    """
    prepared = _prepare(series1, series2, iterations)
    endpoints = simulate_endpoints(
        prepared.start, prepared.n, prepared.steps, prepared.iterations, sampler=sampler
    )
    return _verdict(prepared, endpoints)


def _chunks(total: int, size: int) -> List[Tuple[int, int]]:
    size = max(1, size)
    return [(lo, min(total, lo + size)) for lo in range(0, total, size)]


async def detect_impact_async(
    series1: Vector,
    series2: Vector,
    iterations: Optional[int] = None,
    sampler: Optional[EmpiricalSampler] = None,
    max_parallel: Optional[int] = None,
) -> ImpactResult:
    """Same contract as :func:`detect_impact`, with simulations fanned out to worker threads."""
    from config import settings

    prepared = _prepare(series1, series2, iterations)
    sampler = sampler or get_sampler()
    if max_parallel is None:
        max_parallel = settings.simulation_max_parallel
    sem = asyncio.Semaphore(max(1, int(max_parallel)))

    async def _run(lo: int, hi: int) -> np.ndarray:
        async with sem:
            return await asyncio.to_thread(
                simulate_endpoints, prepared.start, prepared.n, prepared.steps, hi - lo, sampler
            )

    parts = await asyncio.gather(
        *[_run(lo, hi) for lo, hi in _chunks(prepared.iterations, settings.simulation_chunk_size)]
    )
    return _verdict(prepared, np.concatenate(parts))
