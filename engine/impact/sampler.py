"""
Thread-safe uniform resampling from an empirical step distribution.

A sampler owns one numpy random generator and the lock guarding it. The
lock is held only while indices are generated, never while the caller does
anything with the drawn values. A process-wide default sampler is created at
import time, seeded from ``settings.random_seed`` or, when unset, the clock.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Optional

import numpy as np

from engine.impact.exceptions import InvalidInput
from engine.impact.numeric import Vector, as_array

log = logging.getLogger(__name__)


class EmpiricalSampler:
    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()

    @property
    def seed(self) -> int:
        return self._seed

    def sample(self, steps: Vector) -> float:
        arr = _steps(steps)
        with self._lock:
            index = int(self._rng.integers(0, len(arr)))
        return float(arr[index])

    def draw(self, steps: Vector, size: int) -> np.ndarray:
        """Take ``size`` draws with replacement under a single lock acquisition."""
        arr = _steps(steps)
        if size <= 0:
            return np.empty(0, dtype=float)
        with self._lock:
            indices = self._rng.integers(0, len(arr), size=size)
        return arr[indices]


def _steps(steps: Vector) -> np.ndarray:
    arr = steps if isinstance(steps, np.ndarray) else as_array(steps)
    if arr.size == 0:
        raise InvalidInput("cannot sample from an empty step distribution")
    return arr


def _default_sampler() -> EmpiricalSampler:
    from config import settings

    sampler = EmpiricalSampler(settings.random_seed)
    log.debug("default sampler seeded with %d", sampler.seed)
    return sampler


_sampler = _default_sampler()


def get_sampler() -> EmpiricalSampler:
    return _sampler


def sample(steps: Vector) -> float:
    return _sampler.sample(steps)
