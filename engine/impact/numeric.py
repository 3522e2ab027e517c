"""
Numeric primitives shared by the impact detection pipeline: vector sum, mean and successive differences.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np

from engine.impact.exceptions import InvalidInput

Vector = Union[Iterable[float], np.ndarray]


def as_array(x: Vector) -> np.ndarray:
    # always a fresh copy so callers never see their input mutated
    return np.array(x, dtype=float)


def vsum(x: Vector) -> float:
    return float(np.sum(as_array(x)))


def mean(x: Vector) -> float:
    arr = as_array(x)
    if arr.size == 0:
        raise InvalidInput("mean of an empty vector is undefined")
    return float(np.sum(arr) / arr.size)


def diff(x: Vector) -> np.ndarray:
    arr = as_array(x)
    if arr.size < 2:
        return np.empty(0, dtype=float)
    return np.diff(arr)
