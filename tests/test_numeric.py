"""
Test cases for the numeric primitives used by impact detection: sum, mean and successive differences.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from engine.impact import InvalidInput, diff, mean, vsum


def test_sum_and_mean():
    assert vsum([1, 2, 3, 4]) == 10.0
    assert vsum([]) == 0.0
    assert mean([1, 2, 3, 4]) == pytest.approx(2.5)
    assert mean([7]) == 7.0


def test_mean_of_empty_vector_is_rejected():
    with pytest.raises(InvalidInput):
        mean([])


def test_diff():
    assert diff([1, 3, 6, 10]).tolist() == [2.0, 3.0, 4.0]
    assert len(diff([1.0, 2.0])) == 1
    assert len(diff([1.0])) == 0
    assert len(diff([])) == 0


def test_diff_does_not_mutate_input():
    src = np.array([1.0, 4.0, 9.0])
    out = diff(src)
    out[0] = 100.0
    assert src.tolist() == [1.0, 4.0, 9.0]
