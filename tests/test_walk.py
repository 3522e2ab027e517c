"""
Test cases for resampled random walks and the batch endpoint simulation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.impact import InvalidInput, simulate_endpoints, walk
from engine.impact import random_walk as walk_module


def test_walk_accumulates_steps(cycling_sampler):
    path = walk(10.0, 5, [1.0, -2.0, 3.0], sampler=cycling_sampler)
    assert path.tolist() == [11.0, 9.0, 12.0, 13.0, 11.0]


def test_walk_with_single_step(sampler):
    assert walk(0.0, 4, [2.5], sampler=sampler).tolist() == [2.5, 5.0, 7.5, 10.0]


def test_walk_length_and_empty(sampler):
    assert len(walk(1.0, 17, [0.1, -0.1], sampler=sampler)) == 17
    assert len(walk(1.0, 0, [0.1], sampler=sampler)) == 0


def test_walk_needs_steps(sampler):
    with pytest.raises(InvalidInput):
        walk(0.0, 3, [], sampler=sampler)


def test_endpoints_match_deterministic_walks(cycling_sampler):
    ends = simulate_endpoints(0.0, 2, [1.0, 2.0, 3.0], 5, sampler=cycling_sampler)
    assert ends.tolist() == [3.0, 4.0, 5.0, 3.0, 4.0]


def test_endpoints_are_batched_without_changing_results(monkeypatch, cycling_sampler):
    monkeypatch.setattr(walk_module, "_MAX_BATCH_CELLS", 3)
    ends = simulate_endpoints(0.0, 2, [1.0, 2.0, 3.0], 5, sampler=cycling_sampler)
    assert ends.tolist() == [3.0, 4.0, 5.0, 3.0, 4.0]


def test_endpoints_constant_step(sampler):
    ends = simulate_endpoints(3.0, 4, [1.0], 10, sampler=sampler)
    assert ends.tolist() == [7.0] * 10


def test_endpoints_zero_length_walk_stays_at_start(sampler):
    assert simulate_endpoints(2.0, 0, [1.0], 3, sampler=sampler).tolist() == [2.0, 2.0, 2.0]


def test_endpoints_reject_bad_input(sampler):
    with pytest.raises(InvalidInput):
        simulate_endpoints(0.0, 3, [1.0], 0, sampler=sampler)
    with pytest.raises(InvalidInput):
        simulate_endpoints(0.0, 3, [], 10, sampler=sampler)
