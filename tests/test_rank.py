"""
Test cases for the strict rank counts used to turn simulated endpoints into tail fractions.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np

from engine.impact import count_greater, count_less


def test_rank_counts():
    values = [1, 2, 3, 4, 5]
    assert count_greater(3, values) == 2
    assert count_less(3, values) == 2
    assert count_greater(0, values) == 5
    assert count_less(6, values) == 5
    assert count_greater(5, values) == 0
    assert count_less(1, values) == 0


def test_ties_count_toward_neither():
    values = np.array([2.0, 2.0, 2.0])
    assert count_greater(2.0, values) == 0
    assert count_less(2.0, values) == 0


def test_empty_values():
    assert count_greater(1.0, []) == 0
    assert count_less(1.0, []) == 0
