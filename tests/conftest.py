import os
import sys
import numpy as np
import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.impact import EmpiricalSampler


@pytest.fixture
def sampler():
    """A deterministically seeded sampler so Monte Carlo assertions are stable."""
    return EmpiricalSampler(seed=12345)


class CyclingSampler(EmpiricalSampler):
    """Returns the step vector's entries in order, wrapping around; no randomness."""

    def __init__(self) -> None:
        super().__init__(seed=0)
        self._pos = 0

    def sample(self, steps):
        value = float(steps[self._pos % len(steps)])
        self._pos += 1
        return value

    def draw(self, steps, size):
        out = np.array([self.sample(steps) for _ in range(size)], dtype=float)
        return out


@pytest.fixture
def cycling_sampler():
    return CyclingSampler()


# Prevent pytest from attempting to collect any modules inside the engine
# package itself; collection stays focused on the tests directory.

def pytest_ignore_collect(collection_path, config):
    text = str(collection_path)
    if os.path.sep + 'engine' + os.path.sep in text:
        return True
