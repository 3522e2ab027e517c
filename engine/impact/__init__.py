"""
Impact detection subpackage for the ImpactWalk engine.

Re-exports the public pieces of the Monte Carlo two-window comparison:
smoothing, the empirical sampler, random walks, rank statistics and the
:func:`detect_impact` orchestrator, so consumers can import everything from
``engine.impact``.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.impact.detect import ImpactResult, detect_impact, detect_impact_async
from engine.impact.exceptions import ImpactError, InvalidInput
from engine.impact.numeric import diff, mean, vsum
from engine.impact.rank import count_greater, count_less
from engine.impact.sampler import EmpiricalSampler, get_sampler, sample
from engine.impact.smoothing import smooth, smooth_series
from engine.impact.random_walk import simulate_endpoints, walk

__all__ = [
    "ImpactResult",
    "detect_impact",
    "detect_impact_async",
    "ImpactError",
    "InvalidInput",
    "diff",
    "mean",
    "vsum",
    "count_greater",
    "count_less",
    "EmpiricalSampler",
    "get_sampler",
    "sample",
    "smooth",
    "smooth_series",
    "simulate_endpoints",
    "walk",
]
