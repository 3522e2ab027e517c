"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from engine.enums import Operator
from engine.impact import ImpactResult


class ImpactReport(BaseModel):

    probability: float = Field(ge=0.0, le=1.0)
    operator: Operator
    symbol: str
    p_lower: float = Field(ge=0.0, le=1.0)
    p_upper: float = Field(ge=0.0, le=1.0)
    iterations: int
    start_value: float
    real_value: float
    simulated_mean: float
    significant: bool

    @classmethod
    def from_result(cls, result: ImpactResult, alpha: float | None = None) -> ImpactReport:
        return cls(
            probability=result.probability,
            operator=result.operator,
            symbol=result.operator.symbol(),
            p_lower=result.p_lower,
            p_upper=result.p_upper,
            iterations=result.iterations,
            start_value=result.start_value,
            real_value=result.real_value,
            simulated_mean=result.simulated_mean,
            significant=result.significant(alpha),
        )


class SmoothReport(BaseModel):

    series: List[float]
    candidate: Optional[List[float]] = None
    radius: int
