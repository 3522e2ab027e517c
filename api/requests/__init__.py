from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class ImpactRequest(BaseModel):
    series_before: List[float] = Field(min_length=2)
    series_candidate: List[float] = Field(min_length=1)
    iterations: Optional[int] = Field(default=None, ge=1)
    alpha: Optional[float] = Field(default=None, gt=0.0, lt=1.0)


class SmoothRequest(BaseModel):
    series: List[float] = Field(min_length=1)
    candidate: Optional[List[float]] = None
    radius: Optional[int] = Field(default=None, ge=0)
