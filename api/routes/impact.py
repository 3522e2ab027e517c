"""
Impact routes: Monte Carlo before/candidate comparison and the smoothing utilities behind it.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter, HTTPException

from api.requests import ImpactRequest, SmoothRequest
from api.responses import ImpactReport, SmoothReport
from api.routes.exception import handle_exceptions
from config import settings
from engine.impact import detect_impact_async, smooth, smooth_series

router = APIRouter(tags=["Impact"])


@router.post("/impact", response_model=ImpactReport, summary="Before/candidate impact verdict")
@handle_exceptions
async def impact(req: ImpactRequest) -> ImpactReport:
    iterations = req.iterations or settings.default_iterations
    if iterations > settings.max_iterations:
        raise HTTPException(
            status_code=422,
            detail=f"iterations must be at most {settings.max_iterations}",
        )
    result = await detect_impact_async(req.series_before, req.series_candidate, iterations)
    return ImpactReport.from_result(result, alpha=req.alpha)


@router.post("/smooth", response_model=SmoothReport, summary="Moving-average smoothing, optionally joint")
@handle_exceptions
async def smooth_route(req: SmoothRequest) -> SmoothReport:
    radius = settings.smoother if req.radius is None else req.radius
    if req.candidate is None:
        return SmoothReport(series=smooth(req.series, radius=radius).tolist(), radius=radius)

    before, candidate = smooth_series(req.series, req.candidate, radius=radius)
    return SmoothReport(series=before.tolist(), candidate=candidate.tolist(), radius=radius)
