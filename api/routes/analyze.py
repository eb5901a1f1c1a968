"""
Time-series analysis route: trend, seasonality, anomalies and moving-average predictions for one series in a single call.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.requests import AnalyzeSeriesRequest
from api.responses import AnalysisReport, AnalysisResponse
from api.routes.exception import handle_exceptions
from services.analyze_service import analysis_service

router = APIRouter(tags=["Analysis"])


@router.post(
    "/analyze-time-series",
    response_model=AnalysisResponse,
    summary="Trend, seasonality, anomalies and forecast for one series",
)
@handle_exceptions
async def analyze_time_series(req: AnalyzeSeriesRequest) -> AnalysisResponse:
    result = await analysis_service.analyze(req.sequence, req.window_size, req.threshold)
    return AnalysisResponse(analysis=AnalysisReport.from_result(result))
