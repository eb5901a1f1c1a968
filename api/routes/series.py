"""
Per-procedure routes exposing each analysis step on its own, for callers that only need one figure.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.requests import AnomalyRequest, ForecastRequest, SeasonalityRequest, SeriesRequest
from api.responses import (
    AnomalyModel,
    AnomalyResponse,
    ForecastResponse,
    SeasonalityResponse,
    TrendResponse,
)
from api.routes.exception import handle_exceptions
from services.analyze_service import analysis_service

router = APIRouter(tags=["Series"])


@router.post("/trend", response_model=TrendResponse, summary="Least-squares slope of value against index")
@handle_exceptions
async def series_trend(req: SeriesRequest) -> TrendResponse:
    return TrendResponse(trend=await analysis_service.trend(req.sequence))


@router.post("/seasonality", response_model=SeasonalityResponse, summary="Autocorrelation profile by lag")
@handle_exceptions
async def series_seasonality(req: SeasonalityRequest) -> SeasonalityResponse:
    profile = await analysis_service.seasonality(req.sequence, req.max_lag)
    return SeasonalityResponse(seasonality=profile)


@router.post("/anomalies", response_model=AnomalyResponse, summary="Z-score anomalies")
@handle_exceptions
async def series_anomalies(req: AnomalyRequest) -> AnomalyResponse:
    found = await analysis_service.anomalies(req.sequence, req.threshold)
    return AnomalyResponse(anomalies=[AnomalyModel.from_anomaly(a) for a in found])


@router.post("/forecast", response_model=ForecastResponse, summary="Trailing moving-average predictions")
@handle_exceptions
async def series_forecast(req: ForecastRequest) -> ForecastResponse:
    predictions = await analysis_service.forecast(req.sequence, req.window_size)
    return ForecastResponse(predictions=predictions)
