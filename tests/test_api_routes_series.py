"""
Route-level tests for the per-procedure series endpoints.
"""

from __future__ import annotations

import pytest
from fastapi import HTTPException

from api.requests import AnomalyRequest, ForecastRequest, SeasonalityRequest, SeriesRequest
from api.routes import series as series_route


pytestmark = pytest.mark.usefixtures("default_settings")


@pytest.mark.asyncio
async def test_trend_route(linear_series):
    res = await series_route.series_trend(SeriesRequest(sequence=linear_series))
    assert res.success is True
    assert res.trend == pytest.approx(1.0)


@pytest.mark.asyncio
async def test_seasonality_route_respects_max_lag(period_four_series):
    res = await series_route.series_seasonality(SeasonalityRequest(sequence=period_four_series, maxLag=8))
    assert len(res.seasonality) == 8
    assert res.seasonality[3] > res.seasonality[2]


@pytest.mark.asyncio
async def test_seasonality_route_constant_is_422():
    with pytest.raises(HTTPException) as excinfo:
        await series_route.series_seasonality(SeasonalityRequest(sequence=[2.0] * 10))
    assert excinfo.value.status_code == 422


@pytest.mark.asyncio
async def test_anomalies_route():
    req = AnomalyRequest(sequence=[1, 1, 1, 1, 1, 1, 1, 1, 1, 100], threshold=2)
    res = await series_route.series_anomalies(req)
    dumped = res.model_dump(by_alias=True)
    assert [a["index"] for a in dumped["anomalies"]] == [9]
    assert set(dumped["anomalies"][0]) == {"index", "value", "zScore"}


@pytest.mark.asyncio
async def test_anomalies_route_constant_is_empty():
    res = await series_route.series_anomalies(AnomalyRequest(sequence=[3] * 6, threshold=0.1))
    assert res.anomalies == []


@pytest.mark.asyncio
async def test_forecast_route(linear_series):
    res = await series_route.series_forecast(ForecastRequest(sequence=linear_series, windowSize=3))
    assert res.predictions == [2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0]


@pytest.mark.asyncio
async def test_forecast_route_bad_window_is_400(linear_series):
    with pytest.raises(HTTPException) as excinfo:
        await series_route.series_forecast(ForecastRequest(sequence=linear_series, windowSize=0))
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail["kind"] == "InvalidInput"


@pytest.mark.asyncio
async def test_trend_route_oversized_integer_is_400():
    with pytest.raises(HTTPException) as excinfo:
        await series_route.series_trend(SeriesRequest(sequence=[10**400, 1, 2]))
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail["kind"] == "InvalidInput"


@pytest.mark.asyncio
async def test_seasonality_route_overflowing_values_is_400():
    with pytest.raises(HTTPException) as excinfo:
        await series_route.series_seasonality(
            SeasonalityRequest(sequence=[1e308, 1e308, -1e308, -1e308, 1e308, 1e308])
        )
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail["kind"] == "InvalidInput"
