"""
Analysis orchestration: validates one sequence up front, then runs trend, seasonality, anomaly and forecast procedures over it and assembles a single result. Any failure aborts the whole analysis.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from config import settings
from engine.anomaly import Anomaly
from engine.anomaly.zscore import flag_outliers
from engine.forecast.moving_average import trailing_means
from engine.seasonality.autocorrelation import autocorrelation_profile, lag_range, min_series_length
from engine.series import SeriesLike, as_series, check_threshold, check_window_size
from engine.trend.ols import ols_slope


@dataclass(frozen=True)
class AnalysisResult:
    trend: float
    seasonality: List[float]
    anomalies: List[Anomaly]
    predictions: List[float]

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["anomalies"] = [
            {"index": a.index, "value": a.value, "zScore": a.z_score}
            for a in self.anomalies
        ]
        return payload


def analyze(
    sequence: SeriesLike,
    window_size: int | None = None,
    threshold: float | None = None,
) -> AnalysisResult:
    if window_size is None:
        window_size = settings.default_window_size
    if threshold is None:
        threshold = settings.default_anomaly_threshold

    min_length = max(min_series_length(), settings.trend_min_length)
    arr = as_series(sequence, min_length=min_length)
    window_size = check_window_size(window_size, arr.size)
    threshold = check_threshold(threshold)
    lags = lag_range(arr.size)

    return AnalysisResult(
        trend=ols_slope(arr),
        seasonality=autocorrelation_profile(arr, lags),
        anomalies=flag_outliers(arr, threshold),
        predictions=trailing_means(arr, window_size),
    )
