"""
Autocorrelation profile of a series: one coefficient per lag, each normalized by the full-series variance so that coefficients at different lags share one scale and can be compared to find repeating periods.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import numbers
from typing import List

import numpy as np

from config import SEASONALITY_MIN_LENGTH, settings
from engine.errors import DegenerateSeries, InvalidInput
from engine.series import SeriesLike, as_series, ensure_finite, is_constant


def lag_range(n: int, max_lag: int | None = None) -> range:
    """Lags evaluated for a series of length ``n``.

    Lag 0 is excluded, and lags stop below ``n // 2`` so every overlap
    window covers more than half the series.
    """
    if max_lag is None:
        max_lag = settings.seasonality_max_lag
    if isinstance(max_lag, bool) or not isinstance(max_lag, numbers.Integral) or max_lag < 1:
        raise InvalidInput(f"maxLag must be a positive integer, got {max_lag!r}")
    return range(1, min(int(max_lag), n // 2 - 1) + 1)


def min_series_length() -> int:
    # the setting may raise the floor but never lower it below one usable lag
    return max(SEASONALITY_MIN_LENGTH, settings.seasonality_min_length)


def autocorrelation_profile(arr: np.ndarray, lags: range) -> List[float]:
    if is_constant(arr):
        raise DegenerateSeries("seasonality is undefined for a constant series")
    dev = arr - arr.mean()
    denominator = float(dev @ dev)
    ensure_finite(denominator, "seasonality")
    if denominator == 0:
        raise DegenerateSeries("seasonality is undefined for a zero-variance series")
    profile = [float(dev[lag:] @ dev[:-lag]) / denominator for lag in lags]
    ensure_finite(profile, "seasonality")
    return profile


def detect_seasonality(sequence: SeriesLike, max_lag: int | None = None) -> List[float]:
    arr = as_series(sequence, min_length=min_series_length())
    return autocorrelation_profile(arr, lag_range(arr.size, max_lag))
