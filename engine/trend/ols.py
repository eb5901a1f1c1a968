"""
Ordinary least-squares slope of observation value against its 0-based index, the trend figure shown next to each analysed series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import numpy as np

from config import settings
from engine.errors import InvalidInput
from engine.series import SeriesLike, as_series, ensure_finite, is_constant


def ols_slope(arr: np.ndarray) -> float:
    if arr.size < 2:
        raise InvalidInput("trend is undefined for fewer than two distinct indices")
    if is_constant(arr):
        return 0.0
    x = np.arange(arr.size, dtype=float)
    slope = float(np.polyfit(x, arr, 1)[0])
    ensure_finite(slope, "trend")
    return slope


def estimate_trend(sequence: SeriesLike) -> float:
    arr = as_series(sequence, min_length=settings.trend_min_length)
    return ols_slope(arr)
