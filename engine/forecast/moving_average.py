"""
Moving-average forecasting: each position from the window size onward is predicted as the mean of the observations immediately before it, never including the observation being predicted.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from config import settings
from engine.series import SeriesLike, as_series, check_window_size, ensure_finite


def trailing_means(arr: np.ndarray, window_size: int) -> List[float]:
    # windows over arr[:-1] end one step before each target position
    windows = sliding_window_view(arr[:-1], window_size)
    means = windows.mean(axis=1)
    ensure_finite(means, "forecast")
    return [float(v) for v in means]


def forecast(sequence: SeriesLike, window_size: int | None = None) -> List[float]:
    if window_size is None:
        window_size = settings.default_window_size
    arr = as_series(sequence, min_length=2)
    window_size = check_window_size(window_size, arr.size)
    return trailing_means(arr, window_size)
