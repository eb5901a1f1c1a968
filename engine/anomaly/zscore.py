"""
Population z-score anomaly flagging: every observation lying more than a configurable number of standard deviations from the batch mean is reported with its index, value and score.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from config import settings
from engine.series import SeriesLike, as_series, check_threshold, is_constant


@dataclass(frozen=True)
class Anomaly:
    index: int
    value: float
    z_score: float


def _z_scores(arr: np.ndarray) -> np.ndarray:
    # population statistics (ddof=0)
    mean, std = arr.mean(), arr.std()
    if std == 0 or is_constant(arr):
        return np.zeros_like(arr)
    return np.abs(arr - mean) / std


def flag_outliers(arr: np.ndarray, threshold: float) -> List[Anomaly]:
    scores = _z_scores(arr)
    return [
        Anomaly(index=int(i), value=float(arr[i]), z_score=float(scores[i]))
        for i in np.flatnonzero(scores > threshold)
    ]


def detect_anomalies(sequence: SeriesLike, threshold: float | None = None) -> List[Anomaly]:
    if threshold is None:
        threshold = settings.default_anomaly_threshold
    threshold = check_threshold(threshold)
    arr = as_series(sequence, min_length=1)
    return flag_outliers(arr, threshold)
