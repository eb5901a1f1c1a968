"""
Input validation shared by the analysis procedures: converts a caller-supplied sequence into a finite float array and checks window size and threshold parameters, raising InvalidInput before any computation starts.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable, Union

import numpy as np

from engine.errors import InvalidInput

SeriesLike = Union[Iterable[float], np.ndarray]


def _is_bool(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def _coerce_items(sequence: Any) -> np.ndarray:
    if isinstance(sequence, (str, bytes, dict)) or sequence is None:
        raise InvalidInput(f"sequence must be a list of numbers, got {type(sequence).__name__}")
    try:
        items = list(sequence)
    except TypeError as exc:
        raise InvalidInput(f"sequence must be a list of numbers, got {type(sequence).__name__}") from exc

    for i, v in enumerate(items):
        if _is_bool(v) or not isinstance(v, numbers.Real):
            raise InvalidInput(f"sequence[{i}] is not numeric: {v!r}")
    try:
        return np.array(items, dtype=float)
    except OverflowError as exc:
        raise InvalidInput("sequence holds a value too large to represent as a float") from exc


def as_series(sequence: SeriesLike, min_length: int = 1) -> np.ndarray:
    if isinstance(sequence, np.ndarray):
        if sequence.ndim != 1:
            raise InvalidInput(f"sequence must be one-dimensional, got {sequence.ndim} dimensions")
        if sequence.dtype.kind not in "iuf":
            arr = _coerce_items(sequence.tolist())
        else:
            arr = sequence.astype(float)
    else:
        arr = _coerce_items(sequence)

    if arr.size < min_length:
        raise InvalidInput(
            f"sequence needs at least {min_length} observation(s), got {arr.size}"
        )
    bad = np.flatnonzero(~np.isfinite(arr))
    if bad.size:
        raise InvalidInput(f"sequence[{int(bad[0])}] is not finite: {arr[bad[0]]}")
    # a finite spread bounds every mean, sum of squares and autocovariance taken later
    with np.errstate(over="ignore", invalid="ignore"):
        spread = arr.std()
    if not np.isfinite(spread):
        raise InvalidInput("sequence values are too large to analyse without overflow")
    return arr


def check_window_size(window_size: Any, length: int) -> int:
    if _is_bool(window_size) or not isinstance(window_size, numbers.Integral):
        raise InvalidInput(f"windowSize must be an integer, got {window_size!r}")
    w = int(window_size)
    if w < 1 or w >= length:
        raise InvalidInput(
            f"windowSize must satisfy 1 <= windowSize < {length}, got {w}"
        )
    return w


def check_threshold(threshold: Any) -> float:
    if _is_bool(threshold) or not isinstance(threshold, numbers.Real):
        raise InvalidInput(f"threshold must be a number, got {threshold!r}")
    t = float(threshold)
    if not math.isfinite(t) or t < 0:
        raise InvalidInput(f"threshold must be a finite non-negative number, got {t}")
    return t


def ensure_finite(values: Any, what: str) -> None:
    if not np.all(np.isfinite(values)):
        raise InvalidInput(f"{what} overflowed; sequence values are too large to analyse")


def is_constant(arr: np.ndarray) -> bool:
    # exact comparison: a float mean of identical values may not reproduce them
    return arr.size == 0 or bool(np.all(arr == arr[0]))
