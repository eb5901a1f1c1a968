"""
Analyze service that runs the time-series engine in worker threads with bounded concurrency.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from config import settings
from engine import analyzer
from engine.anomaly import Anomaly, detect_anomalies
from engine.errors import AnalysisError, InvalidInput
from engine.forecast import forecast
from engine.seasonality import detect_seasonality
from engine.trend import estimate_trend

log = logging.getLogger(__name__)

_T = TypeVar("_T")


class AnalysisService:
    def __init__(self, max_concurrency: Optional[int] = None) -> None:
        limit = settings.analyze_max_concurrency if max_concurrency is None else max_concurrency
        self._semaphore = asyncio.Semaphore(max(1, int(limit)))

    @staticmethod
    def _check_size(sequence: Sequence[float]) -> None:
        limit = settings.max_sequence_length
        if len(sequence) > limit:
            raise InvalidInput(f"sequence has {len(sequence)} observations, limit is {limit}")

    async def _run(self, name: str, func: Callable[..., _T], sequence: Sequence[float], *args: Any) -> _T:
        try:
            self._check_size(sequence)
            async with self._semaphore:
                started = time.perf_counter()
                result = await asyncio.to_thread(func, sequence, *args)
        except AnalysisError as exc:
            log.info("%s rejected (%s): %s", name, exc.kind.value, exc.message)
            raise
        log.debug(
            "%s n=%d args=%r elapsed_ms=%.2f",
            name,
            len(sequence),
            args,
            (time.perf_counter() - started) * 1000,
        )
        return result

    async def analyze(
        self,
        sequence: Sequence[float],
        window_size: Optional[int] = None,
        threshold: Optional[float] = None,
    ) -> analyzer.AnalysisResult:
        return await self._run("analyze", analyzer.analyze, sequence, window_size, threshold)

    async def trend(self, sequence: Sequence[float]) -> float:
        return await self._run("trend", estimate_trend, sequence)

    async def seasonality(self, sequence: Sequence[float], max_lag: Optional[int] = None) -> List[float]:
        return await self._run("seasonality", detect_seasonality, sequence, max_lag)

    async def anomalies(self, sequence: Sequence[float], threshold: Optional[float] = None) -> List[Anomaly]:
        return await self._run("anomalies", detect_anomalies, sequence, threshold)

    async def forecast(self, sequence: Sequence[float], window_size: Optional[int] = None) -> List[float]:
        return await self._run("forecast", forecast, sequence, window_size)


analysis_service = AnalysisService()
