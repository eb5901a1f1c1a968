"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict, List

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_serializer

from engine.analyzer import AnalysisResult
from engine.anomaly import Anomaly


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class AnomalyModel(NpModel):
    model_config = ConfigDict(populate_by_name=True)

    index: int
    value: float
    z_score: float = Field(alias="zScore")

    @classmethod
    def from_anomaly(cls, anomaly: Anomaly) -> AnomalyModel:
        return cls(index=anomaly.index, value=anomaly.value, z_score=anomaly.z_score)


class AnalysisReport(NpModel):

    trend: float
    seasonality: List[float]
    anomalies: List[AnomalyModel]
    predictions: List[float]

    @classmethod
    def from_result(cls, result: AnalysisResult) -> AnalysisReport:
        return cls.model_validate(result.to_dict())


class AnalysisResponse(NpModel):

    success: bool = True
    analysis: AnalysisReport


class TrendResponse(NpModel):

    success: bool = True
    trend: float


class SeasonalityResponse(NpModel):

    success: bool = True
    seasonality: List[float]


class AnomalyResponse(NpModel):

    success: bool = True
    anomalies: List[AnomalyModel]


class ForecastResponse(NpModel):

    success: bool = True
    predictions: List[float]


class HealthResponse(NpModel):

    status: str = "ok"
    defaults: Dict[str, Any] = Field(default_factory=dict)
