"""
Time-Series Analysis Engine

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.enums import ErrorKind
from engine.errors import AnalysisError, DegenerateSeries, InvalidInput
from engine.anomaly import Anomaly, detect_anomalies
from engine.forecast import forecast
from engine.seasonality import detect_seasonality
from engine.trend import estimate_trend
from engine.analyzer import AnalysisResult, analyze

__all__ = [
    "ErrorKind",
    "AnalysisError",
    "InvalidInput",
    "DegenerateSeries",
    "Anomaly",
    "detect_anomalies",
    "forecast",
    "detect_seasonality",
    "estimate_trend",
    "AnalysisResult",
    "analyze",
]
