"""
Constants and configuration for the time-series analysis service.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


TSINSIGHT_HOST = os.getenv("TSINSIGHT_HOST", "0.0.0.0")
TSINSIGHT_PORT = int(os.getenv("TSINSIGHT_PORT", "4322"))
TSINSIGHT_LOG_LEVEL = os.getenv("TSINSIGHT_LOG_LEVEL", "INFO").upper()

# wire-level defaults used by the dashboard client
DEFAULT_WINDOW_SIZE = 10
DEFAULT_ANOMALY_THRESHOLD = 2.0

# shortest series with at least one admissible autocorrelation lag
SEASONALITY_MIN_LENGTH = 4

HEALTH_PATH = "/health"
API_PREFIX = "/api/v1"

# HTTP status used for each engine error kind
ERROR_STATUS_CODES: dict[str, int] = {
    "InvalidInput": 400,
    "DegenerateSeries": 422,
}


class Settings(BaseSettings):
    host: str = TSINSIGHT_HOST
    port: int = TSINSIGHT_PORT
    log_level: str = TSINSIGHT_LOG_LEVEL

    # forecast window and anomaly threshold used when a caller omits them
    default_window_size: int = DEFAULT_WINDOW_SIZE
    default_anomaly_threshold: float = DEFAULT_ANOMALY_THRESHOLD

    # seasonality lags are capped to bound O(n * lags) work
    seasonality_max_lag: int = 20
    seasonality_min_length: int = SEASONALITY_MIN_LENGTH
    trend_min_length: int = 2

    # service limits
    max_sequence_length: int = 100_000
    analyze_max_concurrency: int = 4

    model_config = {
        "env_prefix": "TSINSIGHT_",
        "extra": "ignore",
    }


settings = Settings()
