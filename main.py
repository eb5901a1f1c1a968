"""
Entry point for the time-series analysis API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from api.routes import router
from config import API_PREFIX, settings

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log.info(
        "Analysis engine ready (windowSize=%d, threshold=%.2f, maxLag=%d, concurrency=%d)",
        settings.default_window_size,
        settings.default_anomaly_threshold,
        settings.seasonality_max_lag,
        settings.analyze_max_concurrency,
    )
    yield
    log.info("Analysis engine shutting down")


app = FastAPI(
    title="Time-Series Insight",
    description="Trend, seasonality, anomaly and moving-average forecast analysis for ordered numeric series.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix=API_PREFIX)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
