"""
Health check route reporting service liveness and the analysis defaults in effect.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.responses import HealthResponse
from api.routes.exception import handle_exceptions
from config import HEALTH_PATH, settings

router = APIRouter(tags=["Health"])


@router.get(HEALTH_PATH, response_model=HealthResponse)
@handle_exceptions
async def health() -> HealthResponse:
    return HealthResponse(
        defaults={
            "windowSize": settings.default_window_size,
            "threshold": settings.default_anomaly_threshold,
            "maxLag": settings.seasonality_max_lag,
            "maxSequenceLength": settings.max_sequence_length,
        },
    )
