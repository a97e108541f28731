"""
Health check endpoint for monitoring.
"""

import time
from fastapi import APIRouter

from ...models.api_models import HealthResponse
from ...version import API_VERSION, PARSER_VERSION

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Report liveness, versions and uptime."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        parser_version=PARSER_VERSION,
        uptime_seconds=round(time.time() - _start_time, 3),
    )
