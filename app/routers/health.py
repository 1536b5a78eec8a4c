# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Provides a health check endpoint for monitoring and load balancers.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from app.dependencies import ClockDep
from lib.clock import to_iso

router = APIRouter()

VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    storage_backend: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check(clock: ClockDep):
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    Does not touch either store.
    """
    return HealthResponse(
        status="healthy",
        timestamp=to_iso(clock.now()),
        environment=settings.ENVIRONMENT,
        storage_backend=settings.STORAGE_BACKEND,
        version=VERSION,
    )
