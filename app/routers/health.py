# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app import __version__
from app.config import settings
from lib.mongo_client import MongoDatabase

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    database: str
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=__version__,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check():
    """
    Readiness check endpoint.

    Returns whether the service can reach MongoDB.
    """
    database_ok = MongoDatabase.ping()

    return ReadinessResponse(
        status="ready" if database_ok else "degraded",
        database="healthy" if database_ok else "unhealthy",
        timestamp=_now(),
    )
