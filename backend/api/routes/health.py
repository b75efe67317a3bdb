"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from shared.config import Settings

from ..dependencies import get_app_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    supabase_url: bool
    anon_key: bool
    service_role_key: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=settings.app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check(settings: Settings = Depends(get_app_settings)) -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether the Supabase settings needed to serve requests are present.
    """
    configured = {
        "supabase_url": bool(settings.supabase_url),
        "anon_key": bool(settings.supabase_anon_key),
        "service_role_key": bool(settings.supabase_service_role_key),
    }
    status = "ready" if all(configured.values()) else "degraded"
    return ReadinessResponse(status=status, **configured)
