"""
Service routes for the File Relay API.

The relay itself lives in ``filerelay.infrastructure.http.upload``.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from filerelay.infrastructure.http.auth import require_api_key
from filerelay.infrastructure.settings import Settings, get_settings

router = APIRouter()


# ============================================================================
# Response Models
# ============================================================================


class RootResponse(BaseModel):
    """Service banner."""

    message: str
    version: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    version: str
    webhook: str


# ============================================================================
# Endpoints
# ============================================================================


@router.get("/", response_model=RootResponse, dependencies=[Depends(require_api_key)])
async def root(settings: Settings = Depends(get_settings)) -> RootResponse:
    return RootResponse(message=settings.app_name, version=settings.app_version)


@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Liveness probe; also reports whether a webhook is configured."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
        webhook="configured" if settings.webhook_url else "missing",
    )
