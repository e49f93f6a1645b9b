from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from skillmatch.config import Settings, get_settings


router = APIRouter(prefix="/health", tags=["health"])


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime


@router.get("/", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))


@router.get("/config", summary="Debug: show selected runtime config")
def config_debug(settings: Settings = Depends(get_settings)):
    if not settings.debug:
        # Avoid exposing runtime config in production.
        return {"detail": "Not Found"}

    return {
        "app_name": settings.app_name,
        "version": settings.version,
        "environment": settings.environment,
        "debug": settings.debug,
        "api_prefix": settings.api_prefix,
        "required_skills": list(settings.required_skills),
        "simulated_latency_ms": settings.simulated_latency_ms,
    }
