"""Liveness endpoint.  Never touches storage."""

from fastapi import APIRouter

from attendance_api.app.schemas.record import HealthStatus

router = APIRouter()


@router.get("", response_model=HealthStatus)
async def health() -> HealthStatus:
    return HealthStatus()
