"""Health check API endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import ServiceError
from ..core.schemas.common import ErrorResponse, HealthCheckResponse
from ..core.services import HealthService
from ..database import get_db_session

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthCheckResponse)
async def health_check(session: AsyncSession = Depends(get_db_session)):
    """Overall status plus the database and Redis checks."""
    return await HealthService(session).get_health_status()


@router.get(
    "/{component}",
    response_model=Dict[str, Any],
    responses={404: {"model": ErrorResponse}},
)
async def component_health(component: str, session: AsyncSession = Depends(get_db_session)):
    """Single component check: ``database`` or ``redis``."""
    health_service = HealthService(session)
    checks = {
        "database": health_service.check_database_health,
        "redis": health_service.check_redis_health,
    }
    if component not in checks:
        raise ServiceError.not_found(f"Unknown health component '{component}'")
    return await checks[component]()
