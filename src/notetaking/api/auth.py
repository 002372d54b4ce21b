"""Authentication API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import LoginRequest, RefreshTokenRequest, TokenResponse
from ..core.schemas.common import ErrorResponse
from ..core.services import AuthService
from ..database import get_db_session

router = APIRouter(prefix="/auth", tags=["authentication"])

# Mounted without the /api prefix
refresh_router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def login(request: LoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Login user and get JWT tokens."""
    auth_service = AuthService(session)
    return await auth_service.authenticate_user(request)


@refresh_router.post(
    "/refresh-token",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def refresh_token(
    request: RefreshTokenRequest, session: AsyncSession = Depends(get_db_session)
):
    """Exchange the current refresh token for a new token pair."""
    auth_service = AuthService(session)
    return await auth_service.refresh_token(request)
