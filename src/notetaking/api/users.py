"""User registration endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import RegisterRequest, UserResponse
from ..core.schemas.common import ErrorResponse
from ..core.services import AuthService
from ..database import get_db_session

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}},
)
async def register(request: RegisterRequest, session: AsyncSession = Depends(get_db_session)):
    """Register a new user."""
    auth_service = AuthService(session)
    return await auth_service.register_user(request)
