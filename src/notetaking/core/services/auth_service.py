"""Authentication service implementation."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import (
    create_access_token,
    create_refresh_token,
    hash_password,
    needs_update,
    refresh_tokens_match,
    verify_password,
)
from ..errors import ServiceError
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import (
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from .interfaces import IAuthService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"
INVALID_REFRESH = "Invalid refresh token"


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> UserResponse:
        """Register new user."""
        email = request.email

        if await self.user_repo.is_email_taken(email):
            logger.info(f"Registration rejected, email already registered: {email}")
            raise ServiceError.conflict("Email already registered")

        user_data = {
            "email": email,
            "password_hash": hash_password(request.password),
            "full_name": request.full_name,
        }

        try:
            user = await self.user_repo.create_user(user_data)
        except IntegrityError:
            # lost a race against a concurrent registration of the same email
            logger.info(f"Concurrent registration detected for {email}")
            raise ServiceError.conflict("Email already registered")

        logger.info(f"Registered user {user.id}")
        return UserResponse(id=user.id, email=user.email, full_name=user.full_name)

    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a fresh token pair."""
        user = await self.user_repo.get_by_email(request.email)
        if not user:
            logger.info("Login failed: unknown email")
            raise ServiceError.unauthorized(INVALID_CREDENTIALS)

        if not verify_password(request.password, user.password_hash):
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise ServiceError.unauthorized(INVALID_CREDENTIALS)

        if needs_update(user.password_hash):
            # committed together with the new token pair
            user.password_hash = hash_password(request.password)
            logger.info(f"Rehashed password for user {user.id}")

        response = await self._issue_tokens(user)
        logger.info(f"User {user.id} logged in")
        return response

    async def refresh_token(self, request: RefreshTokenRequest) -> TokenResponse:
        """Rotate the token pair; the presented refresh token stops working."""
        user = await self.user_repo.get_by_email(request.email)
        if not user:
            logger.info("Token refresh failed: unknown email")
            raise ServiceError.unauthorized(INVALID_REFRESH)

        if not refresh_tokens_match(user.stored_refresh_token, request.refresh_token):
            logger.info(f"Token refresh failed: refresh token mismatch for user {user.id}")
            raise ServiceError.unauthorized(INVALID_REFRESH)

        response = await self._issue_tokens(user)
        logger.info(f"Rotated tokens for user {user.id}")
        return response

    async def _issue_tokens(self, user: User) -> TokenResponse:
        access_token = create_access_token(user)
        refresh_token = create_refresh_token()
        await self.user_repo.store_tokens(user, access_token, refresh_token)

        return TokenResponse(
            full_name=user.full_name,
            access_token=access_token,
            refresh_token=refresh_token,
            token_type="bearer",
            expires_in=self.settings.access_token_expire_minutes * 60,
        )
