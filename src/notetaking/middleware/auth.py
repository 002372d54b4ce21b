"""Authentication middleware."""

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.errors import ServiceError
from ..security import get_user_id_from_token

logger = logging.getLogger(__name__)


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Every rejection is a 401 ServiceError so the error handlers shape it like
    any other failure.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> UUID:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials:
            raise ServiceError.unauthorized("Missing bearer token")

        if credentials.scheme.lower() != "bearer":
            raise ServiceError.unauthorized("Invalid authentication scheme")

        user_id = get_user_id_from_token(credentials.credentials)
        if not user_id:
            logger.info(f"Rejected bearer token on {request.method} {request.url.path}")
            raise ServiceError.unauthorized("Invalid or expired token")

        return user_id


# Dependency for getting current user ID from JWT
async def get_current_user_id(user_id: UUID = Depends(JWTBearer())) -> UUID:
    """Get current authenticated user ID."""
    return user_id
