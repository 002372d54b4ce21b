"""User repository for database operations."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, user_data: dict) -> User:
        """Create new user.

        Raises IntegrityError (after rolling back) when the email is already
        stored, e.g. by a concurrent registration.
        """
        user = User(**user_data)
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.warning("Integrity error while creating user", exc_info=True)
            raise
        await self.session.refresh(user)
        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (normalized) email."""
        stmt = select(User).where(User.email == email)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def is_email_taken(self, email: str) -> bool:
        """Check if email exists."""
        return await self.get_by_email(email) is not None

    async def store_tokens(self, user: User, access_token: str, refresh_token: str) -> User:
        """Overwrite the user's token pair in one commit."""
        user.store_tokens(access_token, refresh_token)
        await self.session.commit()
        return user
