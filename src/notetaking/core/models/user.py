"""
User model for authentication.
"""

from typing import Optional

from sqlalchemy import CheckConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class User(BaseModel):
    """User account identified by email.

    The most recently issued token pair lives on the row itself, so only the
    latest login/refresh session can be refreshed.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)

    stored_access_token: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    stored_refresh_token: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        CheckConstraint("length(email) <= 255", name="ck_users_email_len"),
        CheckConstraint("length(full_name) <= 100", name="ck_users_full_name_len"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}')>"

    def store_tokens(self, access_token: str, refresh_token: str) -> None:
        """Replace the cached token pair; the previous refresh token stops working."""
        self.stored_access_token = access_token
        self.stored_refresh_token = refresh_token
