"""
Authentication schemas.

These schemas define the API contracts for registration, login and
refresh-token rotation.
"""

import uuid

from pydantic import ConfigDict, EmailStr, Field, field_validator

from .common import CamelModel


def normalize_email(value):
    """Trim and lower-case emails before validation."""
    return value.strip().lower() if isinstance(value, str) else value


class RegisterRequest(CamelModel):
    """User registration request schema."""

    email: EmailStr = Field(description="Unique email address")
    password: str = Field(min_length=8, max_length=128, description="User password")
    full_name: str = Field(min_length=1, max_length=100, description="Display name")

    @field_validator("email", mode="before")
    @classmethod
    def clean_email(cls, v):
        return normalize_email(v)

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Full name cannot be empty")
        return v.strip()

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "a@x.com",
                "password": "password1",
                "fullName": "A",
            }
        }
    )


class UserResponse(CamelModel):
    """Public projection of a user (never includes the password hash)."""

    id: uuid.UUID = Field(description="User unique identifier")
    email: str = Field(description="Email address")
    full_name: str = Field(description="Display name")


class LoginRequest(CamelModel):
    """User login request schema."""

    email: str = Field(min_length=1, max_length=255, description="Email address")
    password: str = Field(min_length=8, max_length=128, description="User password")

    @field_validator("email", mode="before")
    @classmethod
    def clean_email(cls, v):
        return normalize_email(v)


class RefreshTokenRequest(CamelModel):
    """Refresh token request schema."""

    email: EmailStr = Field(description="Email the refresh token was issued to")
    refresh_token: str = Field(min_length=1, description="Opaque refresh token")

    @field_validator("email", mode="before")
    @classmethod
    def clean_email(cls, v):
        return normalize_email(v)

    @field_validator("refresh_token")
    @classmethod
    def validate_token_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Refresh token cannot be empty")
        return v


class TokenResponse(CamelModel):
    """Token pair issued by login and refresh."""

    full_name: str = Field(description="User display name")
    access_token: str = Field(description="Signed JWT access token")
    refresh_token: str = Field(description="Opaque refresh token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Access token lifetime in seconds")
