"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import LoginRequest, RefreshTokenRequest, RegisterRequest, TokenResponse, UserResponse
from .common import CamelModel, ErrorResponse, HealthCheckResponse, MessageResponse
from .notes import NoteCreate, NoteListItem, NoteListResponse, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "UserResponse",
    "LoginRequest",
    "RefreshTokenRequest",
    "TokenResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteListItem",
    "NoteListResponse",
    # Common schemas
    "CamelModel",
    "ErrorResponse",
    "HealthCheckResponse",
    "MessageResponse",
]
