"""
Service interfaces for the Note Taking API.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from ..schemas.auth import (
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Registration, login and refresh-token rotation."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> UserResponse:
        """Register new user."""

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a fresh token pair."""

    @abstractmethod
    async def refresh_token(self, request: RefreshTokenRequest) -> TokenResponse:
        """Rotate the token pair."""


class INoteService(ABC):
    """Ownership-scoped note CRUD."""

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""

    @abstractmethod
    async def get_note(self, user_id: UUID, note_id: UUID) -> NoteResponse:
        """Get note by ID."""

    @abstractmethod
    async def list_user_notes(
        self,
        user_id: UUID,
        page: int = 1,
        page_size: int = 20,
        search: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> NoteListResponse:
        """List user notes with pagination."""

    @abstractmethod
    async def update_note(self, user_id: UUID, note_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update title and content."""

    @abstractmethod
    async def delete_note(self, user_id: UUID, note_id: UUID) -> None:
        """Soft-delete note."""


class ITagService(ABC):
    """Global tag listing."""

    @abstractmethod
    async def list_tags(self, search: Optional[str] = None) -> List[str]:
        """Tag names, alphabetically."""


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
