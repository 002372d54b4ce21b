"""
Service layer interfaces and implementations.
"""

from .auth_service import AuthService
from .health_service import HealthService
from .interfaces import IAuthService, IHealthService, INoteService, ITagService
from .note_service import NoteService
from .tag_service import TagService

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "ITagService",
    "IHealthService",
    # Implementations
    "AuthService",
    "NoteService",
    "TagService",
    "HealthService",
]
