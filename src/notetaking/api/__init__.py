"""API routers for the Note Taking API."""

from .auth import refresh_router
from .auth import router as auth_router
from .health import router as health_router
from .notes import router as notes_router
from .tags import router as tags_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "refresh_router",
    "users_router",
    "notes_router",
    "tags_router",
    "health_router",
]
