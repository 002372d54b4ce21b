"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, get_current_user_id
from .errors import register_exception_handlers

__all__ = ["get_current_user_id", "JWTBearer", "register_exception_handlers"]
