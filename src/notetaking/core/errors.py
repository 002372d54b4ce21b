"""
Service-level error taxonomy.

Services raise a single ``ServiceError`` tagged with an ``ErrorKind``; the
HTTP layer turns the kind into a status code (see ``middleware.errors``).
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """What went wrong, independent of transport."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


STATUS_CODES: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}

TITLES: Dict[ErrorKind, str] = {
    ErrorKind.VALIDATION: "ValidationError",
    ErrorKind.CONFLICT: "ConflictError",
    ErrorKind.UNAUTHORIZED: "UnauthorizedError",
    ErrorKind.NOT_FOUND: "NotFoundError",
    ErrorKind.INTERNAL: "InternalError",
}


class ServiceError(Exception):
    """Expected failure of a service operation."""

    def __init__(
        self, kind: ErrorKind, message: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details

    def __repr__(self) -> str:
        return f"ServiceError(kind={self.kind.value!r}, message={self.message!r})"

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]

    @property
    def title(self) -> str:
        return TITLES[self.kind]

    # shorthands used throughout the services
    @classmethod
    def validation(cls, message: str, details: Optional[Dict[str, Any]] = None) -> "ServiceError":
        return cls(ErrorKind.VALIDATION, message, details)

    @classmethod
    def conflict(cls, message: str) -> "ServiceError":
        return cls(ErrorKind.CONFLICT, message)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized") -> "ServiceError":
        return cls(ErrorKind.UNAUTHORIZED, message)

    @classmethod
    def not_found(cls, message: str) -> "ServiceError":
        return cls(ErrorKind.NOT_FOUND, message)
