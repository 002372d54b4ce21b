"""Password hashing, access-token signing and refresh-token helpers."""

from .jwt import (
    create_access_token,
    create_refresh_token,
    decode_access_token,
    get_user_id_from_token,
    refresh_tokens_match,
)
from .password import hash_password, needs_update, verify_password

__all__ = [
    # passwords
    "hash_password",
    "verify_password",
    "needs_update",
    # tokens
    "create_access_token",
    "decode_access_token",
    "get_user_id_from_token",
    "create_refresh_token",
    "refresh_tokens_match",
]
