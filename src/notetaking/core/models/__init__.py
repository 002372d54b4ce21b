"""
Database models for the Note Taking API.

Models included:
    - User: account identified by email, caching the latest token pair
    - Note: soft-deletable note owned by one user
    - Tag: globally shared, lower-case tag name
    - note_tags: note/tag association table
"""

from .base import BaseModel
from .note import Note
from .tag import Tag, note_tags
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "Tag",
    "note_tags",
]
