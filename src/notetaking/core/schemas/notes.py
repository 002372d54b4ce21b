"""
Note and tag schemas.
"""

import uuid
from datetime import datetime
from typing import List

from pydantic import ConfigDict, Field, field_validator

from .common import CamelModel

MAX_TAG_LENGTH = 50


class NoteCreate(CamelModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=200, description="Note title")
    content: str = Field(min_length=1, description="Note content")
    tags: List[str] = Field(default_factory=list, description="Free-form tag names")

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def default_tags(cls, v):
        return [] if v is None else v

    @field_validator("tags")
    @classmethod
    def validate_tag_length(cls, v: List[str]) -> List[str]:
        for tag in v:
            if len(tag.strip()) > MAX_TAG_LENGTH:
                raise ValueError(f"Tags must be at most {MAX_TAG_LENGTH} characters")
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"title": "T", "content": "C", "tags": ["Personal"]}
        }
    )


class NoteUpdate(CamelModel):
    """Only title and content can change."""

    title: str = Field(min_length=1, max_length=200, description="Note title")
    content: str = Field(min_length=1, description="Note content")

    @field_validator("title", "content")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v


class NoteResponse(CamelModel):
    """Full note with its tags."""

    id: uuid.UUID
    title: str
    content: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class NoteListItem(CamelModel):
    """Row of a note listing."""

    id: uuid.UUID
    title: str
    content: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime


class NoteListResponse(CamelModel):
    """One page of notes plus the unpaginated total."""

    notes: List[NoteListItem]
    total_count: int
    page: int
    page_size: int
