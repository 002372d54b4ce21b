# Tags shared by every user's notes
from typing import Iterable, List

from sqlalchemy import CheckConstraint, Column, ForeignKey, String, Table, event
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


# Composite-key association, removed together with either parent
note_tags = Table(
    "note_tags",
    BaseModel.metadata,
    Column("note_id", GUID(), ForeignKey("notes.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", GUID(), ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class Tag(BaseModel):
    """Tag for categorizing notes, created lazily on first use."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)

    __table_args__ = (
        CheckConstraint("name = lower(name)", name="ck_tags_name_lowercase"),
        CheckConstraint("length(name) <= 50", name="ck_tags_name_len"),
    )

    def __repr__(self) -> str:
        return f"<Tag(name='{self.name}')>"

    @classmethod
    def normalize_name(cls, name: str) -> str:
        """Clean up tag name."""
        return name.strip().lower()

    @classmethod
    def normalize_names(cls, names: Iterable[str]) -> List[str]:
        """Normalize, drop blanks and dedupe while keeping first-seen order."""
        seen: List[str] = []
        for raw in names or []:
            clean = cls.normalize_name(raw)
            if clean and clean not in seen:
                seen.append(clean)
        return seen


# Always store the normalized name, whoever builds the Tag
@event.listens_for(Tag, "before_insert", propagate=True)
def _normalize_tag_name_before_insert(mapper, connection, target: Tag):
    target.name = Tag.normalize_name(target.name)


@event.listens_for(Tag, "before_update", propagate=True)
def _normalize_tag_name_before_update(mapper, connection, target: Tag):
    target.name = Tag.normalize_name(target.name)
