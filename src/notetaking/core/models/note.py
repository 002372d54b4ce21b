# Note model for user content
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, String, Text, event
from sqlalchemy.orm import Mapped
from sqlalchemy.orm import attributes as orm_attributes
from sqlalchemy.orm import mapped_column, relationship

from .base import BaseModel
from .tag import note_tags
from .types import GUID

if TYPE_CHECKING:
    from .tag import Tag


class Note(BaseModel):
    """Note owned by exactly one user.

    Notes are never physically removed by the API; ``is_deleted`` hides them
    from every read.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    is_deleted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary=note_tags,
        lazy="selectin",
        order_by="Tag.name",
    )

    __table_args__ = (
        Index("idx_notes_user_created", "user_id", "created_at"),
        CheckConstraint("length(title) <= 200", name="ck_notes_title_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', user_id={self.user_id})>"

    @property
    def tag_names(self) -> List[str]:
        return [tag.name for tag in self.tags]

    def touch(self) -> None:
        """Bump updated_at explicitly."""
        self.updated_at = datetime.now(timezone.utc)

    def soft_delete(self) -> None:
        self.is_deleted = True
        self.touch()


# Ensure the tags collection exists on new instances to avoid an implicit lazy load
@event.listens_for(Note, "init", propagate=True)
def _init_note_collections(target, args, kwargs):
    if "tags" not in kwargs:
        orm_attributes.set_committed_value(target, "tags", [])
