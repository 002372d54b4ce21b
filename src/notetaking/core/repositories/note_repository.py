"""Note repository for database operations."""

import logging
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.note import Note
from ..models.tag import Tag

logger = logging.getLogger(__name__)


class NoteRepository:
    """Repository for note database operations.

    Every read is scoped to one owner and skips soft-deleted rows.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict, tags: Optional[List[Tag]] = None) -> Note:
        """Create note and its tag links in a single commit."""
        note = Note(**note_data, tags=list(tags or []))
        self.session.add(note)
        await self.session.commit()
        return await self.get_by_id_and_user(note.id, note.user_id)

    async def get_by_id_and_user(self, note_id: UUID, user_id: UUID) -> Optional[Note]:
        """Get a live note by ID if owned by user."""
        stmt = (
            select(Note)
            .options(selectinload(Note.tags))
            .where(Note.id == note_id, Note.user_id == user_id, Note.is_deleted.is_(False))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Apply changes to a loaded note and bump updated_at."""
        for key, value in update_data.items():
            setattr(note, key, value)
        note.touch()
        await self.session.commit()
        return note

    async def soft_delete(self, note: Note) -> Note:
        """Flag note as deleted; the row stays."""
        note.soft_delete()
        await self.session.commit()
        return note

    def _list_filters(
        self, user_id: UUID, search: Optional[str], tag: Optional[str]
    ) -> List[Any]:
        conditions: List[Any] = [Note.user_id == user_id, Note.is_deleted.is_(False)]

        if search:
            term = search.lower()
            conditions.append(
                or_(
                    func.lower(Note.title).contains(term, autoescape=True),
                    func.lower(Note.content).contains(term, autoescape=True),
                )
            )

        if tag and tag.strip():
            # EXISTS subquery, so no join duplicates to DISTINCT away
            conditions.append(Note.tags.any(Tag.name == Tag.normalize_name(tag)))

        return conditions

    async def list_user_notes(
        self,
        user_id: UUID,
        page: int = 1,
        page_size: int = 20,
        search: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> tuple[List[Note], int]:
        """List user notes newest first with pagination and optional filters."""
        conditions = self._list_filters(user_id, search, tag)
        offset = (page - 1) * page_size

        count_stmt = select(func.count()).select_from(Note).where(*conditions)
        total_result = await self.session.execute(count_stmt)
        total_count = total_result.scalar() or 0

        # past the last page; also keeps huge offsets away from the driver
        if offset >= total_count:
            return [], total_count

        stmt = (
            select(Note)
            .options(selectinload(Note.tags))
            .where(*conditions)
            .order_by(desc(Note.created_at), desc(Note.id))
            .offset(offset)
            .limit(page_size)
        )
        result = await self.session.execute(stmt)
        notes = list(result.scalars().all())

        logger.debug(
            f"Listed {len(notes)} of {total_count} notes for user {user_id} (page {page})"
        )
        return notes, total_count
