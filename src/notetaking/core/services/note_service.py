"""Note service implementation."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..errors import ServiceError
from ..models.note import Note
from ..models.tag import Tag
from ..redis_client import get_redis_client
from ..repositories.note_repository import NoteRepository
from ..repositories.tag_repository import TagRepository
from ..schemas.notes import NoteCreate, NoteListItem, NoteListResponse, NoteResponse, NoteUpdate
from .interfaces import INoteService

logger = logging.getLogger(__name__)


class NoteService(INoteService):
    """Note service implementation.

    A note is only ever visible to its owner. Missing, deleted and foreign
    notes all produce the same NotFound error so callers cannot probe for
    other users' ids.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.tag_repo = TagRepository(session)
        self.redis = get_redis_client()
        self.settings = get_settings()

    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note, reusing or creating its tags."""
        names = Tag.normalize_names(request.tags)
        tags, created = await self.tag_repo.get_or_create_many(names)

        note_data = {
            "title": request.title,
            "content": request.content,
            "user_id": user_id,
        }
        note = await self.note_repo.create_note(note_data, tags)

        if names:
            # listings are global, so any new link can change them
            await self.redis.invalidate_tags()

        logger.info(
            f"User {user_id} created note {note.id} with {len(names)} tags ({created} new)"
        )
        return self._note_to_response(note)

    async def get_note(self, user_id: UUID, note_id: UUID) -> NoteResponse:
        """Get note by ID."""
        note = await self._get_owned_note(user_id, note_id)
        return self._note_to_response(note)

    async def list_user_notes(
        self,
        user_id: UUID,
        page: int = 1,
        page_size: int = 20,
        search: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> NoteListResponse:
        """List user notes with pagination."""
        errors = []
        if page < 1:
            errors.append({"field": "page", "message": "Page must be at least 1"})
        if page_size < 1 or page_size > self.settings.max_page_size:
            errors.append(
                {
                    "field": "pageSize",
                    "message": f"Page size must be between 1 and {self.settings.max_page_size}",
                }
            )
        if errors:
            raise ServiceError.validation("Invalid pagination parameters", {"errors": errors})

        notes, total_count = await self.note_repo.list_user_notes(
            user_id, page, page_size, search=search, tag=tag
        )

        return NoteListResponse(
            notes=[self._note_to_list_item(note) for note in notes],
            total_count=total_count,
            page=page,
            page_size=page_size,
        )

    async def update_note(self, user_id: UUID, note_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Replace title and content; tags are left untouched."""
        note = await self._get_owned_note(user_id, note_id)
        note = await self.note_repo.update_note(
            note, {"title": request.title, "content": request.content}
        )
        logger.info(f"User {user_id} updated note {note_id}")
        return self._note_to_response(note)

    async def delete_note(self, user_id: UUID, note_id: UUID) -> None:
        """Soft-delete note."""
        note = await self._get_owned_note(user_id, note_id)
        await self.note_repo.soft_delete(note)
        logger.info(f"User {user_id} deleted note {note_id}")

    async def _get_owned_note(self, user_id: UUID, note_id: UUID) -> Note:
        note = await self.note_repo.get_by_id_and_user(note_id, user_id)
        if not note:
            raise ServiceError.not_found(f"Note with ID {note_id} not found.")
        return note

    @staticmethod
    def _note_to_response(note: Note) -> NoteResponse:
        return NoteResponse(
            id=note.id,
            title=note.title,
            content=note.content,
            tags=note.tag_names,
            created_at=note.created_at,
            updated_at=note.updated_at,
        )

    @staticmethod
    def _note_to_list_item(note: Note) -> NoteListItem:
        return NoteListItem(
            id=note.id,
            title=note.title,
            content=note.content,
            tags=note.tag_names,
            created_at=note.created_at,
        )
