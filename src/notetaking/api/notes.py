"""Notes API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.schemas.notes import NoteCreate, NoteListResponse, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

settings = get_settings()

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={401: {"model": ErrorResponse}},
)


@router.post("", response_model=NoteResponse, responses={400: {"model": ErrorResponse}})
async def create_note(
    request: NoteCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(current_user_id, request)


@router.get("", response_model=NoteListResponse, responses={400: {"model": ErrorResponse}})
async def list_notes(
    page: int = Query(1),
    page_size: int = Query(settings.default_page_size, alias="pageSize"),
    search: Optional[str] = Query(None, description="Substring of title or content"),
    tag: Optional[str] = Query(None, description="Exact tag name"),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List the caller's notes, newest first."""
    note_service = NoteService(session)
    return await note_service.list_user_notes(
        user_id=current_user_id,
        page=page,
        page_size=page_size,
        search=search,
        tag=tag,
    )


@router.get("/{note_id}", response_model=NoteResponse, responses={404: {"model": ErrorResponse}})
async def get_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(current_user_id, note_id)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note."""
    note_service = NoteService(session)
    return await note_service.update_note(current_user_id, note_id, request)


@router.delete("/{note_id}", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
async def delete_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    await note_service.delete_note(current_user_id, note_id)
    return MessageResponse(message="Note deleted successfully")
