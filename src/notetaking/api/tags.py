"""Tag listing endpoint."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.services import TagService
from ..database import get_db_session

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=List[str])
async def list_tags(
    search: Optional[str] = Query(None, description="Substring of the tag name"),
    session: AsyncSession = Depends(get_db_session),
):
    """All tag names in use, alphabetically."""
    tag_service = TagService(session)
    return await tag_service.list_tags(search)
