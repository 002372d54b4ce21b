"""Tag repository for database operations."""

import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.tag import Tag

logger = logging.getLogger(__name__)


class TagRepository:
    """Repository for tag database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_name(self, name: str) -> Optional[Tag]:
        """Case-insensitive lookup."""
        stmt = select(Tag).where(func.lower(Tag.name) == Tag.normalize_name(name))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_create(self, name: str) -> Tuple[Tag, bool]:
        """Return the tag with this name, creating it if needed.

        The insert runs inside a SAVEPOINT: if another transaction created
        the same name meanwhile, the unique constraint fires, the savepoint
        is rolled back and the existing row is reused.
        """
        norm = Tag.normalize_name(name)
        tag = await self.get_by_name(norm)
        if tag:
            return tag, False

        tag = Tag(name=norm)
        try:
            async with self.session.begin_nested():
                self.session.add(tag)
        except IntegrityError:
            logger.info(f"Tag '{norm}' created concurrently, reusing existing row")
            existing = await self.get_by_name(norm)
            if existing is None:
                raise
            return existing, False
        return tag, True

    async def get_or_create_many(self, names: List[str]) -> Tuple[List[Tag], int]:
        """Resolve already-normalized names; returns (tags, number created)."""
        tags: List[Tag] = []
        created = 0
        for name in names:
            tag, was_created = await self.get_or_create(name)
            tags.append(tag)
            created += int(was_created)
        return tags, created

    async def list_names(self, search: Optional[str] = None) -> List[str]:
        """All tag names, optionally filtered by substring, alphabetically."""
        stmt = select(Tag.name)
        if search:
            stmt = stmt.where(
                func.lower(Tag.name).contains(search.lower(), autoescape=True)
            )
        stmt = stmt.order_by(Tag.name)
        result = await self.session.execute(stmt)
        return list(result.scalars())
