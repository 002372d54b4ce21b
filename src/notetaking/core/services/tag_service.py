"""Tag listing service with a Redis cache in front of the database."""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..redis_client import get_redis_client
from ..repositories.tag_repository import TagRepository
from .interfaces import ITagService

logger = logging.getLogger(__name__)


class TagService(ITagService):
    """Tag service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.tag_repo = TagRepository(session)
        self.redis = get_redis_client()
        self.settings = get_settings()

    async def list_tags(self, search: Optional[str] = None) -> List[str]:
        """All tag names matching search, alphabetically.

        The cache generation is read before the database so a note created
        with new tags while this listing runs keeps it out of the cache.
        """
        cached = await self.redis.get_cached_tags(search)
        if cached is not None:
            logger.debug(f"Tag cache hit for search={search!r}")
            return cached

        generation = await self.redis.tags_generation()
        names = await self.tag_repo.list_names(search)
        await self.redis.cache_tags(
            search, names, self.settings.tag_cache_ttl_seconds, generation=generation
        )
        return names
