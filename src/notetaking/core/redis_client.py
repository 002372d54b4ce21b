"""Redis client used as an optional cache for tag listings."""

import json
import logging
from typing import List, Optional

import redis.asyncio as redis

from ..config import get_settings

logger = logging.getLogger(__name__)

TAGS_KEY_PREFIX = "tags:"
TAGS_GENERATION_KEY = "tags-generation"


class RedisClient:
    """Thin async wrapper that degrades to a no-op when Redis is down."""

    def __init__(self):
        self.settings = get_settings()
        self.redis: Optional[redis.Redis] = None

    @property
    def is_connected(self) -> bool:
        return self.redis is not None

    async def connect(self) -> None:
        """Connect to Redis."""
        client = redis.from_url(
            self.settings.redis_url,
            max_connections=self.settings.redis_max_connections,
            decode_responses=True,
        )
        try:
            await client.ping()
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            await client.aclose()
            raise
        self.redis = client
        logger.info("Connected to Redis successfully")

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def get(self, key: str) -> Optional[str]:
        if not self.redis:
            return None
        try:
            return await self.redis.get(key)
        except Exception as e:
            logger.error(f"Redis GET error for key {key}: {e}")
            return None

    async def set(self, key: str, value: str, expire: Optional[int] = None) -> bool:
        if not self.redis:
            return False
        try:
            if expire:
                return bool(await self.redis.setex(key, expire, value))
            return bool(await self.redis.set(key, value))
        except Exception as e:
            logger.error(f"Redis SET error for key {key}: {e}")
            return False

    async def delete_pattern(self, pattern: str) -> int:
        """Delete every key matching a glob pattern."""
        if not self.redis:
            return 0
        try:
            keys = [key async for key in self.redis.scan_iter(match=pattern)]
            if not keys:
                return 0
            return await self.redis.delete(*keys)
        except Exception as e:
            logger.error(f"Redis DELETE error for pattern {pattern}: {e}")
            return 0

    # Tag listing cache
    @staticmethod
    def tags_key(search: Optional[str]) -> str:
        return f"{TAGS_KEY_PREFIX}{(search or '').lower()}"

    async def tags_generation(self) -> Optional[str]:
        """Counter bumped by every invalidation; None until the first one."""
        return await self.get(TAGS_GENERATION_KEY)

    async def get_cached_tags(self, search: Optional[str]) -> Optional[List[str]]:
        cached = await self.get(self.tags_key(search))
        if cached is None:
            return None
        try:
            return list(json.loads(cached))
        except (TypeError, ValueError) as e:
            logger.warning(f"Discarding malformed tag cache entry: {e}")
            return None

    async def cache_tags(
        self,
        search: Optional[str],
        names: List[str],
        expire: int,
        generation: Optional[str] = None,
    ) -> bool:
        """Store a listing read under ``generation``.

        If an invalidation happened since that read the listing may be stale
        and is not stored. A race between this check and the write is still
        possible; ``expire`` bounds how long such an entry lives.
        """
        if await self.tags_generation() != generation:
            logger.debug(f"Tag cache invalidated meanwhile, not caching search={search!r}")
            return False
        return await self.set(self.tags_key(search), json.dumps(names), expire)

    async def invalidate_tags(self) -> int:
        if self.redis:
            try:
                await self.redis.incr(TAGS_GENERATION_KEY)
            except Exception as e:
                logger.error(f"Redis INCR error for key {TAGS_GENERATION_KEY}: {e}")
        return await self.delete_pattern(f"{TAGS_KEY_PREFIX}*")


# Singleton instance
_redis_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """Get Redis client singleton."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient()
    return _redis_client
