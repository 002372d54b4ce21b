"""Tests for TagService and its Redis cache."""

import json

from notetaking.core.repositories import TagRepository
from notetaking.core.services.tag_service import TagService


async def _seed(session, *names):
    await TagRepository(session).get_or_create_many(list(names))
    await session.commit()


async def test_list_tags_without_redis_reads_database(test_session):
    await _seed(test_session, "work", "home")

    assert await TagService(test_session).list_tags() == ["home", "work"]


async def test_list_tags_populates_cache(test_session, fake_redis):
    await _seed(test_session, "work", "home", "homework")
    svc = TagService(test_session)

    assert await svc.list_tags("Home") == ["home", "homework"]
    assert json.loads(fake_redis.storage["tags:home"]) == ["home", "homework"]
    assert fake_redis.expirations["tags:home"] == svc.settings.tag_cache_ttl_seconds


async def test_list_tags_serves_cache_hit(test_session, fake_redis):
    await _seed(test_session, "work")
    fake_redis.storage["tags:"] = json.dumps(["cached"])

    assert await TagService(test_session).list_tags() == ["cached"]


async def test_malformed_cache_entry_falls_back_to_database(test_session, fake_redis):
    await _seed(test_session, "work")
    fake_redis.storage["tags:"] = "{not json"

    assert await TagService(test_session).list_tags() == ["work"]
    assert json.loads(fake_redis.storage["tags:"]) == ["work"]


async def test_redis_errors_fall_back_to_database(test_session, fake_redis):
    await _seed(test_session, "work")

    async def broken(*args, **kwargs):
        raise ConnectionError("redis down")

    fake_redis.get = broken
    fake_redis.setex = broken

    assert await TagService(test_session).list_tags() == ["work"]


async def test_listing_raced_by_tag_creation_is_not_cached(test_session, fake_redis):
    await _seed(test_session, "work")
    svc = TagService(test_session)
    read_names = svc.tag_repo.list_names

    async def list_names_then_invalidate(search=None):
        names = await read_names(search)
        # a note with new tags lands after the read
        await svc.redis.invalidate_tags()
        return names

    svc.tag_repo.list_names = list_names_then_invalidate

    assert await svc.list_tags() == ["work"]
    assert "tags:" not in fake_redis.storage
