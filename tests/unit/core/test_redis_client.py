"""RedisClient behaviour with and without a live connection."""

import json

import pytest

from notetaking.core import redis_client as redis_module
from notetaking.core.redis_client import RedisClient


async def test_disconnected_client_is_a_no_op():
    client = RedisClient()

    assert client.is_connected is False
    assert await client.get("k") is None
    assert await client.set("k", "v") is False
    assert await client.delete_pattern("*") == 0
    assert await client.get_cached_tags(None) is None


def test_tags_key_lowercases_search():
    assert RedisClient.tags_key(None) == "tags:"
    assert RedisClient.tags_key("Work") == "tags:work"
    assert RedisClient.tags_key(" Work") == "tags: work"


async def test_cache_round_trip(fake_redis):
    client = redis_module.get_redis_client()

    assert await client.cache_tags("Wo", ["work"], expire=30) is True
    assert fake_redis.expirations["tags:wo"] == 30
    assert await client.get_cached_tags("wo") == ["work"]


async def test_invalidate_tags_only_touches_tag_keys(fake_redis):
    client = redis_module.get_redis_client()
    fake_redis.storage.update({"tags:": json.dumps([]), "tags:x": json.dumps([]), "session": "1"})

    assert await client.invalidate_tags() == 2
    assert fake_redis.storage == {"session": "1", "tags-generation": "1"}


async def test_connect_failure_raises_and_closes(monkeypatch, fake_redis):
    async def refuse():
        raise ConnectionError("refused")

    fake_redis.ping = refuse
    monkeypatch.setattr(redis_module.redis, "from_url", lambda *a, **kw: fake_redis)

    client = RedisClient()
    with pytest.raises(ConnectionError):
        await client.connect()

    assert client.is_connected is False
    assert fake_redis.closed is True


async def test_connect_and_disconnect(monkeypatch, fake_redis):
    monkeypatch.setattr(redis_module.redis, "from_url", lambda *a, **kw: fake_redis)

    client = RedisClient()
    await client.connect()
    assert client.is_connected is True

    await client.disconnect()
    assert client.is_connected is False
    assert fake_redis.closed is True


async def test_cache_tags_skipped_after_invalidation(fake_redis):
    client = redis_module.get_redis_client()
    generation = await client.tags_generation()

    await client.invalidate_tags()

    assert await client.cache_tags("wo", ["work"], expire=30, generation=generation) is False
    assert "tags:wo" not in fake_redis.storage
    assert await client.cache_tags(
        "wo", ["work"], expire=30, generation=await client.tags_generation()
    ) is True
