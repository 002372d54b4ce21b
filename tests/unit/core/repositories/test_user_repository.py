"""Tests for UserRepository against SQLite."""

import pytest
from sqlalchemy.exc import IntegrityError

from notetaking.core.repositories import UserRepository


def _data(email="a@x.com"):
    return {"email": email, "password_hash": "hash", "full_name": "A"}


async def test_create_and_fetch_user(test_session):
    repo = UserRepository(test_session)
    user = await repo.create_user(_data())

    assert (await repo.get_by_email("a@x.com")).id == user.id
    assert await repo.is_email_taken("a@x.com") is True
    assert await repo.is_email_taken("b@x.com") is False


async def test_duplicate_email_raises_integrity_error(test_session):
    repo = UserRepository(test_session)
    await repo.create_user(_data())

    with pytest.raises(IntegrityError):
        await repo.create_user(_data())

    # the session is usable again after the rollback
    assert await repo.is_email_taken("a@x.com") is True


async def test_store_tokens_persists(session_factory):
    async with session_factory() as session:
        repo = UserRepository(session)
        user = await repo.create_user(_data())
        await repo.store_tokens(user, "access", "refresh")

    async with session_factory() as session:
        stored = await UserRepository(session).get_by_email("a@x.com")
        assert stored.stored_access_token == "access"
        assert stored.stored_refresh_token == "refresh"
