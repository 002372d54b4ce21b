"""Tests for NoteService."""

import uuid

import pytest
from sqlalchemy import func, select

from notetaking.core.errors import ErrorKind, ServiceError
from notetaking.core.models import Tag
from notetaking.core.repositories import UserRepository
from notetaking.core.schemas.notes import NoteCreate, NoteUpdate
from notetaking.core.services.note_service import NoteService


@pytest.fixture
async def owners(test_session):
    repo = UserRepository(test_session)
    alice = await repo.create_user({"email": "a@x.com", "password_hash": "h", "full_name": "A"})
    bob = await repo.create_user({"email": "b@x.com", "password_hash": "h", "full_name": "B"})
    return alice.id, bob.id


async def test_create_note_normalizes_and_dedupes_tags(test_session, owners):
    alice, _ = owners
    svc = NoteService(test_session)

    res = await svc.create_note(
        alice, NoteCreate(title="T", content="C", tags=["Work", "work", " WORK ", "", "Home"])
    )

    assert sorted(res.tags) == ["home", "work"]
    names = (await test_session.execute(select(Tag.name).order_by(Tag.name))).scalars().all()
    assert names == ["home", "work"]


async def test_tags_are_shared_between_users(test_session, owners):
    alice, bob = owners
    svc = NoteService(test_session)

    await svc.create_note(alice, NoteCreate(title="A", content="C", tags=["shared"]))
    await svc.create_note(bob, NoteCreate(title="B", content="C", tags=["SHARED"]))

    count = (await test_session.execute(select(func.count()).select_from(Tag))).scalar()
    assert count == 1


async def test_get_note_round_trip(test_session, owners):
    alice, _ = owners
    svc = NoteService(test_session)
    created = await svc.create_note(alice, NoteCreate(title="T", content="C", tags=["x"]))

    fetched = await svc.get_note(alice, created.id)
    assert fetched.id == created.id
    assert fetched.title == "T"
    assert fetched.content == "C"
    assert fetched.tags == ["x"]


async def test_missing_and_foreign_notes_give_same_not_found(test_session, owners):
    alice, bob = owners
    svc = NoteService(test_session)
    created = await svc.create_note(alice, NoteCreate(title="T", content="C"))

    with pytest.raises(ServiceError) as foreign:
        await svc.get_note(bob, created.id)
    assert foreign.value.kind is ErrorKind.NOT_FOUND
    assert foreign.value.message == f"Note with ID {created.id} not found."

    missing_id = uuid.uuid4()
    with pytest.raises(ServiceError) as missing:
        await svc.get_note(alice, missing_id)
    assert missing.value.message == f"Note with ID {missing_id} not found."


async def test_update_note_keeps_tags(test_session, owners):
    alice, _ = owners
    svc = NoteService(test_session)
    created = await svc.create_note(alice, NoteCreate(title="T", content="C", tags=["keep"]))

    updated = await svc.update_note(alice, created.id, NoteUpdate(title="T2", content="C2"))

    assert updated.title == "T2"
    assert updated.content == "C2"
    assert updated.tags == ["keep"]
    assert updated.created_at == created.created_at


async def test_update_foreign_note_is_not_found(test_session, owners):
    alice, bob = owners
    svc = NoteService(test_session)
    created = await svc.create_note(alice, NoteCreate(title="T", content="C"))

    with pytest.raises(ServiceError) as exc:
        await svc.update_note(bob, created.id, NoteUpdate(title="X", content="Y"))
    assert exc.value.kind is ErrorKind.NOT_FOUND
    assert (await svc.get_note(alice, created.id)).title == "T"


async def test_delete_twice_is_not_found(test_session, owners):
    alice, _ = owners
    svc = NoteService(test_session)
    created = await svc.create_note(alice, NoteCreate(title="T", content="C"))

    await svc.delete_note(alice, created.id)

    with pytest.raises(ServiceError) as exc:
        await svc.delete_note(alice, created.id)
    assert exc.value.kind is ErrorKind.NOT_FOUND

    with pytest.raises(ServiceError):
        await svc.get_note(alice, created.id)


@pytest.mark.parametrize("page,page_size", [(0, 10), (-1, 10), (1, 0), (1, 101)])
async def test_list_rejects_bad_pagination(test_session, owners, page, page_size):
    alice, _ = owners
    svc = NoteService(test_session)

    with pytest.raises(ServiceError) as exc:
        await svc.list_user_notes(alice, page=page, page_size=page_size)
    assert exc.value.kind is ErrorKind.VALIDATION
    assert exc.value.details["errors"]


async def test_list_user_notes_pages(test_session, owners):
    alice, bob = owners
    svc = NoteService(test_session)
    for i in range(3):
        await svc.create_note(alice, NoteCreate(title=f"n{i}", content="C"))
    await svc.create_note(bob, NoteCreate(title="other", content="C"))

    res = await svc.list_user_notes(alice, page=1, page_size=2)

    assert res.total_count == 3
    assert res.page == 1
    assert res.page_size == 2
    assert [n.title for n in res.notes] == ["n2", "n1"]


async def test_create_with_tags_invalidates_tag_cache(test_session, owners, fake_redis):
    alice, _ = owners
    fake_redis.storage["tags:"] = '["stale"]'
    fake_redis.storage["tags:wo"] = '["stale"]'
    fake_redis.storage["other"] = "keep"
    svc = NoteService(test_session)

    await svc.create_note(alice, NoteCreate(title="T", content="C"))
    assert "tags:" in fake_redis.storage

    await svc.create_note(alice, NoteCreate(title="T", content="C", tags=["work"]))
    assert fake_redis.storage == {"other": "keep", "tags-generation": "1"}
