"""Tests for NoteService against SQLite."""

import uuid

import pytest

from noteshare.core.enums import Role, Visibility
from noteshare.core.exceptions import Forbidden, InvalidInput, NotFound, Unauthenticated
from noteshare.core.models import Comment
from noteshare.core.schemas.notes import NoteCreate, NoteUpdate
from noteshare.core.services.note_service import NoteService


async def test_create_private_note_defaults(test_session, owner):
    owner_id = owner.id
    service = NoteService(test_session)

    created = await service.create_note(owner_id, NoteCreate(title="  Groceries  ", content="milk"))
    assert created.slug is None

    page = await service.list_notes(owner_id)
    item = page.items[0]
    assert item.id == created.id
    assert item.title == "Groceries"
    assert item.color == "bg-yellow-200"
    assert item.role == Role.OWNER
    assert item.visibility == Visibility.PRIVATE
    assert item.updated_by_id == owner_id
    assert item.comments_count == 0
    assert page.next_cursor is None


async def test_create_requires_user_and_title(test_session, owner):
    owner_id = owner.id
    service = NoteService(test_session)

    with pytest.raises(Unauthenticated):
        await service.create_note(None, NoteCreate(title="x"))
    with pytest.raises(InvalidInput):
        await service.create_note(owner_id, NoteCreate(title="   "))


async def test_create_public_returns_slug(test_session, owner):
    owner_id = owner.id
    service = NoteService(test_session)

    created = await service.create_note(
        owner_id, NoteCreate(title="Launch", share_mode=Visibility.PUBLIC, color="bg-red-200")
    )
    assert created.slug

    public = await service.get_public_note(created.slug)
    assert (public.id, public.title, public.color) == (created.id, "Launch", "bg-red-200")


async def test_create_team_with_unknown_invitee_creates_nothing(test_session, owner):
    owner_id = owner.id
    service = NoteService(test_session)

    with pytest.raises(NotFound):
        await service.create_note(
            owner_id,
            NoteCreate(title="Team", share_mode=Visibility.TEAM, team_user_id=uuid.uuid4()),
        )

    assert (await service.list_notes(owner_id)).items == []


async def test_team_note_visible_to_invitee(test_session, owner, teammate):
    owner_id, teammate_id = owner.id, teammate.id
    service = NoteService(test_session)
    created = await service.create_note(
        owner_id, NoteCreate(title="Shared", share_mode=Visibility.TEAM, team_user_id=teammate_id)
    )

    page = await service.list_notes(teammate_id)
    assert [i.id for i in page.items] == [created.id]
    item = page.items[0]
    assert item.role == Role.EDITOR
    assert item.visibility == Visibility.TEAM
    assert [(c.user_id, c.role, c.user.email) for c in item.collaborators] == [
        (teammate_id, "editor", "teammate@example.com")
    ]

    state = await service.get_sharing_state(created.id, teammate_id)
    assert state.role == Role.EDITOR
    assert state.team.id == teammate_id
    assert state.slug is None


async def test_list_pages_with_cursor_and_garbage_cursor(test_session, owner):
    owner_id = owner.id
    service = NoteService(test_session)
    for i in range(3):
        await service.create_note(owner_id, NoteCreate(title=f"n{i}"))

    first = await service.list_notes(owner_id, limit=2)
    second = await service.list_notes(owner_id, limit=2, cursor=first.next_cursor)
    assert len(first.items) == 2 and len(second.items) == 1
    assert second.next_cursor is None
    assert {i.id for i in first.items}.isdisjoint({i.id for i in second.items})

    restarted = await service.list_notes(owner_id, limit=2, cursor="%%%garbage")
    assert [i.id for i in restarted.items] == [i.id for i in first.items]


async def test_list_counts_comments(test_session, owner, teammate):
    owner_id, teammate_id = owner.id, teammate.id
    service = NoteService(test_session)
    created = await service.create_note(owner_id, NoteCreate(title="Talk"))
    test_session.add_all(
        [Comment(note_id=created.id, author_id=teammate_id, body=str(i)) for i in range(3)]
    )
    await test_session.commit()

    page = await service.list_notes(owner_id)
    assert page.items[0].comments_count == 3


async def test_editor_updates_fields_but_not_sharing(test_session, owner, teammate):
    owner_id, teammate_id = owner.id, teammate.id
    service = NoteService(test_session)
    created = await service.create_note(
        owner_id, NoteCreate(title="Draft", share_mode=Visibility.TEAM, team_user_id=teammate_id)
    )

    result = await service.update_note(created.id, teammate_id, NoteUpdate(content="edited"))
    assert result.ok is True and result.slug is None

    with pytest.raises(Forbidden):
        await service.update_note(
            created.id, teammate_id, NoteUpdate(title="x", share_mode=Visibility.PUBLIC)
        )

    item = (await service.list_notes(owner_id)).items[0]
    assert item.content == "edited"
    assert item.title == "Draft"
    assert item.updated_by_id == teammate_id
    assert item.visibility == Visibility.TEAM


async def test_owner_update_with_share_mode_is_one_change(test_session, owner):
    owner_id = owner.id
    service = NoteService(test_session)
    created = await service.create_note(owner_id, NoteCreate(title="Draft"))

    result = await service.update_note(
        created.id, owner_id, NoteUpdate(title="Final", share_mode=Visibility.PUBLIC)
    )
    assert result.slug

    # a plain field update keeps reporting the current slug
    again = await service.update_note(created.id, owner_id, NoteUpdate(color="bg-blue-200"))
    assert again.slug == result.slug

    item = (await service.list_notes(owner_id)).items[0]
    assert (item.title, item.color, item.public_slug) == ("Final", "bg-blue-200", result.slug)


async def test_update_rejects_blank_title(test_session, owner):
    owner_id = owner.id
    service = NoteService(test_session)
    created = await service.create_note(owner_id, NoteCreate(title="Keep"))

    with pytest.raises(InvalidInput):
        await service.update_note(created.id, owner_id, NoteUpdate(title="  "))

    assert (await service.list_notes(owner_id)).items[0].title == "Keep"


async def test_public_viewer_cannot_update_or_delete(test_session, owner, stranger):
    owner_id, stranger_id = owner.id, stranger.id
    service = NoteService(test_session)
    created = await service.create_note(owner_id, NoteCreate(title="Pub", share_mode=Visibility.PUBLIC))

    state = await service.get_sharing_state(created.id, stranger_id)
    assert state.role == Role.VIEWER

    with pytest.raises(Forbidden):
        await service.update_note(created.id, stranger_id, NoteUpdate(content="vandalism"))
    with pytest.raises(Forbidden):
        await service.delete_note(created.id, stranger_id)


async def test_sharing_state_for_anonymous(test_session, owner):
    owner_id = owner.id
    service = NoteService(test_session)
    private = await service.create_note(owner_id, NoteCreate(title="Secret"))
    public = await service.create_note(owner_id, NoteCreate(title="Open", share_mode=Visibility.PUBLIC))

    with pytest.raises(Unauthenticated):
        await service.get_sharing_state(private.id, None)

    state = await service.get_sharing_state(public.id, None)
    assert (state.visibility, state.role, state.slug) == (Visibility.PUBLIC, Role.VIEWER, public.slug)


async def test_delete_note_owner_only(test_session, owner, teammate):
    owner_id, teammate_id = owner.id, teammate.id
    service = NoteService(test_session)
    created = await service.create_note(
        owner_id, NoteCreate(title="Bye", share_mode=Visibility.TEAM, team_user_id=teammate_id)
    )

    with pytest.raises(Forbidden):
        await service.delete_note(created.id, teammate_id)

    assert await service.delete_note(created.id, owner_id) is True
    with pytest.raises(NotFound):
        await service.get_sharing_state(created.id, owner_id)
    assert (await service.list_notes(teammate_id)).items == []


async def test_public_page_disappears_when_note_goes_private(test_session, owner):
    owner_id = owner.id
    service = NoteService(test_session)
    created = await service.create_note(owner_id, NoteCreate(title="Blink", share_mode=Visibility.PUBLIC))

    await service.update_note(created.id, owner_id, NoteUpdate(share_mode=Visibility.PRIVATE))

    with pytest.raises(NotFound):
        await service.get_public_note(created.slug)
    with pytest.raises(NotFound):
        await service.get_public_note("no-such-slug")


async def test_explicit_null_color_resets_to_default(test_session, owner):
    owner_id = owner.id
    service = NoteService(test_session)
    created = await service.create_note(owner_id, NoteCreate(title="Tinted", color="bg-red-200"))

    await service.update_note(created.id, owner_id, NoteUpdate(content="still red"))
    assert (await service.list_notes(owner_id)).items[0].color == "bg-red-200"

    await service.update_note(created.id, owner_id, NoteUpdate.model_validate({"color": None}))
    item = (await service.list_notes(owner_id)).items[0]
    assert (item.color, item.content) == ("bg-yellow-200", "still red")


async def test_sharing_only_update_records_editor(test_session, owner, teammate):
    owner_id, teammate_id = owner.id, teammate.id
    service = NoteService(test_session)
    created = await service.create_note(
        owner_id, NoteCreate(title="Plan", share_mode=Visibility.TEAM, team_user_id=teammate_id)
    )
    await service.update_note(created.id, teammate_id, NoteUpdate(content="teammate was here"))
    assert (await service.list_notes(owner_id)).items[0].updated_by_id == teammate_id

    await service.update_note(created.id, owner_id, NoteUpdate(share_mode=Visibility.PUBLIC))
    item = (await service.list_notes(owner_id)).items[0]
    assert item.updated_by_id == owner_id
    assert item.visibility == Visibility.PUBLIC
