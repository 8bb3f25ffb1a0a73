"""Tests for NoteRepository against an in-memory SQLite database."""

import uuid
from datetime import datetime, timedelta, timezone

from sqlalchemy import func, select

from noteshare.core.models import Comment, Note, NoteCollaborator, NotePublicLink
from noteshare.core.pagination import NoteCursor
from noteshare.core.repositories.note_repository import NoteRepository

BASE = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


async def _add_notes(session, owner, timestamps):
    notes = []
    for i, ts in enumerate(timestamps):
        note = Note(title=f"note {i}", content="", owner_id=owner.id, created_at=ts, updated_at=ts)
        session.add(note)
        notes.append(note)
    await session.commit()
    return notes


def _expected_order(notes):
    return sorted(notes, key=lambda n: (n.updated_at, str(n.id)), reverse=True)


async def _walk(repo, user_id, limit):
    pages, cursor = [], None
    while True:
        page, next_cursor = await repo.list_for_user(user_id, limit, cursor)
        pages.append([n.id for n in page])
        if next_cursor is None:
            return pages
        # go through the wire format like a client would
        cursor = NoteCursor.decode(next_cursor.encode())


async def test_pages_cover_every_note_once_with_timestamp_ties(test_session, owner):
    # five notes share one timestamp, so order falls back to id
    timestamps = [BASE] * 5 + [BASE - timedelta(minutes=i) for i in range(1, 8)]
    notes = await _add_notes(test_session, owner, timestamps)

    pages = await _walk(NoteRepository(test_session), owner.id, limit=5)

    assert [len(p) for p in pages] == [5, 5, 2]
    flat = [nid for page in pages for nid in page]
    assert flat == [n.id for n in _expected_order(notes)]
    assert len(set(flat)) == len(notes)


async def test_exact_multiple_of_page_size_has_no_trailing_cursor(test_session, owner):
    await _add_notes(test_session, owner, [BASE - timedelta(seconds=i) for i in range(4)])
    repo = NoteRepository(test_session)

    first, cursor = await repo.list_for_user(owner.id, 2)
    second, last_cursor = await repo.list_for_user(owner.id, 2, cursor)

    assert len(first) == 2 and len(second) == 2
    assert cursor == NoteCursor(updated_at=first[-1].updated_at, id=first[-1].id)
    assert last_cursor is None


async def test_lists_owned_and_shared_notes_only(test_session, owner, teammate, stranger):
    mine = Note(title="mine", content="", owner_id=owner.id)
    shared = Note(title="shared", content="", owner_id=teammate.id)
    foreign = Note(title="foreign", content="", owner_id=stranger.id)
    public = Note(title="public", content="", owner_id=stranger.id, is_public=True)
    test_session.add_all([mine, shared, foreign, public])
    await test_session.flush()
    test_session.add(NoteCollaborator(note_id=shared.id, user_id=owner.id, role="editor"))
    await test_session.commit()

    notes, cursor = await NoteRepository(test_session).list_for_user(owner.id, 10)

    assert {n.title for n in notes} == {"mine", "shared"}
    assert cursor is None
    shared_loaded = next(n for n in notes if n.title == "shared")
    assert [c.user.email for c in shared_loaded.collaborators] == ["owner@example.com"]


async def test_count_comments(test_session, owner, teammate):
    a = Note(title="a", content="", owner_id=owner.id)
    b = Note(title="b", content="", owner_id=owner.id)
    test_session.add_all([a, b])
    await test_session.flush()
    test_session.add_all(
        [
            Comment(note_id=a.id, author_id=owner.id, body="one"),
            Comment(note_id=a.id, author_id=teammate.id, body="two"),
        ]
    )
    await test_session.commit()

    counts = await NoteRepository(test_session).count_comments([a.id, b.id])
    assert counts == {a.id: 2}
    assert await NoteRepository(test_session).count_comments([]) == {}


async def test_delete_with_dependents_removes_everything(test_session, owner, teammate):
    note = Note(title="doomed", content="", owner_id=owner.id, is_public=True)
    keep = Note(title="keep", content="", owner_id=owner.id)
    test_session.add_all([note, keep])
    await test_session.flush()
    test_session.add_all(
        [
            NotePublicLink(note_id=note.id, slug="doomed-slug"),
            NoteCollaborator(note_id=note.id, user_id=teammate.id, role="editor"),
            Comment(note_id=note.id, author_id=teammate.id, body="bye"),
            Comment(note_id=keep.id, author_id=teammate.id, body="stay"),
        ]
    )
    await test_session.commit()

    await NoteRepository(test_session).delete_with_dependents(note.id)
    await test_session.commit()

    async def count(model, *where):
        stmt = select(func.count()).select_from(model)
        if where:
            stmt = stmt.where(*where)
        return (await test_session.execute(stmt)).scalar()

    assert await count(Note, Note.id == note.id) == 0
    assert await count(NotePublicLink) == 0
    assert await count(NoteCollaborator) == 0
    assert await count(Comment) == 1
    assert await NoteRepository(test_session).get_by_id(keep.id) is not None


async def test_get_by_id_unknown(test_session):
    assert await NoteRepository(test_session).get_by_id(uuid.uuid4()) is None
