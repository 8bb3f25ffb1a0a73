"""Note repository for database operations."""

from typing import Dict, List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import and_, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.collaborator import NoteCollaborator
from ..models.comment import Comment
from ..models.note import Note
from ..models.public_link import NotePublicLink
from ..pagination import NoteCursor


def _sharing_options():
    return (
        selectinload(Note.public_link),
        selectinload(Note.collaborators).selectinload(NoteCollaborator.user),
    )


class NoteRepository:
    """Repository for note database operations.

    Write methods only flush; committing is up to the calling service so a
    note and its sharing rows change in a single transaction.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add_note(self, note_data: dict) -> Note:
        """Stage a new note and assign its primary key."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.flush()
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID with its public link and collaborators."""
        stmt = (
            select(Note)
            .options(*_sharing_options())
            .where(Note.id == note_id)
            # the session may hold a copy from before the last transition
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(
        self, user_id: UUID, limit: int, cursor: Optional[NoteCursor] = None
    ) -> Tuple[List[Note], Optional[NoteCursor]]:
        """One page of notes owned by or shared with the user, newest first.

        Keyset pagination over ``(updated_at DESC, id DESC)``. One extra row is
        fetched to tell whether another page exists.
        """
        access = or_(
            Note.owner_id == user_id,
            Note.collaborators.any(NoteCollaborator.user_id == user_id),
        )
        stmt = select(Note).options(*_sharing_options()).where(access)

        if cursor is not None:
            stmt = stmt.where(
                or_(
                    Note.updated_at < cursor.updated_at,
                    and_(Note.updated_at == cursor.updated_at, Note.id < cursor.id),
                )
            )

        stmt = (
            stmt.order_by(Note.updated_at.desc(), Note.id.desc())
            .limit(limit + 1)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        notes = list(result.scalars())

        if len(notes) <= limit:
            return notes, None

        page = notes[:limit]
        last = page[-1]
        return page, NoteCursor(updated_at=last.updated_at, id=last.id)

    async def count_comments(self, note_ids: Sequence[UUID]) -> Dict[UUID, int]:
        """Comment counts for a page of notes in one grouped query."""
        if not note_ids:
            return {}
        stmt = (
            select(Comment.note_id, func.count(Comment.id))
            .where(Comment.note_id.in_(list(note_ids)))
            .group_by(Comment.note_id)
        )
        result = await self.session.execute(stmt)
        return {note_id: count for note_id, count in result.all()}

    async def delete_with_dependents(self, note_id: UUID) -> None:
        """Delete a note together with its comments, public link and collaborators."""
        await self.session.execute(delete(Comment).where(Comment.note_id == note_id))
        await self.session.execute(delete(NotePublicLink).where(NotePublicLink.note_id == note_id))
        await self.session.execute(
            delete(NoteCollaborator).where(NoteCollaborator.note_id == note_id)
        )
        await self.session.execute(delete(Note).where(Note.id == note_id))
