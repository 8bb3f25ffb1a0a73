"""Collaborator repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.collaborator import NoteCollaborator


class CollaboratorRepository:
    """Rows granting a non-owner access to a note. Flushes, never commits."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, note_id: UUID, user_id: UUID) -> Optional[NoteCollaborator]:
        stmt = select(NoteCollaborator).where(
            and_(NoteCollaborator.note_id == note_id, NoteCollaborator.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_for_note(self, note_id: UUID) -> int:
        """Remove every collaborator of a note."""
        stmt = delete(NoteCollaborator).where(NoteCollaborator.note_id == note_id)
        result = await self.session.execute(stmt)
        return result.rowcount

    async def upsert(self, note_id: UUID, user_id: UUID, role: str) -> NoteCollaborator:
        """Insert the (note, user) row or update its role if it already exists."""
        collaborator = await self.get(note_id, user_id)
        if collaborator:
            collaborator.role = role
        else:
            collaborator = NoteCollaborator(note_id=note_id, user_id=user_id, role=role)
            self.session.add(collaborator)
        await self.session.flush()
        return collaborator
