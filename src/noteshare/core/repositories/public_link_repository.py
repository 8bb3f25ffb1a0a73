"""Public link repository for database operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.public_link import NotePublicLink


class PublicLinkRepository:
    """Slug rows for public notes. Flushes, never commits."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_note_id(self, note_id: UUID) -> Optional[NotePublicLink]:
        stmt = select(NotePublicLink).where(NotePublicLink.note_id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[NotePublicLink]:
        """Resolve a slug together with the note it points to."""
        stmt = (
            select(NotePublicLink)
            .options(selectinload(NotePublicLink.note))
            .where(NotePublicLink.slug == slug)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_for_note(self, note_id: UUID) -> int:
        stmt = delete(NotePublicLink).where(NotePublicLink.note_id == note_id)
        result = await self.session.execute(stmt)
        return result.rowcount

    async def upsert_slug(self, note_id: UUID, slug: str) -> NotePublicLink:
        """Point the note's link at ``slug``, creating the link if needed."""
        link = await self.get_by_note_id(note_id)
        if link:
            link.slug = slug
        else:
            link = NotePublicLink(note_id=note_id, slug=slug)
            self.session.add(link)
        await self.session.flush()
        return link
