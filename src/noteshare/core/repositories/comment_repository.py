"""Comment repository for database operations."""

from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.comment import Comment


class CommentRepository:
    """Append-only comment log: create and list only."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_comment(self, note_id: UUID, author_id: UUID, body: str) -> Comment:
        """Stage a new comment. Flushes, never commits."""
        comment = Comment(note_id=note_id, author_id=author_id, body=body)
        self.session.add(comment)
        await self.session.flush()
        await self.session.refresh(comment, ["author"])
        return comment

    async def list_for_note(self, note_id: UUID) -> List[Comment]:
        """Comments of a note, most recent first."""
        stmt = (
            select(Comment)
            .options(selectinload(Comment.author))
            .where(Comment.note_id == note_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())
