"""Comment service implementation."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import InvalidInput
from ..models.comment import Comment
from ..repositories.comment_repository import CommentRepository
from ..schemas.comments import CommentCreate, CommentResponse
from .access import AccessResolver, Action
from .interfaces import ICommentService

logger = logging.getLogger(__name__)


def _to_response(comment: Comment) -> CommentResponse:
    author = comment.author
    return CommentResponse(
        id=comment.id,
        body=comment.body,
        author_name=author.display_name if author else "Unknown",
        created_at=comment.created_at,
    )


class CommentService(ICommentService):
    """Append-only comments on notes the caller can see."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.comment_repo = CommentRepository(session)
        self.resolver = AccessResolver(session)

    async def list_comments(self, note_id: UUID, user_id: Optional[UUID]) -> List[CommentResponse]:
        await self.resolver.resolve_for(note_id, user_id, Action.VIEW)
        comments = await self.comment_repo.list_for_note(note_id)
        return [_to_response(c) for c in comments]

    async def add_comment(
        self, note_id: UUID, user_id: Optional[UUID], request: CommentCreate
    ) -> CommentResponse:
        await self.resolver.resolve_for(note_id, user_id, Action.COMMENT)

        body = request.body.strip()
        if not body:
            raise InvalidInput("Comment body is required")

        try:
            comment = await self.comment_repo.create_comment(note_id, user_id, body)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Comment added", extra={"note_id": str(note_id), "author_id": str(user_id)})
        return _to_response(comment)
