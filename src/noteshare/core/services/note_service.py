"""Note service implementation."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..enums import Visibility
from ..exceptions import InvalidInput, NotFound, Unauthenticated
from ..models.note import Note
from ..pagination import NoteCursor, clamp_page_size
from ..repositories.note_repository import NoteRepository
from ..repositories.public_link_repository import PublicLinkRepository
from ..schemas.common import OkResponse
from ..schemas.notes import (
    CollaboratorSummary,
    NoteCreate,
    NoteCreatedResponse,
    NoteListItem,
    NoteListResponse,
    NoteUpdate,
    PublicNoteResponse,
    SharingStateResponse,
)
from ..schemas.users import UserSummary
from .access import AccessResolver, Action, require, role_for
from .interfaces import INoteService
from .visibility_service import VisibilityService, state_of

logger = logging.getLogger(__name__)


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.settings = get_settings()
        self.note_repo = NoteRepository(session)
        self.link_repo = PublicLinkRepository(session)
        self.resolver = AccessResolver(session)
        self.visibility = VisibilityService(session)

    async def create_note(self, user_id: Optional[UUID], request: NoteCreate) -> NoteCreatedResponse:
        """Create a note and put it straight into the requested sharing mode."""
        if user_id is None:
            raise Unauthenticated()
        title = self._clean_title(request.title)

        try:
            note = await self.note_repo.add_note(
                {
                    "title": title,
                    "content": request.content,
                    "color": request.color or None,
                    "owner_id": user_id,
                    "updated_by_id": user_id,
                }
            )
            slug = None
            if request.share_mode != Visibility.PRIVATE:
                slug = await self.visibility.transition(note, request.share_mode, request.team_user_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Note created",
            extra={"note_id": str(note.id), "owner_id": str(user_id), "mode": request.share_mode.value},
        )
        return NoteCreatedResponse(id=note.id, slug=slug)

    async def list_notes(
        self, user_id: UUID, limit: Optional[int] = None, cursor: Optional[str] = None
    ) -> NoteListResponse:
        """List notes owned by or shared with the user, newest first."""
        page_size = clamp_page_size(
            limit, self.settings.default_page_size, self.settings.max_page_size
        )
        notes, next_cursor = await self.note_repo.list_for_user(
            user_id, page_size, NoteCursor.decode(cursor)
        )
        counts = await self.note_repo.count_comments([note.id for note in notes])

        return NoteListResponse(
            items=[self._to_list_item(note, user_id, counts.get(note.id, 0)) for note in notes],
            next_cursor=next_cursor.encode() if next_cursor else None,
        )

    async def get_sharing_state(self, note_id: UUID, user_id: Optional[UUID]) -> SharingStateResponse:
        """Sharing state of a note. Anonymous callers may read public notes."""
        note, access = await self.resolver.resolve_for(note_id, user_id, Action.VIEW)

        team = None
        if note.collaborators:
            team = UserSummary.model_validate(note.collaborators[0].user)

        return SharingStateResponse(
            id=note.id,
            is_public=note.is_public,
            visibility=state_of(note),
            slug=self._public_slug(note),
            team=team,
            role=access.role,
        )

    async def update_note(
        self, note_id: UUID, user_id: Optional[UUID], request: NoteUpdate
    ) -> OkResponse:
        """Update fields and/or sharing mode in a single transaction.

        Field changes need edit rights; a sharing mode change needs the owner.
        """
        changes = request.model_dump(include={"title", "content"}, exclude_none=True)
        # an explicit null clears the colour back to the default
        if "color" in request.model_fields_set:
            changes["color"] = request.color or None

        try:
            note, access = await self.resolver.resolve(note_id, user_id)
            if changes or request.share_mode is None:
                require(access, Action.EDIT)
            if request.share_mode is not None:
                require(access, Action.CHANGE_VISIBILITY)

            if "title" in changes:
                changes["title"] = self._clean_title(changes["title"])
            for key, value in changes.items():
                setattr(note, key, value)
            note.updated_by_id = user_id
            await self.session.flush()

            if request.share_mode is not None:
                slug = await self.visibility.transition(note, request.share_mode, request.team_user_id)
            else:
                slug = self._public_slug(note)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        return OkResponse(slug=slug)

    async def delete_note(self, note_id: UUID, user_id: Optional[UUID]) -> bool:
        """Delete a note and everything hanging off it. Owner only."""
        try:
            await self.resolver.resolve_for(note_id, user_id, Action.DELETE)
            await self.note_repo.delete_with_dependents(note_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Note deleted", extra={"note_id": str(note_id), "user_id": str(user_id)})
        return True

    async def get_public_note(self, slug: str) -> PublicNoteResponse:
        """Content behind a public link, as long as the note is still public."""
        link = await self.link_repo.get_by_slug(slug)
        if not link or not link.note or not link.note.is_public:
            raise NotFound("Note not found")

        note = link.note
        return PublicNoteResponse(
            id=note.id,
            title=note.title,
            content=note.content,
            color=self._color(note),
            updated_at=note.updated_at,
        )

    def _to_list_item(self, note: Note, user_id: UUID, comments_count: int) -> NoteListItem:
        return NoteListItem(
            id=note.id,
            title=note.title,
            content=note.content,
            color=self._color(note),
            owner_id=note.owner_id,
            updated_at=note.updated_at,
            updated_by_id=note.updated_by_id,
            role=role_for(note, user_id),
            visibility=state_of(note),
            is_public=note.is_public,
            public_slug=self._public_slug(note),
            collaborators=[
                CollaboratorSummary(
                    user_id=c.user_id,
                    role=c.role,
                    user=UserSummary.model_validate(c.user),
                )
                for c in note.collaborators
            ],
            comments_count=comments_count,
        )

    def _color(self, note: Note) -> str:
        return note.color or self.settings.default_note_color

    @staticmethod
    def _public_slug(note: Note) -> Optional[str]:
        if note.is_public and note.public_link is not None:
            return note.public_link.slug
        return None

    @staticmethod
    def _clean_title(title: str) -> str:
        title = title.strip()
        if not title:
            raise InvalidInput("Title is required")
        return title
