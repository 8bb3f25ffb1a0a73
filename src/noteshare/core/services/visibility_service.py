"""Visibility state machine: private, team and public notes."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security.slugs import generate_slug
from ..enums import Visibility
from ..exceptions import InvalidInput, NotFound
from ..models.collaborator import CollaboratorRole
from ..models.note import Note
from ..repositories.collaborator_repository import CollaboratorRepository
from ..repositories.public_link_repository import PublicLinkRepository
from ..repositories.user_repository import UserRepository
from .access import AccessResolver, Action

logger = logging.getLogger(__name__)


def state_of(note: Note) -> Visibility:
    """Current mode of a note whose collaborators are loaded."""
    if note.is_public:
        return Visibility.PUBLIC
    if note.collaborators:
        return Visibility.TEAM
    return Visibility.PRIVATE


class VisibilityService:
    """Moves notes between sharing modes.

    Each mode owns a fixed set of rows:

    - private: ``is_public`` false, no public link, no collaborators
    - team: ``is_public`` false, no public link, collaborators
    - public: ``is_public`` true, one public link, no collaborators

    ``transition`` rewrites all of them so a note is never left half in one
    mode and half in another. It only flushes; the caller commits.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.settings = get_settings()
        self.link_repo = PublicLinkRepository(session)
        self.collaborator_repo = CollaboratorRepository(session)
        self.user_repo = UserRepository(session)
        self.resolver = AccessResolver(session)

    async def transition(
        self, note: Note, mode: Visibility, invitee_id: Optional[UUID] = None
    ) -> Optional[str]:
        """Put ``note`` in ``mode``. Returns the new slug for public notes."""
        if mode == Visibility.TEAM and invitee_id is not None:
            await self._check_invitee(note, invitee_id)

        await self.collaborator_repo.delete_for_note(note.id)

        if mode == Visibility.PUBLIC:
            note.is_public = True
            # a new slug on every transition invalidates previously shared links
            link = await self.link_repo.upsert_slug(note.id, generate_slug(self.settings.slug_length))
            slug = link.slug
        else:
            note.is_public = False
            await self.link_repo.delete_for_note(note.id)
            slug = None
            if mode == Visibility.TEAM and invitee_id is not None:
                await self.collaborator_repo.upsert(
                    note.id, invitee_id, CollaboratorRole.EDITOR.value
                )

        await self.session.flush()
        logger.info(
            "Note visibility changed",
            extra={
                "note_id": str(note.id),
                "mode": mode.value,
                "invitee_id": str(invitee_id) if invitee_id else None,
            },
        )
        return slug

    async def change_visibility(
        self,
        note_id: UUID,
        user_id: Optional[UUID],
        mode: Visibility,
        invitee_id: Optional[UUID] = None,
    ) -> Optional[str]:
        """Owner-only mode change committed as one unit."""
        try:
            note, _ = await self.resolver.resolve_for(note_id, user_id, Action.CHANGE_VISIBILITY)
            slug = await self.transition(note, mode, invitee_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return slug

    async def _check_invitee(self, note: Note, invitee_id: UUID) -> None:
        if note.is_owned_by(invitee_id):
            raise InvalidInput("Cannot invite the note owner")
        if not await self.user_repo.get_by_id(invitee_id):
            raise NotFound("Invited user not found")
