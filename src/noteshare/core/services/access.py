"""Per-request access decisions for a single note."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..enums import Role
from ..exceptions import Forbidden, NotFound, Unauthenticated
from ..models.collaborator import CollaboratorRole
from ..models.note import Note
from ..repositories.note_repository import NoteRepository

logger = logging.getLogger(__name__)


class Action(str, Enum):
    VIEW = "view"
    EDIT = "edit"
    DELETE = "delete"
    COMMENT = "comment"
    CHANGE_VISIBILITY = "change_visibility"


@dataclass(frozen=True)
class NoteAccess:
    """What one caller may do with one note."""

    role: Role
    is_public: bool
    authenticated: bool

    @property
    def can_view(self) -> bool:
        if self.is_public:
            return True
        return self.role in (Role.OWNER, Role.EDITOR, Role.VIEWER)

    @property
    def can_edit(self) -> bool:
        return self.role in (Role.OWNER, Role.EDITOR)

    @property
    def can_delete(self) -> bool:
        return self.role == Role.OWNER

    @property
    def can_change_visibility(self) -> bool:
        return self.role == Role.OWNER

    @property
    def can_comment(self) -> bool:
        return self.authenticated and self.can_view

    def allows(self, action: Action) -> bool:
        return {
            Action.VIEW: self.can_view,
            Action.EDIT: self.can_edit,
            Action.DELETE: self.can_delete,
            Action.COMMENT: self.can_comment,
            Action.CHANGE_VISIBILITY: self.can_change_visibility,
        }[action]


def role_for(note: Note, user_id: Optional[UUID]) -> Role:
    """Caller's role, given a note whose collaborators are loaded."""
    if user_id is not None:
        if note.is_owned_by(user_id):
            return Role.OWNER
        for collaborator in note.collaborators:
            if collaborator.user_id == user_id:
                if collaborator.role == CollaboratorRole.EDITOR.value:
                    return Role.EDITOR
                return Role.VIEWER
    if note.is_public:
        return Role.VIEWER
    return Role.NONE


def access_for(note: Note, user_id: Optional[UUID]) -> NoteAccess:
    return NoteAccess(
        role=role_for(note, user_id),
        is_public=note.is_public,
        authenticated=user_id is not None,
    )


def require(access: NoteAccess, action: Action) -> None:
    """Raise unless ``access`` permits ``action``.

    Anonymous callers get 401 so the client can prompt for login; known
    callers get 403.
    """
    if access.allows(action):
        return
    if not access.authenticated:
        raise Unauthenticated()
    raise Forbidden()


class AccessResolver:
    """Loads a note and works out the caller's role on it."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def resolve(self, note_id: UUID, user_id: Optional[UUID]) -> Tuple[Note, NoteAccess]:
        note = await self.note_repo.get_by_id(note_id)
        if not note:
            raise NotFound("Note not found")
        return note, access_for(note, user_id)

    async def resolve_for(
        self, note_id: UUID, user_id: Optional[UUID], action: Action
    ) -> Tuple[Note, NoteAccess]:
        """Resolve and require ``action`` in one step."""
        note, access = await self.resolve(note_id, user_id)
        if not access.allows(action):
            logger.warning(
                "Access denied",
                extra={
                    "note_id": str(note_id),
                    "user_id": str(user_id) if user_id else None,
                    "action": action.value,
                    "role": access.role.value,
                },
            )
        require(access, action)
        return note, access
