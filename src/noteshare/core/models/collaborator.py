# Collaborators for notes in "team" mode
import uuid
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .note import Note
    from .user import User


class CollaboratorRole(str, Enum):
    """Roles stored on collaborator rows. The app only hands out EDITOR."""

    EDITOR = "editor"
    VIEWER = "viewer"


class NoteCollaborator(BaseModel):
    """Non-owner user invited to a note."""

    __tablename__ = "note_collaborators"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    role: Mapped[str] = mapped_column(
        String(20), default=CollaboratorRole.EDITOR.value, nullable=False
    )

    note: Mapped["Note"] = relationship("Note", back_populates="collaborators")
    user: Mapped["User"] = relationship("User", back_populates="collaborations", lazy="selectin")

    __table_args__ = (
        UniqueConstraint("note_id", "user_id", name="uq_note_collaborators_note_user"),
        CheckConstraint("length(role) <= 20", name="ck_note_collaborators_role_len"),
        Index("idx_note_collaborators_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteCollaborator(note_id={self.note_id}, user_id={self.user_id}, role={self.role})>"

    @property
    def is_editor(self) -> bool:
        return self.role == CollaboratorRole.EDITOR.value
