# Note model for user content
import uuid
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .collaborator import NoteCollaborator
    from .comment import Comment
    from .public_link import NotePublicLink
    from .user import User


class Note(BaseModel):
    """Text note owned by a single user.

    Who else can see it depends on ``is_public`` plus the presence of the
    public link and collaborator rows; see ``VisibilityService``.
    """

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    color: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    is_public: Mapped[bool] = mapped_column(default=False, nullable=False)

    # owner reference
    owner_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    # last editor (owner or collaborator)
    updated_by_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    )

    # relationships
    owner: Mapped["User"] = relationship(
        "User",
        back_populates="notes",
        foreign_keys=[owner_id],
        doc="User who created and owns this note",
    )

    # no ORM cascades here: dependent rows are removed with explicit DELETE
    # statements inside the caller's transaction
    public_link: Mapped[Optional["NotePublicLink"]] = relationship(
        "NotePublicLink",
        back_populates="note",
        uselist=False,
        passive_deletes=True,
    )

    collaborators: Mapped[List["NoteCollaborator"]] = relationship(
        "NoteCollaborator",
        back_populates="note",
        order_by="NoteCollaborator.created_at",
        passive_deletes=True,
    )

    comments: Mapped[List["Comment"]] = relationship(
        "Comment",
        back_populates="note",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_notes_owner_id", "owner_id"),
        # keyset pagination order
        Index("idx_notes_updated_id", "updated_at", "id"),
        CheckConstraint("length(title) <= 200", name="ck_notes_title_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', owner_id={self.owner_id})>"

    def is_owned_by(self, user_id: Optional[uuid.UUID]) -> bool:
        """Check if this note is owned by the specified user."""
        return user_id is not None and self.owner_id == user_id
