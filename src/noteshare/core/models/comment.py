# Append-only comments on notes
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .note import Note
    from .user import User


class Comment(BaseModel):
    """Comment left by a reader. Never edited; goes away with its note."""

    __tablename__ = "comments"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    author_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    body: Mapped[str] = mapped_column(Text, nullable=False)

    note: Mapped["Note"] = relationship("Note", back_populates="comments")
    author: Mapped["User"] = relationship("User", lazy="selectin")

    __table_args__ = (Index("idx_comments_note_created", "note_id", "created_at"),)

    def __repr__(self) -> str:
        return f"<Comment(note_id={self.note_id}, author_id={self.author_id})>"
