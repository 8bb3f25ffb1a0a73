# Public link for notes in "public" mode
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .note import Note


class NotePublicLink(BaseModel):
    """Slug that exposes a note on the public page. At most one per note."""

    __tablename__ = "note_public_links"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    slug: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)

    note: Mapped["Note"] = relationship("Note", back_populates="public_link")

    def __repr__(self) -> str:
        return f"<NotePublicLink(note_id={self.note_id}, slug='{self.slug}')>"
