"""
User model for authentication.
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import Boolean, CheckConstraint, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel

if TYPE_CHECKING:
    from .collaborator import NoteCollaborator
    from .note import Note
    from .refresh_token import RefreshToken


class User(BaseModel):
    """User account model with email/password auth."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relations
    notes: Mapped[List["Note"]] = relationship(
        "Note",
        back_populates="owner",
        foreign_keys="Note.owner_id",
        passive_deletes=True,
    )

    collaborations: Mapped[List["NoteCollaborator"]] = relationship(
        "NoteCollaborator",
        back_populates="user",
        passive_deletes=True,
    )

    refresh_tokens: Mapped[List["RefreshToken"]] = relationship(
        "RefreshToken",
        back_populates="user",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("name IS NULL OR length(name) <= 100", name="ck_users_name_len"),
        Index("idx_users_active", "is_active"),
    )

    def __repr__(self) -> str:
        return f"<User(email='{self.email}')>"

    @property
    def display_name(self) -> str:
        """Name shown next to comments; email when no name was given."""
        return self.name if self.name else self.email

    def can_login(self) -> bool:
        """Check if user can login."""
        return self.is_active
