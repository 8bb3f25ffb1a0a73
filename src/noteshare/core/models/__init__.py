"""
Database models for NoteShare.

SQLAlchemy ORM models for the note sharing service. All models are used
through async sessions.

Models included:
    - User: account with email/password authentication
    - Note: note content owned by a single user
    - NotePublicLink: slug for notes in public mode
    - NoteCollaborator: invited editor for notes in team mode
    - Comment: append-only comments on notes
    - RefreshToken: login session refresh tokens
"""

from .base import BaseModel
from .collaborator import CollaboratorRole, NoteCollaborator
from .comment import Comment
from .note import Note
from .public_link import NotePublicLink
from .refresh_token import RefreshToken
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "NotePublicLink",
    "NoteCollaborator",
    "CollaboratorRole",
    "Comment",
    "RefreshToken",
]
