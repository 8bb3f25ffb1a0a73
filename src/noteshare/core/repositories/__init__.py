"""Repository layer for data access."""

from .collaborator_repository import CollaboratorRepository
from .comment_repository import CommentRepository
from .note_repository import NoteRepository
from .public_link_repository import PublicLinkRepository
from .refresh_token_repository import RefreshTokenRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "NoteRepository",
    "CollaboratorRepository",
    "PublicLinkRepository",
    "CommentRepository",
    "RefreshTokenRepository",
]
