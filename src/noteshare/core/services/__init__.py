"""
Service layer: business rules on top of the repositories.

Each service takes the request's AsyncSession and the caller's id
explicitly; there is no ambient user state.
"""

from .access import AccessResolver, Action, NoteAccess, require
from .auth_service import AuthService
from .comment_service import CommentService
from .health_service import HealthService
from .interfaces import IAuthService, ICommentService, IHealthService, INoteService, IUserService
from .note_service import NoteService
from .user_service import UserService
from .visibility_service import VisibilityService, state_of

__all__ = [
    # Interfaces
    "IAuthService",
    "INoteService",
    "ICommentService",
    "IUserService",
    "IHealthService",
    # Access and sharing
    "AccessResolver",
    "Action",
    "NoteAccess",
    "require",
    "VisibilityService",
    "state_of",
    # Implementations
    "AuthService",
    "NoteService",
    "CommentService",
    "UserService",
    "HealthService",
]
