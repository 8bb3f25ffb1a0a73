"""
Service interfaces for NoteShare application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from ..schemas.auth import (
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from ..schemas.comments import CommentCreate, CommentResponse
from ..schemas.common import HealthCheckResponse, OkResponse
from ..schemas.notes import (
    NoteCreate,
    NoteCreatedResponse,
    NoteListResponse,
    NoteUpdate,
    PublicNoteResponse,
    SharingStateResponse,
)
from ..schemas.users import UserSummary


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> UserResponse:
        """Register new user."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return JWT tokens."""
        pass

    @abstractmethod
    async def refresh_token(self, request: RefreshTokenRequest) -> TokenResponse:
        """Refresh JWT token."""
        pass

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        pass

    @abstractmethod
    async def logout_user(self, user_id: UUID, access_token: str) -> bool:
        """Logout user."""
        pass


class INoteService(ABC):
    """Note service for CRUD operations and sharing."""

    @abstractmethod
    async def create_note(self, user_id: Optional[UUID], request: NoteCreate) -> NoteCreatedResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def list_notes(
        self, user_id: UUID, limit: Optional[int] = None, cursor: Optional[str] = None
    ) -> NoteListResponse:
        """List notes visible to the user, one page at a time."""
        pass

    @abstractmethod
    async def get_sharing_state(self, note_id: UUID, user_id: Optional[UUID]) -> SharingStateResponse:
        """Get note sharing state."""
        pass

    @abstractmethod
    async def update_note(self, note_id: UUID, user_id: Optional[UUID], request: NoteUpdate) -> OkResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, user_id: Optional[UUID]) -> bool:
        """Delete note."""
        pass

    @abstractmethod
    async def get_public_note(self, slug: str) -> PublicNoteResponse:
        """Get a public note by its link slug."""
        pass


class ICommentService(ABC):
    """Comment service."""

    @abstractmethod
    async def list_comments(self, note_id: UUID, user_id: Optional[UUID]) -> List[CommentResponse]:
        """List comments of a note."""
        pass

    @abstractmethod
    async def add_comment(
        self, note_id: UUID, user_id: Optional[UUID], request: CommentCreate
    ) -> CommentResponse:
        """Add comment to a note."""
        pass


class IUserService(ABC):
    """User lookup service."""

    @abstractmethod
    async def search_users(self, query: Optional[str], limit: Optional[int] = None) -> List[UserSummary]:
        """Search users by name or email."""
        pass


class IHealthService(ABC):
    """Health monitoring service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        pass
