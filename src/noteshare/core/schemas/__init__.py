"""
Pydantic schemas for validating and documenting API requests and responses.

This package exposes the Pydantic models used across the application to
define input/output contracts for authentication, notes, comments, user
lookup and common responses.
"""

from .auth import LoginRequest, RefreshTokenRequest, RegisterRequest, TokenResponse, UserResponse
from .comments import CommentCreate, CommentResponse
from .common import ErrorResponse, HealthCheckResponse, OkResponse
from .notes import (
    CollaboratorSummary,
    NoteCreate,
    NoteCreatedResponse,
    NoteListItem,
    NoteListResponse,
    NoteUpdate,
    PublicNoteResponse,
    SharingStateResponse,
    VisibilityChange,
)
from .users import UserSummary

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "RefreshTokenRequest",
    "TokenResponse",
    "UserResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteCreatedResponse",
    "NoteListItem",
    "NoteListResponse",
    "CollaboratorSummary",
    "SharingStateResponse",
    "VisibilityChange",
    "PublicNoteResponse",
    # Comment schemas
    "CommentCreate",
    "CommentResponse",
    # User schemas
    "UserSummary",
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
    "OkResponse",
]
