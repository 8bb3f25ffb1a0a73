"""
Note management schemas.

These schemas define the API contracts for note CRUD, sharing mode changes
and the public note page.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import Role, Visibility
from .users import UserSummary


class NoteCreate(BaseModel):
    """Note creation request schema.

    The title is only length-checked here; the service rejects titles that
    are blank after trimming with a 400.
    """

    title: str = Field(max_length=200, description="Note title")
    content: str = Field(default="", description="Plain text content")
    color: Optional[str] = Field(default=None, max_length=50, description="Color tag, e.g. bg-red-200")
    share_mode: Visibility = Field(default=Visibility.PRIVATE, description="Initial sharing mode")
    team_user_id: Optional[uuid.UUID] = Field(
        default=None, description="User to invite as editor (team mode only)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Sprint retro",
                "content": "What went well...",
                "color": "bg-green-200",
                "share_mode": "team",
                "team_user_id": "456e7890-e89b-12d3-a456-426614174000",
            }
        }
    )


class NoteUpdate(BaseModel):
    """Note update request schema. Omitted fields are left untouched."""

    title: Optional[str] = Field(default=None, max_length=200, description="Note title")
    content: Optional[str] = Field(default=None, description="Note content")
    color: Optional[str] = Field(default=None, max_length=50, description="Color tag")
    share_mode: Optional[Visibility] = Field(default=None, description="New sharing mode (owner only)")
    team_user_id: Optional[uuid.UUID] = Field(default=None, description="Invitee for team mode")

    model_config = ConfigDict(
        json_schema_extra={"example": {"title": "Sprint retro (final)", "share_mode": "public"}}
    )


class VisibilityChange(BaseModel):
    """Sharing mode change on its own."""

    mode: Visibility
    team_user_id: Optional[uuid.UUID] = None


class NoteCreatedResponse(BaseModel):
    id: uuid.UUID = Field(description="New note ID")
    slug: Optional[str] = Field(default=None, description="Public link slug for public notes")


class CollaboratorSummary(BaseModel):
    user_id: uuid.UUID
    role: str
    user: UserSummary

    model_config = ConfigDict(from_attributes=True)


class NoteListItem(BaseModel):
    """Note as shown on the dashboard grid."""

    id: uuid.UUID = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    color: str = Field(description="Color tag")
    owner_id: uuid.UUID = Field(description="Note owner ID")
    updated_at: datetime = Field(description="Last update timestamp")
    updated_by_id: Optional[uuid.UUID] = Field(default=None, description="Last editor")

    # sharing info from the caller's point of view
    role: Role = Field(description="Caller's role on this note")
    visibility: Visibility = Field(description="Current sharing mode")
    is_public: bool = Field(description="Whether note is publicly visible")
    public_slug: Optional[str] = Field(default=None, description="Public link slug")
    collaborators: List[CollaboratorSummary] = Field(default_factory=list)
    comments_count: int = Field(default=0, description="Number of comments")


class NoteListResponse(BaseModel):
    """One page of notes plus the cursor for the next one."""

    items: List[NoteListItem]
    next_cursor: Optional[str] = Field(
        default=None, description="Opaque cursor for the next page; null on the last page"
    )


class SharingStateResponse(BaseModel):
    """Sharing state of a note, as needed by the share dialog."""

    id: uuid.UUID
    is_public: bool
    visibility: Visibility
    slug: Optional[str] = Field(default=None, description="Public link slug, if public")
    team: Optional[UserSummary] = Field(default=None, description="First collaborator, if any")
    role: Role = Field(description="Caller's role on this note")


class PublicNoteResponse(BaseModel):
    """Content served on the public note page."""

    id: uuid.UUID
    title: str
    content: str
    color: str
    updated_at: datetime
