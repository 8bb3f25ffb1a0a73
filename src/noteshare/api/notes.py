"""Notes API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.comments import CommentCreate, CommentResponse
from ..core.schemas.common import OkResponse
from ..core.schemas.notes import (
    NoteCreate,
    NoteCreatedResponse,
    NoteListResponse,
    NoteUpdate,
    SharingStateResponse,
    VisibilityChange,
)
from ..core.services import CommentService, NoteService, VisibilityService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id, get_optional_user_id

router = APIRouter(prefix="/notes", tags=["notes"])


@router.post("", response_model=NoteCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note, optionally shared straight away."""
    note_service = NoteService(session)
    return await note_service.create_note(current_user_id, request)


@router.get("", response_model=NoteListResponse)
async def list_notes(
    limit: Optional[int] = Query(None, description="Page size, clamped to the configured maximum"),
    cursor: Optional[str] = Query(None, description="Cursor returned by the previous page"),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List notes owned by or shared with the user, most recently updated first."""
    note_service = NoteService(session)
    return await note_service.list_notes(current_user_id, limit=limit, cursor=cursor)


@router.get("/{note_id}", response_model=SharingStateResponse)
async def get_note(
    note_id: UUID,
    current_user_id: Optional[UUID] = Depends(get_optional_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get the sharing state of a note."""
    note_service = NoteService(session)
    return await note_service.get_sharing_state(note_id, current_user_id)


@router.put("/{note_id}", response_model=OkResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note's fields and/or sharing mode."""
    note_service = NoteService(session)
    return await note_service.update_note(note_id, current_user_id, request)


@router.put("/{note_id}/visibility", response_model=OkResponse)
async def change_visibility(
    note_id: UUID,
    request: VisibilityChange,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Switch a note between private, team and public (owner only)."""
    visibility_service = VisibilityService(session)
    slug = await visibility_service.change_visibility(
        note_id, current_user_id, request.mode, request.team_user_id
    )
    return OkResponse(slug=slug)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note with its comments and sharing rows."""
    note_service = NoteService(session)
    await note_service.delete_note(note_id, current_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{note_id}/comments", response_model=List[CommentResponse])
async def list_comments(
    note_id: UUID,
    current_user_id: Optional[UUID] = Depends(get_optional_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List comments on a note, newest first."""
    comment_service = CommentService(session)
    return await comment_service.list_comments(note_id, current_user_id)


@router.post(
    "/{note_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    note_id: UUID,
    request: CommentCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Comment on a note the user can see."""
    comment_service = CommentService(session)
    return await comment_service.add_comment(note_id, current_user_id, request)
