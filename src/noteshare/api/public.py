"""Public note pages, no authentication."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ErrorResponse
from ..core.schemas.notes import PublicNoteResponse
from ..core.services import NoteService
from ..database import get_db_session

router = APIRouter(prefix="/public", tags=["public"])


@router.get(
    "/{slug}",
    response_model=PublicNoteResponse,
    responses={404: {"model": ErrorResponse, "description": "Unknown slug or note no longer public"}},
)
async def get_public_note(slug: str, session: AsyncSession = Depends(get_db_session)):
    """Read a note through its public link."""
    note_service = NoteService(session)
    return await note_service.get_public_note(slug)
