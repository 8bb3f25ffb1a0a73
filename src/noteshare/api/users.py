"""User lookup API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.users import UserSummary
from ..core.services import UserService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/search", response_model=List[UserSummary])
async def search_users(
    q: str = Query("", description="Substring of the user's name or email"),
    limit: Optional[int] = Query(None, description="Maximum results (capped at 50)"),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Find users to invite as collaborators."""
    user_service = UserService(session)
    return await user_service.search_users(q, limit)
