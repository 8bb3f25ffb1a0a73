"""Authentication API endpoints."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import (
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_bearer_token, get_current_user_id

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, session: AsyncSession = Depends(get_db_session)):
    """Register a new user."""
    auth_service = AuthService(session)
    return await auth_service.register_user(request)


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Login user and get JWT tokens."""
    auth_service = AuthService(session)
    return await auth_service.authenticate_user(request)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    request: RefreshTokenRequest, session: AsyncSession = Depends(get_db_session)
):
    """Refresh JWT token using refresh token."""
    auth_service = AuthService(session)
    return await auth_service.refresh_token(request)


@router.get("/me", response_model=UserResponse)
async def get_current_user(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get current user profile."""
    auth_service = AuthService(session)
    return await auth_service.get_current_user(current_user_id)


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(
    current_user_id: UUID = Depends(get_current_user_id),
    access_token: Optional[str] = Depends(get_bearer_token),
    session: AsyncSession = Depends(get_db_session),
):
    """Logout user (blacklist the access token, revoke all refresh tokens)."""
    auth_service = AuthService(session)
    success = await auth_service.logout_user(current_user_id, access_token or "")
    if success:
        return {"message": "Logged out successfully"}
    return {"message": "No active sessions found"}
