"""Authentication service implementation."""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import blacklist_token, create_access_token, hash_password, verify_password
from ...security.password import needs_update
from ..exceptions import InvalidInput, NotFound, Unauthenticated
from ..models.user import User
from ..repositories.refresh_token_repository import RefreshTokenRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import (
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from .interfaces import IAuthService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.token_repo = RefreshTokenRepository(session)
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> UserResponse:
        """Register new user."""
        if await self.user_repo.is_email_taken(request.email):
            raise InvalidInput("Email already registered")

        user = await self.user_repo.create_user(
            {
                "email": request.email,
                "name": request.name,
                "password_hash": hash_password(request.password),
                "is_active": True,
            }
        )
        logger.info("User registered", extra={"user_id": str(user.id)})
        return UserResponse.model_validate(user)

    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return JWT tokens."""
        user = await self.user_repo.get_by_email(request.email)
        if not user or not user.can_login():
            raise Unauthenticated("Invalid credentials")

        if not verify_password(request.password, user.password_hash):
            logger.warning("Failed login attempt", extra={"user_id": str(user.id)})
            raise Unauthenticated("Invalid credentials")

        # upgrade hashes made with deprecated settings while we have the plain password
        if needs_update(user.password_hash):
            user = await self.user_repo.update_user(
                user.id, {"password_hash": hash_password(request.password)}
            )

        return await self._issue_tokens(user)

    async def refresh_token(self, request: RefreshTokenRequest) -> TokenResponse:
        """Rotate a refresh token and issue a new access token."""
        token_obj = await self.token_repo.get_by_token(request.refresh_token)
        if not token_obj or not token_obj.is_valid:
            raise Unauthenticated("Invalid refresh token")

        user = await self.user_repo.get_by_id(token_obj.user_id)
        if not user or not user.can_login():
            raise Unauthenticated("User account inactive")

        await self.token_repo.delete_token(request.refresh_token)
        return await self._issue_tokens(user)

    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFound("User not found")
        return UserResponse.model_validate(user)

    async def logout_user(self, user_id: UUID, access_token: str) -> bool:
        """Blacklist the access token and revoke every refresh token of the user."""
        try:
            await blacklist_token(access_token)
        except Exception as e:
            # Redis being down must not block logout
            logger.warning(f"Failed to blacklist token in Redis: {e}")

        deleted_count = await self.token_repo.delete_user_tokens(user_id)
        logger.info("User logged out", extra={"user_id": str(user_id)})
        return deleted_count > 0

    async def _issue_tokens(self, user: User) -> TokenResponse:
        access_token = create_access_token(data={"sub": str(user.id)})
        refresh = await self.token_repo.create_token(
            user.id, expires_days=self.settings.refresh_token_expire_days
        )
        return TokenResponse(
            access_token=access_token,
            refresh_token=refresh.token,
            token_type="bearer",
            expires_in=self.settings.access_token_expire_minutes * 60,
            user=UserResponse.model_validate(user),
        )
