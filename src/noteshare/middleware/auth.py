"""Authentication dependencies."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.exceptions import Unauthenticated
from ..security import get_user_id_from_token


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    With ``required=False`` a request without an Authorization header resolves
    to ``None``; a header carrying a bad token is still rejected.
    """

    def __init__(self, required: bool = True):
        super().__init__(auto_error=False)
        self.required = required

    async def __call__(self, request: Request) -> Optional[UUID]:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials:
            if request.headers.get("Authorization"):
                raise Unauthenticated("Invalid authentication scheme")
            if self.required:
                raise Unauthenticated("Not authenticated")
            return None

        user_id = await get_user_id_from_token(credentials.credentials)
        if not user_id:
            raise Unauthenticated("Invalid token or expired token")
        return user_id


# Dependency for getting current user ID from JWT
async def get_current_user_id(user_id: UUID = Depends(JWTBearer())) -> UUID:
    """Get current authenticated user ID."""
    return user_id


async def get_optional_user_id(
    user_id: Optional[UUID] = Depends(JWTBearer(required=False)),
) -> Optional[UUID]:
    """Current user ID, or None for anonymous requests."""
    return user_id


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(HTTPBearer(auto_error=False)),
) -> Optional[str]:
    """Raw access token of the request, if any."""
    return credentials.credentials if credentials else None
