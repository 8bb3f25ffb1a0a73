"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, get_bearer_token, get_current_user_id, get_optional_user_id

__all__ = ["get_current_user_id", "get_optional_user_id", "get_bearer_token", "JWTBearer"]
