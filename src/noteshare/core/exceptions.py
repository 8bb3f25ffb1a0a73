"""Typed failures raised by the service layer.

They are ``HTTPException`` subclasses so FastAPI renders them without extra
handlers, the same way the services always raised ``HTTPException``.
"""

from typing import Optional

from fastapi import HTTPException, status


class NoteShareError(HTTPException):
    """Base class for service errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal error"

    def __init__(self, detail: Optional[str] = None, headers: Optional[dict] = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail or self.default_detail,
            headers=headers,
        )


class Unauthenticated(NoteShareError):
    """No caller identity where one is required."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class Forbidden(NoteShareError):
    """Caller is known but lacks the required role."""

    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Forbidden"


class NotFound(NoteShareError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class InvalidInput(NoteShareError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid input"
