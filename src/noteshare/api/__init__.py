"""API routers for NoteShare."""

from .auth import router as auth_router
from .health import router as health_router
from .notes import router as notes_router
from .public import router as public_router
from .users import router as users_router

__all__ = ["auth_router", "notes_router", "users_router", "public_router", "health_router"]
