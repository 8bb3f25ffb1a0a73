# Main application entry point
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.exceptions import RedisError

from . import __version__
from .api import auth_router, health_router, notes_router, public_router, users_router
from .config import get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.redis_client import get_redis_client
from .database import create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting NoteShare application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    redis_client = get_redis_client()
    try:
        await redis_client.connect()
    except (RedisError, OSError) as e:
        logger.warning(f"Redis connection failed: {e}. Continuing without token blacklist...")

    if settings.create_tables_on_startup:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down NoteShare application")
    await redis_client.disconnect()


app = FastAPI(
    title=settings.app_name,
    description="Collaborative notes with private, team and public sharing",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(public_router, prefix="/api")
app.include_router(health_router, prefix="/api")


@app.get("/")
async def root():
    return {"message": "NoteShare API"}


@app.get("/api/")
async def api_root():
    return {
        "message": "NoteShare API",
        "version": __version__,
        "documentation": {"swagger_ui": "/docs", "redoc": "/redoc", "openapi_json": "/openapi.json"},
        "endpoints": {
            "authentication": "/api/auth/",
            "notes": "/api/notes",
            "users": "/api/users/search",
            "public": "/api/public/{slug}",
            "health": "/api/health/",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("noteshare.main:app", host=settings.host, port=settings.port, reload=settings.reload)
