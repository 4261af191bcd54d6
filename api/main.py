"""
FastAPI Application - Factory Issue Dashboard API
"""
import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from config import settings
from database import init_engine, close_engine
from database.init import run_migrations
from processor.ranking import TTLCache
from utils import logger, init_logging
from .routes import router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    init_logging(app_name="api")
    logger.info("Starting API server")

    try:
        # Alembic drives its own event loop, keep it off ours
        await asyncio.to_thread(run_migrations)
    except Exception as e:
        logger.error(f"Migration failed: {e}")
        # Don't raise - migrations may have already been applied

    await init_engine()
    yield
    logger.info("Shutting down API server")
    await close_engine()


def create_app() -> FastAPI:
    """Build the application with its middleware, routes and cache."""
    app = FastAPI(
        title="Factory Issue Dashboard",
        description="Rankings and statistics for the factory issue tracker",
        version="1.0.0",
        lifespan=lifespan
    )

    app.state.commenter_cache = TTLCache(ttl_seconds=settings.COMMENTER_CACHE_TTL_SECONDS)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    # Same secret and cookie name as the login service that issues sessions
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET_KEY,
        session_cookie=settings.SESSION_COOKIE_NAME,
    )

    app.include_router(router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "name": "Factory Issue Dashboard",
            "version": "1.0.0",
            "status": "running"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT)
