"""
Docshelf Application Entry Point

FastAPI application setup with all routers and middleware.

Surfaces:
- Reader API (/api): public collections, knowledge bases and search
- Admin API (/api/admin): authenticated content management
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docshelf import __version__
from docshelf.admin.api.router import router as admin_router
from docshelf.cache.content_cache import ContentCache
from docshelf.cache.redis_client import close_redis, init_redis
from docshelf.config.settings import settings
from docshelf.core.logging import logger
from docshelf.db.migrations import run_migrations
from docshelf.db.session import close_db, init_db
from docshelf.middleware.error_handler import setup_exception_handlers
from docshelf.middleware.logging import LoggingMiddleware
from docshelf.reader.api.router import router as reader_router
from docshelf.schemas.common import HealthResponse


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Connect the database, migrate, and attach the content cache to app.state."""
    await init_db()
    await run_migrations()
    redis_client = await init_redis()
    app.state.content_cache = ContentCache(client=redis_client)
    logger.info(
        "Docshelf started",
        env=settings.APP_ENV,
        version=__version__,
        cache_enabled=app.state.content_cache.enabled,
    )

    yield

    await close_redis(redis_client)
    await close_db()
    logger.info("Docshelf stopped")


def create_application() -> FastAPI:
    """Create and configure the FastAPI application."""
    application = FastAPI(
        title=settings.APP_NAME,
        description=(
            "Documentation and knowledge-base service.\n\n"
            "Provides:\n"
            "- **Reader**: collections, categories and nested pages; knowledge bases "
            "and articles; search with excerpts\n"
            "- **Admin**: authenticated management of all content"
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS Middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom Middleware
    application.add_middleware(LoggingMiddleware)

    # Exception Handlers
    setup_exception_handlers(application)

    # Routers
    application.include_router(admin_router, prefix="/api/admin")
    application.include_router(reader_router, prefix="/api")

    # Health Check
    @application.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(service=settings.APP_NAME)

    return application


app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "docshelf.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )
