"""
FastAPI Application Factory

This module builds the FastAPI application and configures:
- API routes
- Middleware (request logging)
- Plain-text error responses
- Startup: connection pool, migrations; shutdown: pool disposal

Design Decisions:
- Settings are passed into create_app and stored on app.state; handlers
  read them through dependencies, never through a mutable global
- Migrations finish before the application starts serving requests
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shorturl import __version__
from shorturl.api import endpoints
from shorturl.core.logging_config import setup_logging
from shorturl.core.setting import Settings, get_settings
from shorturl.db.migrate import run_migrations_async
from shorturl.db.session import create_engine, create_session_maker
from shorturl.middleware.logging import add_logging_middleware
from shorturl.services.id_generator import IdGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: build the pooled engine, apply migrations, then serve.
    Shutdown: dispose of the engine and its pooled connections.
    """
    settings: Settings = app.state.settings

    engine = create_engine(settings)
    try:
        if settings.RUN_MIGRATIONS:
            # Runs on a connection of the app engine, so in-memory SQLite
            # databases are migrated where requests will read them
            await run_migrations_async(engine)

        app.state.engine = engine
        app.state.session_maker = create_session_maker(engine)

        logger.info(f"ShortURL service has been run on {settings.HOST}:{settings.PORT}")
        yield
    finally:
        await engine.dispose()
        logger.info("ShortURL service stopped")


async def plain_text_http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> PlainTextResponse:
    """Render every HTTP error as a plain-text body."""
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=exc.headers
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Settings to run with (defaults to environment / .env)

    Returns:
        Configured FastAPI instance

    Raises:
        pydantic.ValidationError: If settings are not given and DATABASE_URL is missing
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    # Only the two service routes are exposed; documentation routes are
    # disabled so they cannot shadow short ids
    app = FastAPI(
        title="ShortURL Service",
        description="A minimal URL shortening service",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.id_generator = IdGenerator(settings.ID_ALPHABET, settings.ID_LENGTH)

    app.add_exception_handler(StarletteHTTPException, plain_text_http_exception_handler)

    add_logging_middleware(app)

    app.include_router(endpoints.router, tags=["ShortURL"])

    return app
