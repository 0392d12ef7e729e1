"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health and the news bounded context)
- Error handlers (centralized error-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- The database engine, created in the lifespan

No business logic belongs here.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from app.core.config import settings
from app.infrastructure.database import create_engine_from_settings, create_session_factory
from app.interfaces.health import router as health_router
from app.interfaces.news.router import router as news_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter

logger = logging.getLogger(__name__)


def _bind_engine(app: FastAPI, engine: AsyncEngine) -> None:
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: own the database engine unless one was injected."""
    owns_engine = getattr(app.state, "engine", None) is None
    if owns_engine:
        _bind_engine(app, create_engine_from_settings(settings))
    logger.info("%s %s started", settings.project_name, settings.version)

    yield

    if owns_engine:
        await app.state.engine.dispose()
        app.state.engine = None
        logger.info("Database engine disposed")


def create_app(engine: Optional[AsyncEngine] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        engine: An already configured engine to use instead of the one
            described by settings. The caller keeps ownership of it.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level, sql_echo=settings.db_echo)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    if engine is not None:
        _bind_engine(app, engine)

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api")
    app.include_router(news_router, prefix="/api")

    return app


app = create_app()
