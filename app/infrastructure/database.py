"""
Async database engine and session factory.

One AsyncEngine (and its connection pool) exists per application
instance. It is built during the FastAPI lifespan and handed to
repositories through per-request sessions; nothing else holds a
connection.
"""

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import Settings

logger = logging.getLogger(__name__)


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the async engine described by the application settings.

    Args:
        settings: Loaded application settings.

    Returns:
        An AsyncEngine; no connection is opened until first use.
    """
    url = settings.get_database_url()
    options: dict[str, object] = {"echo": settings.db_echo}
    if url.startswith("postgresql"):
        options.update(pool_size=settings.db_pool_size, pool_pre_ping=True)

    engine = create_async_engine(url, **options)
    configure_engine(engine)
    logger.info("Database engine created for dialect %s", engine.dialect.name)
    return engine


def configure_engine(engine: AsyncEngine) -> AsyncEngine:
    """Attach connection event listeners to an engine.

    SQLite connections get foreign key enforcement switched on, which
    SQLite leaves off by default.
    """
    is_sqlite = engine.dialect.name == "sqlite"

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        if is_sqlite:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
        logger.debug("Database connection established")

    @event.listens_for(engine.sync_engine, "close")
    def _on_close(dbapi_connection, connection_record):
        logger.debug("Database connection closed")

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Return a factory producing one AsyncSession per request."""
    return async_sessionmaker(engine, expire_on_commit=False)
