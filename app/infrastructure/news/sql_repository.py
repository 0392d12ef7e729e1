"""
Shared plumbing for the SQL repository adapters.

Wraps statement execution on an AsyncSession so that every adapter
reads, commits and translates storage errors the same way.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.engine import Result
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from app.infrastructure.news.storage_errors import translate_storage_error

logger = logging.getLogger(__name__)


class SqlRepository:
    """Base class for adapters backed by one request-scoped AsyncSession.

    Subclasses set `resource` to the entity name used in error details.
    """

    resource = "record"

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _read(self, statement: Executable, identifier: object = None) -> Result:
        """Execute a read-only statement."""
        async with self._translated(identifier):
            return await self._session.execute(statement)

    @asynccontextmanager
    async def _transaction(self, identifier: object = None) -> AsyncIterator[AsyncSession]:
        """Run the enclosed statements as one transaction.

        Commits when the block exits cleanly, rolls back otherwise.
        Rows returned by RETURNING clauses must be fetched inside the block.
        """
        async with self._translated(identifier):
            try:
                yield self._session
            except BaseException:
                await self._session.rollback()
                raise
            await self._session.commit()

    @asynccontextmanager
    async def _translated(self, identifier: object) -> AsyncIterator[None]:
        try:
            yield
        except DBAPIError as exc:
            await self._session.rollback()
            error = translate_storage_error(exc, self.resource, identifier)
            if error is None:
                logger.error("Unclassified storage error on %s: %s", self.resource, type(exc).__name__)
                raise
            raise error from exc
