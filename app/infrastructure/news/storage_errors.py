"""
Reclassification of raw storage-engine errors into domain errors.

This is the single place where driver exceptions are inspected.
PostgreSQL reports failures through SQLSTATE codes; both asyncpg
(`sqlstate`) and psycopg (`pgcode`) expose them on the wrapped
DBAPI exception. SQLite constraint names are folded onto the same
codes. Anything not listed here is left to propagate and ends up as a
generic internal error.
"""

import logging
from typing import Optional

from sqlalchemy.exc import DBAPIError

from app.domain.news.errors import (
    BadRequestError,
    MissingInfoError,
    NewsDomainError,
    ResourceNotFoundError,
    UsernameAlreadyExistsError,
)

logger = logging.getLogger(__name__)

NUMERIC_VALUE_OUT_OF_RANGE = "22003"
INVALID_TEXT_REPRESENTATION = "22P02"
NOT_NULL_VIOLATION = "23502"
FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"

# SQLite (used for local runs and tests) reports extended result codes
# instead of SQLSTATE; these are the constraint failures that matter here.
SQLITE_ERROR_CODES = {
    "SQLITE_CONSTRAINT_NOTNULL": NOT_NULL_VIOLATION,
    "SQLITE_CONSTRAINT_FOREIGNKEY": FOREIGN_KEY_VIOLATION,
    "SQLITE_CONSTRAINT_UNIQUE": UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_PRIMARYKEY": UNIQUE_VIOLATION,
}


def sqlstate_of(exc: DBAPIError) -> Optional[str]:
    """Return the SQLSTATE code carried by a wrapped driver error, if any."""
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code is None:
        code = SQLITE_ERROR_CODES.get(getattr(orig, "sqlite_errorname", None))
    return code


def translate_storage_error(
    exc: DBAPIError, resource: str, identifier: object = None
) -> Optional[NewsDomainError]:
    """Map a storage failure to the matching domain error.

    Args:
        exc: The SQLAlchemy-wrapped driver error.
        resource: Name of the entity the failing statement touched.
        identifier: Key of the row involved, used in the error detail.

    Returns:
        A domain error to raise in place of exc, or None when the
        failure is unclassified and must propagate unchanged.
    """
    code = sqlstate_of(exc)
    logger.debug("Storage error on %s (sqlstate=%s)", resource, code)

    if code in (INVALID_TEXT_REPRESENTATION, NUMERIC_VALUE_OUT_OF_RANGE):
        return BadRequestError(resource, identifier)
    if code == NOT_NULL_VIOLATION:
        # SQLAlchemy's asyncpg adapter keeps the driver exception as __cause__.
        column = (
            getattr(exc.orig, "column_name", None)
            or getattr(exc.orig.__cause__, "column_name", None)
            or "unknown"
        )
        return MissingInfoError(resource, [column])
    if code == FOREIGN_KEY_VIOLATION:
        return ResourceNotFoundError(f"{resource} reference", identifier)
    if code == UNIQUE_VIOLATION:
        if resource == "user":
            return UsernameAlreadyExistsError(str(identifier))
        return BadRequestError(resource, identifier)
    return None
