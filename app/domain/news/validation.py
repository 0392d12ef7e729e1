"""
Validation of untrusted listing, identifier and payload values.

Every value that ends up in a SQL statement's ORDER BY, LIMIT or WHERE
clause passes through here first. Column names are checked against a
fixed allow-list; nothing outside it ever reaches the query builder.
Pure functions only: no IO, no framework imports.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.domain.news.errors import BadRequestError, MissingInfoError

DEFAULT_SORT_COLUMN = "created_at"

ARTICLE_SORT_COLUMNS = frozenset(
    {"created_at", "votes", "title", "author", "topic", "article_id", "comment_count"}
)
COMMENT_SORT_COLUMNS = frozenset({"created_at", "votes", "author"})

# Identifiers, vote counters and row caps are 32-bit signed integers in storage.
MAX_IDENTIFIER = 2**31 - 1
MIN_VOTE_DELTA = -(2**31)
MAX_VOTE_DELTA = 2**31 - 1

_DIGITS = re.compile(r"[0-9]+")


class SortOrder(Enum):
    """Direction of the primary sort key."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class ListQuery:
    """Validated sort/order/limit parameters for a listing.

    Attributes:
        sort_by: A column name taken from the resource's allow-list.
        order: Direction of the primary sort.
        limit: Maximum number of rows, or None for no bound.
    """

    sort_by: str = DEFAULT_SORT_COLUMN
    order: SortOrder = SortOrder.DESC
    limit: Optional[int] = None


def _blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def parse_sort_by(value: Optional[str], allowed: frozenset[str]) -> str:
    """Return the sort column, defaulting to created_at when absent.

    Raises:
        BadRequestError: If the value is not in the allow-list.
    """
    if _blank(value):
        return DEFAULT_SORT_COLUMN
    if value not in allowed:
        raise BadRequestError("sort_by", value)
    return value


def parse_order(value: Optional[str]) -> SortOrder:
    """Return the sort direction (case-insensitive), defaulting to descending.

    Raises:
        BadRequestError: If the value is neither asc nor desc.
    """
    if _blank(value):
        return SortOrder.DESC
    try:
        return SortOrder(value.strip().lower())
    except ValueError:
        raise BadRequestError("order", value) from None


def parse_limit(value: Optional[str]) -> Optional[int]:
    """Return the row cap as a positive integer, or None when absent.

    Raises:
        BadRequestError: If the value is not a positive integer within
            the storage integer range.
    """
    if _blank(value):
        return None
    text = value.strip()
    if not _DIGITS.fullmatch(text) or not 1 <= int(text) <= MAX_IDENTIFIER:
        raise BadRequestError("limit", value)
    return int(text)


def parse_list_query(
    sort_by: Optional[str],
    order: Optional[str],
    limit: Optional[str],
    allowed: frozenset[str],
) -> ListQuery:
    """Validate raw listing parameters against a sortable-column allow-list.

    Args:
        sort_by: Raw sort_by query value.
        order: Raw order query value.
        limit: Raw limit query value.
        allowed: Columns the target listing may be sorted by.

    Returns:
        A ListQuery safe to hand to the query builder.

    Raises:
        BadRequestError: If any of the three values is malformed.
    """
    return ListQuery(
        sort_by=parse_sort_by(sort_by, allowed),
        order=parse_order(order),
        limit=parse_limit(limit),
    )


def parse_identifier(value: object, field: str) -> int:
    """Parse a numeric path identifier before any query is issued.

    Only plain decimal digits within the storage integer range are accepted,
    so "two", "-1", "1.5" and overflowing values fail here rather than in
    the database.

    Raises:
        BadRequestError: If the value is not a well-formed identifier.
    """
    text = str(value).strip()
    if not _DIGITS.fullmatch(text) or int(text) > MAX_IDENTIFIER:
        raise BadRequestError(field, value)
    return int(text)


def require_fields(resource: str, **values: object) -> None:
    """Check that every named field is present and non-empty.

    Raises:
        MissingInfoError: Listing every absent or blank field.
    """
    missing = [
        name
        for name, value in values.items()
        if value is None or (isinstance(value, str) and value.strip() == "")
    ]
    if missing:
        raise MissingInfoError(resource, missing)


def parse_vote_delta(value: object) -> int:
    """Return a signed vote delta.

    Booleans and numeric strings are rejected even though Python would
    happily treat them as integers.

    Raises:
        BadRequestError: If the value is not an integer, or falls outside
            the range a vote counter can be changed by.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadRequestError("inc_votes", value)
    if not MIN_VOTE_DELTA <= value <= MAX_VOTE_DELTA:
        raise BadRequestError("inc_votes", value)
    return value
