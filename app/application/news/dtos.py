"""
Data Transfer Objects for the news application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior. Identifiers and listing
parameters arrive as raw strings; use cases validate them.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CreateTopicCommand:
    """Input DTO for creating a topic."""

    slug: Optional[str]
    description: Optional[str]


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for registering a user."""

    username: Optional[str]
    name: Optional[str]
    avatar_url: Optional[str]


@dataclass(frozen=True)
class GetUserQuery:
    """Input DTO for looking up a single user."""

    username: str


@dataclass(frozen=True)
class ListArticlesQuery:
    """Input DTO for listing articles.

    Attributes:
        sort_by: Raw column name to sort by.
        order: Raw sort direction ("asc" or "desc").
        author: Optional exact-match author filter.
        topic: Optional exact-match topic filter.
        limit: Raw maximum row count.
    """

    sort_by: Optional[str] = None
    order: Optional[str] = None
    author: Optional[str] = None
    topic: Optional[str] = None
    limit: Optional[str] = None


@dataclass(frozen=True)
class GetArticleQuery:
    """Input DTO for fetching one article by its raw path id."""

    article_id: str


@dataclass(frozen=True)
class CreateArticleCommand:
    """Input DTO for creating an article."""

    title: Optional[str]
    topic: Optional[str]
    author: Optional[str]
    body: Optional[str]
    created_at: Optional[datetime]


@dataclass(frozen=True)
class UpdateVotesCommand:
    """Input DTO for applying a signed vote delta to an article or comment.

    Attributes:
        target_id: Raw path id of the article or comment.
        inc_votes: Signed integer to add to the vote counter.
    """

    target_id: str
    inc_votes: object


@dataclass(frozen=True)
class DeleteCommand:
    """Input DTO for deleting an article or comment by raw path id."""

    target_id: str


@dataclass(frozen=True)
class ListCommentsQuery:
    """Input DTO for listing the comments of an article."""

    article_id: str
    sort_by: Optional[str] = None
    order: Optional[str] = None
    limit: Optional[str] = None


@dataclass(frozen=True)
class CreateCommentCommand:
    """Input DTO for posting a comment under an article."""

    article_id: str
    author: Optional[str]
    body: Optional[str]
