"""
Domain entities for the news bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Topic:
    """A subject articles are filed under, identified by its slug."""

    slug: str
    description: str


@dataclass(frozen=True)
class User:
    """A registered author, identified by a globally unique username."""

    username: str
    name: str
    avatar_url: str


@dataclass(frozen=True)
class NewArticle:
    """An article that has not been persisted yet."""

    title: str
    topic: str
    author: str
    body: str
    created_at: datetime


@dataclass(frozen=True)
class Article:
    """A persisted article.

    comment_count is only populated by reads that join the comments
    table (single fetch and listings); it is None on write results.
    """

    article_id: int
    title: str
    topic: str
    author: str
    body: str
    created_at: datetime
    votes: int = 0
    comment_count: Optional[int] = None


@dataclass(frozen=True)
class NewComment:
    """A comment about to be attached to an existing article."""

    article_id: int
    author: str
    body: str


@dataclass(frozen=True)
class Comment:
    """A persisted comment, owned by the article it references."""

    comments_id: int
    author: str
    article_id: int
    votes: int
    created_at: datetime
    body: str
