"""
Pydantic schemas for news API request/response validation.

These schemas enforce input validation and define the API contract.
Create payloads declare every required field; an absent or empty field
on a POST body is reported as MISSING INFO by the error handlers.
No business logic belongs here.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_serializer


def format_timestamp(value: datetime) -> str:
    """Render a timestamp as UTC ISO-8601 with milliseconds, e.g. 2018-11-15T12:21:54.000Z.

    Naive values (SQLite returns these) are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ------------------------------------------------------------------
# Requests
# ------------------------------------------------------------------


class CreateTopicRequest(BaseModel):
    """Request schema for POST /api/topics."""

    slug: str = Field(..., min_length=1, description="Unique topic identifier")
    description: str = Field(..., min_length=1)


class CreateUserRequest(BaseModel):
    """Request schema for POST /api/users."""

    username: str = Field(..., min_length=1, description="Globally unique username")
    name: str = Field(..., min_length=1)
    avatar_url: str = Field(..., min_length=1, description="URI of the user's avatar")


class CreateArticleRequest(BaseModel):
    """Request schema for POST /api/articles.

    Attributes:
        title: Headline of the article.
        topic: Slug of the topic the article is filed under.
        author: Username of the author.
        body: Article text.
        created_at: Publication timestamp (ISO-8601).
    """

    title: str = Field(..., min_length=1)
    topic: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    created_at: datetime


class CreateCommentRequest(BaseModel):
    """Request schema for POST /api/articles/{article_id}."""

    author: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)


class VoteRequest(BaseModel):
    """Request schema for PATCH on articles and comments.

    inc_votes must be a JSON integer; strings such as "10" are rejected.
    """

    inc_votes: StrictInt = Field(..., description="Signed vote delta")


# ------------------------------------------------------------------
# Responses
# ------------------------------------------------------------------


class _Item(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class TopicItem(_Item):
    """A single topic in a response."""

    slug: str
    description: str


class UserItem(_Item):
    """A single user in a response."""

    username: str
    name: str
    avatar_url: str


class _TimestampedItem(_Item):
    created_at: datetime

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return format_timestamp(value)


class ArticleItem(_TimestampedItem):
    """An article as returned by listings and writes (no comment_count)."""

    article_id: int
    title: str
    topic: str
    author: str
    body: str
    votes: int


class ArticleWithCountItem(ArticleItem):
    """An article as returned by the single fetch, with its comment count.

    comment_count is emitted as a string ("13") to stay wire-compatible
    with existing clients.
    """

    comment_count: int

    @field_serializer("comment_count")
    def serialize_comment_count(self, value: int) -> str:
        return str(value)


class CommentItem(_TimestampedItem):
    """A single comment in a response."""

    comments_id: int
    author: str
    article_id: int
    votes: int
    body: str


class TopicsResponse(BaseModel):
    """Response schema for GET /api/topics."""

    topics: list[TopicItem]


class UsersResponse(BaseModel):
    """Response schema for GET /api/users."""

    users: list[UserItem]


class UserResponse(BaseModel):
    """Response schema for a single user, wrapped in a one-element list."""

    user: list[UserItem]


class ArticlesResponse(BaseModel):
    """Response schema for GET /api/articles.

    Listing items leave out comment_count; it is only returned by the
    single-article fetch, even though listings can be sorted by it.
    """

    articles: list[ArticleItem]


class ArticleDetailResponse(BaseModel):
    """Response schema for GET /api/articles/{article_id}."""

    article: list[ArticleWithCountItem]


class ArticleResponse(BaseModel):
    """Response schema for PATCH /api/articles/{article_id}."""

    article: list[ArticleItem]


class CommentsResponse(BaseModel):
    """Response schema for GET /api/articles/{article_id}/comments."""

    comments: list[CommentItem]


class NewCommentResponse(BaseModel):
    """Response schema for POST /api/articles/{article_id}."""

    newComment: list[CommentItem]


class CommentResponse(BaseModel):
    """Response schema for PATCH /api/comments/{comment_id}."""

    comment: list[CommentItem]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    msg: str
