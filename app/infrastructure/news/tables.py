"""
Table definitions for the news schema (SQLAlchemy Core).

These objects are the single source of column names for the query
builder and repositories. They describe an existing schema; creating
or migrating it is outside the application (tests call
metadata.create_all on a throwaway database).
"""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
    text,
)

metadata = MetaData()

topics = Table(
    "topics",
    metadata,
    Column("slug", String, primary_key=True),
    Column("description", String, nullable=False),
)

users = Table(
    "users",
    metadata,
    Column("username", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("avatar_url", String, nullable=False),
)

# topic is a plain column: articles may be filed under a slug that has no topics row.
articles = Table(
    "articles",
    metadata,
    Column("article_id", Integer, primary_key=True, autoincrement=True),
    Column("title", String, nullable=False),
    Column("topic", String, nullable=False),
    Column("author", String, ForeignKey("users.username"), nullable=False),
    Column("body", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("votes", Integer, nullable=False, server_default=text("0")),
)

comments = Table(
    "comments",
    metadata,
    Column("comments_id", Integer, primary_key=True, autoincrement=True),
    Column("author", String, ForeignKey("users.username"), nullable=False),
    Column("article_id", Integer, ForeignKey("articles.article_id"), nullable=False, index=True),
    Column("votes", Integer, nullable=False, server_default=text("0")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("body", Text, nullable=False),
)
