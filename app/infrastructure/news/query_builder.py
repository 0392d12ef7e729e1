"""
Translation of validated listing parameters into SQLAlchemy statements.

Sort names are resolved to column objects through fixed lookup tables,
so only columns known here can ever appear in an ORDER BY clause.
Equal primary sort keys are broken by the row identifier ascending to
keep repeated listings identical.
"""

from typing import Optional

from sqlalchemy import Select, func, select
from sqlalchemy.sql.elements import ColumnElement

from app.domain.news.errors import BadRequestError
from app.domain.news.validation import ListQuery, SortOrder
from app.infrastructure.news.tables import articles, comments

comment_count = func.count(comments.c.comments_id).label("comment_count")

ARTICLE_SORT_EXPRESSIONS: dict[str, ColumnElement] = {
    "created_at": articles.c.created_at,
    "votes": articles.c.votes,
    "title": articles.c.title,
    "author": articles.c.author,
    "topic": articles.c.topic,
    "article_id": articles.c.article_id,
    "comment_count": comment_count,
}

COMMENT_SORT_EXPRESSIONS: dict[str, ColumnElement] = {
    "created_at": comments.c.created_at,
    "votes": comments.c.votes,
    "author": comments.c.author,
}


def _ordering(
    query: ListQuery, expressions: dict[str, ColumnElement], tie_breaker: ColumnElement
) -> list[ColumnElement]:
    try:
        column = expressions[query.sort_by]
    except KeyError:
        raise BadRequestError("sort_by", query.sort_by) from None
    primary = column.asc() if query.order is SortOrder.ASC else column.desc()
    return [primary, tie_breaker.asc()]


def articles_with_comment_count() -> Select:
    """Return a SELECT of every article column plus its comment_count.

    The outer join keeps articles that have no comments (count 0).
    """
    return (
        select(articles, comment_count)
        .select_from(
            articles.outerjoin(comments, comments.c.article_id == articles.c.article_id)
        )
        .group_by(articles.c.article_id)
    )


def build_article_list_query(
    query: ListQuery,
    author: Optional[str] = None,
    topic: Optional[str] = None,
) -> Select:
    """Build the article listing statement.

    Args:
        query: Validated sort/order/limit parameters.
        author: Exact-match author filter, AND-combined with topic.
        topic: Exact-match topic filter.

    Returns:
        A SELECT over articles with comment_count, filtered, ordered and limited.

    Raises:
        BadRequestError: If query.sort_by has no known article column.
    """
    statement = articles_with_comment_count()
    if author is not None:
        statement = statement.where(articles.c.author == author)
    if topic is not None:
        statement = statement.where(articles.c.topic == topic)

    statement = statement.order_by(
        *_ordering(query, ARTICLE_SORT_EXPRESSIONS, articles.c.article_id)
    )
    if query.limit is not None:
        statement = statement.limit(query.limit)
    return statement


def build_article_detail_query(article_id: int) -> Select:
    """Build the single-article statement, including comment_count."""
    return articles_with_comment_count().where(articles.c.article_id == article_id)


def build_comment_list_query(article_id: int, query: ListQuery) -> Select:
    """Build the statement listing one article's comments.

    Raises:
        BadRequestError: If query.sort_by has no known comment column.
    """
    statement = (
        select(comments)
        .where(comments.c.article_id == article_id)
        .order_by(*_ordering(query, COMMENT_SORT_EXPRESSIONS, comments.c.comments_id))
    )
    if query.limit is not None:
        statement = statement.limit(query.limit)
    return statement
