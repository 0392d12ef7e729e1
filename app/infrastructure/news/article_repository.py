"""
Adapter: Article repository.

Implements ArticleRepository port on the articles table.
Listings and single fetches join comments for comment_count; vote
updates are a single UPDATE ... RETURNING so the increment happens in
the database; deletes remove the article's comments first, in the same
transaction.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, select, update

from app.domain.news.entities import Article, NewArticle
from app.domain.news.ports import ArticleRepository
from app.domain.news.validation import ListQuery
from app.infrastructure.news.query_builder import (
    build_article_detail_query,
    build_article_list_query,
)
from app.infrastructure.news.sql_repository import SqlRepository
from app.infrastructure.news.tables import articles, comments

logger = logging.getLogger(__name__)


def _to_article(row) -> Article:
    return Article(
        article_id=row["article_id"],
        title=row["title"],
        topic=row["topic"],
        author=row["author"],
        body=row["body"],
        created_at=row["created_at"],
        votes=row["votes"],
        comment_count=row.get("comment_count"),
    )


class ArticleRepositoryAdapter(SqlRepository, ArticleRepository):
    """Reads and writes articles through an AsyncSession."""

    resource = "article"

    async def get_by_id(self, article_id: int) -> Optional[Article]:
        result = await self._read(build_article_detail_query(article_id), identifier=article_id)
        row = result.mappings().first()
        return _to_article(row) if row is not None else None

    async def exists(self, article_id: int) -> bool:
        statement = select(articles.c.article_id).where(articles.c.article_id == article_id)
        result = await self._read(statement, identifier=article_id)
        return result.first() is not None

    async def list_filtered(
        self,
        query: ListQuery,
        author: Optional[str] = None,
        topic: Optional[str] = None,
    ) -> list[Article]:
        result = await self._read(build_article_list_query(query, author=author, topic=topic))
        found = [_to_article(row) for row in result.mappings()]
        logger.debug("Article listing returned %d rows.", len(found))
        return found

    async def create(self, article: NewArticle) -> Article:
        statement = (
            insert(articles)
            .values(
                title=article.title,
                topic=article.topic,
                author=article.author,
                body=article.body,
                created_at=article.created_at,
            )
            .returning(articles)
        )
        async with self._transaction(identifier=article.author) as session:
            row = (await session.execute(statement)).mappings().one()
        return _to_article(row)

    async def increment_votes(self, article_id: int, delta: int) -> Optional[Article]:
        statement = (
            update(articles)
            .where(articles.c.article_id == article_id)
            .values(votes=articles.c.votes + delta)
            .returning(articles)
        )
        async with self._transaction(identifier=article_id) as session:
            row = (await session.execute(statement)).mappings().first()
        return _to_article(row) if row is not None else None

    async def delete_by_id(self, article_id: int) -> bool:
        async with self._transaction(identifier=article_id) as session:
            removed_comments = await session.execute(
                delete(comments).where(comments.c.article_id == article_id)
            )
            deleted = await session.execute(
                delete(articles)
                .where(articles.c.article_id == article_id)
                .returning(articles.c.article_id)
            )
            found = deleted.first() is not None
        if found:
            logger.debug(
                "Cascade removed %d comments of article %d",
                removed_comments.rowcount,
                article_id,
            )
        return found
