"""
Adapter: Comment repository.

Implements CommentRepository port on the comments table.
"""

from typing import Optional

from sqlalchemy import delete, insert, update

from app.domain.news.entities import Comment, NewComment
from app.domain.news.ports import CommentRepository
from app.domain.news.validation import ListQuery
from app.infrastructure.news.query_builder import build_comment_list_query
from app.infrastructure.news.sql_repository import SqlRepository
from app.infrastructure.news.tables import comments


def _to_comment(row) -> Comment:
    return Comment(
        comments_id=row["comments_id"],
        author=row["author"],
        article_id=row["article_id"],
        votes=row["votes"],
        created_at=row["created_at"],
        body=row["body"],
    )


class CommentRepositoryAdapter(SqlRepository, CommentRepository):
    """Reads and writes comments through an AsyncSession."""

    resource = "comment"

    async def list_for_article(self, article_id: int, query: ListQuery) -> list[Comment]:
        result = await self._read(
            build_comment_list_query(article_id, query), identifier=article_id
        )
        return [_to_comment(row) for row in result.mappings()]

    async def create(self, comment: NewComment) -> Comment:
        statement = (
            insert(comments)
            .values(article_id=comment.article_id, author=comment.author, body=comment.body)
            .returning(comments)
        )
        async with self._transaction(identifier=comment.article_id) as session:
            row = (await session.execute(statement)).mappings().one()
        return _to_comment(row)

    async def increment_votes(self, comment_id: int, delta: int) -> Optional[Comment]:
        statement = (
            update(comments)
            .where(comments.c.comments_id == comment_id)
            .values(votes=comments.c.votes + delta)
            .returning(comments)
        )
        async with self._transaction(identifier=comment_id) as session:
            row = (await session.execute(statement)).mappings().first()
        return _to_comment(row) if row is not None else None

    async def delete_by_id(self, comment_id: int) -> bool:
        statement = (
            delete(comments)
            .where(comments.c.comments_id == comment_id)
            .returning(comments.c.comments_id)
        )
        async with self._transaction(identifier=comment_id) as session:
            found = (await session.execute(statement)).first() is not None
        return found
