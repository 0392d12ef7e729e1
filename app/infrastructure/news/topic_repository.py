"""
Adapter: Topic repository.

Implements TopicRepository port on the topics table.
"""

from sqlalchemy import insert, select

from app.domain.news.entities import Topic
from app.domain.news.ports import TopicRepository
from app.infrastructure.news.sql_repository import SqlRepository
from app.infrastructure.news.tables import topics


def _to_topic(row) -> Topic:
    return Topic(slug=row["slug"], description=row["description"])


class TopicRepositoryAdapter(SqlRepository, TopicRepository):
    """Reads and writes topics through an AsyncSession."""

    resource = "topic"

    async def list_all(self) -> list[Topic]:
        result = await self._read(select(topics).order_by(topics.c.slug))
        return [_to_topic(row) for row in result.mappings()]

    async def create(self, topic: Topic) -> Topic:
        statement = (
            insert(topics)
            .values(slug=topic.slug, description=topic.description)
            .returning(topics)
        )
        async with self._transaction(identifier=topic.slug) as session:
            row = (await session.execute(statement)).mappings().one()
        return _to_topic(row)
