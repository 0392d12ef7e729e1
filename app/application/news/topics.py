"""
Use cases: List and create topics.

Input: none / CreateTopicCommand (slug, description)
Output: list[Topic] / Topic
Side effects: CreateTopicUseCase inserts one row.
Failure cases: MissingInfoError.
"""

import logging

from app.application.news.dtos import CreateTopicCommand
from app.domain.news.entities import Topic
from app.domain.news.ports import TopicRepository
from app.domain.news.validation import require_fields

logger = logging.getLogger(__name__)


class ListTopicsUseCase:
    """Returns every topic."""

    def __init__(self, topic_repo: TopicRepository) -> None:
        self._topic_repo = topic_repo

    async def execute(self) -> list[Topic]:
        topics = await self._topic_repo.list_all()
        logger.info("Listed %d topics.", len(topics))
        return topics


class CreateTopicUseCase:
    """Validates and stores a new topic."""

    def __init__(self, topic_repo: TopicRepository) -> None:
        self._topic_repo = topic_repo

    async def execute(self, command: CreateTopicCommand) -> Topic:
        """Run the create topic use case.

        Raises:
            MissingInfoError: If slug or description is absent or blank.
        """
        require_fields("topic", slug=command.slug, description=command.description)
        logger.info("Creating topic slug=%s", command.slug)
        return await self._topic_repo.create(
            Topic(slug=command.slug, description=command.description)
        )
