"""
Port interfaces (ABCs) for the news bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.

All operations are coroutines: adapters suspend only while a statement
is in flight on the database connection.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.news.entities import (
    Article,
    Comment,
    NewArticle,
    NewComment,
    Topic,
    User,
)
from app.domain.news.validation import ListQuery


class TopicRepository(ABC):
    """Port for reading and creating topics."""

    @abstractmethod
    async def list_all(self) -> list[Topic]:
        """Return every topic."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, topic: Topic) -> Topic:
        """Persist a topic and return the stored record."""
        raise NotImplementedError


class UserRepository(ABC):
    """Port for reading and creating users."""

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Return every user."""
        raise NotImplementedError

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Return the user with this username, or None."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a user and return the stored record.

        Raises:
            UsernameAlreadyExistsError: If storage reports a duplicate username.
        """
        raise NotImplementedError


class ArticleRepository(ABC):
    """Port for articles and their vote counters."""

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Optional[Article]:
        """Return the article with its comment_count, or None."""
        raise NotImplementedError

    @abstractmethod
    async def exists(self, article_id: int) -> bool:
        """Return True if an article with this id is stored."""
        raise NotImplementedError

    @abstractmethod
    async def list_filtered(
        self,
        query: ListQuery,
        author: Optional[str] = None,
        topic: Optional[str] = None,
    ) -> list[Article]:
        """Return articles filtered by author/topic, sorted and limited.

        Args:
            query: Validated sort/order/limit parameters.
            author: Optional exact-match author filter.
            topic: Optional exact-match topic filter.

        Returns:
            Articles carrying comment_count; empty when nothing matches.
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, article: NewArticle) -> Article:
        """Persist an article and return it with its generated id."""
        raise NotImplementedError

    @abstractmethod
    async def increment_votes(self, article_id: int, delta: int) -> Optional[Article]:
        """Atomically add delta to votes. Return the updated row, or None."""
        raise NotImplementedError

    @abstractmethod
    async def delete_by_id(self, article_id: int) -> bool:
        """Delete the article and all of its comments in one transaction.

        Returns:
            False if no article had this id.
        """
        raise NotImplementedError


class CommentRepository(ABC):
    """Port for comments attached to articles."""

    @abstractmethod
    async def list_for_article(self, article_id: int, query: ListQuery) -> list[Comment]:
        """Return the comments of one article, sorted and limited."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, comment: NewComment) -> Comment:
        """Persist a comment and return it with its generated id."""
        raise NotImplementedError

    @abstractmethod
    async def increment_votes(self, comment_id: int, delta: int) -> Optional[Comment]:
        """Atomically add delta to votes. Return the updated row, or None."""
        raise NotImplementedError

    @abstractmethod
    async def delete_by_id(self, comment_id: int) -> bool:
        """Delete a comment. Return False if no comment had this id."""
        raise NotImplementedError
