"""
Use cases: Read, create, vote on and delete articles.

Input: ListArticlesQuery / GetArticleQuery / CreateArticleCommand /
       UpdateVotesCommand / DeleteCommand
Output: list[Article] / Article / None
Side effects: create, vote and delete write to the articles table;
              delete also removes the article's comments.
Failure cases: BadRequestError, ResourceNotFoundError, MissingInfoError.
"""

import logging

from app.application.news.dtos import (
    CreateArticleCommand,
    DeleteCommand,
    GetArticleQuery,
    ListArticlesQuery,
    UpdateVotesCommand,
)
from app.domain.news.entities import Article, NewArticle
from app.domain.news.errors import ResourceNotFoundError
from app.domain.news.ports import ArticleRepository
from app.domain.news.validation import (
    ARTICLE_SORT_COLUMNS,
    parse_identifier,
    parse_list_query,
    parse_vote_delta,
    require_fields,
)

logger = logging.getLogger(__name__)


class ListArticlesUseCase:
    """Orchestrates a filtered, sorted and limited article listing.

    Sort, order and limit are validated against the article allow-list
    before the repository is touched. Author and topic are passed through
    as equality filters with no existence check, so an unknown author
    simply yields an empty list.
    """

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    async def execute(self, query: ListArticlesQuery) -> list[Article]:
        """Run the list articles use case.

        Args:
            query: Raw sort_by, order, author, topic and limit values.

        Returns:
            Matching articles, possibly empty.

        Raises:
            BadRequestError: If sort_by, order or limit is malformed.
        """
        list_query = parse_list_query(
            query.sort_by, query.order, query.limit, ARTICLE_SORT_COLUMNS
        )
        logger.info(
            "Listing articles: sort_by=%s, order=%s, limit=%s, author=%s, topic=%s",
            list_query.sort_by,
            list_query.order.value,
            list_query.limit,
            query.author,
            query.topic,
        )
        return await self._article_repo.list_filtered(
            list_query, author=query.author or None, topic=query.topic or None
        )


class GetArticleUseCase:
    """Fetches one article together with its comment count."""

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    async def execute(self, query: GetArticleQuery) -> Article:
        """Return the article.

        Raises:
            BadRequestError: If the id is malformed.
            ResourceNotFoundError: If no article has this id.
        """
        article_id = parse_identifier(query.article_id, "article_id")
        article = await self._article_repo.get_by_id(article_id)
        if article is None:
            raise ResourceNotFoundError("article", article_id)
        return article


class CreateArticleUseCase:
    """Validates and stores a new article."""

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    async def execute(self, command: CreateArticleCommand) -> Article:
        """Run the create article use case.

        Raises:
            MissingInfoError: If any of title, topic, author, body or
                created_at is absent or blank.
        """
        require_fields(
            "article",
            title=command.title,
            topic=command.topic,
            author=command.author,
            body=command.body,
            created_at=command.created_at,
        )
        logger.info("Creating article by author=%s in topic=%s", command.author, command.topic)
        return await self._article_repo.create(
            NewArticle(
                title=command.title,
                topic=command.topic,
                author=command.author,
                body=command.body,
                created_at=command.created_at,
            )
        )


class VoteOnArticleUseCase:
    """Applies a signed vote delta to an article."""

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    async def execute(self, command: UpdateVotesCommand) -> Article:
        """Run the article vote use case.

        Returns:
            The updated article, without comment_count.

        Raises:
            BadRequestError: If the id or the delta is malformed.
            ResourceNotFoundError: If no article has this id.
        """
        article_id = parse_identifier(command.target_id, "article_id")
        delta = parse_vote_delta(command.inc_votes)

        article = await self._article_repo.increment_votes(article_id, delta)
        if article is None:
            raise ResourceNotFoundError("article", article_id)

        logger.info("Article %d votes changed by %+d to %d", article_id, delta, article.votes)
        return article


class DeleteArticleUseCase:
    """Removes an article and every comment that belongs to it."""

    def __init__(self, article_repo: ArticleRepository) -> None:
        self._article_repo = article_repo

    async def execute(self, command: DeleteCommand) -> None:
        """Run the delete article use case.

        Raises:
            BadRequestError: If the id is malformed.
            ResourceNotFoundError: If no article has this id.
        """
        article_id = parse_identifier(command.target_id, "article_id")
        if not await self._article_repo.delete_by_id(article_id):
            raise ResourceNotFoundError("article", article_id)
        logger.info("Deleted article %d and its comments.", article_id)
