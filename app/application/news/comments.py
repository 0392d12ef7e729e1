"""
Use cases: List, post, vote on and delete comments.

Input: ListCommentsQuery / CreateCommentCommand / UpdateVotesCommand / DeleteCommand
Output: list[Comment] / Comment / None
Side effects: post, vote and delete write to the comments table.
Failure cases: BadRequestError, ResourceNotFoundError, MissingInfoError.
"""

import logging

from app.application.news.dtos import (
    CreateCommentCommand,
    DeleteCommand,
    ListCommentsQuery,
    UpdateVotesCommand,
)
from app.domain.news.entities import Comment, NewComment
from app.domain.news.errors import ResourceNotFoundError
from app.domain.news.ports import ArticleRepository, CommentRepository
from app.domain.news.validation import (
    COMMENT_SORT_COLUMNS,
    parse_identifier,
    parse_list_query,
    parse_vote_delta,
    require_fields,
)

logger = logging.getLogger(__name__)


class ListArticleCommentsUseCase:
    """Lists the comments of one article.

    Unlike the article listing, an unknown parent article is an error:
    an empty list is only returned for an article with no comments.
    """

    def __init__(
        self,
        article_repo: ArticleRepository,
        comment_repo: CommentRepository,
    ) -> None:
        self._article_repo = article_repo
        self._comment_repo = comment_repo

    async def execute(self, query: ListCommentsQuery) -> list[Comment]:
        """Run the list comments use case.

        Args:
            query: Raw article id plus sort_by, order and limit values.

        Returns:
            The article's comments, possibly empty.

        Raises:
            BadRequestError: If the id, sort_by, order or limit is malformed.
            ResourceNotFoundError: If the article does not exist.
        """
        article_id = parse_identifier(query.article_id, "article_id")
        list_query = parse_list_query(
            query.sort_by, query.order, query.limit, COMMENT_SORT_COLUMNS
        )

        if not await self._article_repo.exists(article_id):
            raise ResourceNotFoundError("article", article_id)

        comments = await self._comment_repo.list_for_article(article_id, list_query)
        logger.info("Listed %d comments for article %d", len(comments), article_id)
        return comments


class PostCommentUseCase:
    """Attaches a new comment to an existing article."""

    def __init__(
        self,
        article_repo: ArticleRepository,
        comment_repo: CommentRepository,
    ) -> None:
        self._article_repo = article_repo
        self._comment_repo = comment_repo

    async def execute(self, command: CreateCommentCommand) -> Comment:
        """Run the post comment use case.

        Raises:
            BadRequestError: If the article id is malformed.
            MissingInfoError: If author or body is absent or blank.
            ResourceNotFoundError: If the article does not exist.
        """
        article_id = parse_identifier(command.article_id, "article_id")
        require_fields("comment", author=command.author, body=command.body)

        if not await self._article_repo.exists(article_id):
            raise ResourceNotFoundError("article", article_id)

        logger.info("Posting comment by author=%s on article %d", command.author, article_id)
        return await self._comment_repo.create(
            NewComment(article_id=article_id, author=command.author, body=command.body)
        )


class VoteOnCommentUseCase:
    """Applies a signed vote delta to a comment."""

    def __init__(self, comment_repo: CommentRepository) -> None:
        self._comment_repo = comment_repo

    async def execute(self, command: UpdateVotesCommand) -> Comment:
        """Run the comment vote use case.

        Raises:
            BadRequestError: If the id or the delta is malformed.
            ResourceNotFoundError: If no comment has this id.
        """
        comment_id = parse_identifier(command.target_id, "comment_id")
        delta = parse_vote_delta(command.inc_votes)

        comment = await self._comment_repo.increment_votes(comment_id, delta)
        if comment is None:
            raise ResourceNotFoundError("comment", comment_id)
        return comment


class DeleteCommentUseCase:
    """Removes a single comment."""

    def __init__(self, comment_repo: CommentRepository) -> None:
        self._comment_repo = comment_repo

    async def execute(self, command: DeleteCommand) -> None:
        comment_id = parse_identifier(command.target_id, "comment_id")
        if not await self._comment_repo.delete_by_id(comment_id):
            raise ResourceNotFoundError("comment", comment_id)
        logger.info("Deleted comment %d", comment_id)
