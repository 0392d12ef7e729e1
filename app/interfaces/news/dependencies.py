"""
Dependency injection for the news bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the news context.

Every request gets one AsyncSession from the application's session
factory; all repositories built for that request share it.
"""

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.news.articles import (
    CreateArticleUseCase,
    DeleteArticleUseCase,
    GetArticleUseCase,
    ListArticlesUseCase,
    VoteOnArticleUseCase,
)
from app.application.news.comments import (
    DeleteCommentUseCase,
    ListArticleCommentsUseCase,
    PostCommentUseCase,
    VoteOnCommentUseCase,
)
from app.application.news.topics import CreateTopicUseCase, ListTopicsUseCase
from app.application.news.users import CreateUserUseCase, GetUserUseCase, ListUsersUseCase
from app.infrastructure.news.article_repository import ArticleRepositoryAdapter
from app.infrastructure.news.comment_repository import CommentRepositoryAdapter
from app.infrastructure.news.topic_repository import TopicRepositoryAdapter
from app.infrastructure.news.user_repository import UserRepositoryAdapter


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Yield a request-scoped session; it is closed (and rolled back) afterwards."""
    async with request.app.state.session_factory() as session:
        yield session


def get_list_topics_use_case(session: AsyncSession = Depends(get_session)) -> ListTopicsUseCase:
    return ListTopicsUseCase(topic_repo=TopicRepositoryAdapter(session))


def get_create_topic_use_case(session: AsyncSession = Depends(get_session)) -> CreateTopicUseCase:
    return CreateTopicUseCase(topic_repo=TopicRepositoryAdapter(session))


def get_list_users_use_case(session: AsyncSession = Depends(get_session)) -> ListUsersUseCase:
    return ListUsersUseCase(user_repo=UserRepositoryAdapter(session))


def get_user_use_case(session: AsyncSession = Depends(get_session)) -> GetUserUseCase:
    return GetUserUseCase(user_repo=UserRepositoryAdapter(session))


def get_create_user_use_case(session: AsyncSession = Depends(get_session)) -> CreateUserUseCase:
    return CreateUserUseCase(user_repo=UserRepositoryAdapter(session))


def get_list_articles_use_case(
    session: AsyncSession = Depends(get_session),
) -> ListArticlesUseCase:
    return ListArticlesUseCase(article_repo=ArticleRepositoryAdapter(session))


def get_article_use_case(session: AsyncSession = Depends(get_session)) -> GetArticleUseCase:
    return GetArticleUseCase(article_repo=ArticleRepositoryAdapter(session))


def get_create_article_use_case(
    session: AsyncSession = Depends(get_session),
) -> CreateArticleUseCase:
    return CreateArticleUseCase(article_repo=ArticleRepositoryAdapter(session))


def get_vote_on_article_use_case(
    session: AsyncSession = Depends(get_session),
) -> VoteOnArticleUseCase:
    return VoteOnArticleUseCase(article_repo=ArticleRepositoryAdapter(session))


def get_delete_article_use_case(
    session: AsyncSession = Depends(get_session),
) -> DeleteArticleUseCase:
    return DeleteArticleUseCase(article_repo=ArticleRepositoryAdapter(session))


def get_list_article_comments_use_case(
    session: AsyncSession = Depends(get_session),
) -> ListArticleCommentsUseCase:
    """Build ListArticleCommentsUseCase; both repositories share the session."""
    return ListArticleCommentsUseCase(
        article_repo=ArticleRepositoryAdapter(session),
        comment_repo=CommentRepositoryAdapter(session),
    )


def get_post_comment_use_case(
    session: AsyncSession = Depends(get_session),
) -> PostCommentUseCase:
    """Build PostCommentUseCase; both repositories share the session."""
    return PostCommentUseCase(
        article_repo=ArticleRepositoryAdapter(session),
        comment_repo=CommentRepositoryAdapter(session),
    )


def get_vote_on_comment_use_case(
    session: AsyncSession = Depends(get_session),
) -> VoteOnCommentUseCase:
    return VoteOnCommentUseCase(comment_repo=CommentRepositoryAdapter(session))


def get_delete_comment_use_case(
    session: AsyncSession = Depends(get_session),
) -> DeleteCommentUseCase:
    return DeleteCommentUseCase(comment_repo=CommentRepositoryAdapter(session))
