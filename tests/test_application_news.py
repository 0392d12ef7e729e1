"""
Tests for the news application layer (use cases).

Use cases run against mocked ports. No real infrastructure needed.
Each test verifies orchestration: validation happens before any
repository call, and repository results are mapped to domain errors.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

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
from app.application.news.dtos import (
    CreateArticleCommand,
    CreateCommentCommand,
    CreateTopicCommand,
    CreateUserCommand,
    DeleteCommand,
    GetArticleQuery,
    GetUserQuery,
    ListArticlesQuery,
    ListCommentsQuery,
    UpdateVotesCommand,
)
from app.application.news.topics import CreateTopicUseCase, ListTopicsUseCase
from app.application.news.users import CreateUserUseCase, GetUserUseCase, ListUsersUseCase
from app.domain.news.entities import Article, Comment, NewComment, Topic, User
from app.domain.news.errors import (
    BadRequestError,
    MissingInfoError,
    ResourceNotFoundError,
    UsernameAlreadyExistsError,
)
from app.domain.news.ports import (
    ArticleRepository,
    CommentRepository,
    TopicRepository,
    UserRepository,
)
from app.domain.news.validation import ListQuery, SortOrder

CREATED = datetime(2018, 11, 15, 12, 21, 54, tzinfo=timezone.utc)

ARTICLE = Article(
    article_id=1,
    title="Living in the shadow of a great man",
    topic="mitch",
    author="butter_bridge",
    body="I find this existence challenging",
    created_at=CREATED,
    votes=100,
    comment_count=13,
)

COMMENT = Comment(
    comments_id=19,
    author="lurker",
    article_id=1,
    votes=0,
    created_at=CREATED,
    body="first!",
)

USER = User(username="lurker", name="do_nothing", avatar_url="https://example.com/a.png")


def _mock(port: type) -> AsyncMock:
    return AsyncMock(spec=port)


class TestTopicUseCases:
    """Tests for listing and creating topics."""

    async def test_list_topics(self) -> None:
        repo = _mock(TopicRepository)
        repo.list_all.return_value = [Topic("mitch", "The man, the Mitch, the legend")]
        topics = await ListTopicsUseCase(topic_repo=repo).execute()
        assert [t.slug for t in topics] == ["mitch"]

    async def test_create_topic(self) -> None:
        repo = _mock(TopicRepository)
        repo.create.side_effect = lambda topic: topic
        topic = await CreateTopicUseCase(topic_repo=repo).execute(
            CreateTopicCommand(slug="dogs", description="Not cats")
        )
        assert topic == Topic(slug="dogs", description="Not cats")

    async def test_create_topic_missing_description(self) -> None:
        repo = _mock(TopicRepository)
        with pytest.raises(MissingInfoError):
            await CreateTopicUseCase(topic_repo=repo).execute(
                CreateTopicCommand(slug="dogs", description="")
            )
        repo.create.assert_not_awaited()


class TestUserUseCases:
    """Tests for listing, fetching and registering users."""

    async def test_list_users(self) -> None:
        repo = _mock(UserRepository)
        repo.list_all.return_value = [USER]
        assert await ListUsersUseCase(user_repo=repo).execute() == [USER]

    async def test_get_user(self) -> None:
        repo = _mock(UserRepository)
        repo.get_by_username.return_value = USER
        assert await GetUserUseCase(user_repo=repo).execute(GetUserQuery("lurker")) == USER

    async def test_get_unknown_user_raises_not_found(self) -> None:
        repo = _mock(UserRepository)
        repo.get_by_username.return_value = None
        with pytest.raises(ResourceNotFoundError):
            await GetUserUseCase(user_repo=repo).execute(GetUserQuery("nobody"))

    async def test_create_user(self) -> None:
        repo = _mock(UserRepository)
        repo.get_by_username.return_value = None
        repo.create.side_effect = lambda user: user
        command = CreateUserCommand(
            username="lurker", name="do_nothing", avatar_url="https://example.com/a.png"
        )
        assert await CreateUserUseCase(user_repo=repo).execute(command) == USER

    async def test_duplicate_username_checked_before_insert(self) -> None:
        repo = _mock(UserRepository)
        repo.get_by_username.return_value = USER
        command = CreateUserCommand(username="lurker", name="x", avatar_url="y")
        with pytest.raises(UsernameAlreadyExistsError):
            await CreateUserUseCase(user_repo=repo).execute(command)
        repo.create.assert_not_awaited()

    async def test_missing_fields_checked_before_lookup(self) -> None:
        repo = _mock(UserRepository)
        with pytest.raises(MissingInfoError) as exc_info:
            await CreateUserUseCase(user_repo=repo).execute(
                CreateUserCommand(username="lurker", name=None, avatar_url="")
            )
        assert exc_info.value.missing == ["name", "avatar_url"]
        repo.get_by_username.assert_not_awaited()


class TestArticleUseCases:
    """Tests for the article use cases."""

    async def test_list_articles_passes_validated_query(self) -> None:
        repo = _mock(ArticleRepository)
        repo.list_filtered.return_value = [ARTICLE]
        result = await ListArticlesUseCase(article_repo=repo).execute(
            ListArticlesQuery(sort_by="votes", order="ASC", author="butter_bridge", limit="5")
        )
        assert result == [ARTICLE]
        repo.list_filtered.assert_awaited_once_with(
            ListQuery(sort_by="votes", order=SortOrder.ASC, limit=5),
            author="butter_bridge",
            topic=None,
        )

    async def test_empty_filters_are_ignored(self) -> None:
        repo = _mock(ArticleRepository)
        repo.list_filtered.return_value = []
        await ListArticlesUseCase(article_repo=repo).execute(
            ListArticlesQuery(author="", topic="")
        )
        repo.list_filtered.assert_awaited_once_with(ListQuery(), author=None, topic=None)

    async def test_invalid_sort_by_never_reaches_repository(self) -> None:
        repo = _mock(ArticleRepository)
        with pytest.raises(BadRequestError):
            await ListArticlesUseCase(article_repo=repo).execute(
                ListArticlesQuery(sort_by="password")
            )
        repo.list_filtered.assert_not_awaited()

    async def test_get_article(self) -> None:
        repo = _mock(ArticleRepository)
        repo.get_by_id.return_value = ARTICLE
        article = await GetArticleUseCase(article_repo=repo).execute(GetArticleQuery("1"))
        assert article.comment_count == 13
        repo.get_by_id.assert_awaited_once_with(1)

    async def test_get_article_malformed_id(self) -> None:
        repo = _mock(ArticleRepository)
        with pytest.raises(BadRequestError):
            await GetArticleUseCase(article_repo=repo).execute(GetArticleQuery("dog"))
        repo.get_by_id.assert_not_awaited()

    async def test_get_missing_article(self) -> None:
        repo = _mock(ArticleRepository)
        repo.get_by_id.return_value = None
        with pytest.raises(ResourceNotFoundError):
            await GetArticleUseCase(article_repo=repo).execute(GetArticleQuery("1000"))

    async def test_create_article_requires_every_field(self) -> None:
        repo = _mock(ArticleRepository)
        with pytest.raises(MissingInfoError) as exc_info:
            await CreateArticleUseCase(article_repo=repo).execute(
                CreateArticleCommand(
                    title="t", topic="", author="lurker", body="b", created_at=None
                )
            )
        assert exc_info.value.missing == ["topic", "created_at"]

    async def test_create_article(self) -> None:
        repo = _mock(ArticleRepository)
        repo.create.return_value = ARTICLE
        await CreateArticleUseCase(article_repo=repo).execute(
            CreateArticleCommand(
                title="t", topic="mitch", author="lurker", body="b", created_at=CREATED
            )
        )
        stored = repo.create.await_args.args[0]
        assert stored.author == "lurker"
        assert stored.created_at == CREATED

    async def test_vote_on_article(self) -> None:
        repo = _mock(ArticleRepository)
        repo.increment_votes.return_value = ARTICLE
        await VoteOnArticleUseCase(article_repo=repo).execute(
            UpdateVotesCommand(target_id="1", inc_votes=-5)
        )
        repo.increment_votes.assert_awaited_once_with(1, -5)

    async def test_vote_with_string_delta_rejected(self) -> None:
        repo = _mock(ArticleRepository)
        with pytest.raises(BadRequestError):
            await VoteOnArticleUseCase(article_repo=repo).execute(
                UpdateVotesCommand(target_id="1", inc_votes="ten")
            )
        repo.increment_votes.assert_not_awaited()

    async def test_vote_on_missing_article(self) -> None:
        repo = _mock(ArticleRepository)
        repo.increment_votes.return_value = None
        with pytest.raises(ResourceNotFoundError):
            await VoteOnArticleUseCase(article_repo=repo).execute(
                UpdateVotesCommand(target_id="999", inc_votes=1)
            )

    async def test_delete_missing_article(self) -> None:
        repo = _mock(ArticleRepository)
        repo.delete_by_id.return_value = False
        with pytest.raises(ResourceNotFoundError):
            await DeleteArticleUseCase(article_repo=repo).execute(DeleteCommand("999"))

    async def test_delete_article(self) -> None:
        repo = _mock(ArticleRepository)
        repo.delete_by_id.return_value = True
        assert await DeleteArticleUseCase(article_repo=repo).execute(DeleteCommand("1")) is None
        repo.delete_by_id.assert_awaited_once_with(1)


class TestCommentUseCases:
    """Tests for the comment use cases."""

    async def test_list_comments_of_missing_article(self) -> None:
        article_repo = _mock(ArticleRepository)
        comment_repo = _mock(CommentRepository)
        article_repo.exists.return_value = False
        use_case = ListArticleCommentsUseCase(article_repo=article_repo, comment_repo=comment_repo)
        with pytest.raises(ResourceNotFoundError):
            await use_case.execute(ListCommentsQuery(article_id="999"))
        comment_repo.list_for_article.assert_not_awaited()

    async def test_list_comments(self) -> None:
        article_repo = _mock(ArticleRepository)
        comment_repo = _mock(CommentRepository)
        article_repo.exists.return_value = True
        comment_repo.list_for_article.return_value = [COMMENT]
        use_case = ListArticleCommentsUseCase(article_repo=article_repo, comment_repo=comment_repo)
        assert await use_case.execute(ListCommentsQuery(article_id="1", limit="1")) == [COMMENT]
        comment_repo.list_for_article.assert_awaited_once_with(1, ListQuery(limit=1))

    async def test_list_comments_rejects_article_sort_column(self) -> None:
        article_repo = _mock(ArticleRepository)
        comment_repo = _mock(CommentRepository)
        use_case = ListArticleCommentsUseCase(article_repo=article_repo, comment_repo=comment_repo)
        with pytest.raises(BadRequestError):
            await use_case.execute(ListCommentsQuery(article_id="1", sort_by="title"))
        article_repo.exists.assert_not_awaited()

    async def test_post_comment(self) -> None:
        article_repo = _mock(ArticleRepository)
        comment_repo = _mock(CommentRepository)
        article_repo.exists.return_value = True
        comment_repo.create.return_value = COMMENT
        use_case = PostCommentUseCase(article_repo=article_repo, comment_repo=comment_repo)
        await use_case.execute(CreateCommentCommand(article_id="1", author="lurker", body="first!"))
        comment_repo.create.assert_awaited_once_with(
            NewComment(article_id=1, author="lurker", body="first!")
        )

    async def test_post_comment_on_missing_article(self) -> None:
        article_repo = _mock(ArticleRepository)
        comment_repo = _mock(CommentRepository)
        article_repo.exists.return_value = False
        use_case = PostCommentUseCase(article_repo=article_repo, comment_repo=comment_repo)
        with pytest.raises(ResourceNotFoundError):
            await use_case.execute(CreateCommentCommand(article_id="999", author="a", body="b"))
        comment_repo.create.assert_not_awaited()

    async def test_post_comment_without_body(self) -> None:
        article_repo = _mock(ArticleRepository)
        comment_repo = _mock(CommentRepository)
        use_case = PostCommentUseCase(article_repo=article_repo, comment_repo=comment_repo)
        with pytest.raises(MissingInfoError):
            await use_case.execute(CreateCommentCommand(article_id="1", author="a", body=None))

    async def test_vote_on_comment(self) -> None:
        repo = _mock(CommentRepository)
        repo.increment_votes.return_value = COMMENT
        await VoteOnCommentUseCase(comment_repo=repo).execute(
            UpdateVotesCommand(target_id="19", inc_votes=3)
        )
        repo.increment_votes.assert_awaited_once_with(19, 3)

    async def test_delete_missing_comment(self) -> None:
        repo = _mock(CommentRepository)
        repo.delete_by_id.return_value = False
        with pytest.raises(ResourceNotFoundError):
            await DeleteCommentUseCase(comment_repo=repo).execute(DeleteCommand("999"))

    async def test_delete_comment_malformed_id(self) -> None:
        repo = _mock(CommentRepository)
        with pytest.raises(BadRequestError):
            await DeleteCommentUseCase(comment_repo=repo).execute(DeleteCommand("dog"))
        repo.delete_by_id.assert_not_awaited()
