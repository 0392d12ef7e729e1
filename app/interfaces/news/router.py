"""
FastAPI router for the news bounded context.

All routes delegate to use cases. No business logic here.
Path identifiers and listing parameters are taken as raw strings and
validated by the use cases, so malformed values produce BAD REQUEST
rather than a framework-level validation error.
Error mapping is handled by centralized error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response, status

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
from app.interfaces.news.dependencies import (
    get_article_use_case,
    get_create_article_use_case,
    get_create_topic_use_case,
    get_create_user_use_case,
    get_delete_article_use_case,
    get_delete_comment_use_case,
    get_list_article_comments_use_case,
    get_list_articles_use_case,
    get_list_topics_use_case,
    get_list_users_use_case,
    get_post_comment_use_case,
    get_user_use_case,
    get_vote_on_article_use_case,
    get_vote_on_comment_use_case,
)
from app.interfaces.news.schemas import (
    ArticleDetailResponse,
    ArticleItem,
    ArticleResponse,
    ArticlesResponse,
    ArticleWithCountItem,
    CommentItem,
    CommentResponse,
    CommentsResponse,
    CreateArticleRequest,
    CreateCommentRequest,
    CreateTopicRequest,
    CreateUserRequest,
    ErrorResponse,
    NewCommentResponse,
    TopicItem,
    TopicsResponse,
    UserItem,
    UserResponse,
    UsersResponse,
    VoteRequest,
)

router = APIRouter(tags=["news"])

BAD_REQUEST = {400: {"model": ErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}}


# ------------------------------------------------------------------
# Topics
# ------------------------------------------------------------------


@router.get("/topics", response_model=TopicsResponse, summary="List topics")
async def list_topics(
    use_case: ListTopicsUseCase = Depends(get_list_topics_use_case),
) -> TopicsResponse:
    topics = await use_case.execute()
    return TopicsResponse(topics=[TopicItem.model_validate(t) for t in topics])


@router.post(
    "/topics",
    response_model=list[TopicItem],
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create a topic",
)
async def create_topic(
    request: CreateTopicRequest,
    use_case: CreateTopicUseCase = Depends(get_create_topic_use_case),
) -> list[TopicItem]:
    """Create a topic and return it as a one-element array."""
    topic = await use_case.execute(
        CreateTopicCommand(slug=request.slug, description=request.description)
    )
    return [TopicItem.model_validate(topic)]


# ------------------------------------------------------------------
# Users
# ------------------------------------------------------------------


@router.get("/users", response_model=UsersResponse, summary="List users")
async def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
) -> UsersResponse:
    users = await use_case.execute()
    return UsersResponse(users=[UserItem.model_validate(u) for u in users])


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Register a user",
    description="Fails with USERNAME ALREADY EXISTS when the username is taken.",
)
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> UserResponse:
    user = await use_case.execute(
        CreateUserCommand(
            username=request.username,
            name=request.name,
            avatar_url=request.avatar_url,
        )
    )
    return UserResponse(user=[UserItem.model_validate(user)])


@router.get(
    "/users/{username}",
    response_model=UserResponse,
    responses=NOT_FOUND,
    summary="Get a user by username",
)
async def get_user(
    username: str,
    use_case: GetUserUseCase = Depends(get_user_use_case),
) -> UserResponse:
    user = await use_case.execute(GetUserQuery(username=username))
    return UserResponse(user=[UserItem.model_validate(user)])


# ------------------------------------------------------------------
# Articles
# ------------------------------------------------------------------


@router.get(
    "/articles",
    response_model=ArticlesResponse,
    responses=BAD_REQUEST,
    summary="List articles",
    description=(
        "Filter by author and/or topic, sort by any article column or "
        "comment_count (default created_at, desc) and cap with limit. "
        "Items do not include comment_count."
    ),
)
async def list_articles(
    sort_by: Optional[str] = None,
    order: Optional[str] = None,
    author: Optional[str] = None,
    topic: Optional[str] = None,
    limit: Optional[str] = None,
    use_case: ListArticlesUseCase = Depends(get_list_articles_use_case),
) -> ArticlesResponse:
    articles = await use_case.execute(
        ListArticlesQuery(
            sort_by=sort_by, order=order, author=author, topic=topic, limit=limit
        )
    )
    return ArticlesResponse(
        articles=[ArticleItem.model_validate(a) for a in articles]
    )


@router.post(
    "/articles",
    response_model=list[ArticleItem],
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
    summary="Create an article",
)
async def create_article(
    request: CreateArticleRequest,
    use_case: CreateArticleUseCase = Depends(get_create_article_use_case),
) -> list[ArticleItem]:
    """Create an article and return it as a one-element array."""
    article = await use_case.execute(
        CreateArticleCommand(
            title=request.title,
            topic=request.topic,
            author=request.author,
            body=request.body,
            created_at=request.created_at,
        )
    )
    return [ArticleItem.model_validate(article)]


@router.get(
    "/articles/{article_id}",
    response_model=ArticleDetailResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Get an article with its comment count",
)
async def get_article(
    article_id: str,
    use_case: GetArticleUseCase = Depends(get_article_use_case),
) -> ArticleDetailResponse:
    article = await use_case.execute(GetArticleQuery(article_id=article_id))
    return ArticleDetailResponse(article=[ArticleWithCountItem.model_validate(article)])


@router.patch(
    "/articles/{article_id}",
    response_model=ArticleResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Change an article's votes by inc_votes",
)
async def vote_on_article(
    article_id: str,
    request: VoteRequest,
    use_case: VoteOnArticleUseCase = Depends(get_vote_on_article_use_case),
) -> ArticleResponse:
    article = await use_case.execute(
        UpdateVotesCommand(target_id=article_id, inc_votes=request.inc_votes)
    )
    return ArticleResponse(article=[ArticleItem.model_validate(article)])


@router.delete(
    "/articles/{article_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete an article and its comments",
)
async def delete_article(
    article_id: str,
    use_case: DeleteArticleUseCase = Depends(get_delete_article_use_case),
) -> Response:
    await use_case.execute(DeleteCommand(target_id=article_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/articles/{article_id}",
    response_model=NewCommentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Post a comment on an article",
)
async def post_comment(
    article_id: str,
    request: CreateCommentRequest,
    use_case: PostCommentUseCase = Depends(get_post_comment_use_case),
) -> NewCommentResponse:
    comment = await use_case.execute(
        CreateCommentCommand(article_id=article_id, author=request.author, body=request.body)
    )
    return NewCommentResponse(newComment=[CommentItem.model_validate(comment)])


@router.get(
    "/articles/{article_id}/comments",
    response_model=CommentsResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="List an article's comments",
)
async def list_article_comments(
    article_id: str,
    sort_by: Optional[str] = None,
    order: Optional[str] = None,
    limit: Optional[str] = None,
    use_case: ListArticleCommentsUseCase = Depends(get_list_article_comments_use_case),
) -> CommentsResponse:
    comments = await use_case.execute(
        ListCommentsQuery(article_id=article_id, sort_by=sort_by, order=order, limit=limit)
    )
    return CommentsResponse(comments=[CommentItem.model_validate(c) for c in comments])


# ------------------------------------------------------------------
# Comments
# ------------------------------------------------------------------


@router.patch(
    "/comments/{comment_id}",
    response_model=CommentResponse,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Change a comment's votes by inc_votes",
)
async def vote_on_comment(
    comment_id: str,
    request: VoteRequest,
    use_case: VoteOnCommentUseCase = Depends(get_vote_on_comment_use_case),
) -> CommentResponse:
    comment = await use_case.execute(
        UpdateVotesCommand(target_id=comment_id, inc_votes=request.inc_votes)
    )
    return CommentResponse(comment=[CommentItem.model_validate(comment)])


@router.delete(
    "/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**BAD_REQUEST, **NOT_FOUND},
    summary="Delete a comment",
)
async def delete_comment(
    comment_id: str,
    use_case: DeleteCommentUseCase = Depends(get_delete_comment_use_case),
) -> Response:
    await use_case.execute(DeleteCommand(target_id=comment_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
