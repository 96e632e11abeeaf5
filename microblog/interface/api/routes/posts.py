"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Form, Request, status
from fastapi.responses import RedirectResponse

from microblog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    LikePostRequest,
    LikePostResponse,
    LikePostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
)
from microblog.config import Settings
from microblog.domain.repository.post import PostSortOrder
from microblog.domain.service import SessionTokenService
from microblog.interface.api.session import frontend_redirect, load_session

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


def _split_tags(raw: str) -> list[str]:
    """Split a comma separated tag field."""
    return [part.strip() for part in raw.split(",") if part.strip()]


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    sort: PostSortOrder = PostSortOrder.RECENT,
    tag: str | None = None,
) -> ListPostsResponse:
    """List every post, newest or most liked first, optionally by tag.

    Args:
        list_posts_use_case: List posts use case from DI
        sort: Sort order ("recent" or "popular")
        tag: Exact tag to filter by (results in recent order)

    Returns:
        Matching posts
    """
    return await list_posts_use_case.execute(ListPostsRequest(sort=sort, tag=tag))


@router.post("")
async def create_post(
    request: Request,
    create_post_use_case: FromDishka[CreatePostUseCase],
    token_service: FromDishka[SessionTokenService],
    settings: FromDishka[Settings],
    title: str = Form(default=""),
    content: str = Form(default=""),
    tags: str = Form(default=""),
) -> RedirectResponse:
    """Create a post from a form submission.

    Requires authentication.

    Returns:
        HTTP 303 redirect to the home page

    Raises:
        UnauthenticatedError: If not logged in
        ValidationError: If the title or content is empty
    """
    session = load_session(request, token_service, settings)
    result = await create_post_use_case.execute(
        CreatePostRequest(
            session=session, title=title, body=content, tags=_split_tags(tags)
        )
    )
    logfire.info("Post created via API", post_id=result.post.post_id)

    return RedirectResponse(
        url=frontend_redirect(settings), status_code=status.HTTP_303_SEE_OTHER
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: int,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """Get a single post.

    Raises:
        NotFoundError: If the post does not exist
    """
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.post("/{post_id}/like", response_model=LikePostResponse)
async def like_post(
    post_id: int,
    like_post_use_case: FromDishka[LikePostUseCase],
) -> LikePostResponse:
    """Add one like to a post.

    Returns:
        The new like count, as ``{"likes": n}``

    Raises:
        NotFoundError: If the post does not exist
    """
    return await like_post_use_case.execute(LikePostRequest(post_id=post_id))


@router.post("/{post_id}/delete")
async def delete_post(
    post_id: int,
    request: Request,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    token_service: FromDishka[SessionTokenService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Delete one of the current user's posts.

    Returns:
        HTTP 303 redirect to the home page

    Raises:
        UnauthenticatedError: If not logged in
        NotFoundError: If the post does not exist
        ForbiddenError: If the post belongs to someone else
    """
    session = load_session(request, token_service, settings)
    await delete_post_use_case.execute(
        DeletePostRequest(session=session, post_id=post_id)
    )

    return RedirectResponse(
        url=frontend_redirect(settings), status_code=status.HTTP_303_SEE_OTHER
    )
