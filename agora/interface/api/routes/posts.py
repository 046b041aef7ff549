"""Post routes."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Query, status
from fastapi.responses import JSONResponse

from agora.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from agora.interface.api.envelope import respond, respond_to_validation
from agora.interface.validation import validate

router = APIRouter(prefix="/api/posts", tags=["posts"], route_class=DishkaRoute)

LIST_CACHE_HEADERS = {"Cache-Control": "public, max-age=60"}


@router.get("")
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1, ge=1),
    page_size: int = Query(default=10, ge=1, le=100, alias="pageSize"),
    subreddit_id: UUID | None = Query(default=None, alias="subredditId"),
) -> JSONResponse:
    """List posts newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        page: 1-based page number
        page_size: Posts per page
        subreddit_id: Optional community filter

    Returns:
        Page of posts with page, pageSize, total and totalPages; cacheable
        for a minute
    """
    request = ListPostsRequest(
        page=page, page_size=page_size, subreddit_id=subreddit_id
    )
    return await respond(
        lambda: list_posts_use_case.execute(request), headers=LIST_CACHE_HEADERS
    )


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_post(
    create_post_use_case: FromDishka[CreatePostUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Submit a post to a community."""
    return await respond_to_validation(
        validate(CreatePostRequest, payload),
        create_post_use_case.execute,
        status_code=status.HTTP_201_CREATED,
    )
