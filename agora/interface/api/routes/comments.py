"""Comment routes."""

from typing import Any
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Header, Query, status
from fastapi.responses import JSONResponse

from agora.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from agora.interface.api.envelope import respond, respond_to_validation
from agora.interface.validation import validate

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


@router.get("")
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    post_id: UUID = Query(alias="postId"),
    parent_id: UUID | None = Query(default=None, alias="parentId"),
    limit: int = Query(default=2, ge=1, le=100),
    cursor: UUID | None = None,
) -> JSONResponse:
    """List one level of a post's comment thread, oldest first.

    Args:
        list_comments_use_case: List comments use case from DI
        post_id: Post whose comments to list
        parent_id: Parent comment; top-level comments when omitted
        limit: Page size
        cursor: ID of the last comment of the previous page

    Returns:
        Comments with replyCount and hasMoreReplies, nextCursor and total
    """
    request = ListCommentsRequest(
        post_id=post_id, parent_id=parent_id, limit=limit, cursor=cursor
    )
    return await respond(lambda: list_comments_use_case.execute(request))


@router.post("/create", status_code=status.HTTP_201_CREATED)
async def create_comment(
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Comment on a post or reply to a comment."""
    return await respond_to_validation(
        validate(CreateCommentRequest, payload),
        create_comment_use_case.execute,
        status_code=status.HTTP_201_CREATED,
    )


@router.patch("/{comment_id}")
async def edit_comment(
    comment_id: str,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    payload: Any = Body(None),
    x_user_id: str | None = Header(default=None),
) -> JSONResponse:
    """Edit a comment; only its author or the moderator account may."""
    return await respond_to_validation(
        validate(EditCommentRequest, payload),
        lambda request: edit_comment_use_case.execute(comment_id, x_user_id, request),
    )


@router.delete("/{comment_id}")
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    x_user_id: str | None = Header(default=None),
) -> JSONResponse:
    """Soft-delete a comment; only its author or the moderator account may."""
    return await respond(
        lambda: delete_comment_use_case.execute(comment_id, x_user_id)
    )
