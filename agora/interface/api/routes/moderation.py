"""Moderation routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from agora.application.usecase.moderation import (
    BanUserUseCase,
    FlagRequest,
    FlagUseCase,
    MuteUserUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
    RestrictUserRequest,
)
from agora.interface.api.envelope import respond_to_validation
from agora.interface.validation import validate

router = APIRouter(
    prefix="/api/moderation", tags=["moderation"], route_class=DishkaRoute
)


@router.post("/flag")
async def flag(
    flag_use_case: FromDishka[FlagUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Report a post or comment."""
    return await respond_to_validation(
        validate(FlagRequest, payload), flag_use_case.execute
    )


@router.post("/ban-user")
async def ban_user(
    ban_user_use_case: FromDishka[BanUserUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Ban a user, for a while or permanently."""
    return await respond_to_validation(
        validate(RestrictUserRequest, payload), ban_user_use_case.execute
    )


@router.post("/mute-user")
async def mute_user(
    mute_user_use_case: FromDishka[MuteUserUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Mute a user, for a while or permanently."""
    return await respond_to_validation(
        validate(RestrictUserRequest, payload), mute_user_use_case.execute
    )


@router.post("/remove-comment")
async def remove_comment(
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Remove a comment and notify its author."""
    return await respond_to_validation(
        validate(RemoveCommentRequest, payload), remove_comment_use_case.execute
    )
