"""Vote routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

from agora.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from agora.interface.api.envelope import respond_to_validation
from agora.interface.validation import validate

router = APIRouter(prefix="/api/votes", tags=["votes"], route_class=DishkaRoute)


@router.post("", status_code=status.HTTP_201_CREATED)
async def cast_vote(
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    payload: Any = Body(None),
) -> JSONResponse:
    """Cast, switch or withdraw a vote on a post or comment.

    Voting the same way twice withdraws the vote; voting the other way
    switches it.

    Args:
        cast_vote_use_case: Cast vote use case from DI
        payload: {targetId, targetType, voteType, userId?}

    Returns:
        201 with the vote, the standing vote afterwards and the score delta
    """
    return await respond_to_validation(
        validate(CastVoteRequest, payload),
        cast_vote_use_case.execute,
        status_code=status.HTTP_201_CREATED,
    )
